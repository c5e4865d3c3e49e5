"""
SLHA Line - One physical line split into fields, plus its column layout.

A line parsed from text remembers the column of every field, so that
format() reproduces the original spacing. A line built with add_field()
is laid out canonically instead:

    BLOCK MASS  # comment         <- header: keyword at 0, name after one space
     25     1.25E+02    # h0       <- data: first field at column 1, then a 4-column grid
    # comment                     <- comment line: starts at column 0
"""

from __future__ import annotations

from typing import Any, Iterator

from slhaea.spec import BLOCK_KEYWORDS, COMMENT_CHAR, DATA_INDENT, TAB_WIDTH
from slhaea.errors import FieldIndexError


class SLHALine:
    """
    Container of the fields of one SLHA line.

    Usage:
        line = SLHALine(" 1 1.16637e-05 # G_F")
        line[1]              # "1.16637e-05"
        line.data_size       # 2
        line.format()        # " 1 1.16637e-05 # G_F"

        line = SLHALine().add_fields(25, "1.25E+02", "# h0")
        line.format()        # " 25     1.25E+02    # h0"
    """

    def __init__(self, text: str = "") -> None:
        self._fields: list[str] = []
        self._columns: list[int] = []  # start column of each field
        if text:
            self.assign(text)

    # -------------------------------------------------------------------------
    # Parsing and formatting
    # -------------------------------------------------------------------------

    def assign(self, text: str) -> SLHALine:
        """Replace the content with the fields of text.

        Everything after the first newline is ignored. The column of each
        field in text is recorded so format() reproduces the original line.
        """
        self.clear()
        head = text.split("\n", 1)[0]
        stripped = head.strip()
        if not stripped:
            return self

        comment_pos = stripped.find(COMMENT_CHAR)
        if comment_pos < 0:
            comment_pos = len(stripped)
        data = stripped[:comment_pos].strip()
        comment = stripped[comment_pos:].strip()

        if data:
            self._fields = data.split()
        if comment:
            self._fields.append(comment)

        # Forward search from the end of the previous field. A field whose
        # text also occurs earlier in the gap is placed at that earlier spot.
        pos = 0
        for value in self._fields:
            pos = head.find(value, pos)
            self._columns.append(pos)
            pos += len(value)

        return self

    def reformat(self) -> SLHALine:
        """Discard the current layout and align all fields canonically."""
        if not self._fields:
            return self

        columns: list[int] = []
        first = self._fields[0]

        if first.upper() in BLOCK_KEYWORDS:
            columns.append(0)
            pos = len(first)
            rest = self._fields[1:]
            if rest:
                pos += 1
                columns.append(pos)
                pos += len(rest[0])
                rest = rest[1:]
        elif first.startswith(COMMENT_CHAR):
            columns.append(0)
            pos = len(first)
            rest = self._fields[1:]
        else:
            columns.append(DATA_INDENT)
            pos = DATA_INDENT + len(first)
            rest = self._fields[1:]

        for value in rest:
            # Next grid column, at least two spaces away.
            dist = (TAB_WIDTH - 1) - ((pos - 1) % TAB_WIDTH)
            pos += dist if dist > 1 else dist + TAB_WIDTH
            columns.append(pos)
            pos += len(value)

        self._columns = columns
        return self

    def format(self) -> str:
        """Formatted representation, without a trailing newline."""
        out = ""
        for i, (value, column) in enumerate(zip(self._fields, self._columns)):
            if i:
                out += " "
            if len(out) < column:
                out += " " * (column - len(out))
            out += value
        return out

    def plain(self) -> str:
        """All fields joined by a single space."""
        return " ".join(self._fields)

    # -------------------------------------------------------------------------
    # Modifiers
    # -------------------------------------------------------------------------

    def add_field(self, value: Any) -> SLHALine:
        """
        Add a field to the end of the line and reformat it.

        If the last field already holds a comment, value is glued onto it
        and the number of fields stays the same. Blank values are ignored.
        """
        text = str(value)
        trimmed = text.strip()
        if not trimmed:
            return self

        if self._fields and COMMENT_CHAR in self._fields[-1]:
            self._fields[-1] += text
            return self

        self._fields.append(trimmed)
        self.reformat()
        return self

    def add_fields(self, *values: Any) -> SLHALine:
        for value in values:
            self.add_field(value)
        return self

    def append(self, text: str) -> SLHALine:
        """Append text to the formatted line and parse the result again."""
        return self.assign(self.format() + text)

    def __iadd__(self, text: str) -> SLHALine:
        return self.append(text)

    def clear(self) -> None:
        self._fields = []
        self._columns = []

    # -------------------------------------------------------------------------
    # Classification
    # -------------------------------------------------------------------------

    @property
    def is_block_def(self) -> bool:
        """True if the first field is BLOCK or DECAY (any case)."""
        return bool(self._fields) and self._fields[0].upper() in BLOCK_KEYWORDS

    @property
    def is_comment_line(self) -> bool:
        return bool(self._fields) and self._fields[0].startswith(COMMENT_CHAR)

    @property
    def is_data_line(self) -> bool:
        return bool(self._fields) and not self.is_block_def and not self.is_comment_line

    @property
    def data_size(self) -> int:
        """Number of fields, not counting a trailing comment."""
        size = len(self._fields)
        if size and self._fields[-1].startswith(COMMENT_CHAR):
            size -= 1
        return size

    # -------------------------------------------------------------------------
    # Element access
    # -------------------------------------------------------------------------

    @property
    def fields(self) -> list[str]:
        return list(self._fields)

    @property
    def columns(self) -> list[int]:
        return list(self._columns)

    @property
    def front(self) -> str:
        return self.at(0)

    @property
    def back(self) -> str:
        if not self._fields:
            raise FieldIndexError(-1, 0)
        return self._fields[-1]

    def at(self, index: int) -> str:
        """Checked access to the field at index."""
        if not 0 <= index < len(self._fields):
            raise FieldIndexError(index, len(self._fields))
        return self._fields[index]

    def __getitem__(self, index: int | slice) -> Any:
        if isinstance(index, slice):
            return self._fields[index]
        try:
            return self._fields[index]
        except IndexError:
            raise FieldIndexError(index, len(self._fields)) from None

    def __setitem__(self, index: int, value: Any) -> None:
        """Replace one field. The layout is kept as it is."""
        try:
            self._fields[index] = str(value)
        except IndexError:
            raise FieldIndexError(index, len(self._fields)) from None

    def __len__(self) -> int:
        return len(self._fields)

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SLHALine):
            return NotImplemented
        return self._fields == other._fields and self.format() == other.format()

    def __lt__(self, other: SLHALine) -> bool:
        if not isinstance(other, SLHALine):
            return NotImplemented
        return self._fields < other._fields

    def __gt__(self, other: SLHALine) -> bool:
        if not isinstance(other, SLHALine):
            return NotImplemented
        return other._fields < self._fields

    def __le__(self, other: SLHALine) -> bool:
        if not isinstance(other, SLHALine):
            return NotImplemented
        return not other._fields < self._fields

    def __ge__(self, other: SLHALine) -> bool:
        if not isinstance(other, SLHALine):
            return NotImplemented
        return not self._fields < other._fields

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"SLHALine({self.format()!r})"
