"""
SLHA Block - A named, ordered group of lines with keyed line search.

Lines are looked up by their leading fields. A key of ["1", "(any)"]
matches the first line whose first field is "1" and which has at least
two fields, whatever the second one holds.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Sequence, Union

from slhaea.spec import WILDCARD
from slhaea.errors import NotFoundError
from slhaea.line import SLHALine

LineKeys = Union[str, int, Iterable[Any]]


def normalize_keys(keys: LineKeys) -> list[str]:
    """Turn a line key into a list of strings.

    A string is split on whitespace, a single int becomes a one-element key,
    any other iterable is converted element by element.
    """
    if isinstance(keys, str):
        return keys.split()
    if isinstance(keys, int):
        return [str(keys)]
    return [str(key) for key in keys]


def keys_match(keys: Sequence[str], line: SLHALine) -> bool:
    if len(keys) > len(line):
        return False
    return all(key == WILDCARD or key == value for key, value in zip(keys, line))


def lexicographic_less(a: Sequence[Any], b: Sequence[Any]) -> bool:
    """Lexicographic comparison that only relies on the elements' < operator."""
    for x, y in zip(a, b):
        if x < y:
            return True
        if y < x:
            return False
    return len(a) < len(b)


class SLHABlock:
    """
    A block of an SLHA document.

    The header line (BLOCK / DECAY) is just the first line of the block;
    the name is stored separately and is what the document looks up.

    Usage:
        block = SLHABlock.create("MASS")
        block.append(SLHALine().add_fields(25, "1.25E+02", "# h0"))
        block.at([25])[1]                  # "1.25E+02"
        block.find(["(any)", "1.25E+02"])  # the same line
    """

    def __init__(self, name: str = "", lines: Iterable[SLHALine] | None = None) -> None:
        self.name = name
        self.lines: list[SLHALine] = list(lines) if lines is not None else []

    @classmethod
    def create(cls, name: str, keyword: str = "BLOCK", comment: str = "") -> SLHABlock:
        """Create a block whose first line is a canonically formatted header."""
        header = SLHALine().add_fields(keyword, name)
        if comment:
            if not comment.startswith("#"):
                comment = f"# {comment}"
            header.add_field(comment)
        return cls(name, [header])

    # -------------------------------------------------------------------------
    # Keyed access
    # -------------------------------------------------------------------------

    def find(self, keys: LineKeys) -> SLHALine | None:
        """First line whose leading fields match keys, or None.

        An empty key never matches.
        """
        keys = normalize_keys(keys)
        if not keys:
            return None
        for line in self.lines:
            if keys_match(keys, line):
                return line
        return None

    def at(self, keys: LineKeys) -> SLHALine:
        """Like find(), but raises NotFoundError instead of returning None."""
        keys = normalize_keys(keys)
        line = self.find(keys)
        if line is None:
            raise NotFoundError(f"SLHABlock({self.name!r}).at", keys)
        return line

    def find_or_add(self, keys: LineKeys) -> SLHALine:
        """Like find(), but appends and returns a new empty line on a miss."""
        line = self.find(keys)
        if line is None:
            line = SLHALine()
            self.lines.append(line)
        return line

    def __contains__(self, keys: object) -> bool:
        if isinstance(keys, SLHALine):
            return any(line == keys for line in self.lines)
        return self.find(keys) is not None  # type: ignore[arg-type]

    # -------------------------------------------------------------------------
    # Content
    # -------------------------------------------------------------------------

    def append(self, line: SLHALine | str) -> SLHALine:
        if isinstance(line, str):
            line = SLHALine(line)
        self.lines.append(line)
        return line

    def pop(self, index: int = -1) -> SLHALine:
        return self.lines.pop(index)

    def clear(self) -> None:
        self.lines.clear()

    def assign(self, text: str) -> SLHABlock:
        """Replace all lines with the non-blank lines of text. The name is kept."""
        self.lines = [SLHALine(raw) for raw in text.split("\n") if raw.strip()]
        return self

    def data_lines(self) -> Iterator[SLHALine]:
        return (line for line in self.lines if line.is_data_line)

    def format(self) -> str:
        """Every line followed by a newline."""
        return "".join(f"{line.format()}\n" for line in self.lines)

    def __getitem__(self, index: int) -> SLHALine:
        return self.lines[index]

    def __delitem__(self, index: int) -> None:
        del self.lines[index]

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[SLHALine]:
        return iter(self.lines)

    # -------------------------------------------------------------------------
    # Comparison (over lines; the name is not compared)
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SLHABlock):
            return NotImplemented
        return self.lines == other.lines

    def __lt__(self, other: SLHABlock) -> bool:
        if not isinstance(other, SLHABlock):
            return NotImplemented
        return lexicographic_less(self.lines, other.lines)

    def __gt__(self, other: SLHABlock) -> bool:
        if not isinstance(other, SLHABlock):
            return NotImplemented
        return lexicographic_less(other.lines, self.lines)

    def __le__(self, other: SLHABlock) -> bool:
        if not isinstance(other, SLHABlock):
            return NotImplemented
        return not lexicographic_less(other.lines, self.lines)

    def __ge__(self, other: SLHABlock) -> bool:
        if not isinstance(other, SLHABlock):
            return NotImplemented
        return not lexicographic_less(self.lines, other.lines)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"SLHABlock(name={self.name!r}, lines={len(self.lines)})"
