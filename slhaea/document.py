"""
SLHA Document - Ordered collection of blocks read from or written to text.

Reading assigns each line to the block named by the last header seen:

    # leading comment          -> block ""
    BLOCK SMINPUTS             -> block "SMINPUTS" (the header belongs to it)
     1 1.16637e-05 # G_F       -> block "SMINPUTS"
    DECAY 6 1.35               -> block "6"
     1 3 2 -11 12 # comment    -> block "6"
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Iterator

from slhaea.block import SLHABlock, LineKeys, lexicographic_less
from slhaea.errors import NotFoundError
from slhaea.key import SLHAKey
from slhaea.line import SLHALine


def names_match(a: str, b: str) -> bool:
    """Case-insensitive comparison of block names."""
    return a.casefold() == b.casefold()


class SLHADocument:
    """
    In-memory SLHA document.

    Usage:
        doc = SLHADocument.parse(text)
        doc.at("SMINPUTS").at([1])[1]     # "1.16637e-05"
        doc.field("SMINPUTS;1;1")         # same, via a structural key
        doc.find_or_add("NEWBLOCK")       # create on demand
        str(doc)                          # serialize
    """

    def __init__(self, blocks: Iterable[SLHABlock] | None = None) -> None:
        self.blocks: list[SLHABlock] = list(blocks) if blocks is not None else []

    @classmethod
    def parse(cls, text: str) -> SLHADocument:
        return cls().read(text)

    def read(self, source: str | Iterable[str]) -> SLHADocument:
        """
        Read lines from a string or a text stream and append them to blocks.

        Whitespace-only lines are dropped. A header line with at least two
        data fields switches the current block to its second field; every
        line, headers included, is appended to the current block, which is
        created if needed.
        """
        raw_lines: Iterable[str] = source.split("\n") if isinstance(source, str) else source

        current_name = ""
        for raw in raw_lines:
            if not raw.strip():
                continue
            line = SLHALine(raw)
            if line.is_block_def and line.data_size > 1:
                current_name = line[1]
            self.find_or_add(current_name).append(line)
        return self

    # -------------------------------------------------------------------------
    # Block lookup
    # -------------------------------------------------------------------------

    def find(self, name: str) -> SLHABlock | None:
        """First block whose name matches (case-insensitive), or None."""
        for block in self.blocks:
            if names_match(name, block.name):
                return block
        return None

    def at(self, name: str) -> SLHABlock:
        block = self.find(name)
        if block is None:
            raise NotFoundError("SLHADocument.at", name)
        return block

    def find_or_add(self, name: str) -> SLHABlock:
        """Like find(), but appends and returns a new empty block on a miss."""
        block = self.find(name)
        if block is None:
            block = SLHABlock(name)
            self.blocks.append(block)
        return block

    def count(self, name: str) -> int:
        return 0 if self.find(name) is None else 1

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.find(name) is not None

    @property
    def block_names(self) -> list[str]:
        return [block.name for block in self.blocks]

    # -------------------------------------------------------------------------
    # Field access by structural key
    # -------------------------------------------------------------------------

    def line(self, block: str, keys: LineKeys) -> SLHALine:
        return self.at(block).at(keys)

    def field(self, key: SLHAKey | str) -> str:
        """The field addressed by key. Raises NotFoundError or FieldIndexError."""
        if isinstance(key, str):
            key = SLHAKey.parse(key)
        return self.at(key.block).at(key.line).at(key.field)

    def set_field(self, key: SLHAKey | str, value: Any) -> None:
        """Replace the field addressed by key, keeping the line's layout."""
        if isinstance(key, str):
            key = SLHAKey.parse(key)
        line = self.at(key.block).at(key.line)
        line.at(key.field)  # raises FieldIndexError past the end
        line[key.field] = value

    # -------------------------------------------------------------------------
    # Content
    # -------------------------------------------------------------------------

    def append(self, block: SLHABlock) -> SLHABlock:
        self.blocks.append(block)
        return block

    def pop(self, index: int = -1) -> SLHABlock:
        return self.blocks.pop(index)

    def clear(self) -> None:
        self.blocks.clear()

    def format(self) -> str:
        """All blocks in order, each line terminated by a newline."""
        return "".join(block.format() for block in self.blocks)

    def write(self, path: str | Path) -> int:
        """Write to a file. Returns the number of bytes written."""
        from slhaea.writer import SLHAWriter
        return SLHAWriter.write(self, path)

    def __getitem__(self, index: int) -> SLHABlock:
        return self.blocks[index]

    def __delitem__(self, index: int) -> None:
        del self.blocks[index]

    def __len__(self) -> int:
        return len(self.blocks)

    def __iter__(self) -> Iterator[SLHABlock]:
        return iter(self.blocks)

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SLHADocument):
            return NotImplemented
        return self.blocks == other.blocks

    def __lt__(self, other: SLHADocument) -> bool:
        if not isinstance(other, SLHADocument):
            return NotImplemented
        return lexicographic_less(self.blocks, other.blocks)

    def __gt__(self, other: SLHADocument) -> bool:
        if not isinstance(other, SLHADocument):
            return NotImplemented
        return lexicographic_less(other.blocks, self.blocks)

    def __le__(self, other: SLHADocument) -> bool:
        if not isinstance(other, SLHADocument):
            return NotImplemented
        return not lexicographic_less(other.blocks, self.blocks)

    def __ge__(self, other: SLHADocument) -> bool:
        if not isinstance(other, SLHADocument):
            return NotImplemented
        return not lexicographic_less(self.blocks, other.blocks)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        names = ", ".join(self.block_names)
        return f"SLHADocument(blocks=[{names}])"
