"""
SLHA Shortcuts - One-call helpers for common file-level tasks.

    read_field()    -> Read one field from a file by structural key
    read_block()    -> Read one block from a file by name
    update_field()  -> Replace one field in a file, keeping its layout
    iter_data()     -> Walk the data fields of a block

Usage:
    from slhaea.shortcuts import read_field, update_field

    mh = read_field("spectrum.slha", "MASS;25;1")
    update_field("spectrum.slha", "MASS;25;1", "1.25100000E+02")
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, Iterator

if TYPE_CHECKING:
    from slhaea.block import SLHABlock
    from slhaea.key import SLHAKey


# =============================================================================
# read_field - Fetch a single field
# =============================================================================

def read_field(path: str | Path, key: SLHAKey | str) -> str:
    """
    Read the field addressed by key from a .slha file.

        width = read_field("spectrum.slha", "1000022;DECAY;2")
        br = read_field("spectrum.slha", "1000022;(any),2,11,24;0")

    Raises NotFoundError if the block or line is missing and
    FieldIndexError if the line is too short.
    """
    from slhaea.reader import SLHAReader

    return SLHAReader.read(path).field(key)


# =============================================================================
# read_block - Fetch a single block
# =============================================================================

def read_block(path: str | Path, name: str) -> SLHABlock:
    """
    Read the block called name (case-insensitive) from a .slha file.

        mass = read_block("spectrum.slha", "mass")
    """
    from slhaea.reader import SLHAReader

    return SLHAReader.read(path).at(name)


# =============================================================================
# update_field - Replace a single field in place
# =============================================================================

def update_field(path: str | Path, key: SLHAKey | str, value: Any) -> str:
    """
    Replace the field addressed by key and write the file back.
    Every other line keeps its exact spacing. Returns the old value.

        old = update_field("spectrum.slha", "MASS;25;1", "1.25100000E+02")
    """
    from slhaea.reader import SLHAReader

    doc = SLHAReader.read(path)
    old = doc.field(key)
    doc.set_field(key, value)
    doc.write(path)
    return old


# =============================================================================
# iter_data - Walk data lines
# =============================================================================

def iter_data(block: SLHABlock) -> Iterator[list[str]]:
    """
    Yield the data fields (comment dropped) of every data line in block.

        for index, value in iter_data(doc.at("SMINPUTS")):
            print(index, value)
    """
    for line in block.data_lines():
        yield line[:line.data_size]
