"""
SLHA Reader - Load .slha files into SLHADocument objects.

Usage:
    doc = SLHAReader.read("spectrum.slha")
    doc = SLHAReader.parse(b"BLOCK MASS\\n 25 1.25E+02\\n")

    with open("spectrum.slha") as f:
        doc = SLHAReader.read_stream(f)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from slhaea.spec import ENCODING, MAX_FILE_SIZE
from slhaea.document import SLHADocument

logger = logging.getLogger(__name__)


class SLHAReader:
    """Reads whole SLHA files. The document is always fully materialized."""

    @classmethod
    def read(cls, path: str | Path, max_size: int = MAX_FILE_SIZE) -> SLHADocument:
        """Fully parse a .slha file into an SLHADocument."""
        path = Path(path)
        size = path.stat().st_size
        if size > max_size:
            raise ValueError(
                f"File {path} is {size} bytes, which exceeds maximum of {max_size} bytes"
            )
        with open(path, "rb") as f:
            data = f.read()
        logger.debug("Read %d bytes from %s", len(data), path)
        return cls.parse(data)

    @classmethod
    def parse(cls, data: bytes | str) -> SLHADocument:
        """Parse bytes (UTF-8) or text into an SLHADocument."""
        text = data.decode(ENCODING) if isinstance(data, bytes) else data
        doc = SLHADocument.parse(text)
        logger.debug("Parsed %d blocks: %s", len(doc), doc.block_names)
        return doc

    @classmethod
    def read_stream(cls, stream: Iterable[str]) -> SLHADocument:
        """Parse an open text stream line by line."""
        doc = SLHADocument().read(stream)
        logger.debug("Parsed %d blocks from stream", len(doc))
        return doc
