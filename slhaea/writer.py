"""
SLHA Writer - Serialize SLHADocument objects to .slha files.

Lines parsed from text are written with their original spacing; lines
built programmatically use the canonical layout.
"""

from __future__ import annotations

import logging
from pathlib import Path

from slhaea.spec import ENCODING
from slhaea.document import SLHADocument

logger = logging.getLogger(__name__)


class SLHAWriter:

    @staticmethod
    def serialize(doc: SLHADocument) -> bytes:
        """Serialize a document to UTF-8 bytes."""
        return doc.format().encode(ENCODING)

    @classmethod
    def write(cls, doc: SLHADocument, path: str | Path) -> int:
        """Write a document to path. Returns the number of bytes written."""
        data = cls.serialize(doc)
        with open(path, "wb") as f:
            f.write(data)
        logger.debug("Wrote %d blocks (%d bytes) to %s", len(doc), len(data), path)
        return len(data)
