"""
SLHA Key - Address of a single field, independent of any document.

    "RVHMIX;1,3;2"              -> block RVHMIX, line keys [1, 3], field 2
    "1000022;DECAY;2"           -> total width of the lightest neutralino
    "1000022;(any),2,11,24;0"   -> branching ratio of a 2-body decay
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Sequence

from slhaea.spec import KEY_SEPARATOR, LINE_KEY_SEPARATOR
from slhaea.errors import MalformedKeyError


@dataclass
class SLHAKey:
    block: str
    line: Sequence[Any]
    field: int

    def __post_init__(self) -> None:
        self.line = [str(key) for key in self.line]

    @classmethod
    def parse(cls, text: str) -> SLHAKey:
        """Parse "<block>;<k0>,<k1>,...;<field>". Repeated separators count as one."""
        parts = re.split(f"{re.escape(KEY_SEPARATOR)}+", text)
        if len(parts) != 3:
            raise MalformedKeyError(text, f"expected 3 parts, got {len(parts)}")

        block, line, field = parts
        try:
            index = int(field)
        except ValueError:
            raise MalformedKeyError(text, f"field index {field!r} is not an integer") from None
        if index < 0:
            raise MalformedKeyError(text, f"field index {index} is negative")

        keys = re.split(f"{re.escape(LINE_KEY_SEPARATOR)}+", line)
        return cls(block, keys, index)

    def __str__(self) -> str:
        return f"{self.block}{KEY_SEPARATOR}{LINE_KEY_SEPARATOR.join(self.line)}{KEY_SEPARATOR}{self.field}"
