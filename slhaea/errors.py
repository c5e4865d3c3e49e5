"""
SLHA Errors - Failure kinds raised by lookups and key parsing.

    NotFoundError      -> a checked block / line / field lookup had no match
    MalformedKeyError  -> a structural key string could not be parsed
    FieldIndexError    -> positional field access past the end of a line
"""

from __future__ import annotations


class SLHAError(Exception):
    """Base class for all slhaea errors."""


class NotFoundError(SLHAError, LookupError):
    """A checked lookup found no block or line for the given key."""

    def __init__(self, where: str, key: object) -> None:
        self.where = where
        self.key = key
        super().__init__(f"{where}({key!r}): not found")


class MalformedKeyError(SLHAError, ValueError):
    """A structural key string is not of the form block;line;field."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        super().__init__(f"Malformed SLHA key {text!r}: {reason}")


class FieldIndexError(SLHAError, IndexError):
    """Positional field access beyond the end of a line."""

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"Field index {index} out of range for line with {size} fields")
