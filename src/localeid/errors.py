"""
Error taxonomy for locale identifier parsing and generation.

There is exactly one failure kind per direction:
    - parsing fails with INVALID_IDENTIFIER
    - generating fails with MISSING_FIELD

Running out of memory is not one of these; MemoryError propagates as-is.
"""

from enum import Enum
from typing import Any, Optional


class LocaleErrorKind(str, Enum):
    """Machine-interpretable failure kinds."""

    INVALID_IDENTIFIER = "INVALID_IDENTIFIER"
    """Absent, empty, illegal characters, grammar or ordering violation."""

    MISSING_FIELD = "MISSING_FIELD"
    """The record lacks a field the target notation requires."""


class LocaleIdError(Exception):
    """Base class for every error raised by this package."""

    kind: LocaleErrorKind

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value = value

    def to_log_message(self) -> str:
        return f"[{self.kind.value}] {self} (value={self.value!r})"


class InvalidLocaleIdentifier(LocaleIdError, ValueError):
    """Raised when a string is not a valid identifier in the requested notation."""

    kind = LocaleErrorKind.INVALID_IDENTIFIER

    def __init__(self, message: str, value: Any = None, notation: Optional[str] = None):
        super().__init__(message, value)
        self.notation = notation


class MissingLocaleField(LocaleIdError):
    """Raised when a record cannot be expressed in the requested notation."""

    kind = LocaleErrorKind.MISSING_FIELD
