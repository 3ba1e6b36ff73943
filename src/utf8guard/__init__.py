"""Strict UTF-8 validation with precise error locations."""

from __future__ import annotations

from utf8guard.byteview import ByteView, Utf8Range
from utf8guard.enums import Check, ErrorKind
from utf8guard.iterator import CodepointIterator
from utf8guard.validator import ValidationResult, scan, validate, validate_quick

__version__ = "1.0.0"
__all__ = [
    "ByteView",
    "Check",
    "CodepointIterator",
    "ErrorKind",
    "Utf8Range",
    "ValidationResult",
    "assume_valid",
    "scan",
    "validate",
    "validate_quick",
]

#: Unchecked entry point: tag bytes as valid UTF-8 on the caller's word.
assume_valid = Utf8Range.assume_valid
