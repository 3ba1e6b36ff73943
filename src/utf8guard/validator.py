"""UTF-8 validation: one left-to-right scan with selectable legality checks.

:func:`validate` applies every check; :func:`validate_quick` only verifies
structure (lead bytes, continuation bytes, truncation) and accepts overlong
encodings and codepoints above U+10FFFF.  Both are the same scan, so they
agree on every other error, offset and codepoint count.
"""

from __future__ import annotations

import dataclasses
import logging

from utf8guard.byteview import ByteView, Utf8Range, as_byte_view
from utf8guard.decoder import (
    INVALID_LEAD,
    MAX_CODEPOINT,
    MIN_CODEPOINT,
    ORPHAN_CONTINUATION,
    decode_sequence,
    has_continuations,
    sequence_length,
)
from utf8guard.enums import Check, ErrorKind

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of a validation scan.

    ``range`` is the longest valid prefix.  On failure it ends exactly where
    the offending sequence begins, and ``codepoint_count`` counts only the
    codepoints inside it.
    """

    error: ErrorKind
    range: Utf8Range
    codepoint_count: int

    @property
    def ok(self) -> bool:
        return self.error is ErrorKind.SUCCESS

    @property
    def offset(self) -> int:
        """Byte offset of the first offending byte, or the input length on success."""
        return len(self.range)

    def to_dict(self) -> dict[str, str | int]:
        """Convert this result to a plain dict.

        :returns: A dict with ``'error'``, ``'offset'``, and ``'codepoint_count'`` keys.
        """
        return {
            "error": self.error.label,
            "offset": self.offset,
            "codepoint_count": self.codepoint_count,
        }


def _legality_error(codepoint: int, length: int, checks: Check) -> ErrorKind | None:
    # Out of range is reported ahead of overlong when both apply.
    if checks & Check.CODEPOINT_RANGE and codepoint > MAX_CODEPOINT:
        return ErrorKind.INVALID_CODEPOINT
    if checks & Check.OVERLONG and codepoint < MIN_CODEPOINT[length]:
        return ErrorKind.OVERLONG_ENCODING
    return None


def _failure(
    view: ByteView, error: ErrorKind, offset: int, codepoint_count: int
) -> ValidationResult:
    logger.debug(
        "%s at byte %d after %d codepoints", error.label, offset, codepoint_count
    )
    return ValidationResult(error, view.to_utf8(offset), codepoint_count)


def scan(
    data: ByteView | bytes | bytearray | memoryview, checks: Check = Check.ALL
) -> ValidationResult:
    """Scan *data* as UTF-8 and report the first defect.

    :param data: The bytes to examine.  Any C-contiguous buffer is accepted;
        it is viewed, not copied.
    :param checks: Legality checks applied to each structurally sound
        sequence.  :attr:`Check.ALL` for strict validation,
        :attr:`Check.NONE` for structure only.
    :returns: A :class:`ValidationResult`.  Malformed input never raises.
    :raises TypeError: If *data* is not a bytes-like object.
    """
    view = as_byte_view(data)
    buf = view.buffer
    size = len(buf)
    codepoint_count = 0
    i = 0

    while i < size:
        lead = buf[i]

        if lead < 0x80:
            i += 1
            codepoint_count += 1
            continue

        length = sequence_length(lead)
        if length == ORPHAN_CONTINUATION:
            return _failure(
                view, ErrorKind.UNEXPECTED_CONTINUATION_BYTE, i, codepoint_count
            )
        if length == INVALID_LEAD:
            return _failure(view, ErrorKind.INVALID_BYTE, i, codepoint_count)
        if i + length > size:
            return _failure(view, ErrorKind.UNEXPECTED_END, i, codepoint_count)
        if not has_continuations(buf, i, length):
            return _failure(
                view, ErrorKind.UNEXPECTED_NON_CONTINUATION_BYTE, i, codepoint_count
            )

        if checks:
            codepoint = decode_sequence(buf, i, length)
            error = _legality_error(codepoint, length, checks)
            if error is not None:
                return _failure(view, error, i, codepoint_count)

        i += length
        codepoint_count += 1

    return ValidationResult(ErrorKind.SUCCESS, view.to_utf8(size), codepoint_count)


def validate(data: ByteView | bytes | bytearray | memoryview) -> ValidationResult:
    """Strictly validate *data*, rejecting overlong encodings and codepoints above U+10FFFF."""
    return scan(data, Check.ALL)


def validate_quick(data: ByteView | bytes | bytearray | memoryview) -> ValidationResult:
    """Validate only the byte structure of *data*.

    Overlong encodings and out-of-range codepoints are accepted.  Every
    other defect is reported exactly as :func:`validate` reports it.
    """
    return scan(data, Check.NONE)
