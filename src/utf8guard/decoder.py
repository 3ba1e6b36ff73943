"""Leading-byte classification and codepoint reconstruction.

These helpers operate on anything indexable by position that yields byte
values as integers (``bytes``, ``memoryview``, :class:`ByteView`).  None of
them checks that enough bytes remain; callers establish that first.
"""

from __future__ import annotations

from collections.abc import Sequence

#: Largest legal Unicode codepoint.
MAX_CODEPOINT: int = 0x10FFFF

#: Returned by :func:`sequence_length` for a ``10xxxxxx`` byte.
ORPHAN_CONTINUATION: int = 0
#: Returned by :func:`sequence_length` for a ``11111xxx`` byte.
INVALID_LEAD: int = -1

# Indexed by sequence length.  A decoded value below the entry could have
# been encoded in fewer bytes.
MIN_CODEPOINT: tuple[int, ...] = (0, 0, 0x80, 0x800, 0x10000)

# Payload bits kept from the leading byte, indexed by sequence length.
_LEAD_MASK: tuple[int, ...] = (0, 0x7F, 0x1F, 0x0F, 0x07)


def sequence_length(lead: int) -> int:
    """Return the sequence length announced by the leading byte *lead*.

    :returns: 1-4 for a valid leading byte, :data:`ORPHAN_CONTINUATION` for
        a continuation byte, or :data:`INVALID_LEAD` for ``0xF8``-``0xFF``.
    """
    if lead < 0x80:  # 0xxxxxxx
        return 1
    if lead < 0xC0:  # 10xxxxxx
        return ORPHAN_CONTINUATION
    if lead < 0xE0:  # 110xxxxx
        return 2
    if lead < 0xF0:  # 1110xxxx
        return 3
    if lead < 0xF8:  # 11110xxx
        return 4
    return INVALID_LEAD


def is_continuation(byte: int) -> bool:
    """Return True if *byte* matches ``10xxxxxx``."""
    return byte & 0xC0 == 0x80


def has_continuations(data: Sequence[int], i: int, length: int) -> bool:
    """Return True if the ``length - 1`` bytes after *i* are all continuation bytes."""
    for j in range(i + 1, i + length):
        if data[j] & 0xC0 != 0x80:
            return False
    return True


def decode_sequence(data: Sequence[int], i: int, length: int) -> int:
    """Reconstruct the codepoint of the *length*-byte sequence starting at *i*.

    Continuation bytes contribute their low six bits; their tag bits are
    not checked here.
    """
    codepoint = data[i] & _LEAD_MASK[length]
    for j in range(i + 1, i + length):
        codepoint = (codepoint << 6) | (data[j] & 0x3F)
    return codepoint


def decode_unchecked(data: Sequence[int], i: int) -> int:
    """Decode the codepoint at *i* using only the leading byte to pick a length.

    Assumes well-formed input; continuation bytes and the ``0x80``-``0xBF``
    and ``0xF8``-``0xFF`` lead ranges are not rejected.
    """
    lead = data[i]
    if lead < 0x80:
        return lead
    if lead < 0xE0:
        return decode_sequence(data, i, 2)
    if lead < 0xF0:
        return decode_sequence(data, i, 3)
    return decode_sequence(data, i, 4)


def advance_unchecked(data: Sequence[int], i: int) -> int:
    """Return the offset of the sequence following the one at *i*.

    Stray continuation bytes and reserved lead bytes advance by one so a
    cursor always makes progress, even on input that was never validated.
    """
    lead = data[i]
    if lead <= 0x7F:
        return i + 1
    if lead <= 0xBF:
        return i + 1
    if lead <= 0xDF:
        return i + 2
    if lead <= 0xEF:
        return i + 3
    if lead <= 0xF7:
        return i + 4
    return i + 1
