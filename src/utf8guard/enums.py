"""Enumerations for utf8guard."""

import enum


class ErrorKind(enum.IntEnum):
    """Outcome of a validation scan.

    ``SUCCESS`` is zero so a result's error is falsy when the whole input
    decoded cleanly.  Every other member names the first defect found.
    """

    SUCCESS = 0
    INVALID_BYTE = 1
    INVALID_CODEPOINT = 2
    OVERLONG_ENCODING = 3
    UNEXPECTED_CONTINUATION_BYTE = 4
    UNEXPECTED_NON_CONTINUATION_BYTE = 5
    UNEXPECTED_END = 6

    @property
    def label(self) -> str:
        """Lower-case name used in reports, e.g. ``"overlong_encoding"``."""
        return self.name.lower()


class Check(enum.IntFlag):
    """Bit flags selecting the legality checks a scan applies."""

    NONE = 0
    OVERLONG = 1
    CODEPOINT_RANGE = 2
    ALL = OVERLONG | CODEPOINT_RANGE
