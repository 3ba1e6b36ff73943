"""Forward-only codepoint cursor over a validated range."""

from __future__ import annotations

from utf8guard.decoder import advance_unchecked, decode_unchecked


class CodepointIterator:
    """Cursor that decodes one codepoint at a time.

    The bytes it walks are assumed to be well-formed UTF-8; nothing is
    re-validated.  On bytes that are not, the decoded values and the
    distance advanced are unspecified, and a truncated final sequence may
    read past the range or raise :class:`IndexError`.

    A cursor is owned by whoever advances it; do not share one between
    threads.  Obtain fresh cursors from :meth:`Utf8Range.begin` to restart.

    Cursors compare equal only when they walk the same root memoryview and
    sit at the same offset.  Ranges validated from the same
    :class:`~utf8guard.byteview.ByteView` share a root; separately wrapped
    buffers never do, even when they view the same object.
    """

    __slots__ = ("_buf", "_end", "_pos")

    def __init__(
        self, buf: memoryview, position: int = 0, end: int | None = None
    ) -> None:
        self._buf = buf
        self._pos = position
        self._end = len(buf) if end is None else end

    @property
    def position(self) -> int:
        """Byte offset of the cursor within its range."""
        return self._pos

    @property
    def value(self) -> int:
        """The codepoint at the cursor.

        :raises IndexError: If the cursor is at or past the end of the range.
        """
        if self._pos >= self._end:
            msg = "dereferenced a codepoint cursor at the end of its range"
            raise IndexError(msg)
        return decode_unchecked(self._buf, self._pos)

    def advance(self) -> CodepointIterator:
        """Move past the current sequence and return ``self``."""
        self._pos = advance_unchecked(self._buf, self._pos)
        return self

    def __iter__(self) -> CodepointIterator:
        return self

    def __next__(self) -> int:
        if self._pos >= self._end:
            raise StopIteration
        codepoint = decode_unchecked(self._buf, self._pos)
        self._pos = advance_unchecked(self._buf, self._pos)
        return codepoint

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CodepointIterator):
            return NotImplemented
        return self._buf is other._buf and self._pos == other._pos

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"CodepointIterator(position={self._pos})"
