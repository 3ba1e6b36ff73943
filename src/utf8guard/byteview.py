"""Non-owning byte windows: the raw :class:`ByteView` and the validated :class:`Utf8Range`."""

from __future__ import annotations

from collections.abc import Iterator

from utf8guard._utils import _as_memoryview, _check_length
from utf8guard.iterator import CodepointIterator


class ByteView:
    """Read-only window over a contiguous byte buffer.

    Wraps a ``memoryview`` so no bytes are copied.  The caller keeps the
    underlying buffer alive (and unmodified) for as long as the view is used.

    Views made by :meth:`prefix` share the root memoryview of the view they
    came from and always start at its first byte, so offsets into any of
    them are offsets into the root.
    """

    __slots__ = ("_buf", "_root")

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        self._buf = _as_memoryview(data)
        self._root = self._buf

    def __len__(self) -> int:
        return len(self._buf)

    def __getitem__(self, index: int) -> int:
        """Return the byte at *index*.

        :raises IndexError: If *index* is outside ``[0, len(view))``.
            Negative indices are rejected rather than wrapped.
        """
        if not 0 <= index < len(self._buf):
            msg = f"byte index {index} out of range for view of length {len(self._buf)}"
            raise IndexError(msg)
        return self._buf[index]

    def __bytes__(self) -> bytes:
        return self._buf.tobytes()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ByteView):
            return NotImplemented
        return self._buf == other._buf

    def __hash__(self) -> int:
        return hash(self._buf.tobytes())

    def __repr__(self) -> str:
        return f"ByteView({self._buf.tobytes()!r})"

    @property
    def buffer(self) -> memoryview:
        """The underlying read-only memoryview."""
        return self._buf

    def tobytes(self) -> bytes:
        return self._buf.tobytes()

    def prefix(self, size: int) -> ByteView:
        """Return a view over the first *size* bytes.

        :raises ValueError: If *size* is not in ``[0, len(view)]``.
        """
        _check_length(size, len(self._buf))
        view = ByteView.__new__(ByteView)
        view._buf = self._buf[:size]
        view._root = self._root
        return view

    def to_utf8(self, size: int) -> Utf8Range:
        """Tag the first *size* bytes as well-formed UTF-8 without checking them.

        Used by the validators to hand back the prefix they have already
        proven.  Callers with their own proof should prefer
        :meth:`Utf8Range.assume_valid`, which makes the trust explicit.
        """
        return Utf8Range(self.prefix(size), _trusted=True)


class Utf8Range:
    """A byte window known to decompose into whole UTF-8 sequences.

    Obtain one from :func:`utf8guard.validate` (the result's ``range``) or,
    when validity is established elsewhere, from :meth:`assume_valid`.
    Iterating a range yields its codepoints as integers.  Do not call the
    constructor directly.
    """

    __slots__ = ("_view",)

    def __init__(self, view: ByteView, *, _trusted: bool = False) -> None:
        if not _trusted:
            msg = "use validate() or Utf8Range.assume_valid() to create a Utf8Range"
            raise TypeError(msg)
        self._view = view

    @classmethod
    def assume_valid(cls, data: ByteView | bytes | bytearray | memoryview) -> Utf8Range:
        """Wrap *data* as a validated range without checking it.

        No validation happens here.  If *data* is not well-formed UTF-8,
        iterating the returned range has unspecified results and may raise
        :class:`IndexError` or yield garbage codepoints.
        """
        return cls(as_byte_view(data), _trusted=True)

    def __len__(self) -> int:
        return len(self._view)

    def __iter__(self) -> Iterator[int]:
        return self.begin()

    def __bytes__(self) -> bytes:
        return self._view.tobytes()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Utf8Range):
            return NotImplemented
        return self._view == other._view

    def __hash__(self) -> int:
        return hash(self._view)

    def __repr__(self) -> str:
        return f"Utf8Range({self._view.tobytes()!r})"

    @property
    def view(self) -> ByteView:
        return self._view

    def tobytes(self) -> bytes:
        return self._view.tobytes()

    def begin(self) -> CodepointIterator:
        """Return a cursor at the first byte of the range."""
        return CodepointIterator(self._view._root, 0, len(self._view))

    def end(self) -> CodepointIterator:
        """Return a cursor one past the last byte of the range."""
        size = len(self._view)
        return CodepointIterator(self._view._root, size, size)

    def codepoints(self) -> list[int]:
        return list(self.begin())


def as_byte_view(data: ByteView | bytes | bytearray | memoryview) -> ByteView:
    """Coerce *data* to a :class:`ByteView`, reusing it if it already is one."""
    if isinstance(data, ByteView):
        return data
    return ByteView(data)
