"""Internal shared utilities for utf8guard."""

from __future__ import annotations


def _as_memoryview(data: object) -> memoryview:
    """Return a read-only unsigned-byte memoryview over *data* without copying.

    Raises TypeError if *data* does not expose a C-contiguous buffer.
    """
    try:
        view = memoryview(data)  # type: ignore[arg-type]
    except TypeError:
        msg = f"expected a bytes-like object, got {type(data).__name__}"
        raise TypeError(msg) from None
    if not view.c_contiguous:
        msg = "expected a C-contiguous buffer"
        raise TypeError(msg)
    if view.format != "B" or view.ndim != 1:
        view = view.cast("B")
    return view.toreadonly()


def _check_length(size: int, limit: int) -> None:
    """Raise ValueError unless ``0 <= size <= limit``."""
    if isinstance(size, bool) or not isinstance(size, int) or not 0 <= size <= limit:
        msg = f"length must be an integer between 0 and {limit}, got {size!r}"
        raise ValueError(msg)
