# tests/test_byteview.py
from __future__ import annotations

import array

import pytest

from utf8guard.byteview import ByteView, Utf8Range, as_byte_view


def test_indexed_access():
    view = ByteView(b"\x41\xc3\xa9")
    assert len(view) == 3
    assert view[0] == 0x41
    assert view[2] == 0xA9


@pytest.mark.parametrize("index", [-1, 3, 100])
def test_out_of_bounds_access_raises(index):
    view = ByteView(b"abc")
    with pytest.raises(IndexError):
        view[index]


def test_accepts_bytearray_and_memoryview():
    data = bytearray(b"hello")
    assert ByteView(data).tobytes() == b"hello"
    assert ByteView(memoryview(data)[1:3]).tobytes() == b"el"


def test_view_is_read_only():
    view = ByteView(bytearray(b"abc"))
    assert view.buffer.readonly


def test_view_does_not_copy():
    data = b"shared"
    assert ByteView(data).buffer.obj is data


def test_multibyte_item_buffer_is_cast_to_bytes():
    arr = array.array("H", [0x4142, 0x4344])
    view = ByteView(arr)
    assert len(view) == 4


@pytest.mark.parametrize("bad", ["text", 42, None, [0x41]])
def test_non_buffer_raises_type_error(bad):
    with pytest.raises(TypeError):
        ByteView(bad)


def test_non_contiguous_buffer_raises_type_error():
    with pytest.raises(TypeError):
        ByteView(memoryview(b"abcdef")[::2])


def test_prefix():
    view = ByteView(b"abcdef")
    assert view.prefix(0).tobytes() == b""
    assert view.prefix(3).tobytes() == b"abc"
    assert view.prefix(6) == view


@pytest.mark.parametrize("size", [-1, 7, True, 2.0])
def test_prefix_rejects_bad_length(size):
    with pytest.raises(ValueError, match="length must be"):
        ByteView(b"abcdef").prefix(size)


def test_bytes_and_equality():
    assert bytes(ByteView(b"xyz")) == b"xyz"
    assert ByteView(b"xyz") == ByteView(bytearray(b"xyz"))
    assert ByteView(b"xyz") != ByteView(b"xy")
    assert hash(ByteView(b"xyz")) == hash(ByteView(b"xyz"))


def test_to_utf8_returns_range():
    rng = ByteView(b"caf\xc3\xa9!").to_utf8(5)
    assert isinstance(rng, Utf8Range)
    assert rng.tobytes() == b"caf\xc3\xa9"


def test_assume_valid_wraps_without_checking():
    rng = Utf8Range.assume_valid(b"\xc3\xa9")
    assert len(rng) == 2
    assert rng.codepoints() == [0xE9]
    # Not validated: this is accepted as-is.
    assert len(Utf8Range.assume_valid(b"\xff")) == 1


def test_assume_valid_reuses_view():
    view = ByteView(b"abc")
    assert Utf8Range.assume_valid(view).view is view


def test_range_equality():
    assert Utf8Range.assume_valid(b"ab") == Utf8Range.assume_valid(bytearray(b"ab"))
    assert Utf8Range.assume_valid(b"ab") != Utf8Range.assume_valid(b"a")
    assert bytes(Utf8Range.assume_valid(b"ab")) == b"ab"


def test_range_constructor_is_not_public():
    with pytest.raises(TypeError, match="assume_valid"):
        Utf8Range(ByteView(b"abc"))


def test_as_byte_view_reuses_and_wraps():
    view = ByteView(b"abc")
    assert as_byte_view(view) is view
    assert as_byte_view(bytearray(b"abc")) == view
