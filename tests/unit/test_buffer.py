"""
Unit tests for Buffer and Slice (iniscan.core.buffer).
"""

import pytest

from iniscan.core.buffer import Buffer, Slice
from iniscan.core.errors import EmptyInputError, ErrorKind


class TestBuffer:
    """Construction and read access."""

    def test_from_bytes(self):
        buf = Buffer(b"k=v")
        assert len(buf) == 3
        assert buf.data == b"k=v"
        assert buf[0] == ord("k")

    def test_from_text(self):
        buf = Buffer.from_text("é=1", encoding="utf-8")
        assert buf.data == "é=1".encode("utf-8")

    def test_bytearray_is_copied(self):
        raw = bytearray(b"a=1")
        buf = Buffer(raw)
        raw[0] = ord("z")
        assert buf.data == b"a=1"

    def test_empty_input_is_rejected(self):
        with pytest.raises(EmptyInputError) as exc:
            Buffer(b"")
        assert exc.value.kind == ErrorKind.EMPTY_INPUT

    def test_empty_text_is_rejected(self):
        with pytest.raises(EmptyInputError):
            Buffer.from_text("")


class TestSlice:
    """Bounds-checked views."""

    def test_slice_contents(self):
        buf = Buffer(b"[server]")
        s = buf.slice(1, 6)
        assert isinstance(s, Slice)
        assert bytes(s) == b"server"
        assert s.tobytes() == b"server"
        assert s.decode() == "server"
        assert s.end == 7
        assert len(s) == 6
        assert not s.is_empty

    def test_zero_length_slice_at_end(self):
        buf = Buffer(b"abc")
        s = buf.slice(3, 0)
        assert s.is_empty
        assert bytes(s) == b""

    @pytest.mark.parametrize("start,length", [(-1, 1), (0, -1), (2, 2), (4, 0)])
    def test_out_of_bounds(self, start, length):
        buf = Buffer(b"abc")
        with pytest.raises(ValueError, match="out of bounds"):
            buf.slice(start, length)

    @pytest.mark.parametrize("start,length", [(-1, 1), (0, -1), (2, 50), (4, 0)])
    def test_direct_construction_is_bounds_checked(self, start, length):
        buf = Buffer(b"abc")
        with pytest.raises(ValueError, match="out of bounds"):
            Slice(buf, start, length)

    def test_direct_construction_within_bounds(self):
        s = Slice(Buffer(b"abc"), 1, 2)
        assert bytes(s) == b"bc"

    def test_view_is_read_only_and_zero_copy(self):
        buf = Buffer(b"key=value")
        view = buf.slice(4, 5).view()
        assert view.readonly
        assert view.obj is buf.data
        assert view.tobytes() == b"value"

    def test_overlapping_slices(self):
        buf = Buffer(b"abcdef")
        a = buf.slice(0, 4)
        b = buf.slice(2, 4)
        assert bytes(a) == b"abcd"
        assert bytes(b) == b"cdef"

    def test_equality_requires_same_buffer(self):
        one = Buffer(b"same")
        two = Buffer(b"same")
        assert one.slice(0, 4) == one.slice(0, 4)
        assert one.slice(0, 4) != two.slice(0, 4)
        assert hash(one.slice(0, 2)) == hash(one.slice(0, 2))

    def test_slice_is_frozen(self):
        s = Buffer(b"abc").slice(0, 1)
        with pytest.raises(AttributeError):
            s.start = 2  # type: ignore[misc]
