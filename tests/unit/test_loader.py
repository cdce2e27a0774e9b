"""
Unit tests for reading files into buffers (iniscan.core.loader).
"""

import pytest

from iniscan.core.errors import EmptyInputError, ErrorKind, LoadError
from iniscan.core.loader import load_buffer, read_entire_file


class TestReadEntireFile:
    """Binary reads and their failure modes."""

    def test_reads_bytes_verbatim(self, write_ini):
        path = write_ini(b"[a]\r\nk = v\r\n")
        buf = read_entire_file(path)
        assert buf.data == b"[a]\r\nk = v\r\n"

    def test_accepts_str_path(self, write_ini):
        path = write_ini("k=v\n")
        assert len(read_entire_file(str(path))) == 4

    def test_missing_file(self, tmp_path):
        with pytest.raises(LoadError) as exc:
            read_entire_file(tmp_path / "nope.ini")
        assert exc.value.kind == ErrorKind.IO_ERROR
        assert exc.value.line is None
        assert "nope.ini" in str(exc.value)

    def test_directory_is_an_io_error(self, tmp_path):
        with pytest.raises(LoadError):
            read_entire_file(tmp_path)

    def test_empty_file(self, write_ini):
        path = write_ini(b"")
        with pytest.raises(EmptyInputError) as exc:
            read_entire_file(path)
        assert exc.value.kind == ErrorKind.EMPTY_INPUT


class TestLoadBuffer:
    """Size-limited loading."""

    def test_within_limit(self, write_ini):
        path = write_ini("k=v\n")
        assert load_buffer(path, max_file_bytes=4).data == b"k=v\n"

    def test_over_limit(self, write_ini):
        path = write_ini("key = value\n")
        with pytest.raises(LoadError, match="byte limit"):
            load_buffer(path, max_file_bytes=5)

    def test_no_limit(self, write_ini):
        path = write_ini("x" * 10 + "=1")
        assert len(load_buffer(path)) == 12

    def test_missing_file_with_limit(self, tmp_path):
        with pytest.raises(LoadError):
            load_buffer(tmp_path / "nope.ini", max_file_bytes=10)
