import io

import pytest

from strcomplex.errors import InvalidTextError
from strcomplex.text_parser.textLoader import TextLoader


def test_appends_sentinel(write_file):
    text = TextLoader(write_file(b"banana")).load()
    assert text.getBytes() == b"banana\x00"
    assert text.n == 7
    assert text.length == 6
    assert text.getContent() == b"banana"
    assert text.getArray().tolist() == list(b"banana\x00")


def test_prefix_truncates(write_file):
    path = write_file(b"mississippi")
    assert TextLoader(path, prefix=4).load().getBytes() == b"miss\x00"
    # zero or a prefix beyond the end reads everything
    assert TextLoader(path, prefix=0).load().length == 11
    assert TextLoader(path, prefix=100).load().length == 11


def test_interior_zero_byte_rejected(write_file):
    path = write_file(b"ab\x00cd")
    with pytest.raises(InvalidTextError) as info:
        TextLoader(path).load()
    assert info.value.position == 2
    assert info.value.exitCode == -2


def test_zero_byte_beyond_prefix_is_ignored(write_file):
    path = write_file(b"abcd\x00ef")
    assert TextLoader(path, prefix=4).load().getBytes() == b"abcd\x00"


def test_trailing_zero_is_the_sentinel():
    text = TextLoader("<stream>").parse(io.BytesIO(b"abc\x00"))
    assert text.getBytes() == b"abc\x00"
    assert text.length == 3


def test_empty_file(write_file):
    text = TextLoader(write_file(b"")).load()
    assert text.getBytes() == b"\x00"
    assert text.length == 0


def test_missing_file_raises_oserror(tmp_path):
    with pytest.raises(OSError):
        TextLoader(str(tmp_path / "missing.txt")).load()
