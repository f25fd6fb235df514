import os

import pytest

from voidshell.linereader import LineReader


@pytest.fixture
def open_fd(tmp_path):
    opened = []

    def _open(content: bytes) -> int:
        path = tmp_path / f"input{len(opened)}.txt"
        path.write_bytes(content)
        fd = os.open(path, os.O_RDONLY)
        opened.append(fd)
        return fd

    yield _open
    for fd in opened:
        os.close(fd)


def test_reads_lines_with_newlines(open_fd):
    reader = LineReader(open_fd(b"first\nsecond\n"), 1024)
    assert reader.read_line() == "first\n"
    assert reader.read_line() == "second\n"
    assert reader.read_line() is None


def test_last_line_without_newline(open_fd):
    reader = LineReader(open_fd(b"a\nrest"), 1024)
    assert reader.read_line() == "a\n"
    assert reader.read_line() == "rest"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_empty_input(open_fd):
    assert LineReader(open_fd(b""), 1024).read_line() is None


@pytest.mark.parametrize("buffer_size", [1, 2, 3, 7, 1024])
def test_iteration_matches_splitlines(open_fd, buffer_size):
    content = "line one\n\nthird line here\nlast"
    reader = LineReader(open_fd(content.encode()), buffer_size)
    assert list(reader) == content.splitlines(keepends=True)


def test_multibyte_split_across_buffers(open_fd):
    content = "héllo wörld\nñ\n"
    reader = LineReader(open_fd(content.encode("utf-8")), 1)
    assert "".join(reader) == content


def test_reads_from_pipe():
    read_fd, write_fd = os.pipe()
    try:
        os.write(write_fd, b"x\ny\n")
        os.close(write_fd)
        assert list(LineReader(read_fd, 4)) == ["x\n", "y\n"]
    finally:
        os.close(read_fd)


def test_negative_fd_rejected():
    with pytest.raises(ValueError):
        LineReader(-1, 1024)


@pytest.mark.parametrize("buffer_size", [0, -5])
def test_bad_buffer_size_rejected(buffer_size):
    with pytest.raises(ValueError):
        LineReader(0, buffer_size)


def test_closed_fd_raises_oserror(tmp_path):
    path = tmp_path / "f.txt"
    path.write_bytes(b"data\n")
    fd = os.open(path, os.O_RDONLY)
    os.close(fd)
    with pytest.raises(OSError):
        LineReader(fd, 16).read_line()