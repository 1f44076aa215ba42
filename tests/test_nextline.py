import os

import pytest

from cursus.nextline import LineReader, get_next_line


@pytest.fixture
def open_file(tmp_path):
    descriptors = []

    def _open(content: bytes, name: str = "input.txt") -> int:
        path = tmp_path / name
        path.write_bytes(content)
        fd = os.open(path, os.O_RDONLY)
        descriptors.append(fd)
        return fd

    yield _open
    for fd in descriptors:
        try:
            os.close(fd)
        except OSError:
            pass


def test_reads_lines_with_newlines(open_file):
    reader = LineReader(open_file(b"first\nsecond\n"))
    assert reader.read_line() == b"first\n"
    assert reader.read_line() == b"second\n"
    assert reader.read_line() is None


def test_last_line_without_newline(open_file):
    reader = LineReader(open_file(b"one\ntwo"))
    assert list(reader) == [b"one\n", b"two"]


def test_empty_file_gives_none(open_file):
    assert LineReader(open_file(b"")).read_line() is None


@pytest.mark.parametrize("size", [1, 2, 3, 7, 1024])
def test_buffer_size_does_not_change_lines(open_file, size):
    content = b"alpha\n\nbeta gamma\ndelta"
    lines = list(LineReader(open_file(content), size))
    assert b"".join(lines) == content
    assert lines == content.splitlines(keepends=True)


def test_blank_lines_are_kept(open_file):
    assert list(LineReader(open_file(b"\n\n"), 1)) == [b"\n", b"\n"]


def test_negative_fd_rejected():
    with pytest.raises(ValueError):
        LineReader(-1)


def test_zero_buffer_size_rejected(open_file):
    with pytest.raises(ValueError):
        LineReader(open_file(b"x"), 0)


def test_read_error_raises(tmp_path):
    path = tmp_path / "gone.txt"
    path.write_bytes(b"data\n")
    fd = os.open(path, os.O_RDONLY)
    reader = LineReader(fd)
    os.close(fd)
    with pytest.raises(OSError):
        reader.read_line()


def test_get_next_line_keeps_state_per_descriptor(open_file):
    fd_a = open_file(b"a1\na2\n", "a.txt")
    fd_b = open_file(b"b1\nb2\n", "b.txt")
    assert get_next_line(fd_a) == b"a1\n"
    assert get_next_line(fd_b) == b"b1\n"
    assert get_next_line(fd_a) == b"a2\n"
    assert get_next_line(fd_b) == b"b2\n"
    assert get_next_line(fd_a) is None
    assert get_next_line(fd_b) is None


def test_get_next_line_rejects_negative_fd():
    with pytest.raises(ValueError):
        get_next_line(-3)


def test_reads_from_pipe():
    read_end, write_end = os.pipe()
    try:
        os.write(write_end, b"over\nthe pipe")
        os.close(write_end)
        assert list(LineReader(read_end, 4)) == [b"over\n", b"the pipe"]
    finally:
        os.close(read_end)