import pytest

from aoc.util import read_file_bytes, read_file_text, split_blocks, split_bytes_lines


def test_read_file_bytes_roundtrip(tmp_path):
    path = tmp_path / "in.txt"
    path.write_bytes(b"1\n2\n")

    assert read_file_bytes(path) == b"1\n2\n"
    assert read_file_bytes(str(path)) == b"1\n2\n"


def test_read_file_bytes_missing_file_has_context(tmp_path):
    missing = tmp_path / "nope.txt"

    with pytest.raises(OSError, match="Failed to open file") as excinfo:
        read_file_bytes(missing)

    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_read_file_text_rejects_invalid_utf8(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_bytes(b"\xff\xfe")

    with pytest.raises(ValueError, match="not valid utf8"):
        read_file_text(path)


def test_split_bytes_lines_stops_at_first_empty_piece():
    assert list(split_bytes_lines(b"a\nbb\n")) == [b"a", b"bb"]
    assert list(split_bytes_lines(b"a\n\nc\n")) == [b"a"]
    assert list(split_bytes_lines(b"")) == []


def test_split_blocks_drops_empty_groups():
    assert split_blocks("a\nb\n\nc\n\n\n") == ["a\nb", "c"]
