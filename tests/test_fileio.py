import pytest

from plainpad.fileio import default_save_name, read_lines, write_lines


def test_round_trip(tmp_path):
    target = tmp_path / "doc.txt"
    lines = ["first", "", "  indented", "last"]
    write_lines(target, lines)
    assert read_lines(target) == lines


def test_no_newline_after_last_line(tmp_path):
    target = tmp_path / "doc.txt"
    write_lines(target, ["a", "b"])
    assert target.read_bytes() == b"a\nb"


def test_trailing_newline_does_not_add_line(tmp_path):
    target = tmp_path / "doc.txt"
    target.write_bytes(b"one\ntwo\n")
    assert read_lines(target) == ["one", "two"]


def test_empty_file_gives_one_empty_line(tmp_path):
    target = tmp_path / "empty.txt"
    target.write_bytes(b"")
    assert read_lines(target) == [""]


def test_crlf_line_endings(tmp_path):
    target = tmp_path / "dos.txt"
    target.write_bytes(b"one\r\ntwo\r\n")
    assert read_lines(target) == ["one", "two"]


def test_unicode_round_trip(tmp_path):
    target = tmp_path / "u.txt"
    lines = ["héllo", "ü→"]
    write_lines(target, lines)
    assert read_lines(target) == lines


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_lines(tmp_path / "absent.txt")


def test_write_into_missing_directory_raises(tmp_path):
    with pytest.raises(OSError):
        write_lines(tmp_path / "nowhere" / "doc.txt", ["x"])


def test_save_name_takes_part_after_backslash():
    assert default_save_name("C:\\docs\\notes.txt") == "notes.txt"


def test_save_name_without_backslash_is_whole_path():
    assert default_save_name("notes.txt") == "notes.txt"


def test_save_name_of_empty_path():
    assert default_save_name("") == ""