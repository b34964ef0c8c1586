import os

import pytest

from connectlib.files import (
    copy_dirs,
    copy_file,
    create_dir,
    exists,
    get_absolute_path,
    get_directory,
    get_file_name,
    get_filepath,
    get_full_file_name,
    read_file,
    write_file,
)


def test_write_then_read_round_trip(tmp_path):
    path = tmp_path / "note.txt"
    write_file(path, "first\nsecond\n")
    assert read_file(path) == "first\nsecond\n"


def test_read_adds_final_newline(tmp_path):
    path = tmp_path / "note.txt"
    write_file(path, "first\nsecond")
    assert read_file(path) == "first\nsecond\n"


def test_read_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    write_file(path, "")
    assert read_file(path) == ""


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file(tmp_path / "missing.txt")


def test_write_bytes(tmp_path):
    path = tmp_path / "blob.bin"
    write_file(path, b"\x00\x01\x02")
    assert path.read_bytes() == b"\x00\x01\x02"


def test_create_dir_reports_existing(tmp_path):
    target = tmp_path / "assets"
    assert create_dir(target) is True
    assert create_dir(target) is False
    assert target.is_dir()


def test_create_dir_over_file_raises(tmp_path):
    target = tmp_path / "plain"
    target.write_text("x")
    with pytest.raises(FileExistsError):
        create_dir(target)


def test_copy_file_overwrites(tmp_path):
    src = tmp_path / "src.txt"
    dest = tmp_path / "dest.txt"
    src.write_text("new")
    dest.write_text("old contents")
    copy_file(src, dest)
    assert dest.read_text() == "new"


def test_copy_file_creates_destination(tmp_path):
    src = tmp_path / "src.txt"
    src.write_text("data")
    copy_file(src, tmp_path / "copy.txt")
    assert (tmp_path / "copy.txt").read_text() == "data"


def test_copy_dirs_recursive(tmp_path):
    src = tmp_path / "src"
    (src / "nested").mkdir(parents=True)
    (src / "a.txt").write_text("a")
    (src / "nested" / "b.txt").write_text("b")
    dest = tmp_path / "dest"
    copy_dirs(src, dest, True)
    assert (dest / "a.txt").read_text() == "a"
    assert (dest / "nested" / "b.txt").read_text() == "b"


def test_copy_dirs_overwrites_existing_files(tmp_path):
    src = tmp_path / "src"
    src.mkdir()
    (src / "a.txt").write_text("fresh")
    dest = tmp_path / "dest"
    dest.mkdir()
    (dest / "a.txt").write_text("stale")
    copy_dirs(src, dest)
    assert (dest / "a.txt").read_text() == "fresh"


def test_copy_dirs_without_root_fails_on_missing_dest(tmp_path):
    src = tmp_path / "src"
    (src / "nested").mkdir(parents=True)
    with pytest.raises(FileNotFoundError):
        copy_dirs(src, tmp_path / "missing" / "dest")


def test_file_names():
    assert get_full_file_name("shaders/basic.glsl") == "basic.glsl"
    assert get_file_name("shaders/basic.glsl") == "basic.glsl"
    assert get_full_file_name("shaders/") == ""


def test_exists(tmp_path):
    path = tmp_path / "here.txt"
    assert exists(path) is False
    path.write_text("x")
    assert exists(path) is True


def test_absolute_path():
    result = get_absolute_path("some_file.txt")
    assert os.path.isabs(result)
    assert result.endswith("some_file.txt")


def test_get_directory():
    assert get_directory("shaders/common/basic.glsl") == "shaders/common"
    assert get_directory("basic.glsl") == "basic.glsl"


def test_get_filepath():
    assert get_filepath("shaders/basic.glsl") == "shaders/"
    assert get_filepath("shaders\\basic.glsl") == "shaders\\"
    assert get_filepath("basic.glsl") == ""