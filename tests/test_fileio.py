import io
import os
import struct

import pytest

from boogakit.fileio import (
    MousePointerKind,
    OpenFlags,
    delete_directory,
    do_paths_match,
    file_copy,
    file_delete,
    file_open,
    file_size,
    fprint,
    get_absolute_path,
    get_relative_path,
    is_directory,
    is_file,
    is_path_absolute,
    make_directory,
    read_entire_file,
    write_entire_file,
)
from boogakit.lcg import Lcg


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_open_flags_from_raw_value_create_and_write(workdir):
    with file_open("raw.txt", OpenFlags(3)) as f:
        f.write(b"raw")
    assert read_entire_file("raw.txt") == b"raw"


def test_read_flag_opens_read_only(workdir):
    write_entire_file("ro.txt", b"data")
    with file_open("ro.txt", OpenFlags.READ) as f:
        with pytest.raises(OSError):
            f.write(b"more")
    assert read_entire_file("ro.txt") == b"data"


def test_mouse_pointer_kind_lookup():
    assert MousePointerKind(120) is MousePointerKind.POINT
    assert MousePointerKind(10) is MousePointerKind.TEXT_SELECT
    with pytest.raises(ValueError):
        MousePointerKind(5)


def test_write_then_read_with_handles(workdir):
    with file_open("test.txt", OpenFlags.WRITE | OpenFlags.CREATE) as f:
        f.write(b"Hello, World!")
    with file_open("test.txt", OpenFlags.READ) as f:
        assert f.read() == b"Hello, World!"


def test_create_replaces_existing(workdir):
    write_entire_file("a.txt", b"long old contents")
    with file_open("a.txt", OpenFlags.CREATE | OpenFlags.WRITE) as f:
        f.write(b"new")
    assert read_entire_file("a.txt") == b"new"


def test_write_without_create_appends(workdir):
    write_entire_file("a.txt", b"first")
    with file_open("a.txt", OpenFlags.WRITE) as f:
        f.write(b"second")
    assert read_entire_file("a.txt") == b"firstsecond"


def test_write_without_create_requires_existing(workdir):
    with pytest.raises(FileNotFoundError):
        file_open("missing.txt", OpenFlags.WRITE)


def test_read_missing_file_raises(workdir):
    with pytest.raises(FileNotFoundError):
        read_entire_file("missing.txt")


def test_write_bytes_int(workdir):
    with file_open("test_bytes.txt", OpenFlags.WRITE | OpenFlags.CREATE) as f:
        f.write(struct.pack("<i", 42))
    assert struct.unpack("<i", read_entire_file("test_bytes.txt"))[0] == 42
    assert file_size("test_bytes.txt") == 4


def test_entire_file_round_trip_text(workdir):
    write_entire_file("entire_test.txt", "Entire file test")
    assert read_entire_file("entire_test.txt") == b"Entire file test"


def test_entire_file_round_trip_big(workdir):
    rng = Lcg(1)
    data = b"".join(struct.pack("<Q", rng.next()) for _ in range(4096))
    write_entire_file("integers", data)
    read_back = read_entire_file("integers")
    assert len(read_back) == len(data)
    assert read_back == data
    assert is_file("integers")


def test_fprint_binary(workdir):
    with file_open("balls.txt", OpenFlags.WRITE | OpenFlags.CREATE) as f:
        fprint(f, "Hello, %cs!", "Balls")
    assert read_entire_file("balls.txt") == b"Hello, Balls!"


def test_fprint_text_stream():
    stream = io.StringIO()
    fprint(stream, "Number: %d", 42)
    assert stream.getvalue() == "Number: 42"


def test_fprint_long_format_keeps_all_text():
    stream = io.StringIO()
    fmt = "x" * 10000
    fprint(stream, fmt)
    assert stream.getvalue() == fmt


def test_file_delete(workdir):
    write_entire_file("gone.txt", b"x")
    assert is_file("gone.txt")
    file_delete("gone.txt")
    assert not is_file("gone.txt")
    with pytest.raises(FileNotFoundError):
        file_delete("gone.txt")


def test_file_copy(workdir):
    write_entire_file("src.txt", b"payload")
    file_copy("src.txt", "dst.txt")
    assert read_entire_file("dst.txt") == b"payload"


def test_file_copy_refuses_to_replace(workdir):
    write_entire_file("src.txt", b"new")
    write_entire_file("dst.txt", b"old")
    with pytest.raises(FileExistsError):
        file_copy("src.txt", "dst.txt", False)
    assert read_entire_file("dst.txt") == b"old"
    file_copy("src.txt", "dst.txt", True)
    assert read_entire_file("dst.txt") == b"new"


def test_make_directory_and_queries(workdir):
    make_directory("test_dir", False)
    assert is_directory("test_dir")
    assert not is_file("test_dir")
    with pytest.raises(FileExistsError):
        make_directory("test_dir", False)


def test_absolute_and_relative_paths(workdir):
    make_directory("test_dir")
    dir_abs = get_absolute_path("test_dir")
    assert is_path_absolute(dir_abs)
    assert not is_path_absolute("test_dir")
    dir_rel = get_relative_path(".", dir_abs)
    assert do_paths_match(dir_rel, "test_dir")


def test_do_paths_match_normalises(workdir):
    assert do_paths_match("a/b/../c", os.path.join("a", "c"))
    assert not do_paths_match("a", "b")


def test_recursive_directories(workdir):
    make_directory("test_dir1/test_dir2/test_dir3", True)
    make_directory("test_dir1/test_dir2/test_dir4", True)
    assert is_directory("test_dir1")
    assert is_directory("test_dir1/test_dir2")
    assert is_directory("test_dir1/test_dir2//test_dir3")
    assert is_directory("test_dir1/test_dir2//test_dir4")


def test_non_recursive_make_needs_parent(workdir):
    with pytest.raises(FileNotFoundError):
        make_directory("p/q/r", False)


def test_delete_directories(workdir):
    make_directory("test_dir")
    delete_directory("test_dir", False)
    assert not is_directory("test_dir")

    make_directory("test_dir1/test_dir2/test_dir3", True)
    write_entire_file("test_dir1/test_dir2/file.txt", b"x")
    with pytest.raises(OSError):
        delete_directory("test_dir1", False)
    delete_directory("test_dir1", True)
    assert not is_directory("test_dir1")


def test_file_size_matches_written(workdir):
    write_entire_file("sized.bin", b"\x00" * 123)
    assert file_size("sized.bin") == len(b"\x00" * 123)