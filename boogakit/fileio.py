"""File and directory operations, path queries and formatted file output."""

from __future__ import annotations

import io
import os
import shutil
from enum import IntEnum, IntFlag
from typing import IO, Any, Union

from boogakit.formatting import PRINT_BUFFER_SIZE, format_truncated

PathLike = Union[str, os.PathLike]


class OpenFlags(IntFlag):
    """How to open a file.

    CREATE replaces an existing file and writes from the start; WRITE without
    CREATE appends to an existing file.
    """

    READ = 0
    CREATE = 1 << 0
    WRITE = 1 << 1


class MousePointerKind(IntEnum):
    DEFAULT = 0
    TEXT_SELECT = 10
    BUSY = 20
    BUSY_BACKGROUND = 30
    CROSS = 40
    ARROW_N = 50
    ARROWS_NW_SE = 60
    ARROWS_NE_SW = 70
    ARROWS_HORIZONTAL = 80
    ARROWS_VERTICAL = 90
    ARROWS_ALL = 100
    NO = 110
    POINT = 120
    MAX = 121


def file_open(path: PathLike, flags: OpenFlags = OpenFlags.READ) -> IO[bytes]:
    """Open ``path`` in binary mode according to ``flags``; raises OSError on failure."""
    flags = OpenFlags(flags)
    if flags & OpenFlags.CREATE:
        return open(path, "wb" if flags & OpenFlags.WRITE else "w+b")
    if flags & OpenFlags.WRITE:
        handle = open(path, "r+b")
        handle.seek(0, os.SEEK_END)
        return handle
    return open(path, "rb")


def _as_bytes(data: Union[str, bytes, bytearray, memoryview]) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def write_entire_file(path: PathLike, data: Union[str, bytes]) -> None:
    """Replace the contents of ``path`` with ``data`` (text is written as UTF-8)."""
    with file_open(path, OpenFlags.CREATE | OpenFlags.WRITE) as handle:
        handle.write(_as_bytes(data))


def read_entire_file(path: PathLike) -> bytes:
    """Return the whole contents of ``path``."""
    with file_open(path, OpenFlags.READ) as handle:
        return handle.read()


def file_delete(path: PathLike) -> None:
    """Delete the file at ``path``."""
    os.remove(path)


def file_copy(source: PathLike, destination: PathLike, replace_if_exists: bool = False) -> None:
    """Copy a file; raises FileExistsError if the destination exists and may not be replaced."""
    if not replace_if_exists and os.path.exists(destination):
        raise FileExistsError(f"destination already exists: {os.fspath(destination)}")
    shutil.copyfile(source, destination)


def make_directory(path: PathLike, recursive: bool = False) -> None:
    """Create a directory; with ``recursive`` missing parents are made and existing ones kept."""
    if recursive:
        os.makedirs(path, exist_ok=True)
    else:
        os.mkdir(path)


def delete_directory(path: PathLike, recursive: bool = False) -> None:
    """Remove a directory; without ``recursive`` it must be empty."""
    if recursive:
        shutil.rmtree(path)
    else:
        os.rmdir(path)


def is_file(path: PathLike) -> bool:
    return os.path.isfile(path)


def is_directory(path: PathLike) -> bool:
    return os.path.isdir(path)


def is_path_absolute(path: PathLike) -> bool:
    return os.path.isabs(path)


def get_absolute_path(path: PathLike) -> str:
    """The absolute, normalised form of ``path``."""
    return os.path.abspath(path)


def get_relative_path(from_path: PathLike, to_path: PathLike) -> str:
    """Path of ``to_path`` relative to the directory ``from_path``."""
    return os.path.relpath(os.path.abspath(to_path), os.path.abspath(from_path))


def do_paths_match(a: PathLike, b: PathLike) -> bool:
    """Whether two paths name the same location once made absolute and normalised."""
    return os.path.normcase(os.path.abspath(a)) == os.path.normcase(os.path.abspath(b))


def file_size(path: PathLike) -> int:
    """Size of the file at ``path`` in bytes."""
    return os.path.getsize(path)


def fprint(f: IO[Any], fmt: str, *args: Any) -> None:
    """Format and write to ``f`` in chunks of the print buffer size."""
    step = PRINT_BUFFER_SIZE - 1
    text_stream = isinstance(f, io.TextIOBase)
    for start in range(0, len(fmt), step):
        chunk = format_truncated(fmt[start:start + step], PRINT_BUFFER_SIZE, *args)
        f.write(chunk if text_stream else chunk.encode("utf-8"))