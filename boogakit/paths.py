"""Splitting of file paths into directory, file name and extension."""

from __future__ import annotations

_SEPARATORS = frozenset("/\\:")


def _last_separator(path: str) -> int:
    return max((path.rfind(sep) for sep in _SEPARATORS), default=-1)


def get_file_extension(path: str) -> str:
    """Extension of the last path component, including its dot, or "" if there is none.

    "dir/file.ext" gives ".ext".
    """
    dot = path.rfind(".")
    if dot < 0 or dot < _last_separator(path):
        return ""
    return path[dot:]


def get_file_name_including_extension(path: str) -> str:
    """Text after the last separator.

    The whole path is returned when it has no separator or ends in one.
    """
    sep = _last_separator(path)
    if sep != -1 and sep < len(path) - 1:
        return path[sep + 1:]
    return path


def get_file_name_excluding_extension(path: str) -> str:
    """File name without its last extension; a leading dot is not an extension."""
    name = get_file_name_including_extension(path)
    dot = name.rfind(".")
    if dot >= 1:
        return name[:dot]
    return name


def get_directory_of(path: str) -> str:
    """Everything before the last separator, or "" if there is none."""
    sep = _last_separator(path)
    if sep < 0:
        return ""
    return path[:sep]