"""File and directory helpers."""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path
from typing import Union

_log = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def read_file(filepath: PathLike) -> str:
    """Read a text file; every line, including the last, ends with a newline."""
    with open(filepath, encoding="utf-8", newline="") as file:
        text = file.read()
    if not text:
        return ""
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return "".join(f"{line}\n" for line in lines)


def write_file(filepath: PathLike, data: str | bytes) -> None:
    """Write ``data`` to ``filepath``, replacing what was there."""
    if isinstance(data, bytes):
        with open(filepath, "wb") as file:
            file.write(data)
    else:
        with open(filepath, "w", encoding="utf-8", newline="") as file:
            file.write(data)


def create_dir(dir_name: PathLike) -> bool:
    """Create a directory; return False if it already exists."""
    try:
        os.mkdir(dir_name)
    except FileExistsError:
        if os.path.isdir(dir_name):
            return False
        raise
    return True


def copy_file(src_path: PathLike, dest_path: PathLike) -> None:
    """Copy a file, overwriting the destination."""
    shutil.copyfile(src_path, dest_path)


def copy_dirs(src_path: PathLike, dest_path: PathLike, create_root: bool = False) -> None:
    """Copy the contents of ``src_path`` into ``dest_path`` recursively.

    Files that fail to copy are logged and skipped.
    """
    if create_root:
        create_dir(dest_path)
    for entry in Path(src_path).iterdir():
        target = Path(dest_path) / entry.name
        if entry.is_dir():
            create_dir(target)
            copy_dirs(entry, target)
            continue
        try:
            shutil.copyfile(entry, target)
        except OSError as error:
            _log.error("Failed to copy dirs from %s to %s\n Error: %s", entry, target, error)


def get_full_file_name(path: PathLike) -> str:
    """The last path component, or an empty string if the path ends in a separator."""
    return os.path.basename(os.fspath(path))


def get_file_name(path: PathLike) -> str:
    """The file name of ``path``, extension included."""
    return os.path.basename(os.fspath(path))


def exists(filepath: PathLike) -> bool:
    return os.path.exists(filepath)


def get_absolute_path(path: PathLike) -> str:
    """Absolute form of ``path``, without resolving ``..`` or links."""
    return str(Path(path).absolute())


def get_directory(filepath: str) -> str:
    """Everything before the last ``/``, or the whole string if there is none."""
    head, separator, _ = filepath.rpartition("/")
    return head if separator else filepath


def get_filepath(full_path: str) -> str:
    """Everything up to and including the last ``/`` or ``\\``."""
    cut = max(full_path.rfind("/"), full_path.rfind("\\"))
    return full_path[:cut + 1]