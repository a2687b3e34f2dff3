"""Enumeration of point files inside the input directories."""

import os
import stat
from pathlib import Path
from typing import Iterable

from ..utils.collation import text_sort_key

DEFAULT_EXTENSION = '.pts'


class DirectoryNotFound(FileNotFoundError):
    """An input directory does not exist or is not a directory.

    Attributes:
        path: The offending input path
    """

    def __init__(self, path: str | os.PathLike):
        self.path = Path(path)
        super().__init__(f"The specified input directory does not exist: {path}")


def _is_existing_directory(path: str | os.PathLike) -> bool:
    # Path('') would resolve to the working directory
    if not os.fspath(path).strip():
        return False
    return Path(path).is_dir()


def find_missing_directories(directory_paths: Iterable[str | os.PathLike]) -> list[Path]:
    """Return every input path that is not an existing directory, in input order.

    Blank paths count as missing."""
    return [Path(p) for p in directory_paths if not _is_existing_directory(p)]


def list_point_files(directory_paths: Iterable[str | os.PathLike], extension: str = DEFAULT_EXTENSION) -> list[Path]:
    """List the point files directly inside each directory.

    All directories are validated before any of them is listed, so a missing directory
    aborts the whole batch before a single file is touched. Subdirectories are not
    entered.

    Args:
        directory_paths: Directories to scan, in order
        extension: File suffix to match, including the leading dot

    Returns:
        Flat list of file paths; directories in input order, files of one directory
        sorted by name

    Raises:
        DirectoryNotFound: The first input path that is not an existing directory
    """
    directory_paths = list(directory_paths)
    for directory_path in directory_paths:
        if not _is_existing_directory(directory_path):
            raise DirectoryNotFound(directory_path)
    directories = [Path(p) for p in directory_paths]

    files: list[Path] = []
    for directory in directories:
        files.extend(sorted(_iterate_matching_files(directory, extension), key=lambda p: text_sort_key(p.name)))
    return files


def _iterate_matching_files(directory: Path, extension: str):
    child: Path
    for child in directory.iterdir():
        if not child.name.endswith(extension):
            continue
        # Symlinks count when they point at a regular file
        try:
            st = child.stat()
        except FileNotFoundError:
            continue
        if stat.S_ISREG(st.st_mode):
            yield child
