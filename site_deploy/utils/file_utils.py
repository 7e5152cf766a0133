"""File operation utilities"""

import fnmatch
import os
import shutil
from pathlib import Path
from typing import Optional, List


def to_posix_relative(file_path: Path, directory: Path) -> str:
    """
    Relative path of a file under directory, always with forward slashes

    Raises:
        ValueError: If file_path is not inside directory
    """
    return file_path.relative_to(directory).as_posix()


def is_hidden(relative_path: Path) -> bool:
    """Check whether any component of a relative path starts with a dot"""
    return any(part.startswith('.') for part in relative_path.parts)


def matches_any(relative_path: str, patterns: List[str]) -> bool:
    """
    Check a relative path against glob patterns

    A pattern matches either the full relative path or its file name.
    """
    name = relative_path.rsplit('/', 1)[-1]
    return any(
        fnmatch.fnmatch(relative_path, pattern) or fnmatch.fnmatch(name, pattern)
        for pattern in patterns
    )


def scan_directory(directory: Path,
                   exclude_patterns: Optional[List[str]] = None,
                   include_hidden: bool = False) -> List[Path]:
    """
    Scan directory for files

    Args:
        directory: Directory to scan
        exclude_patterns: Patterns to exclude
        include_hidden: Include hidden files

    Returns:
        List of file paths sorted by relative path
    """
    exclude_patterns = exclude_patterns or []
    files = []

    for path in directory.rglob('*'):
        if not path.is_file():
            continue

        relative = path.relative_to(directory)

        # Skip hidden files if requested
        if not include_hidden and is_hidden(relative):
            continue

        # Check exclude patterns
        if matches_any(relative.as_posix(), exclude_patterns):
            continue

        files.append(path)

    return sorted(files, key=lambda p: to_posix_relative(p, directory))


def display_path(file_path: Path) -> str:
    """Path relative to the working directory when possible"""
    try:
        return os.path.relpath(file_path)
    except ValueError:
        # Different drive on Windows
        return str(file_path)


def copy_file(src: Path, dst: Path) -> None:
    """
    Copy file contents, creating parent directories

    Args:
        src: Source file
        dst: Destination file
    """
    dst.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(src, dst)
