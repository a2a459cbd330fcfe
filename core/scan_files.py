"""
scan_files.py - File Scanning Module

Provides non-recursive directory enumeration. Subdirectories are never
listed and never count as taken names.
"""

from pathlib import Path
from typing import List, Set

from .errors import PathUnavailable
from .models_fs import FileEntry, normalize_for_comparison
from .text_match import stem_of


def _iter_file_paths(directory: Path) -> List[Path]:
    directory = Path(directory)
    if not directory.is_dir():
        raise PathUnavailable(f"Directory does not exist: {directory}", directory)

    try:
        return [item for item in directory.iterdir() if item.is_file()]
    except OSError as e:
        raise PathUnavailable(f"Cannot read directory {directory}: {e}", directory) from e


def scan_directory(directory: Path) -> List[FileEntry]:
    """
    Snapshot the files directly inside a directory

    Args:
        directory: Target directory

    Returns:
        File list, sorted by name for a stable processing order
    """
    paths = sorted(_iter_file_paths(directory), key=lambda p: p.name.lower())
    return [FileEntry.from_path(p) for p in paths]


def get_existing_stems(directory: Path, case_insensitive: bool = False) -> Set[str]:
    """
    Get set of stems of the files currently in a directory

    Args:
        directory: Target directory
        case_insensitive: Whether case-insensitive

    Returns:
        Stem set (first-dot rule, normalized for comparison)
    """
    return {
        normalize_for_comparison(stem_of(p.name), case_insensitive)
        for p in _iter_file_paths(directory)
    }
