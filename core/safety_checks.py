"""
safety_checks.py - Safety Check Module

Checks run right before a file is moved. Each check raises instead of
returning a status so a failing file aborts the batch.
"""

from pathlib import Path
import os
import platform

from .errors import MoveFailure, PathUnavailable
from .text_match import is_valid_filename


def check_source(src: Path) -> None:
    """
    Check the file to move still exists and is a regular file

    Raises:
        PathUnavailable: Source vanished or is not a file
    """
    if not src.exists():
        raise PathUnavailable(f"Source file does not exist: {src}", src)
    if not src.is_file():
        raise PathUnavailable(f"Source path is not a file: {src}", src)


def check_path_length(path: Path, max_length: int = 260) -> None:
    """
    Check if path length exceeds limit (mainly for Windows)

    Raises:
        ValueError: Path is too long
    """
    path_str = str(path)
    if len(path_str) > max_length:
        raise ValueError(f"Path length ({len(path_str)}) exceeds limit ({max_length}): {path}")


def check_destination(src: Path, dst: Path) -> None:
    """
    Check the destination can be created without overwriting anything

    Raises:
        MoveFailure: Destination exists, is invalid or is not writable
    """
    if dst.exists() or dst.is_symlink():
        raise MoveFailure(f"Destination already exists: {dst}", src, dst)

    if platform.system() == "Windows":
        valid, error = is_valid_filename(dst.name)
        if not valid:
            raise MoveFailure(error, src, dst)
        try:
            check_path_length(dst)
        except ValueError as e:
            raise MoveFailure(str(e), src, dst) from e

    if not os.access(dst.parent, os.W_OK):
        raise MoveFailure(f"Directory is not writable: {dst.parent}", src, dst)


def check_rename_op(src: Path, dst: Path) -> None:
    """Run every pre-move check for a single rename"""
    check_source(src)
    check_destination(src, dst)
