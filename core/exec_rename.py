"""
exec_rename.py - Rename Execution Module

Responsibilities:
- Move one file to its allocated name (atomic rename, copy+delete across devices)
- Single-file mode and directory mode
- Abort the batch on the first failure
- Optional JSON execution log
"""

from pathlib import Path
from typing import Optional
from datetime import datetime
import errno
import json
import logging
import os
import shutil

from .allocate_name import allocate
from .errors import MoveFailure, PathUnavailable
from .models_fs import DirectoryContext, FileEntry, RenameOptions, RenameResult
from .safety_checks import check_rename_op
from .scan_files import scan_directory

logger = logging.getLogger(__name__)


def _copy_then_delete(src: Path, dst: Path) -> None:
    """Move across devices; never leaves a half-written destination behind"""
    try:
        shutil.copy2(src, dst)
    except OSError as e:
        try:
            if dst.exists():
                dst.unlink()
        except OSError as cleanup_error:
            raise MoveFailure(
                f"Copy to {dst} failed ({e}) and the partial file could not be removed: {cleanup_error}",
                src, dst
            ) from cleanup_error
        raise MoveFailure(f"Copy to {dst} failed: {e}", src, dst) from e

    try:
        src.unlink()
    except OSError as e:
        raise MoveFailure(f"Copied to {dst} but could not remove {src}: {e}", src, dst) from e


def move_file(src: Path, dst: Path) -> None:
    """
    Move a file to its new path

    Args:
        src: Current path
        dst: Destination path (must not exist)

    Raises:
        PathUnavailable: Source vanished
        MoveFailure: Rename failed or destination already exists
    """
    check_rename_op(src, dst)

    try:
        os.rename(src, dst)
    except FileNotFoundError as e:
        raise PathUnavailable(f"Source file does not exist: {src}", src) from e
    except OSError as e:
        if e.errno != errno.EXDEV:
            raise MoveFailure(f"Cannot rename {src.name} to {dst.name}: {e}", src, dst) from e
        _copy_then_delete(src, dst)

    logger.info("Renamed %s -> %s", src.name, dst.name)


def rename_entry(entry: FileEntry, context: DirectoryContext, options: RenameOptions) -> Path:
    """Allocate a free name for one file and move it there"""
    dst = allocate(entry, context.base_name, context.path, options)
    move_file(entry.path, dst)
    return dst


def rename_file(path: Path, options: Optional[RenameOptions] = None) -> RenameResult:
    """
    Rename a single file after its containing directory

    Args:
        path: File to rename
        options: Rename options

    Returns:
        Execution result with one operation
    """
    if options is None:
        options = RenameOptions()

    entry = FileEntry.from_path(path)
    context = DirectoryContext.containing(entry.path)

    result = RenameResult()
    try:
        dst = rename_entry(entry, context, options)
        result.add_op(entry.path, dst)
    finally:
        if options.log_dir:
            save_result_log(result, options.log_dir)
    return result


def rename_directory(path: Path, options: Optional[RenameOptions] = None) -> RenameResult:
    """
    Rename every file directly inside a directory

    Files are processed one at a time in name order. The directory is
    listed again for every file, so each file sees the names taken by
    the ones before it. The first failure stops the loop and propagates.

    Args:
        path: Target directory
        options: Rename options

    Returns:
        Execution result
    """
    if options is None:
        options = RenameOptions()

    context = DirectoryContext.from_path(path)
    entries = scan_directory(context.path)
    logger.debug("Renaming %d file(s) in %s as '%s'", len(entries), context.path, context.base_name)

    result = RenameResult()
    try:
        for i, entry in enumerate(entries):
            try:
                dst = rename_entry(entry, context, options)
            except Exception:
                logger.error(
                    "Aborted at %s; %d of %d file(s) left untouched",
                    entry.name, len(entries) - i, len(entries)
                )
                raise
            result.add_op(entry.path, dst)
    finally:
        if options.log_dir:
            save_result_log(result, options.log_dir)

    return result


def save_result_log(result: RenameResult, log_dir: Path) -> Path:
    """Save execution result log"""
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
    log_file = log_dir / f"rename_result_{timestamp}.json"

    data = {
        "timestamp": timestamp,
        "renamed_count": result.count,
        "renamed": [
            {"src": str(op.src), "dst": str(op.dst)}
            for op in result.ops
        ],
    }

    with open(log_file, 'w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=2)

    return log_file
