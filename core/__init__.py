"""
core - Directory Renamer Core Module

Provides free name allocation and the single-file / directory rename flows.
"""

from .models_fs import (
    FileEntry,
    DirectoryContext,
    RenameOp,
    RenameOptions,
    RenameResult,
    DEFAULT_MAX_DISAMBIGUATOR,
)

from .errors import (
    RenamerError,
    PathUnavailable,
    NameSpaceExhausted,
    MoveFailure,
)

from .text_match import (
    normalize_base_name,
    split_name,
    stem_of,
    is_valid_filename,
)

from .scan_files import (
    scan_directory,
    get_existing_stems,
)

from .allocate_name import (
    candidate_stem,
    next_free_stem,
    allocate,
)

from .exec_rename import (
    move_file,
    rename_file,
    rename_directory,
    save_result_log,
)

from .safety_checks import (
    check_source,
    check_destination,
    check_rename_op,
)

__all__ = [
    # Data models
    "FileEntry",
    "DirectoryContext",
    "RenameOp",
    "RenameOptions",
    "RenameResult",
    "DEFAULT_MAX_DISAMBIGUATOR",

    # Errors
    "RenamerError",
    "PathUnavailable",
    "NameSpaceExhausted",
    "MoveFailure",

    # Text processing
    "normalize_base_name",
    "split_name",
    "stem_of",
    "is_valid_filename",

    # Scanning
    "scan_directory",
    "get_existing_stems",

    # Allocation
    "candidate_stem",
    "next_free_stem",
    "allocate",

    # Execution
    "move_file",
    "rename_file",
    "rename_directory",
    "save_result_log",

    # Safety checks
    "check_source",
    "check_destination",
    "check_rename_op",
]
