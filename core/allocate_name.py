"""
allocate_name.py - Free Name Allocation Module

Responsibilities:
- Build candidate stems "1_<base>", "2_<base>", ...
- Pick the first candidate not taken by a file in the directory
- Rebuild the destination path with the original extension

Allocation never touches the filesystem beyond listing the directory.
"""

from pathlib import Path
from typing import Iterable, Optional
import logging

from .errors import NameSpaceExhausted
from .models_fs import FileEntry, RenameOptions, DEFAULT_MAX_DISAMBIGUATOR, normalize_for_comparison
from .scan_files import get_existing_stems
from .text_match import stem_of

logger = logging.getLogger(__name__)


def candidate_stem(n: int, base_name: str) -> str:
    """Stem of the n-th candidate name"""
    return f"{n}_{base_name}"


def next_free_stem(
    existing_stems: Iterable[str],
    base_name: str,
    max_disambiguator: int = DEFAULT_MAX_DISAMBIGUATOR,
    case_insensitive: bool = False
) -> str:
    """
    Find the first free candidate stem

    The search is linear and always starts at 1, so the result is the
    lowest n whose candidate is absent from existing_stems. A base name
    containing a dot is compared by its first-dot stem, the same way the
    names already on disk are read.

    Args:
        existing_stems: Stems already present in the directory
        base_name: Normalized base name
        max_disambiguator: Largest n to try
        case_insensitive: Whether to compare with casefold()

    Returns:
        Free stem

    Raises:
        NameSpaceExhausted: Every candidate up to max_disambiguator is taken
    """
    taken = {normalize_for_comparison(s, case_insensitive) for s in existing_stems}

    n = 1
    while n <= max_disambiguator:
        candidate = candidate_stem(n, base_name)
        if normalize_for_comparison(stem_of(candidate), case_insensitive) not in taken:
            return candidate
        n += 1

    raise NameSpaceExhausted(base_name, max_disambiguator)


def allocate(
    entry: FileEntry,
    base_name: str,
    directory: Path,
    options: Optional[RenameOptions] = None
) -> Path:
    """
    Compute a destination path for one file

    Args:
        entry: File to rename
        base_name: Normalized base name of the directory
        directory: Directory to allocate in
        options: Rename options

    Returns:
        Destination path whose stem is not used by any file in directory
    """
    if options is None:
        options = RenameOptions()

    directory = Path(directory)
    existing = get_existing_stems(directory, options.case_insensitive_detect)
    stem = next_free_stem(
        existing,
        base_name,
        max_disambiguator=options.max_disambiguator,
        case_insensitive=options.case_insensitive_detect,
    )
    dst = directory / (stem + entry.extension)
    logger.debug("Allocated %s for %s (%d stems taken)", dst.name, entry.name, len(existing))
    return dst
