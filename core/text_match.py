"""
text_match.py - Name Text Tools

Provides base name normalization, stem/extension splitting and
filename validation
"""

from typing import Optional, Tuple


def normalize_base_name(directory_name: str) -> str:
    """
    Build the base name shared by every file renamed in a directory

    Args:
        directory_name: Name of the directory (last path component)

    Returns:
        Lowercased name with spaces replaced by underscores
    """
    return directory_name.lower().replace(" ", "_")


def split_name(name: str) -> Tuple[str, str]:
    """
    Split a filename at its first dot

    "archive.tar.gz" -> ("archive", ".tar.gz"), "README" -> ("README", ""),
    ".bashrc" -> ("", ".bashrc")

    Args:
        name: Filename

    Returns:
        (stem, extension), extension keeps its leading dot
    """
    stem, dot, rest = name.partition(".")
    return stem, dot + rest


def stem_of(name: str) -> str:
    """Stem of a filename under the first-dot rule"""
    return name.split(".")[0]


def is_valid_filename(name: str) -> Tuple[bool, Optional[str]]:
    """
    Check if filename is valid (mainly for Windows)

    Args:
        name: Filename

    Returns:
        (is_valid, error_reason)
    """
    if not name:
        return False, "Filename cannot be empty"

    # Windows invalid characters
    invalid_chars = '<>:"/\\|?*'
    for char in invalid_chars:
        if char in name:
            return False, f"Filename contains invalid character: {char}"

    # Trailing space or dot
    if name.endswith(' ') or name.endswith('.'):
        return False, "Filename cannot end with space or dot"

    if len(name) > 255:
        return False, "Filename exceeds 255 characters"

    return True, None
