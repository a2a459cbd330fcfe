"""
errors.py - Error Types

Every failure raised by the core derives from RenamerError, so the
command-line layer can turn any of them into a single message.
"""

from pathlib import Path
from typing import Optional


class RenamerError(Exception):
    """Base class for rename errors"""


class PathUnavailable(RenamerError):
    """Directory cannot be read, or a file vanished before it was moved"""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class NameSpaceExhausted(RenamerError):
    """No free disambiguator is left below the configured maximum"""

    def __init__(self, base_name: str, limit: int):
        super().__init__(f"No free name left for '{base_name}' (tried 1..{limit})")
        self.base_name = base_name
        self.limit = limit


class MoveFailure(RenamerError):
    """Moving a file to its new name failed"""

    def __init__(self, message: str, src: Path, dst: Path):
        super().__init__(message)
        self.src = src
        self.dst = dst
