"""
models_fs.py - Core Data Structure Definitions

Contains:
- FileEntry: File being renamed
- DirectoryContext: Directory whose name drives the new file names
- RenameOp: Single completed rename
- RenameOptions: Rename options configuration
- RenameResult: Moves completed by one invocation
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional
import os
import platform

from .text_match import normalize_base_name, split_name

# Largest disambiguator tried before giving up (signed 32-bit maximum)
DEFAULT_MAX_DISAMBIGUATOR = 2 ** 31 - 1


@dataclass
class FileEntry:
    """File information data class"""
    path: Path                      # Full path
    name: str                       # Filename (with extension)
    stem: str                       # Part before the first dot
    extension: str                  # Everything from the first dot on (may be empty)

    @classmethod
    def from_path(cls, p: Path) -> "FileEntry":
        """Create FileEntry from Path object"""
        p = Path(os.path.abspath(p))
        stem, extension = split_name(p.name)
        return cls(path=p, name=p.name, stem=stem, extension=extension)


@dataclass
class DirectoryContext:
    """Directory together with its normalized base name"""
    path: Path
    base_name: str

    @classmethod
    def from_path(cls, directory: Path) -> "DirectoryContext":
        directory = Path(os.path.abspath(directory))
        return cls(path=directory, base_name=normalize_base_name(directory.name))

    @classmethod
    def containing(cls, file_path: Path) -> "DirectoryContext":
        """Context of the directory a file lives in"""
        return cls.from_path(Path(os.path.abspath(file_path)).parent)


@dataclass
class RenameOp:
    """Single rename operation"""
    src: Path                       # Source path
    dst: Path                       # Destination path


@dataclass
class RenameOptions:
    """Rename options configuration"""
    # Compare stems case-insensitively (Windows/macOS default to insensitive)
    case_insensitive_detect: bool = field(default_factory=lambda: platform.system() in ("Windows", "Darwin"))

    # Upper bound for the numeric prefix
    max_disambiguator: int = DEFAULT_MAX_DISAMBIGUATOR

    # Directory for JSON execution logs (None disables logging to file)
    log_dir: Optional[Path] = None


@dataclass
class RenameResult:
    """Rename execution result"""
    ops: List[RenameOp] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.ops)

    def add_op(self, src: Path, dst: Path) -> None:
        self.ops.append(RenameOp(src=src, dst=dst))

    def summary(self) -> str:
        """Generate summary"""
        lines = [f"Renamed {self.count} file(s):"]
        for op in self.ops:
            lines.append(f"  - {op.src.name} -> {op.dst.name}")
        return "\n".join(lines)


def normalize_for_comparison(name: str, case_insensitive: bool) -> str:
    """Normalize stem for comparison"""
    if case_insensitive:
        return name.casefold()
    return name
