"""
Shared fixtures for the renamer tests.
"""

from pathlib import Path

import pytest

from core import RenameOptions


@pytest.fixture
def my_folder(tmp_path: Path) -> Path:
    """Empty directory whose base name is 'my_folder'"""
    folder = tmp_path / "My Folder"
    folder.mkdir()
    return folder


@pytest.fixture
def options() -> RenameOptions:
    """Case-sensitive options so results do not depend on the host OS"""
    return RenameOptions(case_insensitive_detect=False)


def make_files(directory: Path, *names: str) -> None:
    for name in names:
        (directory / name).write_text(f"content of {name}")


def names_in(directory: Path) -> set:
    return {p.name for p in directory.iterdir() if p.is_file()}
