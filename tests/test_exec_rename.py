"""
Tests for single-file and directory renaming.
"""

import errno
import json
import os
from pathlib import Path

import pytest

from core import (
    MoveFailure, PathUnavailable, RenameOptions,
    move_file, rename_directory, rename_file,
)
from core import exec_rename
from conftest import make_files, names_in


def test_directory_mode_scenario(my_folder, options):
    make_files(my_folder, "a.txt", "b.txt")
    result = rename_directory(my_folder, options)
    assert names_in(my_folder) == {"1_my_folder.txt", "2_my_folder.txt"}
    assert result.count == 2


def test_directory_mode_follows_name_order(my_folder, options):
    make_files(my_folder, "b.txt", "a.txt")
    rename_directory(my_folder, options)
    assert (my_folder / "1_my_folder.txt").read_text() == "content of a.txt"
    assert (my_folder / "2_my_folder.txt").read_text() == "content of b.txt"


def test_new_file_gets_next_number(my_folder, options):
    make_files(my_folder, "1_my_folder.txt", "c.txt")
    result = rename_file(my_folder / "c.txt", options)
    assert result.ops[0].dst == my_folder / "2_my_folder.txt"
    assert names_in(my_folder) == {"1_my_folder.txt", "2_my_folder.txt"}


def test_single_file_mode_scenario(my_folder, options):
    make_files(my_folder, "report.csv", "other.txt")
    rename_file(my_folder / "report.csv", options)
    assert names_in(my_folder) == {"1_my_folder.csv", "other.txt"}


def test_extensions_preserved(my_folder, options):
    make_files(my_folder, "archive.tar.gz", "notes", "photo.JPG")
    rename_directory(my_folder, options)
    assert names_in(my_folder) == {"1_my_folder.tar.gz", "2_my_folder", "3_my_folder.JPG"}


def test_rerun_never_overwrites(my_folder, options):
    make_files(my_folder, "a.txt", "b.txt", "c.png")
    contents = sorted(p.read_text() for p in my_folder.iterdir())

    rename_directory(my_folder, options)
    rename_directory(my_folder, options)

    assert len(names_in(my_folder)) == 3
    assert sorted(p.read_text() for p in my_folder.iterdir()) == contents
    stems = [name.split(".")[0] for name in names_in(my_folder)]
    assert len(set(stems)) == 3


def test_directory_mode_ignores_subdirectories(my_folder, options):
    (my_folder / "nested").mkdir()
    make_files(my_folder, "a.txt")
    rename_directory(my_folder, options)
    assert (my_folder / "nested").is_dir()
    assert names_in(my_folder) == {"1_my_folder.txt"}


def test_empty_directory(my_folder, options):
    assert rename_directory(my_folder, options).count == 0


def test_abort_on_first_failure(my_folder, options, monkeypatch):
    make_files(my_folder, "a.txt", "b.txt", "c.txt")
    real_rename = os.rename
    calls = []

    def flaky_rename(src, dst):
        calls.append(src)
        if len(calls) == 2:
            raise PermissionError(errno.EACCES, "Permission denied", str(src))
        real_rename(src, dst)

    monkeypatch.setattr(exec_rename.os, "rename", flaky_rename)

    with pytest.raises(MoveFailure) as excinfo:
        rename_directory(my_folder, options)

    assert "Permission denied" in str(excinfo.value)
    assert len(calls) == 2
    assert names_in(my_folder) == {"1_my_folder.txt", "b.txt", "c.txt"}


def test_existing_destination_is_not_overwritten(my_folder):
    make_files(my_folder, "a.txt", "taken.txt")
    with pytest.raises(MoveFailure):
        move_file(my_folder / "a.txt", my_folder / "taken.txt")
    assert (my_folder / "taken.txt").read_text() == "content of taken.txt"
    assert (my_folder / "a.txt").exists()


def test_vanished_source(my_folder):
    with pytest.raises(PathUnavailable):
        move_file(my_folder / "missing.txt", my_folder / "1_my_folder.txt")


def test_cross_device_falls_back_to_copy(my_folder, monkeypatch):
    make_files(my_folder, "a.txt")

    def no_rename(src, dst):
        raise OSError(errno.EXDEV, "Invalid cross-device link")

    monkeypatch.setattr(exec_rename.os, "rename", no_rename)
    move_file(my_folder / "a.txt", my_folder / "1_my_folder.txt")

    assert names_in(my_folder) == {"1_my_folder.txt"}
    assert (my_folder / "1_my_folder.txt").read_text() == "content of a.txt"


def test_failed_copy_removes_partial_destination(my_folder, monkeypatch):
    make_files(my_folder, "a.txt")

    def no_rename(src, dst):
        raise OSError(errno.EXDEV, "Invalid cross-device link")

    def partial_copy(src, dst):
        with open(dst, "w") as f:
            f.write("half")
        raise OSError(errno.ENOSPC, "No space left on device")

    monkeypatch.setattr(exec_rename.os, "rename", no_rename)
    monkeypatch.setattr(exec_rename.shutil, "copy2", partial_copy)

    with pytest.raises(MoveFailure) as excinfo:
        move_file(my_folder / "a.txt", my_folder / "1_my_folder.txt")

    assert "No space left" in str(excinfo.value)
    assert names_in(my_folder) == {"a.txt"}


def test_result_log_written(my_folder, options, tmp_path):
    make_files(my_folder, "a.txt")
    options.log_dir = tmp_path / "logs"
    rename_directory(my_folder, options)

    logs = list((tmp_path / "logs").glob("rename_result_*.json"))
    assert len(logs) == 1
    data = json.loads(logs[0].read_text(encoding="utf-8"))
    assert data["renamed_count"] == 1
    assert data["renamed"][0]["dst"].endswith("1_my_folder.txt")


def test_result_log_written_on_abort(my_folder, tmp_path, monkeypatch):
    make_files(my_folder, "a.txt", "b.txt")
    options = RenameOptions(case_insensitive_detect=False, log_dir=tmp_path / "logs")
    real_rename = os.rename
    calls = []

    def flaky_rename(src, dst):
        calls.append(src)
        if len(calls) == 2:
            raise OSError(errno.EIO, "I/O error")
        real_rename(src, dst)

    monkeypatch.setattr(exec_rename.os, "rename", flaky_rename)
    with pytest.raises(MoveFailure):
        rename_directory(my_folder, options)

    logs = list((tmp_path / "logs").glob("rename_result_*.json"))
    data = json.loads(logs[0].read_text(encoding="utf-8"))
    assert data["renamed_count"] == 1


@pytest.mark.parametrize("folder_name, base_name", [
    ("My Folder", "my_folder"),
    ("v1.2 files", "v1.2_files"),
    (".config", ".config"),
    ("Release 2.0.1 Final", "release_2.0.1_final"),
    ("Ünïcode Földer", "ünïcode_földer"),
])
def test_directory_mode_with_unusual_folder_names(tmp_path, options, folder_name, base_name):
    folder = tmp_path / folder_name
    folder.mkdir()
    make_files(folder, "a.txt", "b.txt", "c.md")

    rename_directory(folder, options)
    assert names_in(folder) == {
        f"1_{base_name}.txt", f"2_{base_name}.txt", f"3_{base_name}.md",
    }

    rename_directory(folder, options)
    names = names_in(folder)
    assert len(names) == 3
    assert len({name.split(".")[0] for name in names}) == 3


def test_single_file_mode_with_relative_parent_path(my_folder, options, monkeypatch):
    (my_folder / "sub").mkdir()
    make_files(my_folder, "report.csv")
    monkeypatch.chdir(my_folder / "sub")

    result = rename_file(Path("../report.csv"), options)

    assert result.ops[0].dst == my_folder / "1_my_folder.csv"
    assert names_in(my_folder) == {"1_my_folder.csv"}


def test_directory_mode_with_relative_paths(my_folder, options, monkeypatch):
    (my_folder / "sub").mkdir()
    make_files(my_folder, "a.txt", "b.txt")
    monkeypatch.chdir(my_folder / "sub")

    rename_directory(Path(".."), options)
    assert names_in(my_folder) == {"1_my_folder.txt", "2_my_folder.txt"}

    monkeypatch.chdir(my_folder)
    rename_directory(Path("."), options)
    assert len(names_in(my_folder)) == 2
    assert all("_my_folder." in name for name in names_in(my_folder))
