"""Tests for listing the entries of the root directory."""

from unittest.mock import patch

import pytest

from dirzip.archive.enumerator import enumerate_entries
from dirzip.core.errors import InvalidInputError


def test_lists_immediate_children_only(sample_root):
    entries = enumerate_entries(sample_root)

    assert [entry.name for entry in entries] == ["a.txt", "b"]
    assert all(entry.parent == sample_root for entry in entries)


def test_entries_are_sorted_by_name(tmp_path):
    for name in ["zeta.txt", "alpha", "Mid.csv", "beta.log"]:
        (tmp_path / name).write_text(name)

    names = [entry.name for entry in enumerate_entries(tmp_path)]

    assert names == sorted(names)


def test_accepts_string_paths(sample_root):
    assert len(enumerate_entries(str(sample_root))) == 2


def test_empty_directory(tmp_path):
    assert enumerate_entries(tmp_path) == []


def test_missing_root_is_rejected(tmp_path):
    with pytest.raises(InvalidInputError, match="not a valid directory"):
        enumerate_entries(tmp_path / "missing")


def test_file_root_is_rejected(tmp_path):
    path = tmp_path / "file.txt"
    path.write_text("not a directory")

    with pytest.raises(InvalidInputError):
        enumerate_entries(path)


class FakeDirEntry:
    """Stand-in for os.DirEntry whose inspection can fail."""

    def __init__(self, path, error=None):
        self.path = str(path)
        self.error = error

    def is_dir(self):
        if self.error is not None:
            raise self.error
        return False


def test_unreadable_child_is_skipped(tmp_path):
    children = [
        FakeDirEntry(tmp_path / "good.txt"),
        FakeDirEntry(tmp_path / "vanished.txt", error=PermissionError("denied")),
        FakeDirEntry(tmp_path / "also_good"),
    ]

    with patch("dirzip.archive.enumerator.os.scandir") as scandir:
        scandir.return_value.__enter__.return_value = iter(children)
        entries = enumerate_entries(tmp_path)

    assert [entry.name for entry in entries] == ["also_good", "good.txt"]


def test_unlistable_root_is_rejected(tmp_path):
    with patch("dirzip.archive.enumerator.os.scandir", side_effect=PermissionError("denied")):
        with pytest.raises(InvalidInputError, match="Unable to read the directory"):
            enumerate_entries(tmp_path)
