"""Tests for file management operations."""

import os
from pathlib import Path

import pytest

from dirscout.operations import change_directory
from dirscout.operations import create_file
from dirscout.operations import delete_file
from dirscout.operations import resolve_against


class TestCreateFile:
    """Tests for create_file()."""

    def test_creates_empty_file(self, tmp_path):
        """Test creating a new file relative to the root."""
        path = create_file(tmp_path, "f.txt")

        assert path == tmp_path / "f.txt"
        assert path.is_file()
        assert path.stat().st_size == 0

    def test_second_create_fails_and_keeps_original(self, tmp_path):
        """Test that creating an existing file fails without touching it."""
        path = create_file(tmp_path, "f.txt")
        path.write_text("original")
        os.utime(path, (1_000_000_000, 1_000_000_000))

        with pytest.raises(FileExistsError):
            create_file(tmp_path, "f.txt")

        assert path.read_text() == "original"
        assert path.stat().st_mtime == 1_000_000_000

    def test_existing_directory_is_not_replaced(self, tmp_path):
        """Test that a directory of the same name blocks creation."""
        (tmp_path / "sub").mkdir()

        with pytest.raises(FileExistsError):
            create_file(tmp_path, "sub")

        assert (tmp_path / "sub").is_dir()

    def test_dangling_symlink_is_not_followed(self, tmp_path):
        """Test that a dangling symlink blocks creation of its target."""
        (tmp_path / "link").symlink_to(tmp_path / "target")

        with pytest.raises(FileExistsError):
            create_file(tmp_path, "link")

        assert not (tmp_path / "target").exists()

    def test_absolute_name_ignores_root(self, tmp_path):
        """Test that an absolute name is used as-is."""
        other = tmp_path / "other"
        other.mkdir()

        path = create_file(tmp_path / "unused", str(other / "f.txt"))

        assert path == other / "f.txt"
        assert path.exists()

    def test_missing_parent_raises(self, tmp_path):
        """Test that creation in a missing directory raises OSError."""
        with pytest.raises(FileNotFoundError):
            create_file(tmp_path, "missing/f.txt")


class TestDeleteFile:
    """Tests for delete_file()."""

    def test_deletes_file(self, tmp_path):
        """Test removing a regular file."""
        (tmp_path / "f.txt").touch()

        path = delete_file(tmp_path, "f.txt")

        assert path == tmp_path / "f.txt"
        assert not path.exists()

    def test_missing_file_raises(self, tmp_path):
        """Test that deleting nothing raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            delete_file(tmp_path, "nope.txt")

    def test_directory_is_refused(self, tmp_path):
        """Test that directories are not removed."""
        (tmp_path / "sub").mkdir()

        with pytest.raises(OSError):
            delete_file(tmp_path, "sub")

        assert (tmp_path / "sub").is_dir()

    def test_symlink_removed_not_target(self, tmp_path):
        """Test that deleting a symlink leaves its target in place."""
        target = tmp_path / "target.txt"
        target.write_text("keep")
        (tmp_path / "link").symlink_to(target)

        delete_file(tmp_path, "link")

        assert not (tmp_path / "link").is_symlink()
        assert target.read_text() == "keep"


class TestChangeDirectory:
    """Tests for change_directory()."""

    def test_changes_process_directory(self, tmp_path, monkeypatch):
        """Test that the new root is returned and becomes the cwd."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / "sub").mkdir()

        new_root = change_directory(tmp_path, "sub")

        assert new_root == (tmp_path / "sub").resolve()
        assert Path.cwd() == new_root

    def test_relative_to_given_root_not_cwd(self, tmp_path, monkeypatch):
        """Test that relative targets resolve against the explicit root."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / "a" / "inner").mkdir(parents=True)
        (tmp_path / "b").mkdir()

        new_root = change_directory(tmp_path / "a", "inner")

        assert new_root == (tmp_path / "a" / "inner").resolve()

    def test_parent_directory(self, tmp_path, monkeypatch):
        """Test changing to the parent with ..."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / "sub").mkdir()

        new_root = change_directory(tmp_path / "sub", "..")

        assert new_root == tmp_path.resolve()

    def test_missing_directory_raises(self, tmp_path, monkeypatch):
        """Test that a missing target raises and leaves the cwd alone."""
        monkeypatch.chdir(tmp_path)

        with pytest.raises(FileNotFoundError):
            change_directory(tmp_path, "missing")

        assert Path.cwd() == tmp_path.resolve()

    def test_file_raises(self, tmp_path, monkeypatch):
        """Test that a file is not a valid target."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / "f.txt").touch()

        with pytest.raises(NotADirectoryError):
            change_directory(tmp_path, "f.txt")


class TestResolveAgainst:
    """Tests for resolve_against()."""

    def test_relative(self):
        assert resolve_against(Path("/srv"), "data/x") == Path("/srv/data/x")

    def test_absolute(self):
        assert resolve_against(Path("/srv"), "/etc/hosts") == Path("/etc/hosts")

    def test_dotdot_is_lexical(self):
        assert resolve_against(Path("/srv/app"), "../logs") == Path("/srv/logs")

    def test_home_expanded(self, monkeypatch):
        monkeypatch.setenv("HOME", "/home/tester")

        assert resolve_against(Path("/srv"), "~/notes") == Path("/home/tester/notes")
