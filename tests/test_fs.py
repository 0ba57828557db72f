"""Tests for the filesystem abstraction."""

import pytest

from common.fs import MapFileSystem, OSFileSystem


class TestMapFileSystem:
    """In-memory filesystem."""

    def setup_method(self):
        """Set up test fixtures."""
        self.fs = MapFileSystem()

    def test_parents_are_implied(self):
        self.fs.add_file("/a/b/c.json", "{}")

        assert self.fs.exists("/a/b/c.json")
        assert self.fs.exists("/a/b")
        assert self.fs.exists("/a")
        assert self.fs.exists("/")
        assert not self.fs.exists("/a/c")

    def test_paths_are_normalized(self):
        self.fs.add_file("/a/./b/../b/c.json")

        assert self.fs.exists("/a/b/c.json")
        assert self.fs.exists("/a/b/x/../c.json")

    def test_read_text(self):
        self.fs.add_file("/a.json", "content")

        assert self.fs.read_text("/a.json") == "content"
        with pytest.raises(FileNotFoundError):
            self.fs.read_text("/missing.json")

    def test_add_dir(self):
        self.fs.add_dir("/empty/dir")

        assert self.fs.exists("/empty/dir")
        assert self.fs.glob("/empty/*") == []

    def test_glob(self):
        self.fs.add_file("/t/a.json")
        self.fs.add_file("/t/b.yaml")

        assert self.fs.glob("/t/*.json") == ["/t/a.json"]

    def test_glob_star_stays_in_one_directory(self):
        self.fs.add_file("/t/a.json")
        self.fs.add_file("/t/nested/c.json")

        assert self.fs.glob("/t/*.json") == ["/t/a.json"]
        assert self.fs.glob("/t/**/*.json") == ["/t/a.json", "/t/nested/c.json"]
        assert self.fs.glob("/t/*/*.json") == ["/t/nested/c.json"]


class TestOSFileSystem:
    """Host filesystem."""

    def test_exists_read_and_glob(self, tmp_path):
        (tmp_path / "d").mkdir()
        (tmp_path / "d" / "a.json").write_text("{}", encoding="utf-8")
        (tmp_path / "d" / "nested").mkdir()
        (tmp_path / "d" / "nested" / "b.json").write_text("[]", encoding="utf-8")
        fs = OSFileSystem()

        assert fs.exists(str(tmp_path / "d"))
        assert not fs.exists(str(tmp_path / "missing"))
        assert fs.read_text(str(tmp_path / "d" / "a.json")) == "{}"
        assert fs.glob(str(tmp_path / "d" / "**" / "*.json")) == sorted([
            str(tmp_path / "d" / "a.json"),
            str(tmp_path / "d" / "nested" / "b.json"),
        ])
