"""Filesystem abstraction used by specifier resolution and config loading.

Resolvers only ever call ``exists``; ``read_text`` and ``glob`` exist for the
project config loader. ``MapFileSystem`` keeps everything in memory so
resolution can be exercised without touching disk.
"""

from __future__ import annotations

import fnmatch
import glob as _glob
import os
import posixpath
from typing import Dict, List, Protocol, Set


class FileSystem(Protocol):
    """Capability consumed by resolvers and the config loader."""

    def exists(self, path: str) -> bool:
        """Return True if ``path`` names an existing file or directory."""

    def read_text(self, path: str) -> str:
        """Return the contents of ``path`` decoded as UTF-8."""

    def glob(self, pattern: str) -> List[str]:
        """Return paths matching ``pattern`` (``**`` spans directories)."""


class OSFileSystem:
    """FileSystem backed by the host operating system."""

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def read_text(self, path: str) -> str:
        with open(path, "r", encoding="utf-8") as fh:
            return fh.read()

    def glob(self, pattern: str) -> List[str]:
        return sorted(p for p in _glob.glob(pattern, recursive=True) if os.path.isfile(p))

    def __repr__(self) -> str:
        return "OSFileSystem()"


def _match_segments(path: List[str], pattern: List[str]) -> bool:
    """Match path segments against pattern segments; only ``**`` spans directories."""
    if not pattern:
        return not path
    head, rest = pattern[0], pattern[1:]
    if head == "**":
        return _match_segments(path, rest) or (bool(path) and _match_segments(path[1:], pattern))
    return bool(path) and fnmatch.fnmatchcase(path[0], head) and _match_segments(path[1:], rest)


class MapFileSystem:
    """In-memory FileSystem keyed by POSIX-style absolute paths.

    Adding a file implicitly creates all of its parent directories.
    """

    def __init__(self) -> None:
        self._files: Dict[str, str] = {}
        self._dirs: Set[str] = {"/"}

    @staticmethod
    def _norm(path: str) -> str:
        return posixpath.normpath(path.replace("\\", "/"))

    def _add_parents(self, path: str) -> None:
        parent = posixpath.dirname(path)
        while parent and parent not in self._dirs:
            self._dirs.add(parent)
            parent = posixpath.dirname(parent)

    def add_file(self, path: str, content: str = "") -> None:
        """Add (or replace) a file."""
        norm = self._norm(path)
        self._files[norm] = content
        self._add_parents(norm)

    def add_dir(self, path: str) -> None:
        """Add an empty directory."""
        norm = self._norm(path)
        self._dirs.add(norm)
        self._add_parents(norm)

    def exists(self, path: str) -> bool:
        norm = self._norm(path)
        return norm in self._files or norm in self._dirs

    def read_text(self, path: str) -> str:
        norm = self._norm(path)
        try:
            return self._files[norm]
        except KeyError:
            raise FileNotFoundError(path) from None

    def glob(self, pattern: str) -> List[str]:
        parts = self._norm(pattern).split("/")
        return sorted(
            path for path in self._files
            if _match_segments(path.split("/"), parts)
        )

    def __repr__(self) -> str:
        return f"MapFileSystem(files={len(self._files)})"
