# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Read-only project filesystem views used by every detector and plan builder."""

from __future__ import annotations

import logging
import os
import posixpath
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Protocol

from ..config import DEFAULT_IGNORED_DIRS, DetectionSettings
from ..errors import ProjectAccessError

logger = logging.getLogger(__name__)


@dataclass
class TreeScan:
    """Relative file paths plus a per-extension histogram from a single walk."""

    files: list[str] = field(default_factory=list)
    ext_counts: dict[str, int] = field(default_factory=dict)

    def add(self, rel_path: str) -> None:
        self.files.append(rel_path)
        ext = posixpath.splitext(rel_path)[1].lower()
        if ext:
            self.ext_counts[ext] = self.ext_counts.get(ext, 0) + 1


class ProjectFS(Protocol):
    """Minimal read-only view over a project tree."""

    def has(self, path: str) -> bool: ...

    def read(self, path: str) -> str: ...

    def dir_exists(self, path: str) -> bool: ...

    def scan_tree(self) -> TreeScan: ...


def contains_ext(files: Iterable[str], ext: str) -> bool:
    """True when any path in ``files`` ends with ``ext`` (case-insensitive)."""
    needle = ext.lower()
    return any(path.lower().endswith(needle) for path in files)


def _normalize(path: str) -> str:
    cleaned = posixpath.normpath(path.replace("\\", "/"))
    return "" if cleaned == "." else cleaned.lstrip("/")


class LocalFS:
    """Project tree backed by the local disk."""

    def __init__(self, root: str | os.PathLike[str], settings: DetectionSettings | None = None):
        self.root = os.fspath(root)
        self.settings = settings or DetectionSettings()

    def _abs(self, path: str) -> str:
        return os.path.join(self.root, *_normalize(path).split("/"))

    def has(self, path: str) -> bool:
        return os.path.isfile(self._abs(path))

    def read(self, path: str) -> str:
        try:
            with open(self._abs(path), "rb") as handle:
                data = handle.read(self.settings.max_file_bytes)
        except OSError:
            return ""
        return data.decode("utf-8", errors="replace")

    def dir_exists(self, path: str) -> bool:
        return os.path.isdir(self._abs(path))

    def scan_tree(self) -> TreeScan:
        """
        Walk the tree once, skipping noise directories.

        Only an unreadable root raises; errors below the root drop that subtree.
        """
        if not os.path.exists(self.root):
            raise ProjectAccessError(self.root, "path does not exist")
        if not os.path.isdir(self.root):
            raise ProjectAccessError(self.root, "not a directory")
        try:
            os.listdir(self.root)
        except OSError as exc:
            raise ProjectAccessError(self.root, exc.strerror or str(exc)) from exc

        def _on_error(exc: OSError) -> None:
            logger.debug("Skipping unreadable path %s: %s", exc.filename, exc)

        scan = TreeScan()
        ignored = self.settings.ignored_dirs
        for dirpath, dirnames, filenames in os.walk(self.root, onerror=_on_error):
            dirnames[:] = sorted(name for name in dirnames if name not in ignored)
            rel_dir = os.path.relpath(dirpath, self.root)
            for name in sorted(filenames):
                rel = name if rel_dir == "." else posixpath.join(rel_dir.replace(os.sep, "/"), name)
                scan.add(rel)
        return scan

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"LocalFS({self.root!r})"


class MemoryFS:
    """In-memory project tree, mainly for tests and callers holding fixtures."""

    def __init__(
        self,
        files: Mapping[str, str] | None = None,
        dirs: Iterable[str] = (),
        ignored_dirs: frozenset[str] = DEFAULT_IGNORED_DIRS,
    ):
        self.files: dict[str, str] = {_normalize(path): content for path, content in (files or {}).items()}
        self.ignored_dirs = ignored_dirs
        self.dirs: set[str] = {_normalize(path) for path in dirs}
        for path in list(self.files) + list(self.dirs):
            parent = posixpath.dirname(path)
            while parent:
                self.dirs.add(parent)
                parent = posixpath.dirname(parent)
        self.dirs.discard("")

    def has(self, path: str) -> bool:
        return _normalize(path) in self.files

    def read(self, path: str) -> str:
        return self.files.get(_normalize(path), "")

    def dir_exists(self, path: str) -> bool:
        return _normalize(path) in self.dirs

    def scan_tree(self) -> TreeScan:
        scan = TreeScan()
        for path in sorted(self.files):
            parts = path.split("/")[:-1]
            if any(part in self.ignored_dirs for part in parts):
                continue
            scan.add(path)
        return scan


__all__ = ["LocalFS", "MemoryFS", "ProjectFS", "TreeScan", "contains_ext"]
