"""File storage used by the resource command.

Every path handed to a ``FileStore`` is relative to the store's root (the
Laravel project directory).  ``LocalFileStore`` talks to disk;
``MemoryFileStore`` keeps files in a dict and is used to exercise the
generator without touching the filesystem.
"""

from __future__ import annotations

import fnmatch
from abc import ABC, abstractmethod
from pathlib import Path


class FileStore(ABC):
    """Minimal file operations needed to scaffold a resource."""

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Return ``True`` if *path* exists."""

    @abstractmethod
    def read(self, path: str) -> str:
        """Return the text content of *path*.

        Raises:
            FileNotFoundError: If the file does not exist.
        """

    @abstractmethod
    def write(self, path: str, content: str) -> None:
        """Create or overwrite *path*, creating parent directories."""

    @abstractmethod
    def append(self, path: str, content: str) -> None:
        """Append *content* to *path*, creating the file if it is missing."""

    @abstractmethod
    def glob(self, pattern: str) -> list[str]:
        """Return the sorted relative paths matching a glob *pattern*."""


class LocalFileStore(FileStore):
    """``FileStore`` backed by a directory on the local filesystem."""

    def __init__(self, root: str | Path = ".") -> None:
        self.root = Path(root)

    def path(self, path: str) -> Path:
        """Resolve a store-relative path to an absolute filesystem path."""
        return self.root / path

    def exists(self, path: str) -> bool:
        return self.path(path).exists()

    def read(self, path: str) -> str:
        return self.path(path).read_text(encoding="utf-8")

    def write(self, path: str, content: str) -> None:
        target = self.path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")

    def append(self, path: str, content: str) -> None:
        target = self.path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        with target.open("a", encoding="utf-8") as handle:
            handle.write(content)

    def glob(self, pattern: str) -> list[str]:
        return sorted(
            p.relative_to(self.root).as_posix() for p in self.root.glob(pattern)
        )


class MemoryFileStore(FileStore):
    """In-memory ``FileStore``; ``files`` maps relative paths to content."""

    def __init__(self, files: dict[str, str] | None = None) -> None:
        self.files: dict[str, str] = dict(files or {})

    def exists(self, path: str) -> bool:
        return path in self.files

    def read(self, path: str) -> str:
        try:
            return self.files[path]
        except KeyError:
            raise FileNotFoundError(path) from None

    def write(self, path: str, content: str) -> None:
        self.files[path] = content

    def append(self, path: str, content: str) -> None:
        self.files[path] = self.files.get(path, "") + content

    def glob(self, pattern: str) -> list[str]:
        # Match segment by segment so ``*`` never crosses a ``/``, as on disk.
        parts = pattern.split("/")
        return sorted(
            p for p in self.files
            if len(p.split("/")) == len(parts)
            and all(map(fnmatch.fnmatchcase, p.split("/"), parts))
        )
