"""Filesystem capability used by the expander.

The expander never touches the disk directly. It asks a ``FileSystem`` to
resolve a reference against a directory, to check existence and to read
text, so hosts and tests can substitute their own implementation.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class FileSystem(Protocol):
    """The three operations the expander needs from its host."""

    def resolve(self, base_dir: str, ref: str) -> str:
        """Return the absolute, normalised path of ``ref`` relative to ``base_dir``."""
        ...

    def exists(self, path: str) -> bool:
        """Return True if ``path`` exists."""
        ...

    def read(self, path: str) -> str:
        """Return the text content of ``path``; raise ``OSError`` on failure."""
        ...


class LocalFileSystem:
    """``FileSystem`` backed by the local disk.

    Parameters
    ----------
    encoding:
        Text encoding used by :meth:`read`.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def resolve(self, base_dir: str, ref: str) -> str:
        # Absolute refs replace base_dir; ".." segments are collapsed
        return os.path.abspath(os.path.join(base_dir, ref))

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def read(self, path: str) -> str:
        return Path(path).read_text(encoding=self.encoding)

    def __repr__(self) -> str:
        return f"LocalFileSystem(encoding={self.encoding!r})"
