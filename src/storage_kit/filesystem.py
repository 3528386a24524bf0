"""Filesystem abstraction for testability.

This module provides the single seam where storage_kit touches the disk.
FileOps and DirOps only ever talk to a FileSystem, so tests can substitute
a double that fails on chosen paths. The RealFileSystem implementation
wraps standard library operations and lets their exceptions propagate.
"""

from __future__ import annotations

import os
import shutil
from pathlib import Path


class RealFileSystem:
    """Production filesystem implementation.

    Wraps standard library Path, os and shutil operations.
    Satisfies the FileSystem protocol structurally.
    """

    def read_text(self, path: Path, encoding: str = "utf-8") -> str:
        """Read text content from a file without newline translation."""
        with path.open(encoding=encoding, newline="") as handle:
            return handle.read()

    def write_text(self, path: Path, content: str, encoding: str = "utf-8") -> None:
        """Write text content to a file, replacing any existing content."""
        with path.open("w", encoding=encoding, newline="") as handle:
            handle.write(content)

    def exists(self, path: Path) -> bool:
        """Check if a path is accessible."""
        return os.access(path, os.F_OK)

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory."""
        return path.is_dir()

    def mkdir(self, path: Path, parents: bool = False, exist_ok: bool = False) -> None:
        """Create a directory."""
        path.mkdir(parents=parents, exist_ok=exist_ok)

    def unlink(self, path: Path) -> None:
        """Remove a file."""
        path.unlink()

    def rmtree(self, path: Path) -> None:
        """Remove a directory tree."""
        shutil.rmtree(path)

    def rename(self, src: Path, dst: Path) -> None:
        """Rename a file or directory."""
        os.rename(src, dst)

    def listdir(self, path: Path) -> list[str]:
        """List the names of the entries in a directory."""
        return os.listdir(path)
