"""Protocol definitions for core abstractions.

This module defines abstract interfaces (Protocols) for the storage services.
Designing to interfaces enables:
- Loose coupling between FileOps, DirOps and the disk
- Easy substitution of test doubles
- Clear contracts for implementations

All concrete implementations satisfy these protocols structurally (duck typing).
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Protocol, Union, runtime_checkable

from storage_kit.types import (
    DeleteResult,
    ListResult,
    ReadResult,
    RenameResult,
    WriteResult,
)

PathLike = Union[str, os.PathLike]


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for low-level filesystem primitives.

    Implementations raise OSError subclasses on failure; callers convert
    them into result objects.
    """

    def read_text(self, path: Path, encoding: str = "utf-8") -> str:
        """Read text content from a file."""
        ...

    def write_text(self, path: Path, content: str, encoding: str = "utf-8") -> None:
        """Write text content to a file."""
        ...

    def exists(self, path: Path) -> bool:
        """Check if a path exists."""
        ...

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory."""
        ...

    def mkdir(self, path: Path, parents: bool = False, exist_ok: bool = False) -> None:
        """Create a directory."""
        ...

    def unlink(self, path: Path) -> None:
        """Remove a file."""
        ...

    def rmtree(self, path: Path) -> None:
        """Remove a directory tree."""
        ...

    def rename(self, src: Path, dst: Path) -> None:
        """Rename a file or directory."""
        ...

    def listdir(self, path: Path) -> list[str]:
        """List entry names in a directory."""
        ...


@runtime_checkable
class FileOperations(Protocol):
    """Protocol for single-file operations."""

    def read(self, path: PathLike) -> ReadResult:
        """Read a text file.

        Args:
            path: File to read.

        Returns:
            ReadResult with content and name fields, or the error.
        """
        ...

    def create(self, path: PathLike, content: str) -> WriteResult:
        """Write a new file, overwriting any existing one."""
        ...

    def update(self, path: PathLike, content: str) -> WriteResult:
        """Replace the content of a file."""
        ...

    def delete(self, path: PathLike) -> DeleteResult:
        """Remove a single file."""
        ...

    def rename(self, old_path: PathLike, new_path: PathLike) -> RenameResult:
        """Rename a file. Directories are rejected."""
        ...

    def copy(self, old_path: PathLike, new_path: PathLike) -> bool:
        """Copy a text file.

        Returns:
            True if the content was read and written, False otherwise.
        """
        ...


@runtime_checkable
class DirectoryOperations(Protocol):
    """Protocol for directory operations."""

    def exists(self, path: PathLike) -> bool:
        """Check whether a file or directory exists."""
        ...

    def check(self, path: PathLike) -> bool:
        """Check whether a path is an existing directory."""
        ...

    def create(self, path: PathLike) -> WriteResult:
        """Create a single directory level."""
        ...

    def rename(self, old_path: PathLike, new_path: PathLike) -> RenameResult:
        """Rename a file or directory."""
        ...

    def delete(self, path: PathLike) -> DeleteResult:
        """Remove a directory tree."""
        ...

    def list(self, path: PathLike, recursive: bool = False) -> ListResult:
        """List the entries of a directory.

        Args:
            path: Directory to list.
            recursive: Also list subdirectories into ``children``.

        Returns:
            ListResult with the entries, or the error.
        """
        ...

    def last_name(self, base_name: PathLike, extension: str = "") -> str:
        """Return the first unused copy name for ``base_name``."""
        ...

    def copy(self, source_path: PathLike, dest_path: PathLike | None = None) -> bool:
        """Recursively copy a directory."""
        ...

    def move(self, source_path: PathLike, dest_path: PathLike | None = None) -> None:
        """Copy a directory, then delete the source."""
        ...
