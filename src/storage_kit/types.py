"""Result and entry types returned by storage operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path, PurePath
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from storage_kit.errors import ErrorKind, classify_error

__all__ = [
    "DeleteResult",
    "DirEntry",
    "ListResult",
    "OperationResult",
    "ReadResult",
    "RenameResult",
    "WriteResult",
    "split_name",
]

_ResultT = TypeVar("_ResultT", bound="OperationResult")


def split_name(path: str | PurePath) -> tuple[str, str, str]:
    """Split a path into stem, extension and stem+extension.

    Only the last suffix counts as the extension, and dotfiles such as
    ``.bashrc`` have none.

    Example:
        >>> split_name("docs/archive.tar.gz")
        ('archive.tar', '.gz', 'archive.tar.gz')
    """
    pure = PurePath(path)
    return pure.stem, pure.suffix, pure.name


@dataclass
class OperationResult:
    """Outcome of an operation that carries no payload.

    Attributes:
        success: True if the operation succeeded.
        error: The exception that caused the failure (None on success).
    """

    success: bool
    error: Exception | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.success and self.error is not None:
            raise ValueError("success=True but error is set")
        if not self.success and self.error is None:
            raise ValueError("success=False requires an error")

    @property
    def error_kind(self) -> ErrorKind | None:
        """Classification of the error, or None on success."""
        if self.error is None:
            return None
        return classify_error(self.error)

    @classmethod
    def ok(cls: type[_ResultT]) -> _ResultT:
        """Build a successful result."""
        return cls(success=True)

    @classmethod
    def failed(cls: type[_ResultT], error: Exception) -> _ResultT:
        """Build a failed result carrying ``error``."""
        return cls(success=False, error=error)


class WriteResult(OperationResult):
    """Outcome of creating or updating a file, or creating a directory."""


class DeleteResult(OperationResult):
    """Outcome of deleting a file or a directory tree."""


class RenameResult(OperationResult):
    """Outcome of renaming a file or a directory."""


@dataclass
class ReadResult:
    """Outcome of reading a text file.

    On success every payload field is set and ``error`` is None. On failure
    only ``error`` is set.

    Attributes:
        success: True if the file was read.
        name: File name without its extension.
        content: Text content of the file.
        extension: Last suffix including the dot, or "".
        name_with_extension: Final path component.
        error: The exception that caused the failure.
    """

    success: bool
    name: str | None = None
    content: str | None = None
    extension: str | None = None
    name_with_extension: str | None = None
    error: Exception | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        payload = (self.name, self.content, self.extension, self.name_with_extension)
        if self.success:
            if self.error is not None:
                raise ValueError("success=True but error is set")
            if any(value is None for value in payload):
                raise ValueError("success=True requires name, content and extension")
        else:
            if self.error is None:
                raise ValueError("success=False requires an error")
            if any(value is not None for value in payload):
                raise ValueError("success=False cannot carry file content")

    @property
    def error_kind(self) -> ErrorKind | None:
        """Classification of the error, or None on success."""
        if self.error is None:
            return None
        return classify_error(self.error)

    @classmethod
    def from_content(cls, path: str | PurePath, content: str) -> ReadResult:
        """Build a successful result, deriving name fields from ``path``."""
        name, extension, name_with_extension = split_name(path)
        return cls(
            success=True,
            name=name,
            content=content,
            extension=extension,
            name_with_extension=name_with_extension,
        )

    @classmethod
    def failed(cls, error: Exception) -> ReadResult:
        """Build a failed result carrying ``error``."""
        return cls(success=False, error=error)


class DirEntry(BaseModel):
    """A single item found while listing a directory."""

    model_config = ConfigDict(populate_by_name=True)

    path: Path
    is_file: bool = Field(alias="isFile")
    name: str
    extension: str | None = None
    name_with_extension: str | None = Field(default=None, alias="nameWithExtension")
    children: list[DirEntry] | None = None

    @classmethod
    def for_path(
        cls, path: Path, is_dir: bool, children: list[DirEntry] | None = None
    ) -> DirEntry:
        """Build an entry for ``path``.

        Extension fields are set only for files, ``children`` only for directories.
        """
        name, extension, name_with_extension = split_name(path)
        if is_dir:
            return cls(path=path, is_file=False, name=name, children=children)
        return cls(
            path=path,
            is_file=True,
            name=name,
            extension=extension,
            name_with_extension=name_with_extension,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialise with camelCase keys, omitting unset fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


@dataclass
class ListResult:
    """Outcome of listing a directory.

    ``success=True`` with no entries means the directory is empty, which is
    distinct from ``success=False`` (the directory could not be read).
    """

    success: bool
    entries: list[DirEntry] = field(default_factory=list)
    error: Exception | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.success and self.error is not None:
            raise ValueError("success=True but error is set")
        if not self.success:
            if self.error is None:
                raise ValueError("success=False requires an error")
            if self.entries:
                raise ValueError("success=False cannot carry entries")

    @property
    def error_kind(self) -> ErrorKind | None:
        """Classification of the error, or None on success."""
        if self.error is None:
            return None
        return classify_error(self.error)
