"""Uniform-result file and directory operations."""

__version__ = "0.1.0"

# Export the services and result types for embedding applications
from storage_kit.context import StorageContext, create_context
from storage_kit.dir_ops import DirOps
from storage_kit.errors import ErrorKind, NameExhaustedError, NotAFileError, StorageError
from storage_kit.file_ops import FileOps
from storage_kit.types import (
    DeleteResult,
    DirEntry,
    ListResult,
    ReadResult,
    RenameResult,
    WriteResult,
)

__all__ = [
    "__version__",
    "DeleteResult",
    "DirEntry",
    "DirOps",
    "ErrorKind",
    "FileOps",
    "ListResult",
    "NameExhaustedError",
    "NotAFileError",
    "ReadResult",
    "RenameResult",
    "StorageContext",
    "StorageError",
    "WriteResult",
    "create_context",
]
