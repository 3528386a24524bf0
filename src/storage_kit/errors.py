"""Error taxonomy for storage operations.

Operations never raise OS errors past their own boundary. They attach the
exception object, unmodified, to a failed result. ``classify_error`` maps
that object onto a small set of kinds so callers can branch without
inspecting ``errno`` themselves.
"""

from __future__ import annotations

import errno
from enum import Enum

__all__ = [
    "ErrorKind",
    "NameExhaustedError",
    "NotAFileError",
    "StorageError",
    "classify_error",
]


class ErrorKind(str, Enum):
    """Coarse classification of a storage failure."""

    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"
    ALREADY_EXISTS = "already_exists"
    NOT_A_DIRECTORY = "not_a_directory"
    IS_A_DIRECTORY = "is_a_directory"
    NAME_EXHAUSTED = "name_exhausted"
    DECODE_ERROR = "decode_error"
    UNKNOWN = "unknown"


class StorageError(Exception):
    """Base class for errors raised by storage_kit itself."""

    pass


class NotAFileError(StorageError, IsADirectoryError):
    """A file operation was given a directory."""

    def __init__(self, path: object) -> None:
        super().__init__(errno.EISDIR, "It is not a valid file", str(path))


class NameExhaustedError(StorageError):
    """No unused copy name was found within the attempt limit."""

    def __init__(self, base_name: str, attempts: int) -> None:
        super().__init__(f"No free name for '{base_name}' after {attempts} attempts")
        self.base_name = base_name
        self.attempts = attempts


_OS_ERROR_KINDS: tuple[tuple[type[BaseException], ErrorKind], ...] = (
    (FileNotFoundError, ErrorKind.NOT_FOUND),
    (PermissionError, ErrorKind.PERMISSION_DENIED),
    (FileExistsError, ErrorKind.ALREADY_EXISTS),
    (NotADirectoryError, ErrorKind.NOT_A_DIRECTORY),
    (IsADirectoryError, ErrorKind.IS_A_DIRECTORY),
)


def classify_error(error: BaseException) -> ErrorKind:
    """Map an exception onto an ErrorKind.

    Args:
        error: Exception captured from a storage operation.

    Returns:
        The matching ErrorKind, or ErrorKind.UNKNOWN.
    """
    if isinstance(error, NameExhaustedError):
        return ErrorKind.NAME_EXHAUSTED
    if isinstance(error, UnicodeError):
        return ErrorKind.DECODE_ERROR
    for error_type, kind in _OS_ERROR_KINDS:
        if isinstance(error, error_type):
            return kind
    return ErrorKind.UNKNOWN
