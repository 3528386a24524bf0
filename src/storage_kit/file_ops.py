"""Single-file operations."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Callable

from storage_kit.errors import NotAFileError
from storage_kit.filesystem import RealFileSystem
from storage_kit.types import DeleteResult, ReadResult, RenameResult, WriteResult

if TYPE_CHECKING:
    from storage_kit.config import StorageSettings
    from storage_kit.protocols import FileSystem, PathLike

logger = logging.getLogger(__name__)


class FileOps:
    """Reads, writes, deletes, renames and copies single text files.

    Every method catches OS errors at its own boundary and reports them
    through the returned result. Nothing here raises for a failed I/O call.
    """

    def __init__(
        self,
        filesystem: FileSystem,
        encoding: str = "utf-8",
        directory_check: Callable[[Path], bool] | None = None,
    ) -> None:
        """Initialize file operations.

        Args:
            filesystem: Filesystem abstraction (required).
            encoding: Text encoding for reads and writes.
            directory_check: Predicate used by rename to reject directories.
                Defaults to ``filesystem.is_dir``.

        Note:
            Use factory method `from_settings()` for production code.
        """
        self.fs = filesystem
        self.encoding = encoding
        self.directory_check = directory_check or filesystem.is_dir

    @classmethod
    def from_settings(
        cls,
        settings: StorageSettings | None = None,
        filesystem: FileSystem | None = None,
    ) -> FileOps:
        """Factory method for production instantiation.

        Args:
            settings: Optional settings supplying the text encoding.
            filesystem: Optional filesystem abstraction (created if not provided).

        Returns:
            Configured FileOps instance.
        """
        encoding = settings.encoding if settings else "utf-8"
        return cls(filesystem=filesystem or RealFileSystem(), encoding=encoding)

    def read(self, path: PathLike) -> ReadResult:
        """Read a text file.

        Args:
            path: File to read.

        Returns:
            ReadResult with the content and name fields derived from ``path``,
            or a failed result if the file is missing, unreadable or not text.
        """
        file_path = Path(path)
        try:
            content = self.fs.read_text(file_path, encoding=self.encoding)
        except (OSError, UnicodeError) as e:
            logger.debug("Read failed for %s: %s", file_path, e)
            return ReadResult.failed(e)
        return ReadResult.from_content(file_path, content)

    def create(self, path: PathLike, content: str) -> WriteResult:
        """Write ``content`` to ``path``, overwriting any existing file."""
        return self._write(Path(path), content)

    def update(self, path: PathLike, content: str) -> WriteResult:
        """Replace the content of ``path``.

        The file does not have to exist beforehand; this behaves like create.
        """
        return self._write(Path(path), content)

    def _write(self, file_path: Path, content: str) -> WriteResult:
        try:
            self.fs.write_text(file_path, content, encoding=self.encoding)
        except (OSError, UnicodeError) as e:
            logger.debug("Write failed for %s: %s", file_path, e)
            return WriteResult.failed(e)
        return WriteResult.ok()

    def delete(self, path: PathLike) -> DeleteResult:
        """Remove a single file. Directories are not removed."""
        file_path = Path(path)
        try:
            self.fs.unlink(file_path)
        except OSError as e:
            logger.debug("Delete failed for %s: %s", file_path, e)
            return DeleteResult.failed(e)
        return DeleteResult.ok()

    def rename(self, old_path: PathLike, new_path: PathLike) -> RenameResult:
        """Rename a file.

        Args:
            old_path: Existing file.
            new_path: New location.

        Returns:
            RenameResult. Fails with NotAFileError when ``old_path`` is a
            directory, or with the OS error when the rename itself fails.
        """
        src, dst = Path(old_path), Path(new_path)
        try:
            if self.directory_check(src):
                raise NotAFileError(src)
            self.fs.rename(src, dst)
        except OSError as e:
            logger.debug("Rename failed for %s -> %s: %s", src, dst, e)
            return RenameResult.failed(e)
        return RenameResult.ok()

    def copy(self, old_path: PathLike, new_path: PathLike) -> bool:
        """Copy a text file.

        Returns:
            True if the source was read and the destination written.
        """
        source = self.read(old_path)
        if not source.success:
            return False
        # content is always set on a successful read
        written = self.create(new_path, source.content or "")
        if not written.success:
            logger.debug("Copy failed for %s -> %s: %s", old_path, new_path, written.error)
            return False
        return True
