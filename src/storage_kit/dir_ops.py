"""Directory operations, including recursive copy and move."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING

from storage_kit.errors import NameExhaustedError
from storage_kit.file_ops import FileOps
from storage_kit.filesystem import RealFileSystem
from storage_kit.types import DeleteResult, DirEntry, ListResult, RenameResult, WriteResult

if TYPE_CHECKING:
    from storage_kit.config import StorageSettings
    from storage_kit.protocols import FileOperations, FileSystem, PathLike

logger = logging.getLogger(__name__)

DEFAULT_COPY_SUFFIX = "-copy"
DEFAULT_MAX_NAME_ATTEMPTS = 10_000


def _is_within(path: Path, root: Path) -> bool:
    """Check whether ``path`` is ``root`` or lies below it."""
    resolved = path.resolve()
    resolved_root = root.resolve()
    return resolved == resolved_root or resolved_root in resolved.parents


class DirOps:
    """Manages directories: CRUD, listing, copy naming, recursive copy and move.

    Follows Separate Use from Creation: the constructor takes the FileOps used
    to copy individual files during a recursive copy. Use the factory method
    `from_settings()` for production instantiation.
    """

    def __init__(
        self,
        filesystem: FileSystem,
        files: FileOperations,
        copy_suffix: str = DEFAULT_COPY_SUFFIX,
        max_name_attempts: int = DEFAULT_MAX_NAME_ATTEMPTS,
    ) -> None:
        """Initialize directory operations.

        Args:
            filesystem: Filesystem abstraction (required).
            files: File operations used for leaf copies (required).
            copy_suffix: Suffix appended by last_name.
            max_name_attempts: Number of candidate names last_name tries.
        """
        if max_name_attempts < 1:
            raise ValueError("max_name_attempts must be at least 1")
        self.fs = filesystem
        self.files = files
        self.copy_suffix = copy_suffix
        self.max_name_attempts = max_name_attempts

    @classmethod
    def from_settings(
        cls,
        settings: StorageSettings | None = None,
        filesystem: FileSystem | None = None,
        files: FileOperations | None = None,
    ) -> DirOps:
        """Factory method for production instantiation.

        Args:
            settings: Optional settings (suffix, attempt limit, encoding).
            filesystem: Optional filesystem abstraction (created if not provided).
            files: Optional file operations (created if not provided).

        Returns:
            Configured DirOps instance.
        """
        fs = filesystem or RealFileSystem()
        if settings is None:
            return cls(filesystem=fs, files=files or FileOps.from_settings(filesystem=fs))
        return cls(
            filesystem=fs,
            files=files or FileOps.from_settings(settings, filesystem=fs),
            copy_suffix=settings.copy_suffix,
            max_name_attempts=settings.max_name_attempts,
        )

    def exists(self, path: PathLike) -> bool:
        """Check whether a file or directory exists at ``path``."""
        try:
            return self.fs.exists(Path(path))
        except OSError:
            return False

    def check(self, path: PathLike) -> bool:
        """Check whether ``path`` is an existing directory.

        Returns:
            False for missing paths, regular files and paths that cannot be stat'ed.
        """
        try:
            return self.fs.is_dir(Path(path))
        except OSError:
            return False

    def create(self, path: PathLike) -> WriteResult:
        """Create a single directory level. The parent must already exist."""
        dir_path = Path(path)
        try:
            self.fs.mkdir(dir_path)
        except OSError as e:
            logger.debug("Create failed for %s: %s", dir_path, e)
            return WriteResult.failed(e)
        return WriteResult.ok()

    def rename(self, old_path: PathLike, new_path: PathLike) -> RenameResult:
        """Rename a directory or a file."""
        src, dst = Path(old_path), Path(new_path)
        try:
            self.fs.rename(src, dst)
        except OSError as e:
            logger.debug("Rename failed for %s -> %s: %s", src, dst, e)
            return RenameResult.failed(e)
        return RenameResult.ok()

    def delete(self, path: PathLike) -> DeleteResult:
        """Remove a directory and everything below it."""
        dir_path = Path(path)
        try:
            self.fs.rmtree(dir_path)
        except OSError as e:
            logger.debug("Delete failed for %s: %s", dir_path, e)
            return DeleteResult.failed(e)
        return DeleteResult.ok()

    def list(self, path: PathLike, recursive: bool = False) -> ListResult:
        """List the entries of a directory, sorted by name.

        Each entry is classified with check(). Files carry extension fields;
        directories carry ``children`` only when ``recursive`` is set. A
        subdirectory that cannot be read gets empty ``children``.

        Args:
            path: Directory to list.
            recursive: Descend into subdirectories.

        Returns:
            ListResult with the entries, or the error if ``path`` itself
            could not be enumerated.
        """
        dir_path = Path(path)
        try:
            names = sorted(self.fs.listdir(dir_path))
        except OSError as e:
            logger.debug("List failed for %s: %s", dir_path, e)
            return ListResult(success=False, error=e)

        entries = []
        for name in names:
            child = dir_path / name
            is_dir = self.check(child)
            children = None
            if recursive and is_dir:
                children = self.list(child, recursive=True).entries
            entries.append(DirEntry.for_path(child, is_dir, children=children))
        return ListResult(success=True, entries=entries)

    def last_name(self, base_name: PathLike, extension: str = "") -> str:
        """Return the first unused copy name for ``base_name``.

        Candidates are ``<base>-copy<ext>``, then ``<base>-copy-2<ext>``,
        ``<base>-copy-3<ext>`` and so on. There is no ``-1``.

        Args:
            base_name: Path without extension to derive the name from.
            extension: Extension appended after the suffix, e.g. ".txt".

        Returns:
            A path string that does not exist yet.

        Raises:
            NameExhaustedError: If every candidate up to max_name_attempts exists.
        """
        base = os.fspath(base_name)
        for attempt in range(1, self.max_name_attempts + 1):
            suffix = self.copy_suffix if attempt == 1 else f"{self.copy_suffix}-{attempt}"
            candidate = f"{base}{suffix}{extension}"
            if not self.exists(candidate):
                return candidate
        raise NameExhaustedError(base, self.max_name_attempts)

    def copy(self, source_path: PathLike, dest_path: PathLike | None = None) -> bool:
        """Recursively copy a directory.

        Entries are copied one at a time in listing order. Each destination is
        the entry's path relative to ``source_path`` joined onto ``dest_path``.
        Entries that fail to copy are logged and skipped.

        Args:
            source_path: Directory to copy.
            dest_path: Target directory. Defaults to last_name(source_path).

        Returns:
            True once the walk completes, even if some entries were skipped.
            False only when the destination lies inside the source.

        Raises:
            NameExhaustedError: If no default destination name is free.
        """
        source = Path(source_path)
        dest = Path(dest_path) if dest_path is not None else Path(self.last_name(source))

        if _is_within(dest, source):
            logger.error("Refusing to copy %s into itself (%s)", source, dest)
            return False

        if not self.exists(dest):
            created = self.create(dest)
            if not created.success:
                logger.warning("Could not create %s: %s", dest, created.error)

        listing = self.list(source)
        if not listing.success:
            logger.warning("Could not list %s: %s", source, listing.error)

        for entry in listing.entries:
            target = dest / entry.path.relative_to(source)
            if entry.is_file:
                if not self.files.copy(entry.path, target):
                    logger.warning("Skipped %s: copy to %s failed", entry.path, target)
            else:
                self.copy(entry.path, target)
        return True

    def move(self, source_path: PathLike, dest_path: PathLike | None = None) -> None:
        """Copy a directory, then delete the source.

        The source is deleted even if some entries failed to copy. There is
        no rollback. Nothing is deleted when copy() refuses to run.
        """
        if not self.copy(source_path, dest_path):
            return
        deleted = self.delete(source_path)
        if not deleted.success:
            logger.warning("Could not delete %s after move: %s", source_path, deleted.error)
