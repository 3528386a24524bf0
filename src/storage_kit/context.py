"""Application context for dependency injection.

This module separates object creation from object use. Instead of a
process-wide holder, callers build a StorageContext once and pass it (or
its members) to whatever needs file or directory operations.

Dependencies are typed using Protocols (abstract interfaces) rather than
concrete implementations, so test doubles can be injected without
inheritance.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from storage_kit.config import StorageSettings, load_settings
from storage_kit.protocols import DirectoryOperations, FileOperations, FileSystem


@dataclass
class StorageContext:
    """Container for the storage services.

    All dependencies are typed using Protocol interfaces, not concrete classes.
    """

    files: FileOperations
    dirs: DirectoryOperations
    filesystem: FileSystem
    settings: StorageSettings = field(default_factory=StorageSettings)


def create_context(
    settings: StorageSettings | None = None,
    config_path: Path | None = None,
    filesystem: FileSystem | None = None,
) -> StorageContext:
    """Factory for storage dependencies.

    Creates all services with proper wiring. Use this in production code.
    For tests, construct StorageContext directly with test doubles.

    Args:
        settings: Explicit settings. Takes precedence over ``config_path``.
        config_path: Settings file to load when ``settings`` is not given.
        filesystem: Override the filesystem implementation.

    Returns:
        Configured StorageContext with all dependencies.
    """
    from storage_kit.dir_ops import DirOps
    from storage_kit.file_ops import FileOps
    from storage_kit.filesystem import RealFileSystem

    resolved = settings or load_settings(config_path)
    fs = filesystem or RealFileSystem()
    files = FileOps.from_settings(resolved, filesystem=fs)
    dirs = DirOps.from_settings(resolved, filesystem=fs, files=files)

    return StorageContext(files=files, dirs=dirs, filesystem=fs, settings=resolved)
