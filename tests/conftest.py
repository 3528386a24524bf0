"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from storage_kit.config import StorageSettings
from storage_kit.context import StorageContext, create_context
from storage_kit.dir_ops import DirOps
from storage_kit.file_ops import FileOps
from storage_kit.filesystem import RealFileSystem


class FailingWriteFileSystem(RealFileSystem):
    """RealFileSystem that refuses to write chosen paths.

    Used to simulate a permission failure on a single nested file.
    """

    def __init__(self, deny: set[Path]) -> None:
        self.deny = deny

    def write_text(self, path: Path, content: str, encoding: str = "utf-8") -> None:
        if any(path == denied or denied in path.parents for denied in self.deny):
            raise PermissionError(13, "Permission denied", str(path))
        super().write_text(path, content, encoding=encoding)


@pytest.fixture
def failing_fs_factory() -> type[FailingWriteFileSystem]:
    """Return the write-failing filesystem class for per-test construction."""
    return FailingWriteFileSystem


@pytest.fixture
def fs() -> RealFileSystem:
    """Real filesystem implementation."""
    return RealFileSystem()


@pytest.fixture
def files(fs: RealFileSystem) -> FileOps:
    """FileOps over the real filesystem."""
    return FileOps(fs)


@pytest.fixture
def dirs(fs: RealFileSystem, files: FileOps) -> DirOps:
    """DirOps over the real filesystem."""
    return DirOps(fs, files)


@pytest.fixture
def context() -> StorageContext:
    """Fully wired context with default settings."""
    return create_context(settings=StorageSettings())


# ============================================================================
# Tree Fixtures
# ============================================================================


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Create a nested source tree.

    Layout:
        source/
            readme.md
            notes.txt
            sub/
                g.txt
                deep/
                    h.json
            empty/
    """
    root = tmp_path / "source"
    (root / "sub" / "deep").mkdir(parents=True)
    (root / "empty").mkdir()
    (root / "readme.md").write_text("# Title\n")
    (root / "notes.txt").write_text("first line\nsecond line\n")
    (root / "sub" / "g.txt").write_text("g content")
    (root / "sub" / "deep" / "h.json").write_text('{"key": "value"}')
    return root


# ============================================================================
# Mock FileSystem Fixture
# ============================================================================


@pytest.fixture
def mock_filesystem() -> MagicMock:
    """Create a mock FileSystem for testing.

    The mock tracks all filesystem operations without touching real files.
    """
    mock_fs = MagicMock()
    mock_fs.exists.return_value = False
    mock_fs.is_dir.return_value = False
    mock_fs.read_text.return_value = ""
    mock_fs.listdir.return_value = []
    return mock_fs


@pytest.fixture
def mock_storage_context() -> StorageContext:
    """Create a StorageContext whose services are mocks."""
    return StorageContext(
        files=MagicMock(),
        dirs=MagicMock(),
        filesystem=MagicMock(),
    )
