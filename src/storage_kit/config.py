"""Settings for storage operations."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

# Default settings location
CONFIG_DIR = Path.home() / ".storage-kit"
CONFIG_FILE = CONFIG_DIR / "config.yaml"


class StorageSettings(BaseModel):
    """Tunables shared by FileOps and DirOps."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    encoding: str = "utf-8"
    copy_suffix: str = Field(default="-copy", min_length=1, alias="copySuffix")
    max_name_attempts: int = Field(default=10_000, ge=1, alias="maxNameAttempts")

    @classmethod
    def from_file(cls, path: Path) -> StorageSettings:
        """Load settings from a YAML file.

        Args:
            path: Path to the YAML settings file.

        Returns:
            Parsed StorageSettings. An empty file yields the defaults.

        Raises:
            FileNotFoundError: If file doesn't exist.
            ValueError: If the file cannot be read, or its YAML or contents are invalid.
        """
        if not path.exists():
            raise FileNotFoundError(f"Settings file not found: {path}")

        try:
            text = path.read_text()
        except OSError as e:
            raise ValueError(f"Cannot read settings file {path}: {e}") from e

        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Settings in {path} must be a mapping")

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ValueError(f"Invalid settings in {path}: {e}") from e


def load_settings(path: Path | None = None) -> StorageSettings:
    """Load settings from ``path``, the default file, or built-in defaults.

    Args:
        path: Explicit settings file. Must exist when given.

    Returns:
        Resolved StorageSettings.
    """
    if path is not None:
        return StorageSettings.from_file(path)
    if CONFIG_FILE.exists():
        return StorageSettings.from_file(CONFIG_FILE)
    return StorageSettings()
