"""Persistent user settings.

Stores the remembered Maven repository path and whether it should be
used without prompting. Settings live in ~/.config/mvnpurge/config.toml
and are only read by the command-line front-end; the sweep core never
consults them.
"""

import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from mvnpurge.cache.models import DEFAULT_MAX_ERRORS
from mvnpurge.core.paths import get_settings_path


class Settings(BaseModel):
    """User preferences for mvnpurge.

    Attributes:
        maven_repo_path: Last used Maven repository root, if any.
        always_use_saved_path: Use the saved root without prompting.
        max_errors: Default cap on retained error records.
    """

    model_config = ConfigDict(extra="forbid")

    maven_repo_path: Annotated[
        str | None,
        Field(description="Remembered Maven repository root"),
    ] = None
    always_use_saved_path: Annotated[
        bool,
        Field(description="Skip the prompt and use the saved root"),
    ] = False
    max_errors: Annotated[
        int,
        Field(ge=0, description="Default number of error records kept"),
    ] = DEFAULT_MAX_ERRORS

    @property
    def saved_root(self) -> str | None:
        """The remembered root, or None if unset or blank."""
        if self.maven_repo_path and self.maven_repo_path.strip():
            return self.maven_repo_path
        return None

    @property
    def skip_prompt(self) -> bool:
        """Whether the saved root should be used without asking."""
        return self.always_use_saved_path and self.saved_root is not None


class SettingsError(Exception):
    """Base exception for settings errors."""


class SettingsNotFoundError(SettingsError):
    """Raised when the settings file is not found."""


class SettingsParseError(SettingsError):
    """Raised when the settings file cannot be parsed."""


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from a TOML file.

    Args:
        path: Path to the settings file. If None, uses the default path.

    Returns:
        Validated Settings object.

    Raises:
        SettingsNotFoundError: If the settings file doesn't exist.
        SettingsParseError: If the TOML syntax is invalid.
        SettingsError: If the content doesn't match the schema.
    """
    settings_path = path or get_settings_path()

    if not settings_path.exists():
        raise SettingsNotFoundError(f"Settings not found: {settings_path}")

    try:
        with open(settings_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SettingsParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise SettingsError(f"Failed to read settings: {e}") from e

    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        raise SettingsError(f"Invalid settings content: {e}") from e


def load_settings_or_default(path: Path | None = None) -> Settings:
    """Load settings, falling back to defaults when no file exists.

    Raises:
        SettingsError: If the file exists but cannot be used.
    """
    try:
        return load_settings(path)
    except SettingsNotFoundError:
        return Settings()


def save_settings(settings: Settings, path: Path | None = None) -> Path:
    """Save settings to a TOML file.

    The file is written atomically by first writing to a temporary file
    in the same directory and then using os.replace() for atomic rename.

    Args:
        settings: The Settings object to save.
        path: Path to save the settings. If None, uses the default path.

    Returns:
        Path where the settings were saved.

    Raises:
        SettingsError: If the file cannot be written.
    """
    settings_path = path or get_settings_path()

    data = _settings_to_dict(settings)

    tmp_path: Path | None = None
    try:
        settings_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=settings_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(settings_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise SettingsError(f"Failed to write settings: {e}") from e

    return settings_path


def delete_settings(path: Path | None = None) -> bool:
    """Remove the settings file.

    Returns:
        True if a file was removed, False if none existed.

    Raises:
        SettingsError: If the file exists but cannot be removed.
    """
    settings_path = path or get_settings_path()
    try:
        settings_path.unlink()
    except FileNotFoundError:
        return False
    except OSError as e:
        raise SettingsError(f"Failed to remove settings: {e}") from e
    return True


def _settings_to_dict(settings: Settings) -> dict[str, object]:
    """Convert Settings to a dictionary for TOML serialization.

    TOML has no null, so an unset repository path is omitted.
    """
    result: dict[str, object] = {"always_use_saved_path": settings.always_use_saved_path}

    if settings.maven_repo_path is not None:
        result["maven_repo_path"] = settings.maven_repo_path

    if settings.max_errors != DEFAULT_MAX_ERRORS:
        result["max_errors"] = settings.max_errors

    return result
