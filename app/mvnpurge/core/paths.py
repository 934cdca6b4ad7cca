"""XDG-compliant path management for mvnpurge.

This module provides standardized paths following the XDG Base Directory
Specification for configuration storage.

XDG defaults:
- Config: ~/.config/mvnpurge/
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "mvnpurge"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/mvnpurge/ (or XDG_CONFIG_HOME/mvnpurge/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_settings_path() -> Path:
    """Get the settings file path.

    Returns:
        Path to ~/.config/mvnpurge/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_user_theme_path() -> Path:
    """Get the user theme override path.

    Returns:
        Path to ~/.config/mvnpurge/theme.toml.
    """
    return get_config_dir() / "theme.toml"


def get_default_repo_path() -> Path:
    """Get Maven's default local repository location.

    Returns:
        Path to ~/.m2/repository.
    """
    return Path.home() / ".m2" / "repository"
