"""XDG-compliant path management for ocflwalk.

This module provides standardized paths following the XDG Base Directory
Specification for configuration storage.

XDG defaults:
- Config: ~/.config/ocflwalk/
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "ocflwalk"


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
        Path to ~/.config/ocflwalk/ (or XDG_CONFIG_HOME/ocflwalk/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_config_path() -> Path:
    """Get the default configuration file path.

    Returns:
        Path to ~/.config/ocflwalk/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_user_theme_path() -> Path:
    """Get the user theme configuration path.

    Returns:
        Path to ~/.config/ocflwalk/theme.toml.
    """
    return get_config_dir() / "theme.toml"


def absolute_path(path: str | Path) -> Path:
    """Make a path absolute and collapse ``.`` and ``..`` lexically.

    Symbolic links are left alone, so a path keeps the name it was
    reached by.
    """
    return Path(os.path.abspath(path))
