"""User directory lookups for mdscriptfilter.

Follows the XDG Base Directory Specification for the configuration file
and the macOS conventions for the user Library folder.
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "mdscriptfilter"


def get_home_dir() -> str:
    """Get the current user's home directory as a string.

    Returns:
        Absolute home directory path without a trailing slash.
    """
    return str(Path.home())


def get_library_dirs() -> list[str]:
    """Get the user-domain Library directories.

    Returns:
        List containing the path to ~/Library.
    """
    return [str(Path.home() / "Library")]


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/mdscriptfilter/ (or XDG_CONFIG_HOME/mdscriptfilter/).
    """
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_config_path() -> Path:
    """Get the default configuration file path.

    Returns:
        Path to ~/.config/mdscriptfilter/config.toml.
    """
    return get_config_dir() / "config.toml"
