"""Get SIR home directory path or path under it."""

import os
from pathlib import Path

from .constants import SIR_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get SIR home directory path or path under it.

    Checks SIR_HOME environment variable first, defaults to ~/.sir if not set.

    Args:
        *parts: Optional path components to join (e.g., "config.json")

    Returns:
        Absolute path to SIR home directory or subpath under it

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.sir")
        >>> get_home_dir("config.json")
        Path("/Users/user/.sir/config.json")
    """
    sir_home_env = os.environ.get("SIR_HOME")
    if sir_home_env:
        sir_home = Path(sir_home_env).expanduser().resolve()
    else:
        home_env = os.environ.get("HOME")
        sir_home = Path(home_env) / SIR_HOME_EXT if home_env else Path.home() / SIR_HOME_EXT

    return sir_home / Path(*parts) if parts else sir_home
