"""Config file discovery.

Lookup order for ``swaycmd.toml``:

1. ``SWAYCMD_CONFIG`` env var (must point at an existing file)
2. Walk up from the working directory, similar to how git finds .git/
3. ``$XDG_CONFIG_HOME/swaycmd/swaycmd.toml`` (``~/.config`` by default)
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "swaycmd.toml"
CONFIG_ENV_VAR = "SWAYCMD_CONFIG"


def user_config_path() -> Path:
    """Return the per-user config location, whether or not it exists."""
    base = os.environ.get("XDG_CONFIG_HOME")
    root = Path(base) if base else Path.home() / ".config"
    return root / "swaycmd" / CONFIG_FILENAME


def find_config(start: Path | None = None) -> Path | None:
    """Locate swaycmd.toml, starting the walk-up at *start* (default: cwd).

    Returns the path to the config file, or None if not found.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        if p.is_file():
            return p
        return None

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent

    user_path = user_config_path()
    if user_path.is_file():
        return user_path
    return None
