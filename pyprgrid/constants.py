"""Shared constants for pyprgrid."""

import os
from pathlib import Path

__all__ = [
    "ACTIVE_CELL",
    "CONFIG_FILE",
    "DEFAULT_ACTIVITY",
    "IDLE_CELL",
    "WORKSPACE_SEPARATOR",
]

# Config file path - use XDG_CONFIG_HOME with fallback to ~/.config
_xdg_config_home = Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")
CONFIG_FILE = _xdg_config_home / "pyprgrid" / "config.toml"

DEFAULT_ACTIVITY = "default"

# "<activity>:<index>"
WORKSPACE_SEPARATOR = ":"

# Status block cells
ACTIVE_CELL = "   "
IDLE_CELL = "███"
