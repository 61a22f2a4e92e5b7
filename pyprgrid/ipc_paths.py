"""Hyprland socket paths."""

import os
from pathlib import Path

__all__ = [
    "EVENTS_SOCKET",
    "HYPRCTL_SOCKET",
    "HYPRLAND_INSTANCE_SIGNATURE",
    "IPC_FOLDER",
]

HYPRLAND_INSTANCE_SIGNATURE = os.environ.get("HYPRLAND_INSTANCE_SIGNATURE", "NO_INSTANCE")

_runtime_folder = f"{os.environ.get('XDG_RUNTIME_DIR', '')}/hypr/{HYPRLAND_INSTANCE_SIGNATURE}"

# Older Hyprland releases kept their sockets in /tmp
IPC_FOLDER = _runtime_folder if Path(_runtime_folder).exists() else f"/tmp/hypr/{HYPRLAND_INSTANCE_SIGNATURE}"  # noqa: S108

HYPRCTL_SOCKET = f"{IPC_FOLDER}/.socket.sock"
EVENTS_SOCKET = f"{IPC_FOLDER}/.socket2.sock"
