"""Compositor adapters."""

from .backend import EnvironmentBackend
from .hyprland import HyprlandBackend
from .proxy import BackendProxy

__all__ = ["BackendProxy", "EnvironmentBackend", "HyprlandBackend"]
