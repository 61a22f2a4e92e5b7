"""Workspace switch animation selection.

Hyprland has a single "workspaces" animation, so it is re-configured right
before each switch depending on the kind of move.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .models import AnimationKind

if TYPE_CHECKING:
    from .adapters.proxy import BackendProxy
    from .config import Configuration

__all__ = ["AnimationSelector"]

# kind: (curve option, style option)
_OPTIONS = {
    AnimationKind.HORIZONTAL: ("workspace_switch_animation_curve", "workspace_horizontal_switch_animation_style"),
    AnimationKind.VERTICAL: ("workspace_switch_animation_curve", "workspace_vertical_switch_animation_style"),
    AnimationKind.ACTIVITY: ("activity_switch_animation_curve", "activity_switch_animation_style"),
}


class AnimationSelector:
    """Maps a move kind to an "animation" keyword."""

    def __init__(self, config: Configuration, backend: BackendProxy) -> None:
        self.config = config
        self.backend = backend

    def keyword(self, kind: AnimationKind) -> str | None:
        """Return the keyword command for `kind`, None if its curve isn't configured."""
        curve_option, style_option = _OPTIONS[kind]
        curve = self.config.get_str(curve_option)
        if not curve:
            return None
        enabled = 1 if self.config.get_bool("enable_animations") else 0
        duration = self.config.get_int("animation_duration")
        settings = f"workspaces,{enabled},{duration},{curve}"
        style = self.config.get_str(style_option)
        if style:
            settings += f",{style}"
        return f"animation {settings}"

    async def apply(self, kind: AnimationKind) -> None:
        """Configure the animation for the next switch (no-op without a curve)."""
        keyword = self.keyword(kind)
        if keyword:
            await self.backend.set_keyword(keyword)
