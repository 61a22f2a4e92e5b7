"""Configuration schema.

Defaults here are the documented fallbacks for a missing file or key.
"""

from collections.abc import Callable
from typing import Any

from .validation import ConfigField, ConfigItems

GRID_DIMENSIONS = 2


def _check_activities(value: Any) -> list[str]:  # noqa: ANN401
    if any(not name for name in value):
        return ["activity names can't be empty"]
    return []


def activity_name_warnings(names: list[str]) -> list[str]:
    """Report names which may produce clashing workspace names.

    These are tolerated: the first matching activity wins.
    """
    warnings = []
    seen: set[str] = set()
    for name in names:
        if ":" in name:
            warnings.append(f"activity name {name!r} contains ':', lookups may pick another activity")
        elif name in seen:
            warnings.append(f"activity {name!r} is listed twice, only the first one is reachable")
        seen.add(name)
    return warnings


def _check_dimensions(value: Any) -> list[str]:  # noqa: ANN401
    if len(value) != GRID_DIMENSIONS:
        return ["expected [width, height]"]
    if any(dim < 1 for dim in value):
        return ["width and height must be at least 1"]
    return []


def _at_least(minimum: int) -> Callable[[Any], list[str]]:
    """Range check for integer options (numeric strings are accepted by the type check)."""

    def check(value: Any) -> list[str]:  # noqa: ANN401
        if int(value) < minimum:
            return [f"must be at least {minimum}"]
        return []

    return check


CONFIG_SCHEMA = ConfigItems(
    # ordered activity names
    ConfigField("activities", list[str], default=["default"], validator=_check_activities),
    # grid size of every activity, as [width, height]
    ConfigField("workspaces", list[int], default=[3, 3], validator=_check_dimensions),
    ConfigField("enable_animations", bool, default=True),
    # Hyprland animation ticks (ds)
    ConfigField("animation_duration", int, default=6, validator=_at_least(0)),
    # unset curves keep the current Hyprland animation
    ConfigField("workspace_switch_animation_curve", str),
    ConfigField("workspace_horizontal_switch_animation_style", str),
    ConfigField("workspace_vertical_switch_animation_style", str),
    ConfigField("activity_switch_animation_curve", str),
    ConfigField("activity_switch_animation_style", str),
    # mouse polling interval (ms)
    ConfigField("polling_rate", int, default=300, validator=_at_least(1)),
    # distance from a screen edge (px) which triggers a switch
    ConfigField("edge_width", int, default=0, validator=_at_least(0)),
    # distance from the opposite edge (px) the cursor is moved to
    ConfigField("edge_margin", int, default=2, validator=_at_least(0)),
)
