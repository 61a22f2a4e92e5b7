"""Activity grid model and navigation.

Every activity owns ``width * height`` workspaces named ``<activity>:<n>``
(``n`` starting at 1), laid out row-major from the top-left corner::

    work:1 work:2 work:3
    work:4 work:5 work:6
    work:7 work:8 work:9

Everything here is pure: the caller queries the active workspace from the
compositor and hands its name over, nothing is cached between calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .constants import ACTIVE_CELL, DEFAULT_ACTIVITY, IDLE_CELL, WORKSPACE_SEPARATOR
from .models import Direction, NotInManagedWorkspace

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .config import Configuration

__all__ = ["Grid", "build_grid", "grid_from_config"]

DEFAULT_WIDTH = 3
DEFAULT_HEIGHT = 3


@dataclass(frozen=True)
class Grid:
    """Activities and their workspace names, indexed identically."""

    activities: tuple[str, ...]
    workspaces: tuple[tuple[str, ...], ...]
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT

    @property
    def size(self) -> int:
        """Number of workspaces per activity."""
        return self.width * self.height

    def resolve_activity_index(self, name: str) -> int | None:
        """Return the index of the activity `name` belongs to.

        `name` may be an activity name or one of its workspaces;
        the first activity in configuration order wins.
        """
        for index, activity in enumerate(self.activities):
            if name == activity or name.startswith(activity + WORKSPACE_SEPARATOR):
                return index
        return None

    def resolve_indices(self, name: str) -> tuple[int, int | None] | None:
        """Return (activity index, workspace index) for a workspace name.

        The workspace index is None when the activity is known but `name`
        isn't one of its grid slots (eg. "work:scratch").
        """
        activity_index = self.resolve_activity_index(name)
        if activity_index is None:
            return None
        try:
            return activity_index, self.workspaces[activity_index].index(name)
        except ValueError:
            return activity_index, None

    def position(self, workspace_index: int) -> tuple[int, int]:
        """Return the (row, col) of a workspace index."""
        return divmod(workspace_index, self.width)

    def move_within_grid(self, workspace_index: int, dx: int, dy: int, cycle: bool) -> int:
        """Return the workspace index reached from `workspace_index` moving by (dx, dy).

        Args:
            workspace_index: starting slot
            dx: column offset, positive goes right
            dy: row offset, positive goes down
            cycle: wrap around the edges instead of stopping there
        """
        row, col = self.position(workspace_index)
        if cycle:
            col = (col + dx) % self.width
            row = (row + dy) % self.height
        else:
            col = max(0, min(self.width - 1, col + dx))
            row = max(0, min(self.height - 1, row + dy))
        return row * self.width + col

    def moved_workspace(self, current: str, dx: int, dy: int, cycle: bool) -> str:
        """Return the name of the workspace next to `current` in the (dx, dy) direction.

        Raises:
            NotInManagedWorkspace: `current` isn't a grid slot
        """
        indices = self.resolve_indices(current)
        if indices is None or indices[1] is None:
            raise NotInManagedWorkspace(current)
        activity_index, workspace_index = indices
        return self.workspaces[activity_index][self.move_within_grid(workspace_index, dx, dy, cycle)]

    def next_activity(self, current_activity_index: int | None, cycle: bool, direction: Direction) -> int:
        """Return the index of the activity after (or before) the current one."""
        if current_activity_index is None:
            return 0
        count = len(self.activities)
        index = current_activity_index + direction.value
        if cycle:
            return index % count
        return max(0, min(count - 1, index))

    def activity_switch_target(self, current: str, activity_index: int) -> str:
        """Return the workspace to focus when switching to another activity.

        The local part of `current` (eg. ":5" in "work:5") is kept when
        `current` belongs to a known activity, otherwise the first workspace
        of the destination is used.
        """
        current_index = self.resolve_activity_index(current)
        if current_index is not None:
            suffix = current[len(self.activities[current_index]) :]
            if suffix:
                return self.activities[activity_index] + suffix
        return self.workspaces[activity_index][0]

    def activity_workspace(self, activity_index: int, local_name: str) -> str:
        """Return the full name of `local_name` in the given activity."""
        return f"{self.activities[activity_index]}{WORKSPACE_SEPARATOR}{local_name}"

    def status_repr(self, workspace_name: str) -> str | None:
        """Draw the activity containing `workspace_name`, with a hole for the active slot.

        Returns None when the workspace isn't a grid slot.
        """
        indices = self.resolve_indices(workspace_name)
        if indices is None or indices[1] is None:
            return None
        active = indices[1]
        rows = []
        for row in range(self.height):
            cells = (ACTIVE_CELL if row * self.width + col == active else IDLE_CELL for col in range(self.width))
            rows.append(" ".join(cells))
        return "\n".join(rows)


def build_grid(activity_names: Sequence[str], width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> Grid:
    """Build the grid for `activity_names`, a "default" activity is used if empty."""
    activities = tuple(activity_names) or (DEFAULT_ACTIVITY,)
    workspaces = tuple(tuple(f"{name}{WORKSPACE_SEPARATOR}{i}" for i in range(1, width * height + 1)) for name in activities)
    return Grid(activities, workspaces, width, height)


def grid_from_config(config: Configuration) -> Grid:
    """Build the grid from the "activities" and "workspaces" options."""
    width, height = config.get_list("workspaces") or (DEFAULT_WIDTH, DEFAULT_HEIGHT)
    return build_grid([str(name) for name in config.get_list("activities")], int(width), int(height))
