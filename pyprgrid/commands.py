"""Grid navigation commands.

Each `run_<name>` coroutine implements the `<name>` CLI sub-command (with
"_" replaced by "-"). The active workspace is queried from Hyprland on every
call, so commands keep working if the user switches workspaces by other means.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .adapters.proxy import BackendProxy
from .animations import AnimationSelector
from .grid import grid_from_config
from .logging_setup import get_logger
from .models import ActivityNotFound, AnimationKind, Direction, NotInManagedWorkspace, PyprError, WorkspaceNotFound
from .mouse import MouseLoop
from .status import StatusPrinter

if TYPE_CHECKING:
    from .adapters.backend import EnvironmentBackend
    from .config import Configuration

__all__ = ["GridCommands"]


class GridCommands:
    """Commands working on the activity grid."""

    def __init__(self, config: Configuration, backend: EnvironmentBackend) -> None:
        self.config = config
        self.grid = grid_from_config(config)
        self.log = get_logger("grid")
        self._shared_backend = backend
        self.backend = BackendProxy(backend, self.log)
        self.animations = AnimationSelector(config, BackendProxy(backend, get_logger("animations")))

    async def _switch(self, workspace: str, move_window: bool, animation: AnimationKind) -> None:
        await self.animations.apply(animation)
        if not await self.backend.switch_workspace(workspace, move_window):
            raise PyprError

    async def _move(self, dx: int, dy: int, cycle: bool, move_window: bool) -> None:
        current = await self.backend.get_active_workspace()
        target = self.grid.moved_workspace(current, dx, dy, cycle)
        await self._switch(target, move_window, AnimationKind.HORIZONTAL if dx else AnimationKind.VERTICAL)

    async def _cycle_activity(self, direction: Direction, cycle: bool, move_window: bool) -> None:
        current = await self.backend.get_active_workspace()
        index = self.grid.next_activity(self.grid.resolve_activity_index(current), cycle, direction)
        await self._switch(self.grid.activity_switch_target(current, index), move_window, AnimationKind.ACTIVITY)

    async def run_move_left(self, cycle: bool = False, move_window: bool = False) -> None:
        """Focus the workspace on the left."""
        await self._move(-1, 0, cycle, move_window)

    async def run_move_right(self, cycle: bool = False, move_window: bool = False) -> None:
        """Focus the workspace on the right."""
        await self._move(1, 0, cycle, move_window)

    async def run_move_up(self, cycle: bool = False, move_window: bool = False) -> None:
        """Focus the workspace above."""
        await self._move(0, -1, cycle, move_window)

    async def run_move_down(self, cycle: bool = False, move_window: bool = False) -> None:
        """Focus the workspace below."""
        await self._move(0, 1, cycle, move_window)

    async def run_next_activity(self, cycle: bool = False, move_window: bool = False) -> None:
        """Switch to the next activity, keeping the position in the grid."""
        await self._cycle_activity(Direction.NEXT, cycle, move_window)

    async def run_prev_activity(self, cycle: bool = False, move_window: bool = False) -> None:
        """Switch to the previous activity, keeping the position in the grid."""
        await self._cycle_activity(Direction.PREV, cycle, move_window)

    async def run_switch_to_activity(self, name: str, move_window: bool = False) -> None:
        """<activity> Switch to the given activity, keeping the position in the grid."""
        if name not in self.grid.activities:
            raise ActivityNotFound(name)
        current = await self.backend.get_active_workspace()
        target = self.grid.activity_switch_target(current, self.grid.activities.index(name))
        await self._switch(target, move_window, AnimationKind.ACTIVITY)

    async def run_switch_to_workspace(self, name: str, move_window: bool = False) -> None:
        """<activity:workspace> Switch to the given workspace of any activity."""
        indices = self.grid.resolve_indices(name)
        if indices is None:
            raise ActivityNotFound(name)
        activity_index, workspace_index = indices
        if workspace_index is None:
            raise WorkspaceNotFound(name)
        await self._switch(self.grid.workspaces[activity_index][workspace_index], move_window, AnimationKind.ACTIVITY)

    async def run_switch_to_workspace_in_activity(self, name: str, move_window: bool = False) -> None:
        """<workspace> Switch to the given workspace of the current activity."""
        current = await self.backend.get_active_workspace()
        activity_index = self.grid.resolve_activity_index(current)
        if activity_index is None:
            raise NotInManagedWorkspace(current)
        await self._switch(self.grid.activity_workspace(activity_index, name), move_window, AnimationKind.ACTIVITY)

    async def run_mouse_loop(self) -> None:
        """Switch workspaces when the mouse touches a screen edge (runs forever)."""
        loop = MouseLoop(self.grid, self.config, BackendProxy(self._shared_backend, get_logger("mouse")), self.animations)
        await loop.run()

    async def run_print_activity_status(self) -> None:
        """Print the activity grid as JSON, once and on every workspace change."""
        printer = StatusPrinter(self.grid, BackendProxy(self._shared_backend, get_logger("status")))
        await printer.run()
