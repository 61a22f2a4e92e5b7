"""Switch workspaces when the mouse reaches a screen edge.

The cursor position is polled every `polling_rate` milliseconds. Touching an
edge moves to the neighbouring workspace (always wrapping around) and warps
the cursor to the opposite edge, so crossing the screen feels continuous.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .models import AnimationKind, CursorPosition, MonitorInfo

if TYPE_CHECKING:
    from .adapters.proxy import BackendProxy
    from .animations import AnimationSelector
    from .config import Configuration
    from .grid import Grid

__all__ = ["EdgeHit", "MouseLoop", "detect_edges"]


@dataclass(frozen=True)
class EdgeHit:
    """An edge crossing: grid direction and where to put the cursor afterwards."""

    dx: int
    dy: int
    x: int
    y: int


def _logical_size(monitor: MonitorInfo) -> tuple[int, int]:
    """Monitor size in layout coordinates (the ones `cursorpos` uses)."""
    scale = monitor.get("scale") or 1.0
    width, height = int(monitor["width"] / scale), int(monitor["height"] / scale)
    # odd transforms are 90 or 270 degree rotations
    if monitor.get("transform", 0) % 2:
        return height, width
    return width, height


def _axis(pos: int, size: int, edge_width: int, edge_margin: int) -> tuple[int, int]:
    """Return (direction, new position) for one axis."""
    if pos <= edge_width:
        return -1, size - edge_margin
    if pos >= size - 1 - edge_width:
        return 1, edge_margin
    return 0, pos


def detect_edges(cursor: CursorPosition, monitor: MonitorInfo, edge_width: int, edge_margin: int) -> EdgeHit | None:
    """Return the edge crossing for `cursor`, None when it is away from the edges.

    Args:
        cursor: global cursor position
        monitor: the monitor the cursor is on
        edge_width: distance from an edge (px) which counts as touching it
        edge_margin: distance from the opposite edge (px) to warp the cursor to
    """
    width, height = _logical_size(monitor)
    off_x, off_y = monitor.get("x", 0), monitor.get("y", 0)
    dx, x = _axis(cursor["x"] - off_x, width, edge_width, edge_margin)
    dy, y = _axis(cursor["y"] - off_y, height, edge_width, edge_margin)
    if dx == 0 and dy == 0:
        return None
    return EdgeHit(dx, dy, x + off_x, y + off_y)


class MouseLoop:
    """Polls the cursor and switches workspaces on edge hits."""

    def __init__(self, grid: Grid, config: Configuration, backend: BackendProxy, animations: AnimationSelector) -> None:
        self.grid = grid
        self.backend = backend
        self.animations = animations
        self.log = backend.log
        self.polling_rate = config.get_int("polling_rate") / 1000
        self.edge_width = config.get_int("edge_width")
        self.edge_margin = config.get_int("edge_margin")

    async def run(self) -> None:
        """Run forever (until the compositor connection fails)."""
        current = await self.backend.get_active_workspace()
        indices = self.grid.resolve_indices(current)
        if indices is None or indices[1] is None:
            self.log.info("%s is not a grid workspace, moving to %s", current, self.grid.workspaces[0][0])
            await self.backend.switch_workspace(self.grid.workspaces[0][0])

        # TODO: re-read the monitor on monitoradded / monitorremoved events
        monitor = await self.backend.get_monitor_props()
        self.log.info("Watching edges of %s (%sx%s)", monitor["name"], monitor["width"], monitor["height"])
        while True:
            await asyncio.sleep(self.polling_rate)
            await self.tick(monitor)

    async def tick(self, monitor: MonitorInfo) -> bool:
        """Check the cursor once, returns True if the workspace was switched."""
        hit = detect_edges(await self.backend.get_cursor_position(), monitor, self.edge_width, self.edge_margin)
        if hit is None:
            return False

        current = await self.backend.get_active_workspace()
        indices = self.grid.resolve_indices(current)
        if indices is None or indices[1] is None:
            self.log.warning("unknown workspace %s", current)
            return False
        activity_index, workspace_index = indices

        new_index = self.grid.move_within_grid(workspace_index, hit.dx, hit.dy, cycle=True)
        new_workspace = self.grid.workspaces[activity_index][new_index]
        if new_workspace == current:
            return False

        if hit.dx:
            await self.animations.apply(AnimationKind.HORIZONTAL)
        elif hit.dy:
            await self.animations.apply(AnimationKind.VERTICAL)
        await self.backend.switch_workspace(new_workspace)
        await self.backend.move_cursor(hit.x, hit.y)
        return True
