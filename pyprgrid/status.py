"""Print the activity grid as JSON lines, for status bars (eg. waybar's "custom" module)."""

from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING, TextIO

from .ipc import get_event_stream
from .models import TransportError

if TYPE_CHECKING:
    import asyncio

    from .adapters.proxy import BackendProxy
    from .grid import Grid

__all__ = ["StatusPrinter"]


class StatusPrinter:
    """Prints `{"text": <grid>}` for the current workspace and on every change."""

    def __init__(self, grid: Grid, backend: BackendProxy, output: TextIO | None = None) -> None:
        self.grid = grid
        self.backend = backend
        self.log = backend.log
        self.output = output or sys.stdout

    def print_status(self, workspace_name: str) -> None:
        """Print the status line, nothing for workspaces outside the grid."""
        text = self.grid.status_repr(workspace_name)
        if text is None:
            self.log.debug("%s is not a grid workspace", workspace_name)
            return
        print(json.dumps({"text": text}, ensure_ascii=False), file=self.output, flush=True)

    def event_workspace(self, workspace_name: str) -> None:
        """Active workspace changed."""
        if workspace_name.startswith("special:"):
            return
        self.print_status(workspace_name)

    def event_focusedmon(self, params: str) -> None:
        """Focused monitor changed, its workspace becomes the active one."""
        _, workspace_name = params.split(",", 1)
        self.event_workspace(workspace_name)

    async def run(self, event_reader: asyncio.StreamReader | None = None) -> None:
        """Print the current status, then follow the event stream until it ends."""
        self.print_status(await self.backend.get_active_workspace())
        writer = None
        if event_reader is None:
            event_reader, writer = await get_event_stream(self.log)
        try:
            await self.read_events_loop(event_reader)
        except OSError as e:
            self.log.critical("Event stream failed: %s", e)
            raise TransportError from e
        finally:
            if writer is not None:
                writer.close()

    async def read_events_loop(self, event_reader: asyncio.StreamReader) -> None:
        """Consume the event stream, calling the matching `event_*` method."""
        while True:
            data = (await event_reader.readline()).decode(errors="replace")
            if not data:
                self.log.info("Event stream closed")
                return
            parsed_event = self.backend.parse_event(data)
            if parsed_event is None:
                continue
            name, params = parsed_event
            handler = getattr(self, name, None)
            if handler:
                handler(params)
