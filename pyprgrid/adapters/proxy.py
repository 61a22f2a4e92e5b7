"""Backend proxy that injects a component logger into all calls.

Each component (commands, mouse loop, status printer, animations) gets its
own BackendProxy instance with its own logger, while sharing the underlying
backend, so IPC traffic is logged under the name of whoever issued it.
"""

from logging import Logger
from typing import TYPE_CHECKING, Any

from ..models import CursorPosition, MonitorInfo

if TYPE_CHECKING:
    from .backend import EnvironmentBackend


class BackendProxy:
    """Proxy that injects a logger into all backend calls.

    Attributes:
        log: The logger to use for all backend operations
    """

    def __init__(self, backend: "EnvironmentBackend", log: Logger) -> None:
        """Initialize the proxy.

        Args:
            backend: The underlying backend to delegate calls to
            log: The logger to inject into all backend calls
        """
        self._backend = backend
        self.log = log

    async def get_monitor_props(self) -> MonitorInfo:
        """Return the focused monitor."""
        return await self._backend.get_monitor_props(log=self.log)

    async def get_active_workspace(self) -> str:
        """Return the name of the focused workspace."""
        return await self._backend.get_active_workspace(log=self.log)

    async def get_cursor_position(self) -> CursorPosition:
        """Return the pointer position."""
        return await self._backend.get_cursor_position(log=self.log)

    async def switch_workspace(self, name: str, move_window: bool = False) -> bool:
        """Focus the workspace called `name`, optionally taking the focused window along."""
        return await self._backend.switch_workspace(name, move_window=move_window, log=self.log)

    async def move_cursor(self, x: int, y: int) -> bool:  # pylint: disable=invalid-name
        """Move the pointer to an absolute position."""
        return await self._backend.move_cursor(x, y, log=self.log)

    async def set_keyword(self, keyword_command: str) -> bool:
        """Execute a keyword/config command."""
        return await self._backend.set_keyword(keyword_command, log=self.log)

    def parse_event(self, raw_data: str) -> tuple[str, Any] | None:
        """Parse a raw event string into (event_name, event_data)."""
        return self._backend.parse_event(raw_data, log=self.log)
