"""Compositor backend interface."""

from abc import ABC, abstractmethod
from logging import Logger
from typing import Any

from ..models import CursorPosition, MonitorInfo


class EnvironmentBackend(ABC):
    """Talks to the compositor.

    A single instance is shared by all the components; every call takes the
    logger of the caller (see `BackendProxy`), so the logs show who asked.
    """

    @abstractmethod
    async def execute(self, command: str, *, log: Logger, base_command: str = "dispatch") -> bool:
        """Run a command, returns True on success.

        `base_command` is "dispatch" or "keyword".
        """

    @abstractmethod
    async def execute_json(self, command: str, *, log: Logger) -> Any:  # noqa: ANN401
        """Run a query and return the decoded JSON reply."""

    @abstractmethod
    async def get_monitors(self, *, log: Logger) -> list[MonitorInfo]:
        """Return the monitors."""

    @abstractmethod
    async def get_active_workspace(self, *, log: Logger) -> str:
        """Return the name of the focused workspace."""

    @abstractmethod
    async def get_cursor_position(self, *, log: Logger) -> CursorPosition:
        """Return the pointer position, in layout coordinates."""

    @abstractmethod
    def parse_event(self, raw_data: str, *, log: Logger) -> tuple[str, Any] | None:
        """Turn an event line into ("event_<name>", params), None if it isn't an event."""

    async def get_monitor_props(self, *, log: Logger) -> MonitorInfo:
        """Return the focused monitor.

        Raises:
            RuntimeError: no monitor has the focus
        """
        for mon in await self.get_monitors(log=log):
            if mon.get("focused"):
                return mon
        msg = "no focused monitor"
        raise RuntimeError(msg)

    async def switch_workspace(self, name: str, *, move_window: bool = False, log: Logger) -> bool:
        """Focus the workspace called `name`, taking the active window along if `move_window` is set."""
        dispatcher = "movetoworkspace" if move_window else "workspace"
        return await self.execute(f"{dispatcher} name:{name}", log=log)

    async def move_cursor(self, x: int, y: int, *, log: Logger) -> bool:  # pylint: disable=invalid-name
        return await self.execute(f"movecursor {x} {y}", log=log)

    async def set_keyword(self, keyword_command: str, *, log: Logger) -> bool:
        """Change a setting at runtime, eg. "animation workspaces,1,6,default"."""
        return await self.execute(keyword_command, log=log, base_command="keyword")
