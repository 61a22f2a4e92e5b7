"""Hyprland backend, using the hyprctl socket."""

from logging import Logger
from typing import Any, cast

from ..ipc import get_response, hyprctl_connection
from ..models import CursorPosition, MonitorInfo
from .backend import EnvironmentBackend


class HyprlandBackend(EnvironmentBackend):
    """Sends hyprctl requests over `.socket.sock`, one connection per request."""

    async def execute(self, command: str, *, log: Logger, base_command: str = "dispatch") -> bool:
        if not command:
            log.warning("%s triggered without a command!", base_command)
            return False
        log.debug("%s %s", base_command, command)

        request = f"/{base_command} {command}"

        async with hyprctl_connection(log) as (ctl_reader, ctl_writer):
            ctl_writer.write(request.encode())
            await ctl_writer.drain()
            resp = await ctl_reader.read(100)

        if resp.strip() == b"ok":
            return True
        log.error("FAILED %s", resp)
        return False

    async def execute_json(self, command: str, *, log: Logger) -> Any:  # noqa: ANN401
        log.debug("-j/%s", command)
        ret = await get_response(f"-j/{command}".encode(), log)
        assert isinstance(ret, list | dict)
        return ret

    async def get_monitors(self, *, log: Logger) -> list[MonitorInfo]:
        return cast("list[MonitorInfo]", await self.execute_json("monitors", log=log))

    async def get_active_workspace(self, *, log: Logger) -> str:
        workspace = await self.execute_json("activeworkspace", log=log)
        return str(workspace["name"])

    async def get_cursor_position(self, *, log: Logger) -> CursorPosition:
        pos = await self.execute_json("cursorpos", log=log)
        return CursorPosition(x=int(pos["x"]), y=int(pos["y"]))

    def parse_event(self, raw_data: str, *, log: Logger) -> tuple[str, Any] | None:  # noqa: ARG002
        """Split "name>>params" lines."""
        if ">>" not in raw_data:
            return None
        cmd, params = raw_data.split(">>", 1)
        return f"event_{cmd}", params.rstrip("\n")
