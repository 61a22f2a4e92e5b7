"""Interact with hyprland using sockets."""

__all__ = [
    "get_event_stream",
    "get_response",
    "hyprctl_connection",
]

import asyncio
import contextlib
import json
from collections.abc import AsyncIterator
from logging import Logger

from .ipc_paths import EVENTS_SOCKET, HYPRCTL_SOCKET
from .models import JSONResponse, TransportError


@contextlib.asynccontextmanager
async def hyprctl_connection(logger: Logger) -> AsyncIterator[tuple[asyncio.StreamReader, asyncio.StreamWriter]]:
    """Open a connection to the hyprctl socket, closing it on exit.

    Args:
        logger: logger to use in case of error

    Raises:
        TransportError: the socket is missing, refuses the connection or drops it
    """
    try:
        reader, writer = await asyncio.open_unix_connection(HYPRCTL_SOCKET)
    except FileNotFoundError as e:
        logger.critical("hyprctl socket not found! is it running ?")
        raise TransportError from e
    except OSError as e:
        logger.critical("hyprctl connection failed: %s", e)
        raise TransportError from e
    try:
        yield reader, writer
    except OSError as e:
        logger.critical("hyprctl connection lost: %s", e)
        raise TransportError from e
    finally:
        writer.close()
        try:
            await writer.wait_closed()
        except OSError as e:
            # the reply (or the error) is already handled at this point
            logger.debug("hyprctl socket close failed: %s", e)


async def get_response(command: bytes, logger: Logger) -> JSONResponse:
    """Get response of `command` from the IPC socket.

    Args:
        command: raw request, eg. b"-j/activeworkspace"
        logger: logger to use in case of error
    """
    async with hyprctl_connection(logger) as (reader, writer):
        writer.write(command)
        await writer.drain()
        reader_data = await reader.read()
    decoded_data = reader_data.decode("utf-8", errors="replace")
    try:
        return json.loads(decoded_data)  # type: ignore[no-any-return]
    except json.JSONDecodeError as e:
        logger.critical("Invalid response for %s: %s", command, decoded_data)
        raise TransportError from e


async def get_event_stream(logger: Logger) -> tuple[asyncio.StreamReader, asyncio.StreamWriter]:
    """Return a new event socket connection.

    Args:
        logger: logger to use in case of error
    """
    try:
        return await asyncio.open_unix_connection(EVENTS_SOCKET)
    except OSError as e:
        logger.critical("Failed to open hyprland event stream: %s", e)
        raise TransportError from e
