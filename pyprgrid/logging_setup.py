"""Logging configuration.

`init_logger` must run first, then every component asks `get_logger` for
its own named logger (they all share the handlers created at init time).
"""

import logging
import os

from .ansi import LogStyles, make_style, should_colorize

__all__ = [
    "LogObjects",
    "get_logger",
    "init_logger",
    "is_debug",
]

DEBUG_FORMAT = r"%(name)12s - %(message)s // %(filename)s:%(lineno)d"
FILE_FORMAT = r"%(asctime)s [%(levelname)s] %(name)s :: %(message)s :: %(filename)s:%(lineno)d"


class LogObjects:
    """State shared by the loggers: the debug mode and the handlers installed by `init_logger`."""

    debug: bool = bool(os.environ.get("DEBUG"))
    handlers: list[logging.Handler] = []


def is_debug() -> bool:
    return LogObjects.debug


class ColorFormatter(logging.Formatter):
    """Terminal formatter, warnings and errors are colored."""

    def __init__(self, fmt: str, colorize: bool) -> None:
        super().__init__(fmt)
        self._by_level: dict[int, logging.Formatter] = {}
        if colorize:
            for level, style in (
                (logging.WARNING, LogStyles.WARNING),
                (logging.ERROR, LogStyles.ERROR),
                (logging.CRITICAL, LogStyles.CRITICAL),
            ):
                prefix, suffix = make_style(*style)
                self._by_level[level] = logging.Formatter(prefix + fmt + suffix)

    def format(self, record: logging.LogRecord) -> str:
        formatter = self._by_level.get(record.levelno)
        return formatter.format(record) if formatter else super().format(record)


def init_logger(filename: str | None = None, force_debug: bool = False) -> None:
    """Create the log handlers.

    Args:
        filename: also write the logs to this file
        force_debug: enable debug mode (the DEBUG environment variable does it too)
    """
    if force_debug:
        LogObjects.debug = True

    LogObjects.handlers.clear()
    if filename:
        file_handler = logging.FileHandler(filename)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        LogObjects.handlers.append(file_handler)
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(ColorFormatter(DEBUG_FORMAT if is_debug() else r"%(message)s", should_colorize()))
    LogObjects.handlers.append(stream_handler)


def get_logger(name: str = "pyprgrid") -> logging.Logger:
    """Return the logger called `name`, its level follows the debug mode."""
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG if is_debug() else logging.WARNING)
    logger.propagate = False
    for handler in LogObjects.handlers:
        if handler not in logger.handlers:
            logger.addHandler(handler)
    logger.debug('Logger "%s" initialized', name)
    return logger
