"""Terminal colors for the log output."""

import os
import sys
from typing import TextIO

__all__ = ["LogStyles", "make_style", "should_colorize"]

RESET = "\x1b[0m"

BOLD = "1"
DIM = "2"
RED = "31"
YELLOW = "33"


def should_colorize(stream: TextIO | None = None) -> bool:
    """Tell if `stream` (stderr by default) should get ANSI colors.

    NO_COLOR disables them and FORCE_COLOR enables them, else only TTYs get colors.
    """
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    stream = stream or sys.stderr
    return hasattr(stream, "isatty") and stream.isatty()


def make_style(*codes: str) -> tuple[str, str]:
    """Return the (prefix, suffix) wrapping a text in the given SGR codes."""
    prefix = f"\x1b[{';'.join(codes)}m" if codes else ""
    return prefix, RESET


class LogStyles:
    """SGR codes per log level."""

    WARNING = (YELLOW, DIM)
    ERROR = (RED, DIM)
    CRITICAL = (RED, BOLD)
