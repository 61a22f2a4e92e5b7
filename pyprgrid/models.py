"""Type definitions and data models for Pyprgrid.

Provides TypedDict definitions matching Hyprland's JSON API responses:
- WorkspaceDf: Workspace identifier
- MonitorInfo: Monitor/output properties
- CursorPosition: Pointer coordinates

Also includes:
- Direction / AnimationKind: navigation intents
- ExitCode: Standard CLI exit codes
- PyprError and the grid lookup errors
"""

from enum import Enum, IntEnum, StrEnum
from typing import TypedDict

PlainTypes = float | str | dict[str, "PlainTypes"] | list["PlainTypes"]
JSONResponse = dict[str, PlainTypes] | list[dict[str, PlainTypes]] | PlainTypes


class WorkspaceDf(TypedDict):
    """Workspace definition."""

    id: int
    name: str


class MonitorInfo(TypedDict):
    """Monitor information as returned by Hyprland."""

    id: int
    name: str
    description: str
    width: int
    height: int
    refreshRate: float
    x: int
    y: int
    activeWorkspace: WorkspaceDf
    specialWorkspace: WorkspaceDf
    reserved: list[int]
    scale: float
    transform: int
    focused: bool
    disabled: bool


class CursorPosition(TypedDict):
    """Cursor position as returned by Hyprland."""

    x: int
    y: int


class Direction(Enum):
    """Activity cycling direction."""

    NEXT = 1
    PREV = -1


class AnimationKind(StrEnum):
    """Which animation profile a switch uses."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    ACTIVITY = "activity"


class ExitCode(IntEnum):
    """Standard exit codes for the pyprgrid CLI."""

    SUCCESS = 0
    USAGE_ERROR = 1  # No command provided, invalid arguments
    CONNECTION_ERROR = 3  # Cannot talk to Hyprland
    COMMAND_ERROR = 4  # Command execution failed


class PyprError(BaseException):
    """Used for errors which already triggered logging."""


class TransportError(PyprError):
    """The compositor could not be reached."""


class GridError(Exception):
    """Base class for workspace lookup failures."""


class NotInManagedWorkspace(GridError):
    """The active workspace is not part of any activity grid."""

    def __init__(self, workspace: str) -> None:
        super().__init__(f"not in a valid activity workspace: {workspace!r}")
        self.workspace = workspace


class ActivityNotFound(GridError):
    """No configured activity matches the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"activity not found: {name!r}")
        self.name = name


class WorkspaceNotFound(GridError):
    """The activity exists but the requested workspace does not."""

    def __init__(self, name: str) -> None:
        super().__init__(f"workspace not found: {name!r}")
        self.name = name
