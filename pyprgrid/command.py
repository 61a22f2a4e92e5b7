"""Command line entry point."""

from __future__ import annotations

import argparse
import asyncio
import pathlib
import sys

import shtab

from .adapters import HyprlandBackend
from .commands import GridCommands
from .config_loader import ConfigLoader
from .logging_setup import get_logger, init_logger
from .models import ExitCode, GridError, PyprError, TransportError
from .version import VERSION

__all__ = ["get_parser", "main", "run_command"]

TOML_FILE = {
    "bash": "_shtab_pyprgrid_compgen_TOMLFiles",
    "zsh": "_files -g '(*.toml|*.TOML)'",
    "tcsh": "f:*.toml",
}

PREAMBLE = {
    "bash": """
# $1=COMP_WORDS[1]
_shtab_pyprgrid_compgen_TOMLFiles() {
  compgen -d -- $1  # recurse into subdirs
  compgen -f -X '!*?.toml' -- $1
  compgen -f -X '!*?.TOML' -- $1
}
""",
    "zsh": "",
    "tcsh": "",
}

# Sub-command options, passed to the command handlers
COMMAND_OPTIONS = ("cycle", "move_window", "name")

_MOVES = {
    "move-left": "Focus the workspace on the left",
    "move-right": "Focus the workspace on the right",
    "move-up": "Focus the workspace above",
    "move-down": "Focus the workspace below",
    "next-activity": "Switch to the next activity",
    "prev-activity": "Switch to the previous activity",
}

_SWITCHES = {
    "switch-to-activity": ("activity", "Switch to an activity, keeping the position in the grid"),
    "switch-to-workspace": ("activity:workspace", "Switch to a workspace of any activity"),
    "switch-to-workspace-in-activity": ("workspace", "Switch to a workspace of the current activity"),
}


def _add_move_window(subparser: argparse.ArgumentParser) -> None:
    subparser.add_argument("-w", "--move-window", action="store_true", help="Take the focused window along")


def get_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(prog="pyprgrid", description="Activities and a workspace grid for Hyprland", allow_abbrev=False)
    parser.add_argument("--version", action="version", version=VERSION)
    parser.add_argument(
        "--debug",
        help="Enable debug mode and log to a file",
        metavar="filename",
    ).complete = shtab.FILE
    parser.add_argument(
        "--config",
        help="Use a different configuration file",
        metavar="filename",
        type=pathlib.Path,
    ).complete = TOML_FILE
    shtab.add_argument_to(parser, preamble=PREAMBLE)

    subparsers = parser.add_subparsers(dest="command")
    for name, help_text in _MOVES.items():
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("-c", "--cycle", action="store_true", help="Wrap around instead of stopping at the edges")
        _add_move_window(sub)
    for name, (metavar, help_text) in _SWITCHES.items():
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("-n", "--name", required=True, metavar=metavar, help="Destination name")
        _add_move_window(sub)
    subparsers.add_parser("mouse-loop", help="Switch workspaces when the mouse touches a screen edge")
    subparsers.add_parser("print-activity-status", help="Print the activity grid as JSON for status bars")
    return parser


async def run_command(args: argparse.Namespace) -> None:
    """Load the configuration and run the requested command."""
    config = await ConfigLoader(get_logger("config")).load(args.config or "")
    commands = GridCommands(config, HyprlandBackend())
    handler = getattr(commands, "run_" + args.command.replace("-", "_"))
    params = {k: v for k, v in vars(args).items() if k in COMMAND_OPTIONS}
    await handler(**params)


def main() -> None:
    """Run the command."""
    parser = get_parser()
    args = parser.parse_args()
    if args.debug:
        init_logger(filename=args.debug, force_debug=True)
    else:
        init_logger()
    log = get_logger()

    if not args.command:
        parser.print_usage(sys.stderr)
        sys.exit(ExitCode.USAGE_ERROR)

    try:
        asyncio.run(run_command(args))
    except KeyboardInterrupt:
        pass
    except GridError as e:
        log.error(str(e))  # noqa: TRY400
        sys.exit(ExitCode.COMMAND_ERROR)
    except TransportError:
        log.critical("Can't talk to Hyprland.")
        sys.exit(ExitCode.CONNECTION_ERROR)
    except PyprError:
        log.critical("Command failed.")
        sys.exit(ExitCode.COMMAND_ERROR)
    except Exception:  # pylint: disable=W0718
        log.critical("Unhandled exception:", exc_info=True)
        sys.exit(ExitCode.COMMAND_ERROR)


if __name__ == "__main__":
    main()
