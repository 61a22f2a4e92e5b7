from unittest.mock import AsyncMock, Mock

import pytest

from pyprgrid import command
from pyprgrid.models import ActivityNotFound, ExitCode, PyprError, TransportError


@pytest.fixture
def parser():
    return command.get_parser()


def test_parse_moves(parser):
    args = parser.parse_args(["move-left", "--cycle", "-w"])
    assert args.command == "move-left"
    assert args.cycle is True
    assert args.move_window is True

    args = parser.parse_args(["next-activity"])
    assert args.cycle is False
    assert args.move_window is False


def test_parse_switches(parser):
    args = parser.parse_args(["switch-to-workspace-in-activity", "-n", "4"])
    assert args.name == "4"
    assert args.move_window is False
    with pytest.raises(SystemExit):
        parser.parse_args(["switch-to-activity"])
    with pytest.raises(SystemExit):
        parser.parse_args(["mouse-loop", "--cycle"])


def test_parse_globals(parser):
    args = parser.parse_args(["--config", "/tmp/x.toml", "print-activity-status"])
    assert args.debug is None
    assert str(args.config) == "/tmp/x.toml"
    args = parser.parse_args(["--debug", "/tmp/log", "mouse-loop"])
    assert args.debug == "/tmp/log"
    assert parser.parse_args([]).command is None


def test_every_command_has_a_handler(parser):
    from pyprgrid.commands import GridCommands

    subparsers = next(a for a in parser._actions if a.dest == "command")
    for name in subparsers.choices:
        assert callable(getattr(GridCommands, "run_" + name.replace("-", "_")))


@pytest.mark.asyncio
async def test_run_command(mocker, tmp_path):
    (tmp_path / "config.toml").write_text('activities = ["work"]\n', encoding="utf-8")
    commands = Mock()
    commands.run_switch_to_activity = AsyncMock()
    grid_commands = mocker.patch("pyprgrid.command.GridCommands", return_value=commands)

    args = command.get_parser().parse_args(["--config", str(tmp_path / "config.toml"), "switch-to-activity", "-n", "work", "-w"])
    await command.run_command(args)

    config = grid_commands.call_args.args[0]
    assert config.get_list("activities") == ["work"]
    commands.run_switch_to_activity.assert_awaited_once_with(name="work", move_window=True)


def run_main(monkeypatch, mocker, argv, error=None):
    monkeypatch.setattr("sys.argv", ["pyprgrid", *argv])
    run = mocker.patch("pyprgrid.command.run_command", new=AsyncMock(side_effect=error))
    with pytest.raises(SystemExit) as info:
        command.main()
    return run, info.value.code


def test_main_usage(monkeypatch, mocker):
    run, code = run_main(monkeypatch, mocker, [])
    assert code == ExitCode.USAGE_ERROR
    run.assert_not_called()


@pytest.mark.parametrize(
    ("error", "code"),
    [
        (ActivityNotFound("games"), ExitCode.COMMAND_ERROR),
        (TransportError(), ExitCode.CONNECTION_ERROR),
        (PyprError(), ExitCode.COMMAND_ERROR),
        (RuntimeError("no focused monitor"), ExitCode.COMMAND_ERROR),
    ],
)
def test_main_errors(monkeypatch, mocker, error, code):
    run, exit_code = run_main(monkeypatch, mocker, ["mouse-loop"], error)
    assert exit_code == code
    run.assert_awaited_once()


def test_main_success(monkeypatch, mocker):
    monkeypatch.setattr("sys.argv", ["pyprgrid", "move-up"])
    run = mocker.patch("pyprgrid.command.run_command", new=AsyncMock())
    command.main()
    run.assert_awaited_once()
