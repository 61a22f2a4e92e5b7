" generic fixtures "
import logging
from copy import deepcopy
from unittest.mock import AsyncMock

import pytest

from pyprgrid.config import Configuration
from pyprgrid.schema import CONFIG_SCHEMA


def pytest_configure():
    "Runs once before all"
    from pyprgrid.logging_setup import init_logger

    init_logger("/dev/null", force_debug=True)


@pytest.fixture
def test_logger():
    return logging.getLogger("pyprgrid.tests")


def make_config(logger, **values):
    "Configuration with the real schema defaults"
    return Configuration(values, logger=logger, schema=CONFIG_SCHEMA)


MONITOR = {
    "id": 0,
    "name": "DP-1",
    "description": "Microstep MAG342CQPV DB6H513700137 (DP-1)",
    "width": 1920,
    "height": 1080,
    "refreshRate": 59.99900,
    "x": 0,
    "y": 0,
    "activeWorkspace": {"id": 1, "name": "default:1"},
    "specialWorkspace": {"id": 0, "name": ""},
    "reserved": [0, 0, 0, 0],
    "scale": 1.00,
    "transform": 0,
    "focused": True,
    "disabled": False,
}


class FakeBackend:
    """Records what a component sends to Hyprland.

    Mimics the `BackendProxy` interface, `workspace` is what
    `get_active_workspace` returns and follows the switches.
    """

    def __init__(self, log, workspace="default:1"):
        self.log = log
        self.workspace = workspace
        self.cursor = {"x": 500, "y": 500}
        self.monitor = deepcopy(MONITOR)
        self.switch_workspace = AsyncMock(side_effect=self._switch)
        self.move_cursor = AsyncMock(return_value=True)
        self.set_keyword = AsyncMock(return_value=True)
        self.execute = AsyncMock(return_value=True)

    async def _switch(self, name, move_window=False):
        self.workspace = name
        return True

    async def get_active_workspace(self):
        return self.workspace

    async def get_cursor_position(self):
        return dict(self.cursor)

    async def get_monitor_props(self):
        return self.monitor

    def parse_event(self, raw_data):
        if ">>" not in raw_data:
            return None
        cmd, params = raw_data.split(">>", 1)
        return f"event_{cmd}", params.rstrip("\n")


@pytest.fixture
def backend(test_logger):
    return FakeBackend(test_logger)
