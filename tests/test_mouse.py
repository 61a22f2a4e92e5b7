import asyncio

import pytest

from pyprgrid.animations import AnimationSelector
from pyprgrid.grid import build_grid
from pyprgrid.mouse import EdgeHit, MouseLoop, detect_edges

from .conftest import MONITOR, make_config


def test_detect_edges_left():
    hit = detect_edges({"x": 2, "y": 500}, MONITOR, edge_width=5, edge_margin=2)
    assert hit == EdgeHit(dx=-1, dy=0, x=1918, y=500)


def test_detect_edges_right_and_bottom():
    assert detect_edges({"x": 1919, "y": 500}, MONITOR, 0, 2) == EdgeHit(1, 0, 2, 500)
    assert detect_edges({"x": 1000, "y": 1079}, MONITOR, 0, 2) == EdgeHit(0, 1, 1000, 2)
    assert detect_edges({"x": 1000, "y": 0}, MONITOR, 0, 2) == EdgeHit(0, -1, 1000, 1078)


def test_detect_edges_corner():
    assert detect_edges({"x": 0, "y": 1079}, MONITOR, 0, 10) == EdgeHit(-1, 1, 1910, 10)


def test_detect_edges_idle():
    assert detect_edges({"x": 1, "y": 500}, MONITOR, 0, 2) is None
    assert detect_edges({"x": 960, "y": 540}, MONITOR, 0, 2) is None


def test_detect_edges_offset_and_scale():
    monitor = dict(MONITOR, x=1920, y=0, width=3840, height=2160, scale=2.0)
    assert detect_edges({"x": 1921, "y": 500}, monitor, 2, 2) == EdgeHit(-1, 0, 3838, 500)
    assert detect_edges({"x": 3839, "y": 500}, monitor, 0, 2) == EdgeHit(1, 0, 1922, 500)
    assert detect_edges({"x": 2500, "y": 500}, monitor, 0, 2) is None


def test_detect_edges_rotated():
    monitor = dict(MONITOR, transform=1)
    assert detect_edges({"x": 1079, "y": 500}, monitor, 0, 2) == EdgeHit(1, 0, 2, 500)
    assert detect_edges({"x": 500, "y": 1919}, monitor, 0, 2) == EdgeHit(0, 1, 500, 2)
    assert detect_edges({"x": 500, "y": 1079}, monitor, 0, 2) is None
    flipped = dict(MONITOR, transform=2)
    assert detect_edges({"x": 1919, "y": 500}, flipped, 0, 2) == EdgeHit(1, 0, 2, 500)


@pytest.fixture
def mouse_loop(test_logger, backend):
    config = make_config(
        test_logger,
        activities=["work", "home"],
        workspace_switch_animation_curve="overshot",
        workspace_horizontal_switch_animation_style="slide",
        workspace_vertical_switch_animation_style="slidevert",
        polling_rate=10,
        edge_width=5,
    )
    backend.workspace = "work:5"
    return MouseLoop(build_grid(["work", "home"]), config, backend, AnimationSelector(config, backend))


def test_loop_settings(mouse_loop):
    assert mouse_loop.polling_rate == 0.01
    assert mouse_loop.edge_width == 5
    assert mouse_loop.edge_margin == 2


@pytest.mark.asyncio
async def test_tick_idle(mouse_loop, backend):
    assert await mouse_loop.tick(MONITOR) is False
    backend.switch_workspace.assert_not_awaited()
    backend.move_cursor.assert_not_awaited()


@pytest.mark.asyncio
async def test_tick_left_edge(mouse_loop, backend):
    backend.cursor = {"x": 2, "y": 500}
    assert await mouse_loop.tick(MONITOR) is True
    backend.set_keyword.assert_awaited_once_with("animation workspaces,1,6,overshot,slide")
    backend.switch_workspace.assert_awaited_once_with("work:4")
    backend.move_cursor.assert_awaited_once_with(1918, 500)


@pytest.mark.asyncio
async def test_tick_wraps(mouse_loop, backend):
    backend.workspace = "home:3"
    backend.cursor = {"x": 1919, "y": 1079}
    assert await mouse_loop.tick(MONITOR) is True
    # diagonal: horizontal animation wins
    backend.set_keyword.assert_awaited_once_with("animation workspaces,1,6,overshot,slide")
    backend.switch_workspace.assert_awaited_once_with("home:4")
    backend.move_cursor.assert_awaited_once_with(2, 2)


@pytest.mark.asyncio
async def test_tick_vertical(mouse_loop, backend):
    backend.cursor = {"x": 500, "y": 0}
    assert await mouse_loop.tick(MONITOR) is True
    backend.set_keyword.assert_awaited_once_with("animation workspaces,1,6,overshot,slidevert")
    backend.switch_workspace.assert_awaited_once_with("work:2")


@pytest.mark.asyncio
async def test_tick_unmanaged(mouse_loop, backend):
    backend.workspace = "music"
    backend.cursor = {"x": 0, "y": 500}
    assert await mouse_loop.tick(MONITOR) is False
    backend.switch_workspace.assert_not_awaited()


@pytest.mark.asyncio
async def test_tick_single_column(test_logger, backend):
    config = make_config(test_logger, workspaces=[1, 3])
    loop = MouseLoop(build_grid(["default"], 1, 3), config, backend, AnimationSelector(config, backend))
    backend.cursor = {"x": 0, "y": 500}
    assert await loop.tick(MONITOR) is False
    backend.switch_workspace.assert_not_awaited()


@pytest.mark.asyncio
async def test_run_moves_to_grid(mouse_loop, backend):
    backend.workspace = "1"
    task = asyncio.create_task(mouse_loop.run())
    await asyncio.sleep(0.05)
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task
    backend.switch_workspace.assert_any_await("work:1")


@pytest.mark.asyncio
async def test_run_polls(mouse_loop, backend):
    backend.cursor = {"x": 1919, "y": 500}
    task = asyncio.create_task(mouse_loop.run())
    await asyncio.sleep(0.1)
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task
    # the cursor stays at the edge in this fake, so it keeps switching
    assert backend.switch_workspace.await_count >= 2
    assert backend.switch_workspace.await_args_list[0].args == ("work:6",)
