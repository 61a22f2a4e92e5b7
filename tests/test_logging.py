import io
import logging

from pyprgrid.ansi import LogStyles, make_style, should_colorize
from pyprgrid.logging_setup import ColorFormatter, LogObjects, get_logger, is_debug


def test_should_colorize(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.setenv("FORCE_COLOR", "1")
    assert should_colorize() is False
    monkeypatch.delenv("NO_COLOR")
    assert should_colorize(io.StringIO()) is True
    monkeypatch.delenv("FORCE_COLOR")
    assert should_colorize(io.StringIO()) is False


def test_make_style():
    assert make_style("31", "1") == ("\x1b[31;1m", "\x1b[0m")
    assert make_style() == ("", "\x1b[0m")


def test_color_formatter():
    record = logging.LogRecord("grid", logging.ERROR, __file__, 1, "boom", None, None)
    prefix, suffix = make_style(*LogStyles.ERROR)
    assert ColorFormatter("%(message)s", colorize=True).format(record) == f"{prefix}boom{suffix}"
    assert ColorFormatter("%(message)s", colorize=False).format(record) == "boom"
    record.levelno = logging.INFO
    assert ColorFormatter("%(message)s", colorize=True).format(record) == "boom"


def test_get_logger():
    # conftest forces the debug mode
    assert is_debug()
    logger = get_logger("pyprgrid.test_logging")
    assert logger.level == logging.DEBUG
    assert logger.propagate is False
    assert all(handler in logger.handlers for handler in LogObjects.handlers)
