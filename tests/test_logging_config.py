"""Tests for logging_config.py module."""

import io
import logging

import colorlog
import pytest

from twitch_chatline.logging_config import (
    LoggerConfigurator,
    build_formatter,
    debug_level_from_env,
)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    chat = logging.getLogger("twitch_chatline")
    handlers, level, chat_level = root.handlers[:], root.level, chat.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    chat.setLevel(chat_level)


def _record(level: int) -> logging.LogRecord:
    return logging.LogRecord(
        name="test", level=level, pathname="", lineno=0, msg="test", args=(), exc_info=None
    )


def test_formatter_is_colorlog():
    assert isinstance(build_formatter(), colorlog.ColoredFormatter)


def test_formatter_info_color():
    formatted = build_formatter().format(_record(logging.INFO))
    assert "\033[32m" in formatted  # Green color code
    assert "INFO" in formatted
    assert "test" in formatted


def test_formatter_error_colors_message_too():
    formatted = build_formatter().format(_record(logging.ERROR))
    assert formatted.count("\033[31m") >= 2


@pytest.mark.parametrize("value", ["true", "1", "YES"])
def test_debug_level_from_env_enabled(monkeypatch, value):
    monkeypatch.setenv("DEBUG", value)
    assert debug_level_from_env() == logging.DEBUG


def test_debug_level_from_env_default(monkeypatch):
    monkeypatch.delenv("DEBUG", raising=False)
    assert debug_level_from_env() == logging.INFO


def test_configure_installs_colored_handler(restore_root_logger, monkeypatch):
    monkeypatch.delenv("DEBUG", raising=False)
    stream = io.StringIO()
    level = LoggerConfigurator({"stream": stream}).configure()
    root = logging.getLogger()
    assert level == logging.INFO
    assert root.level == logging.INFO
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, colorlog.ColoredFormatter)
    logging.getLogger("some.library").warning("careful")
    assert "careful" in stream.getvalue()


def test_configure_explicit_level(restore_root_logger):
    level = LoggerConfigurator({"level": logging.DEBUG, "stream": io.StringIO()}).configure()
    assert level == logging.DEBUG
    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("asyncio").level == logging.INFO
