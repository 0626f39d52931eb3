"""Tests for feature_switch/logging_config.py."""

import io
import logging
import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from feature_switch.logger import StdLogger
from feature_switch.logging_config import LOGGER_NAME, SwitchFormatter, setup_logging


@pytest.fixture
def switch_logger():
    """Restore the feature_switch logger after each test."""
    logger = logging.getLogger(LOGGER_NAME)
    saved = list(logger.handlers), logger.level, logger.propagate
    yield logger
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])
    logger.propagate = saved[2]


def test_setup_logging_leaves_root_logger_alone(switch_logger):
    root = logging.getLogger()
    root_handlers, root_level = list(root.handlers), root.level

    setup_logging("DEBUG", stream=io.StringIO())

    assert root.handlers == root_handlers
    assert root.level == root_level
    assert switch_logger.level == logging.DEBUG
    assert switch_logger.propagate is False


def test_std_logger_output(switch_logger):
    stream = io.StringIO()
    setup_logging("INFO", stream=stream, color=False)

    StdLogger().log("Current Environment: uat")
    StdLogger().warn(RuntimeError("boom"))

    output = stream.getvalue()
    assert "[feature_switch] INFO: Current Environment: uat" in output
    assert "[feature_switch] WARNING: boom" in output
    assert "\033[" not in output


def test_repeat_call_replaces_only_own_handler(switch_logger):
    app_handler = logging.NullHandler()
    switch_logger.addHandler(app_handler)

    setup_logging(stream=io.StringIO())
    setup_logging(stream=io.StringIO())

    own = [h for h in switch_logger.handlers if isinstance(h.formatter, SwitchFormatter)]
    assert len(own) == 1
    assert app_handler in switch_logger.handlers


def test_warnings_colored_when_enabled(switch_logger):
    stream = io.StringIO()
    setup_logging(stream=stream, color=True)

    StdLogger().log("plain")
    StdLogger().warn("careful")

    lines = stream.getvalue().splitlines()
    assert not lines[0].startswith("\033[")
    assert lines[1].startswith(SwitchFormatter.COLORS["WARNING"])


def test_unknown_level_falls_back_to_info(switch_logger):
    setup_logging("chatty", stream=io.StringIO())
    assert switch_logger.level == logging.INFO
