"""
Console output for the ``feature_switch`` logger.

The library logs through ``logging.getLogger("feature_switch")`` and never
touches the root logger. Applications that already configure logging need
nothing from this module; others can call:

    from feature_switch.logging_config import setup_logging
    setup_logging()  # before feature_switch.init()
"""

import logging
import sys
from datetime import datetime

LOGGER_NAME = "feature_switch"


class SwitchFormatter(logging.Formatter):
    """``HH:MM:SS [feature_switch] LEVEL: message``, yellow/red for problems."""

    COLORS = {
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
    }
    RESET = "\033[0m"

    def __init__(self, color: bool = True):
        super().__init__()
        self.color = color

    def format(self, record):
        timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
        line = f"{timestamp} [{record.name}] {record.levelname}: {record.getMessage()}"
        color = self.COLORS.get(record.levelname) if self.color else None
        return f"{color}{line}{self.RESET}" if color else line


class _SwitchHandler(logging.StreamHandler):
    pass


def setup_logging(level: str = "INFO", stream=None, color: bool = None) -> logging.Logger:
    """
    Send feature switch messages to a console stream.

    Calling it again replaces the handler installed by the previous call;
    handlers added by the application are left alone.

    Args:
        level: Minimum log level ("DEBUG", "INFO", "WARNING", "ERROR")
        stream: Output stream, defaults to stdout
        color: Colorize warnings; defaults to whether the stream is a TTY
    """
    stream = stream or sys.stdout
    if color is None:
        color = hasattr(stream, "isatty") and stream.isatty()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    for handler in [h for h in logger.handlers if isinstance(h, _SwitchHandler)]:
        logger.removeHandler(handler)

    handler = _SwitchHandler(stream)
    handler.setFormatter(SwitchFormatter(color=color))
    logger.addHandler(handler)
    # already printed here; keep it out of the application's root handlers
    logger.propagate = False
    return logger
