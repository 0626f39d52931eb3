"""Logger collaborator used by the feature switch helper."""
from __future__ import annotations

import logging
from typing import Protocol


class Logger(Protocol):
    def log(self, message: str) -> None: ...

    def warn(self, message: str | Exception) -> None: ...


class StdLogger:
    """Default logger: forwards ``log`` to INFO and ``warn`` to WARNING."""

    def __init__(self, name: str = "feature_switch"):
        self._logger = logging.getLogger(name)

    def log(self, message: str) -> None:
        self._logger.info(message)

    def warn(self, message: str | Exception) -> None:
        self._logger.warning("%s", message)
