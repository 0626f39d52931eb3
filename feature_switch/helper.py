"""
Environment-aware feature switches.

Call ``init()`` once at startup with the active environment and the
configuration, then ask ``is_feature_enabled(name)`` anywhere:

    import feature_switch

    feature_switch.init("uat", raw_config)
    if feature_switch.is_feature_enabled("new-checkout"):
        ...

The resolution index is built once during ``init()`` and never changes.
There is no way back to the uninitialized state.
"""
from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional

from feature_switch import config as defaults
from feature_switch.config_loader import load_config
from feature_switch.dto import to_config
from feature_switch.environment import Environment
from feature_switch.errors import (
    AlreadyInitializedError,
    NotInitializedError,
    UndefinedFeatureError,
)
from feature_switch.logger import Logger, StdLogger
from feature_switch.models import FeatureDefinition, FeatureSwitchConfiguration
from feature_switch.resolution import partition, resolve

_log = logging.getLogger(__name__)

_INSTANCE: Optional["FeatureSwitch"] = None


class FeatureSwitch:
    """A validated configuration resolved against one environment."""

    def __init__(
        self,
        environment: Environment | str,
        config: FeatureSwitchConfiguration | Mapping[str, Any],
        logger: Optional[Logger] = None,
    ):
        self._environment = Environment.parse(environment)
        self._config = to_config(config)
        self._logger = logger or StdLogger()
        self._index = resolve(self._config.features, self._environment)

        self._logger.log(f"Current Environment: {self._environment.value}")
        enabled, disabled = partition(self._index)
        self._logger.log(f"Enabled Features: {json.dumps(enabled, indent=2)}")
        self._logger.log(f"Disabled Features: {json.dumps(disabled, indent=2)}")

    @property
    def environment(self) -> Environment:
        return self._environment

    @property
    def config(self) -> FeatureSwitchConfiguration:
        return self._config

    @property
    def index(self) -> Mapping[str, bool]:
        return self._index

    @property
    def logger(self) -> Logger:
        return self._logger

    def is_feature_enabled(self, feature_name: str) -> bool:
        """
        Return whether ``feature_name`` is on in this environment.

        Unknown names raise UndefinedFeatureError when the configuration asks
        for strict lookups; otherwise they log a warning and return False.
        """
        is_enabled = self._index.get(feature_name)
        if is_enabled is None:
            error = UndefinedFeatureError(feature_name)
            if self._config.strict:
                raise error
            self._logger.warn(str(error))
            return False
        if is_enabled:
            self._logger.log(f'Feature "{feature_name}" is used.')
        else:
            self._logger.log(f'Feature "{feature_name}" is skipped.')
        return is_enabled

    def get_feature_def(self, feature_name: str) -> Optional[FeatureDefinition]:
        return self._config.features.get(feature_name)

    def enabled_features(self) -> list[str]:
        return partition(self._index)[0]

    def disabled_features(self) -> list[str]:
        return partition(self._index)[1]


def init(
    environment: Environment | str,
    config: FeatureSwitchConfiguration | Mapping[str, Any],
    *,
    logger: Optional[Logger] = None,
    ignore_multiple_init: bool = False,
) -> FeatureSwitch:
    """
    Initialize the process-wide feature switches.

    Args:
        environment: Active environment (enum member or its name).
        config: A FeatureSwitchConfiguration or the raw dict form.
        logger: Object with ``log``/``warn``; defaults to StdLogger.
        ignore_multiple_init: Warn and keep the first instance instead of
            raising when called again.

    Returns:
        The active FeatureSwitch handle.

    Raises:
        AlreadyInitializedError: on a second call without ignore_multiple_init.
        ValidationError: if the environment or configuration is invalid.
    """
    global _INSTANCE
    if _INSTANCE is not None:
        error = AlreadyInitializedError()
        if ignore_multiple_init:
            _INSTANCE.logger.warn(error)
            return _INSTANCE
        raise error

    _INSTANCE = FeatureSwitch(environment, config, logger=logger)
    _log.debug("Feature switches initialized for %s", _INSTANCE.environment.value)
    return _INSTANCE


def init_from_file(
    environment: Environment | str | None = None,
    path: str | Path | None = None,
    **options,
) -> FeatureSwitch:
    """``init()`` with the configuration read from a JSON/YAML file."""
    if environment is None:
        environment = defaults.default_environment()
    raw = load_config(path or defaults.DEFAULT_CONFIG_PATH)
    return init(environment, raw, **options)


def get_instance() -> FeatureSwitch:
    if _INSTANCE is None:
        raise NotInitializedError()
    return _INSTANCE


def is_feature_enabled(feature_name: str) -> bool:
    return get_instance().is_feature_enabled(feature_name)


def get_feature_def(feature_name: str) -> Optional[FeatureDefinition]:
    return get_instance().get_feature_def(feature_name)


class FeatureSwitchHelper:
    """Class-style entry points over the module-level functions."""

    init = staticmethod(init)
    init_from_file = staticmethod(init_from_file)
    is_feature_enabled = staticmethod(is_feature_enabled)
    get_feature_def = staticmethod(get_feature_def)
    get_instance = staticmethod(get_instance)
