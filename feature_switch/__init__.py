"""
feature_switch - environment-aware feature toggles.

Initialize once with an environment and a configuration, then query
``is_feature_enabled(name)`` for the rest of the process lifetime.
"""

from feature_switch.environment import Environment
from feature_switch.errors import (
    AlreadyInitializedError,
    ConfigFileError,
    FeatureSwitchError,
    NotInitializedError,
    UndefinedFeatureError,
    ValidationError,
)
from feature_switch.helper import (
    FeatureSwitch,
    FeatureSwitchHelper,
    get_feature_def,
    get_instance,
    init,
    init_from_file,
    is_feature_enabled,
)
from feature_switch.models import (
    FeatureDefinition,
    FeatureSwitchConfiguration,
    ValidationOptions,
)

__version__ = "0.1.0"

__all__ = [
    "AlreadyInitializedError",
    "ConfigFileError",
    "Environment",
    "FeatureDefinition",
    "FeatureSwitch",
    "FeatureSwitchConfiguration",
    "FeatureSwitchError",
    "FeatureSwitchHelper",
    "NotInitializedError",
    "UndefinedFeatureError",
    "ValidationError",
    "ValidationOptions",
    "get_feature_def",
    "get_instance",
    "init",
    "init_from_file",
    "is_feature_enabled",
]
