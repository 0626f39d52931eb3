"""
Process-level defaults for the feature switch helper.

Both values can be overridden through environment variables.
"""

import os

from feature_switch.environment import Environment

# Environment used when the caller does not pass one explicitly
DEFAULT_ENVIRONMENT = os.environ.get("FEATURE_SWITCH_ENV", Environment.DEVELOPMENT.value)

# Config file read by init_from_file() when no path is given
DEFAULT_CONFIG_PATH = os.environ.get("FEATURE_SWITCH_CONFIG", "feature-switch.json")


def default_environment() -> Environment:
    return Environment.parse(DEFAULT_ENVIRONMENT)
