"""
Feature resolution.

A feature is on when it is force-enabled, or when the active environment's
flag is set. Production has no flag of its own: a feature only reaches
production through ``is_force_enabled``.
"""
from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from feature_switch.environment import Environment
from feature_switch.models import FeatureDefinition


def is_enabled_in(definition: FeatureDefinition, environment: Environment) -> bool:
    return (
        definition.is_force_enabled
        or (environment is Environment.DEVELOPMENT and definition.is_dev_feature)
        or (environment is Environment.TEST and definition.is_test_feature)
        or (environment is Environment.UAT and definition.is_uat_feature)
    )


def resolve(
    features: Mapping[str, FeatureDefinition], environment: Environment
) -> Mapping[str, bool]:
    """Return a read-only name -> enabled index with one entry per feature."""
    return MappingProxyType(
        {name: is_enabled_in(definition, environment) for name, definition in features.items()}
    )


def partition(index: Mapping[str, bool]) -> tuple[list[str], list[str]]:
    """Split a resolution index into sorted (enabled, disabled) name lists."""
    enabled = sorted(name for name, on in index.items() if on)
    disabled = sorted(name for name, on in index.items() if not on)
    return enabled, disabled
