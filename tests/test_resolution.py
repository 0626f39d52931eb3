"""Tests for feature_switch/resolution.py -- the per-environment truth table."""

import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from feature_switch.environment import Environment
from feature_switch.errors import ValidationError
from feature_switch.models import FeatureDefinition
from feature_switch.resolution import is_enabled_in, partition, resolve


def _feature(name="f", force=False, dev=False, test=False, uat=False):
    return FeatureDefinition(
        name=name,
        is_force_enabled=force,
        is_dev_feature=dev,
        is_test_feature=test,
        is_uat_feature=uat,
    )


@pytest.mark.parametrize("env", list(Environment))
def test_force_enabled_is_on_everywhere(env):
    assert is_enabled_in(_feature(force=True), env) is True


@pytest.mark.parametrize(
    "env, flag",
    [
        (Environment.DEVELOPMENT, "dev"),
        (Environment.TEST, "test"),
        (Environment.UAT, "uat"),
    ],
)
def test_environment_flag_controls_result(env, flag):
    """Without force, only the active environment's flag matters."""
    assert is_enabled_in(_feature(**{flag: True}), env) is True
    assert is_enabled_in(_feature(**{flag: False}), env) is False

    others = {"dev", "test", "uat"} - {flag}
    only_others = _feature(**{name: True for name in others})
    assert is_enabled_in(only_others, env) is False


def test_production_ignores_environment_flags():
    """Production is reachable only through is_force_enabled."""
    every_flag = _feature(dev=True, test=True, uat=True)
    assert is_enabled_in(every_flag, Environment.PRODUCTION) is False


def test_resolve_has_same_keys_as_input():
    features = {
        "a": _feature("a", force=True),
        "b": _feature("b", dev=True),
        "c": _feature("c", uat=True),
    }
    index = resolve(features, Environment.DEVELOPMENT)
    assert set(index) == set(features)
    assert dict(index) == {"a": True, "b": True, "c": False}


def test_resolve_empty():
    assert dict(resolve({}, Environment.TEST)) == {}


def test_resolve_index_is_read_only():
    index = resolve({"a": _feature("a")}, Environment.TEST)
    with pytest.raises(TypeError):
        index["a"] = True


def test_partition_sorts_names():
    enabled, disabled = partition({"zeta": True, "alpha": True, "mid": False})
    assert enabled == ["alpha", "zeta"]
    assert disabled == ["mid"]


def test_environment_parse_accepts_names():
    assert Environment.parse("UAT") is Environment.UAT
    assert Environment.parse(" production ") is Environment.PRODUCTION
    assert Environment.parse(Environment.TEST) is Environment.TEST


def test_environment_parse_rejects_unknown():
    with pytest.raises(ValidationError, match="staging"):
        Environment.parse("staging")
    with pytest.raises(ValidationError):
        Environment.parse(None)
