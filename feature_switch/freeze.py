"""
Deep-freeze helper.

Turns nested containers into their read-only counterparts so a configuration
cannot be changed once it has been loaded:

    dict / Mapping  -> types.MappingProxyType
    list / tuple    -> tuple
    set / frozenset -> frozenset

Anything else (scalars, frozen pydantic models) is returned as-is. Writing to
a frozen mapping raises TypeError.
"""

from collections.abc import Mapping, Set
from types import MappingProxyType
from typing import Any


def deep_freeze(value: Any) -> Any:
    """Return a recursively read-only view of ``value``."""
    if isinstance(value, Mapping):
        return MappingProxyType({k: deep_freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(deep_freeze(v) for v in value)
    if isinstance(value, Set):
        return frozenset(deep_freeze(v) for v in value)
    return value
