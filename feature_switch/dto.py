"""Coerce plain dicts (parsed JSON/YAML) into a FeatureSwitchConfiguration."""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any

import pydantic

from feature_switch.errors import ValidationError
from feature_switch.models import FeatureSwitchConfiguration

logger = logging.getLogger(__name__)


def _describe(errors: list[dict]) -> str:
    lines = []
    for err in errors:
        loc = ".".join(str(part) for part in err.get("loc", ())) or "<root>"
        lines.append(f"  {loc}: {err.get('msg')}")
    return "\n".join(lines)


def to_config(raw: FeatureSwitchConfiguration | Any) -> FeatureSwitchConfiguration:
    """
    Return a validated, frozen configuration.

    Args:
        raw: Either a FeatureSwitchConfiguration or a plain mapping in the
            wire format. A typed config whose features are already frozen is
            returned unchanged; one derived with ``model_copy(update=...)``
            skipped validation and is rebuilt.

    Raises:
        ValidationError: if required fields are missing or mistyped.
    """
    if isinstance(raw, FeatureSwitchConfiguration):
        if isinstance(raw.features, MappingProxyType):
            return raw
        raw = {
            "features": raw.features,
            "validation_options": raw.validation_options,
        }
    try:
        return FeatureSwitchConfiguration.model_validate(raw)
    except pydantic.ValidationError as e:
        errors = e.errors()
        logger.debug("Configuration rejected with %d error(s)", len(errors))
        raise ValidationError(
            f"Invalid feature switch configuration ({len(errors)} error(s)):\n{_describe(errors)}",
            errors=errors,
        ) from e
