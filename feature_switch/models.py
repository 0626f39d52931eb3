"""
Configuration model for feature switches.

Raw configuration looks like this (JSON shown, YAML works the same way):

    {
      "features": {
        "new-checkout": {
          "isForceEnabled": false,
          "isDevFeature": true,
          "isTestFeature": true,
          "isUatFeature": false
        }
      },
      "validationOptions": {
        "shouldNotUseUndefinedFeatureSwitches": true
      }
    }

Keys are camelCase on the wire and snake_case on the models; both spellings
are accepted on input. Every model is frozen and the ``features`` mapping is
deep-frozen after validation, so a configuration never changes once built.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    StrictBool,
    StrictStr,
    field_serializer,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from feature_switch.freeze import deep_freeze


class _FrozenModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )


class FeatureDefinition(_FrozenModel):
    """One feature and the environments it is switched on for."""

    name: StrictStr
    is_force_enabled: StrictBool
    is_dev_feature: StrictBool
    is_test_feature: StrictBool
    is_uat_feature: StrictBool


class ValidationOptions(_FrozenModel):
    should_not_use_undefined_feature_switches: StrictBool


class FeatureSwitchConfiguration(_FrozenModel):
    features: Mapping[str, FeatureDefinition]
    validation_options: ValidationOptions

    @model_validator(mode="before")
    @classmethod
    def _name_features_by_key(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        features = data.get("features")
        if not isinstance(features, Mapping):
            return data
        named = {}
        for key, body in features.items():
            if isinstance(body, Mapping) and "name" not in body:
                body = {"name": key, **body}
            named[key] = body
        return {**data, "features": named}

    @field_validator("features")
    @classmethod
    def _check_names_and_freeze(cls, features: Mapping[str, FeatureDefinition]):
        for key, definition in features.items():
            if definition.name != key:
                raise ValueError(
                    f'feature key "{key}" does not match its name "{definition.name}"'
                )
        return deep_freeze(features)

    @field_serializer("features")
    def _serialize_features(self, features, info):
        by_alias = bool(info.by_alias)
        return {name: d.model_dump(by_alias=by_alias) for name, d in features.items()}

    # mappingproxy is neither hashable nor picklable
    def __hash__(self) -> int:
        return hash((tuple(self.features.items()), self.validation_options))

    def __deepcopy__(self, memo=None):
        return self

    def __getstate__(self):
        state = super().__getstate__()
        state["__dict__"] = {**state["__dict__"], "features": dict(self.features)}
        return state

    def __setstate__(self, state):
        state["__dict__"]["features"] = deep_freeze(state["__dict__"]["features"])
        super().__setstate__(state)

    @property
    def strict(self) -> bool:
        """True when looking up an undefined feature must raise."""
        return self.validation_options.should_not_use_undefined_feature_switches
