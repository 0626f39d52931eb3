"""Deployment environments a process can run in."""
from __future__ import annotations

from enum import Enum

from feature_switch.errors import ValidationError


class Environment(str, Enum):
    DEVELOPMENT = "development"
    TEST = "test"
    UAT = "uat"
    PRODUCTION = "production"

    @classmethod
    def parse(cls, value: "Environment | str") -> "Environment":
        """Return the Environment for an enum member or a case-insensitive name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        allowed = ", ".join(e.value for e in cls)
        raise ValidationError(f"Unknown environment {value!r}. Use one of: {allowed}.")

    def __str__(self) -> str:
        return self.value
