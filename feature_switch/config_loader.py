"""Read raw feature switch configuration from JSON or YAML files."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

import yaml

from feature_switch.errors import ConfigFileError

_YAML_SUFFIXES = {".yaml", ".yml"}


def load_config(path: str | Path) -> Dict[str, Any]:
    """
    Return the raw (unvalidated) configuration stored at ``path``.

    The format is chosen by suffix: ``.json`` or ``.yaml``/``.yml``.
    Validation is left to ``feature_switch.dto.to_config``.
    """
    path = Path(path)
    if not path.exists():
        raise ConfigFileError(f"Feature switch config not found: {path}")

    suffix = path.suffix.lower()
    with path.open("r", encoding="utf-8") as f:
        try:
            if suffix == ".json":
                raw = json.load(f)
            elif suffix in _YAML_SUFFIXES:
                raw = yaml.safe_load(f) or {}
            else:
                raise ConfigFileError(
                    f"Unsupported config format '{suffix}' for {path}. "
                    "Use .json, .yaml or .yml."
                )
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigFileError(f"Could not parse {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigFileError(
            f"{path} must contain a mapping at the top level, got {type(raw).__name__}."
        )
    return raw
