from __future__ import annotations

import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml

CONFIG_ENV_VAR = "WSTF_CONFIG"


@dataclass(slots=True)
class ReadabilityConfig:
    """Configuration options for building a readability engine."""

    language: str = "de"
    default_variant: str = "WSTF1"
    punkt_model_path: str | None = None
    hyphenation_path: str | None = None
    # Single-letter edge syllables are not split off at 2, e.g. "über" is one syllable.
    hyphenation_left_min: int = 2
    hyphenation_right_min: int = 2
    normalize_unicode: bool = True

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(ReadabilityConfig)}
    return {key: data[key] for key in data if key in allowed}


def config_from_dict(data: Mapping[str, Any] | None) -> ReadabilityConfig:
    """Build a ReadabilityConfig from a dictionary-like input."""
    if data is None:
        return ReadabilityConfig()
    return ReadabilityConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> ReadabilityConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> ReadabilityConfig:
    """
    Load configuration from YAML when provided, otherwise return defaults.

    Without an explicit path the file named by WSTF_CONFIG is used, if set.
    """
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR) or None
    if path is None:
        return ReadabilityConfig()
    return config_from_yaml(path)
