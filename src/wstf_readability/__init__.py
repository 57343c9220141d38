"""
wstf_readability package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import ReadabilityConfig, config_from_dict, config_from_yaml, load_config
from .engine import ReadabilityEngine, build_engine
from .errors import (
    EmptyInput,
    InvalidRequest,
    InvalidVariant,
    ReadabilityError,
    ResourceLoadError,
    UnsupportedLanguage,
)
from .formulas import FormulaVariant, evaluate_formula, parse_variant
from .languages import LanguageProfile, load_language_profile

__all__ = [
    "ReadabilityConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "ReadabilityEngine",
    "build_engine",
    "FormulaVariant",
    "evaluate_formula",
    "parse_variant",
    "LanguageProfile",
    "load_language_profile",
    "ReadabilityError",
    "UnsupportedLanguage",
    "InvalidVariant",
    "EmptyInput",
    "ResourceLoadError",
    "InvalidRequest",
]

__version__ = "0.1.0"
