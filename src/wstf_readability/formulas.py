"""
Coefficient tables and evaluation for the four Wiener Sachtextformel variants.

See https://de.wikipedia.org/wiki/Lesbarkeitsindex#Wiener_Sachtextformel
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

from .errors import InvalidVariant
from .models import ReadabilityMetrics


class FormulaVariant(str, Enum):
    WSTF1 = "WSTF1"
    WSTF2 = "WSTF2"
    WSTF3 = "WSTF3"
    WSTF4 = "WSTF4"


@dataclass(frozen=True, slots=True)
class FormulaCoefficients:
    """Linear regression weights applied to MS, SL, IW and ES."""

    ms: float
    sl: float
    iw: float = 0.0
    es: float = 0.0
    intercept: float = 0.0


COEFFICIENTS: Dict[FormulaVariant, FormulaCoefficients] = {
    FormulaVariant.WSTF1: FormulaCoefficients(
        ms=0.1935, sl=0.1672, iw=0.1297, es=-0.0327, intercept=-0.875
    ),
    FormulaVariant.WSTF2: FormulaCoefficients(
        ms=0.2007, sl=0.1682, iw=0.1373, intercept=-2.779
    ),
    FormulaVariant.WSTF3: FormulaCoefficients(ms=0.2963, sl=0.1905, intercept=-1.1144),
    FormulaVariant.WSTF4: FormulaCoefficients(ms=0.2744, sl=0.2656, intercept=-1.693),
}

# WSTF values read roughly as German school grades.
MIN_GRADE = 4
MAX_GRADE = 15


def parse_variant(value: Any) -> FormulaVariant:
    """
    Resolve a formula selector.

    Accepts a FormulaVariant, a case-insensitive name such as "wstf2", or an
    integer between 1 and 4. Everything else raises InvalidVariant.
    """
    if isinstance(value, FormulaVariant):
        return value
    if isinstance(value, bool):
        raise InvalidVariant(f"Unknown readability formula {value!r}.")
    if isinstance(value, int):
        if 1 <= value <= len(FormulaVariant):
            return list(FormulaVariant)[value - 1]
        raise InvalidVariant(f"Unknown readability formula {value!r}.")
    if isinstance(value, str):
        normalized = value.strip().upper()
        try:
            return FormulaVariant(normalized)
        except ValueError as exc:
            raise InvalidVariant(f"Unknown readability formula {value!r}.") from exc
    raise InvalidVariant(f"Unknown readability formula {value!r}.")


def evaluate_formula(variant: FormulaVariant, metrics: ReadabilityMetrics) -> float:
    """Evaluate one variant against document-level metrics. No rounding is applied."""
    coefficients = COEFFICIENTS[parse_variant(variant)]
    return float(
        coefficients.ms * metrics.ms
        + coefficients.sl * metrics.sl
        + coefficients.iw * metrics.iw
        + coefficients.es * metrics.es
        + coefficients.intercept
    )


def interpret_score(score: float) -> int:
    """Map a WSTF value onto the school grade band it approximates."""
    return int(min(MAX_GRADE, max(MIN_GRADE, round(score))))
