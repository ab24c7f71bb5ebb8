"""
src/analytics/compliance.py
───────────────────────────
Water-chemistry compliance evaluation.

Provides:
  - evaluate()       : readings vs. range table → compliance verdict + violations
  - recommend()      : corrective chemical actions for out-of-range readings
  - active_ranges()  : facility rules, or the MAHC default when none configured

All bounds are inclusive and compared exactly (no tolerance). Both
functions are total: a parameter without a reading or without a bound is
skipped rather than reported.
"""

from __future__ import annotations

import logging

from config.standards import (
    ALKALINITY,
    CALCIUM_HARDNESS,
    CHLORINE,
    MAHC_STANDARD,
    PH,
    Parameter,
)
from src.analytics.formatting import fmt_number, fmt_range
from src.data.models import ComplianceResult, ComplianceRules, Range, RangeTable, ReadingSet

logger = logging.getLogger(__name__)

DEFAULT_RANGES = RangeTable.model_validate(MAHC_STANDARD)

# Cyanuric acid and temperature are recorded and carry bounds, but are not
# part of the compliance verdict.
CHECKED_PARAMETERS: tuple[Parameter, ...] = (PH, CHLORINE, ALKALINITY, CALCIUM_HARDNESS)

# (parameter, advice when below min, advice when above max)
_ADVICE: tuple[tuple[Parameter, str, str], ...] = (
    (
        PH,
        "pH is too low. Add soda ash or sodium carbonate to increase pH.",
        "pH is too high. Add muriatic acid or sodium bisulfate to lower pH.",
    ),
    (
        CHLORINE,
        "Chlorine is too low. Add chlorine to increase sanitizer levels.",
        "Chlorine is too high. Dilute or allow time for chlorine to dissipate.",
    ),
    (
        ALKALINITY,
        "Alkalinity is too low. Add sodium bicarbonate to increase alkalinity.",
        "Alkalinity is too high. Add muriatic acid to lower alkalinity.",
    ),
)


def active_ranges(rules: ComplianceRules | None) -> RangeTable:
    """Range table in force for a facility."""
    if rules is None:
        return DEFAULT_RANGES
    return rules.pool_testing_ranges


def _with_unit(value: float, param: Parameter) -> str:
    return f"{fmt_number(value)} {param.unit}" if param.unit else fmt_number(value)


def _violation(param: Parameter, value: float, bound: Range) -> str:
    span = fmt_range(bound.min, bound.max)
    if param.unit:
        span = f"{span} {param.unit}"
    return f"{param.label} {_with_unit(value, param)} is outside range {span}"


def evaluate(readings: ReadingSet, ranges: RangeTable) -> ComplianceResult:
    """
    Check readings against a range table.

    Violations are listed in the fixed order pH, chlorine, alkalinity,
    calcium hardness, one entry per out-of-range parameter.
    """
    violations: list[str] = []
    for param in CHECKED_PARAMETERS:
        value: float | None = getattr(readings, param.key)
        bound: Range | None = getattr(ranges, param.key)
        if value is None or bound is None:
            continue
        if value < bound.min or value > bound.max:
            violations.append(_violation(param, value, bound))

    logger.debug("Evaluated readings: %d violation(s)", len(violations))
    return ComplianceResult(is_compliant=not violations, violations=violations)


def recommend(readings: ReadingSet, ranges: RangeTable | None = None) -> list[str]:
    """
    Corrective actions for pH, chlorine and alkalinity (in that order).

    At most one recommendation per parameter. Falls back to the MAHC
    default table when no ranges are given.
    """
    table = ranges if ranges is not None else DEFAULT_RANGES
    recommendations: list[str] = []
    for param, too_low, too_high in _ADVICE:
        value: float | None = getattr(readings, param.key)
        if value is None:
            continue
        bound: Range = getattr(table, param.key)
        if value < bound.min:
            recommendations.append(too_low)
        elif value > bound.max:
            recommendations.append(too_high)
    return recommendations
