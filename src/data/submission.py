"""
src/data/submission.py
──────────────────────
Build log records at recording time.

Compliance verdicts and in-range flags are computed once, when a reading
is recorded, against the rules in force at that moment. The returned
records are frozen; later rule changes never alter them.
"""
from __future__ import annotations

import logging
from datetime import datetime

from src.analytics.compliance import active_ranges, evaluate, recommend
from src.data.models import (
    ChemicalAddition,
    ComplianceRules,
    PoolTestingLog,
    Range,
    ReadingSet,
    SaltLevelLog,
    TemperatureLog,
)

logger = logging.getLogger(__name__)


def in_range(value: float, target: Range) -> bool:
    return target.min <= value <= target.max


def record_pool_test(
    log_id: str,
    facility_id: str,
    readings: ReadingSet,
    rules: ComplianceRules | None,
    recorded_by: str,
    timestamp: datetime,
    recorded_by_name: str = "",
    chemicals_added: list[ChemicalAddition] | None = None,
    notes: str | None = None,
) -> PoolTestingLog:
    """Evaluate a pool test against the facility's active rules and freeze the result."""
    ranges = active_ranges(rules)
    result = evaluate(readings, ranges)
    recommendations = recommend(readings, ranges)

    if not result.is_compliant:
        logger.info(
            "Pool test %s at %s is non-compliant: %s",
            log_id,
            facility_id,
            "; ".join(result.violations),
        )

    return PoolTestingLog(
        id=log_id,
        facility_id=facility_id,
        timestamp=timestamp,
        recorded_by=recorded_by,
        recorded_by_name=recorded_by_name,
        notes=notes,
        readings=readings,
        chemicals_added=chemicals_added or [],
        is_compliant=result.is_compliant,
        recommendations=recommendations,
    )


def record_salt_level(
    log_id: str,
    facility_id: str,
    salt_level: float,
    target_range: Range,
    recorded_by: str,
    timestamp: datetime,
    recorded_by_name: str = "",
    action_taken: str | None = None,
    notes: str | None = None,
) -> SaltLevelLog:
    return SaltLevelLog(
        id=log_id,
        facility_id=facility_id,
        timestamp=timestamp,
        recorded_by=recorded_by,
        recorded_by_name=recorded_by_name,
        notes=notes,
        salt_level=salt_level,
        target_range=target_range,
        is_in_range=in_range(salt_level, target_range),
        action_taken=action_taken,
    )


def record_temperature(
    log_id: str,
    facility_id: str,
    temperature: float,
    location: str,
    target_range: Range,
    recorded_by: str,
    timestamp: datetime,
    recorded_by_name: str = "",
    action_taken: str | None = None,
    notes: str | None = None,
) -> TemperatureLog:
    return TemperatureLog(
        id=log_id,
        facility_id=facility_id,
        timestamp=timestamp,
        recorded_by=recorded_by,
        recorded_by_name=recorded_by_name,
        notes=notes,
        temperature=temperature,
        location=location,
        target_range=target_range,
        is_in_range=in_range(temperature, target_range),
        action_taken=action_taken,
    )
