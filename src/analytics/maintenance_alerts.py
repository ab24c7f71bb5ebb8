"""
src/analytics/maintenance_alerts.py
────────────────────────────────────
Maintenance alert derivation.

Scans recorded logs and emits alerts for:
  - salt level outside its target range        → out_of_range / high
  - water temperature outside its target range → out_of_range / medium
  - salt cell / filter cleaning past due       → maintenance_overdue / high
  - salt cell / filter cleaning due soon       → maintenance_due / medium (≤ 3 d) or low (≤ 7 d)

Alerts are derived, never stored. Ids are built from the alert kind and
the source log id, so re-deriving over the same logs yields the same ids.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import datetime, timedelta

from config.alerts import (
    DUE_SOON_DAYS,
    SEVERITY_ORDER,
    URGENT_DUE_DAYS,
    AlertKind,
    AlertSeverity,
)
from src.analytics.formatting import fmt_number, fmt_range
from src.data.models import (
    Alert,
    FilterCleaningLog,
    Log,
    LogType,
    SaltCellCleaningLog,
    SaltLevelLog,
    TemperatureLog,
    check_as_of,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DueWindow:
    """Cutoffs (days) for recurring maintenance alerts."""
    due_soon_days: int = DUE_SOON_DAYS
    urgent_days: int = URGENT_DUE_DAYS


def days_until(due: datetime, as_of: datetime) -> int:
    """Whole days from ``as_of`` to ``due``, truncated toward zero."""
    return int((due - as_of) / timedelta(days=1))


# ── Per-kind rules ────────────────────────────────────────────────────────────


def _salt_level_alerts(log: SaltLevelLog, as_of: datetime, window: DueWindow) -> list[Alert]:
    if log.is_in_range:
        return []
    target = fmt_range(log.target_range.min, log.target_range.max)
    return [
        Alert(
            id=f"salt-{log.id}",
            kind=AlertKind.OUT_OF_RANGE,
            severity=AlertSeverity.HIGH,
            title="Salt Level Out of Range",
            description=f"Salt level is {fmt_number(log.salt_level)} ppm (target: {target} ppm)",
            source_log_id=log.id,
        )
    ]


def _temperature_alerts(log: TemperatureLog, as_of: datetime, window: DueWindow) -> list[Alert]:
    if log.is_in_range:
        return []
    target = fmt_range(log.target_range.min, log.target_range.max)
    return [
        Alert(
            id=f"temp-{log.id}",
            kind=AlertKind.OUT_OF_RANGE,
            severity=AlertSeverity.MEDIUM,
            title="Temperature Out of Range",
            description=(
                f"{log.location} temperature is {fmt_number(log.temperature)}°F "
                f"(target: {target}°F)"
            ),
            source_log_id=log.id,
        )
    ]


def _cleaning_alerts(
    log: SaltCellCleaningLog | FilterCleaningLog,
    as_of: datetime,
    window: DueWindow,
    id_prefix: str,
    subject: str,
) -> list[Alert]:
    if log.next_cleaning_due is None:
        return []

    days = days_until(log.next_cleaning_due, as_of)
    if days < 0:
        return [
            Alert(
                id=f"{id_prefix}-overdue-{log.id}",
                kind=AlertKind.MAINTENANCE_OVERDUE,
                severity=AlertSeverity.HIGH,
                title=f"{subject} Overdue",
                description=f"{subject.capitalize()} was due {abs(days)} days ago",
                source_log_id=log.id,
            )
        ]
    if days <= window.due_soon_days:
        severity = AlertSeverity.MEDIUM if days <= window.urgent_days else AlertSeverity.LOW
        plural = "" if days == 1 else "s"
        return [
            Alert(
                id=f"{id_prefix}-due-{log.id}",
                kind=AlertKind.MAINTENANCE_DUE,
                severity=severity,
                title=f"{subject} Due Soon",
                description=f"{subject.capitalize()} is due in {days} day{plural}",
                source_log_id=log.id,
            )
        ]
    return []


def _salt_cell_alerts(log: SaltCellCleaningLog, as_of: datetime, window: DueWindow) -> list[Alert]:
    return _cleaning_alerts(log, as_of, window, "salt-cell", "Salt Cell Cleaning")


def _filter_alerts(log: FilterCleaningLog, as_of: datetime, window: DueWindow) -> list[Alert]:
    return _cleaning_alerts(log, as_of, window, "filter", "Filter Cleaning")


def _no_alerts(log: Log, as_of: datetime, window: DueWindow) -> list[Alert]:
    return []


RULES: dict[LogType, Callable[..., list[Alert]]] = {
    LogType.POOL_TESTING: _no_alerts,
    LogType.INSPECTION: _no_alerts,
    LogType.SALT_LEVEL: _salt_level_alerts,
    LogType.SALT_CELL_CLEANING: _salt_cell_alerts,
    LogType.FILTER_CLEANING: _filter_alerts,
    LogType.TEMPERATURE: _temperature_alerts,
}

_unruled = set(LogType) - set(RULES)
if _unruled:
    raise RuntimeError(f"no alert rule for log types: {sorted(t.value for t in _unruled)}")


# ── Main API ──────────────────────────────────────────────────────────────────


def derive_alerts(
    logs: Iterable[Log],
    as_of: datetime,
    *,
    window: DueWindow | None = None,
) -> list[Alert]:
    """
    Derive alerts from logs as of a given instant.

    Args:
        logs: Recorded logs of any kind (input order is preserved within a severity)
        as_of: Reference instant for due-date arithmetic (timezone-aware)
        window: Due-soon / urgent cutoffs; defaults to 7 and 3 days

    Returns:
        Alerts sorted high → medium → low (stable)
    """
    as_of = check_as_of(as_of)
    window = window or DueWindow()
    alerts: list[Alert] = []
    for log in logs:
        alerts.extend(RULES[LogType(log.type)](log, as_of, window))

    logger.debug("Derived %d alert(s) as of %s", len(alerts), as_of.isoformat())
    return sorted(alerts, key=lambda a: SEVERITY_ORDER[a.severity])
