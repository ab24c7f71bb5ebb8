"""
src/analytics/dashboard_stats.py
─────────────────────────────────
Dashboard rollups for one facility.

Compliance rate: share of the 10 most recent pool tests that were
recorded as compliant, as a whole percentage (None with no tests).
Status cutoffs for the compliance card: ≥ 90 % good, ≥ 70 % warning,
below that poor.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from datetime import datetime

from config.alerts import (
    COMPLIANCE_GOOD_PCT,
    COMPLIANCE_WARNING_PCT,
    RECENT_TESTS_WINDOW,
    ComplianceStatus,
)
from src.analytics.maintenance_alerts import DueWindow, derive_alerts
from src.data.models import (
    Alert,
    Checklist,
    DashboardSnapshot,
    DashboardStats,
    IncidentReport,
    Log,
    LogType,
    PoolTestingLog,
    check_as_of,
)

logger = logging.getLogger(__name__)

_INACTIVE_INCIDENT_STATUSES = frozenset({"draft", "closed"})
_PENDING_CHECKLIST_STATUSES = frozenset({"pending", "in-progress"})


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def recent_pool_tests(logs: Sequence[Log], window: int = RECENT_TESTS_WINDOW) -> list[PoolTestingLog]:
    """Most recent pool tests, newest first; ties keep input order."""
    tests = [log for log in logs if log.type == LogType.POOL_TESTING]
    # sorted(reverse=True) is stable for equal keys
    return sorted(tests, key=lambda log: log.timestamp, reverse=True)[:window]


def aggregate(
    logs: Sequence[Log],
    incidents: Sequence[IncidentReport],
    checklists: Sequence[Checklist],
    alerts: Sequence[Alert],
    *,
    recent_window: int = RECENT_TESTS_WINDOW,
) -> DashboardStats:
    total_tests = sum(1 for log in logs if log.type == LogType.POOL_TESTING)
    recent = recent_pool_tests(logs, recent_window)

    rate: int | None = None
    if recent:
        compliant = sum(1 for t in recent if t.is_compliant)
        rate = _round_half_up(100.0 * compliant / len(recent))

    return DashboardStats(
        compliance_rate=rate,
        active_incident_count=sum(
            1 for i in incidents if i.status not in _INACTIVE_INCIDENT_STATUSES
        ),
        pending_checklist_count=sum(
            1 for c in checklists if c.status in _PENDING_CHECKLIST_STATUSES
        ),
        maintenance_alert_count=len(alerts),
        total_pool_test_count=total_tests,
        recent_pool_test_count=len(recent),
    )


def classify_compliance_rate(rate: int | None) -> ComplianceStatus:
    if rate is None:
        return ComplianceStatus.UNKNOWN
    if rate >= COMPLIANCE_GOOD_PCT:
        return ComplianceStatus.GOOD
    if rate >= COMPLIANCE_WARNING_PCT:
        return ComplianceStatus.WARNING
    return ComplianceStatus.POOR


def build_dashboard(
    facility_id: str,
    logs: Sequence[Log],
    incidents: Sequence[IncidentReport],
    checklists: Sequence[Checklist],
    as_of: datetime,
    *,
    window: DueWindow | None = None,
    recent_window: int = RECENT_TESTS_WINDOW,
) -> DashboardSnapshot:
    """
    Recompute alerts and rollups for one facility from a data snapshot.

    Records belonging to other facilities are ignored.
    """
    as_of = check_as_of(as_of)
    own_logs = [log for log in logs if log.facility_id == facility_id]
    own_incidents = [i for i in incidents if i.facility_id == facility_id]
    own_checklists = [c for c in checklists if c.facility_id == facility_id]

    alerts = derive_alerts(own_logs, as_of, window=window)
    stats = aggregate(
        own_logs, own_incidents, own_checklists, alerts, recent_window=recent_window
    )
    logger.info(
        "Dashboard %s: %d alert(s), compliance rate %s",
        facility_id,
        len(alerts),
        stats.compliance_rate,
    )
    return DashboardSnapshot(
        facility_id=facility_id,
        as_of=as_of,
        alerts=alerts,
        stats=stats,
        compliance_status=classify_compliance_rate(stats.compliance_rate),
    )
