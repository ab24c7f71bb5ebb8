"""
config/alerts.py
────────────────
Alert kinds, severity levels, ordering and due-date cutoffs.
"""

from enum import Enum


class AlertSeverity(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class AlertKind(str, Enum):
    OUT_OF_RANGE = "out_of_range"
    MAINTENANCE_DUE = "maintenance_due"
    MAINTENANCE_OVERDUE = "maintenance_overdue"


class ComplianceStatus(str, Enum):
    GOOD = "good"
    WARNING = "warning"
    POOR = "poor"
    UNKNOWN = "unknown"


# Severity ordering for sorting (lower = shown first)
SEVERITY_ORDER: dict[str, int] = {
    AlertSeverity.HIGH: 0,
    AlertSeverity.MEDIUM: 1,
    AlertSeverity.LOW: 2,
}

# Recurring maintenance: alert when due within DUE_SOON_DAYS,
# escalate to medium within URGENT_DUE_DAYS.
DUE_SOON_DAYS = 7
URGENT_DUE_DAYS = 3

# Dashboard compliance card cutoffs (percent)
COMPLIANCE_GOOD_PCT = 90
COMPLIANCE_WARNING_PCT = 70

RECENT_TESTS_WINDOW = 10
