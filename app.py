"""
app.py
──────
Pool Operations Monitor — Demo Entry Point.

Startup sequence:
  1. Configure logging from LOG_LEVEL
  2. Generate a seeded facility history (pool tests, maintenance, incidents)
  3. Derive alerts and dashboard rollups for the facility
  4. Print the dashboard snapshot
"""
import logging

from config.settings import settings
from src.analytics.dashboard_stats import build_dashboard
from src.analytics.maintenance_alerts import DueWindow
from src.analytics.trends import pool_test_frame
from src.data.simulator import generate_facility_dataset

logger = logging.getLogger(__name__)


def main() -> None:
    # ── 1. Logging ────────────────────────────────────────────────────────────
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # ── 2. Facility data ──────────────────────────────────────────────────────
    logger.info("Generating %d days of history for %s", settings.HISTORY_DAYS, settings.FACILITY_ID)
    data = generate_facility_dataset()

    # ── 3. Dashboard ──────────────────────────────────────────────────────────
    snapshot = build_dashboard(
        data.facility_id,
        data.logs,
        data.incidents,
        data.checklists,
        data.as_of,
        window=DueWindow(settings.DUE_SOON_DAYS, settings.URGENT_DUE_DAYS),
        recent_window=settings.RECENT_TESTS_WINDOW,
    )
    trend = pool_test_frame(data.logs, data.as_of, days=settings.TREND_DAYS)

    # ── 4. Report ─────────────────────────────────────────────────────────────
    stats = snapshot.stats
    rate = "n/a" if stats.compliance_rate is None else f"{stats.compliance_rate}%"
    print(f"Facility {snapshot.facility_id} as of {snapshot.as_of:%Y-%m-%d %H:%M %Z}")
    print(
        f"  Compliance: {rate} ({snapshot.compliance_status.value}, "
        f"{stats.recent_pool_test_count} recent / {stats.total_pool_test_count} total tests)"
    )
    print(f"  Active incidents:   {stats.active_incident_count}")
    print(f"  Pending checklists: {stats.pending_checklist_count}")
    print(f"  Maintenance alerts: {stats.maintenance_alert_count}")
    for alert in snapshot.alerts:
        print(f"    [{alert.severity.value:<6}] {alert.title}: {alert.description}")
    if not trend.empty:
        print(f"  Last {settings.TREND_DAYS} days (means):")
        print(trend[["ph", "chlorine", "alkalinity"]].mean().round(2).to_string())


if __name__ == "__main__":
    main()
