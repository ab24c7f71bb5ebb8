"""
config/settings.py
──────────────────
Application configuration loaded from environment variables.
"""
import os
from dataclasses import dataclass

from config.alerts import DUE_SOON_DAYS, RECENT_TESTS_WINDOW, URGENT_DUE_DAYS


@dataclass
class Settings:
    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Facility scope for the demo entry point
    FACILITY_ID: str = os.getenv("FACILITY_ID", "facility-001")

    # Simulation
    SIMULATION_SEED: int = int(os.getenv("SIMULATION_SEED", "42"))
    HISTORY_DAYS: int = int(os.getenv("HISTORY_DAYS", "30"))

    # Maintenance due-date cutoffs (days)
    DUE_SOON_DAYS: int = int(os.getenv("DUE_SOON_DAYS", str(DUE_SOON_DAYS)))
    URGENT_DUE_DAYS: int = int(os.getenv("URGENT_DUE_DAYS", str(URGENT_DUE_DAYS)))

    # Dashboard
    RECENT_TESTS_WINDOW: int = int(os.getenv("RECENT_TESTS_WINDOW", str(RECENT_TESTS_WINDOW)))
    TREND_DAYS: int = int(os.getenv("TREND_DAYS", "7"))


settings = Settings()
