"""
tests/conftest.py
─────────────────
Shared pytest fixtures for Pool Operations Monitor test suite.
"""
import os
from datetime import datetime, timedelta, timezone

import pytest

os.environ.setdefault("HISTORY_DAYS", "7")
os.environ.setdefault("SIMULATION_SEED", "42")


@pytest.fixture
def now() -> datetime:
    return datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def facility_ranges():
    """pH 7.2–7.8, chlorine 1–10 ppm, alkalinity 80–120 ppm, calcium 200–400 ppm."""
    from src.data.models import RangeTable
    return RangeTable.model_validate({
        "pH": {"min": 7.2, "max": 7.8},
        "chlorine": {"min": 1.0, "max": 10.0},
        "alkalinity": {"min": 80, "max": 120},
        "calciumHardness": {"min": 200, "max": 400},
        "cyanuricAcid": {"min": 30, "max": 50},
        "temperature": {"min": 78, "max": 84},
    })


@pytest.fixture
def good_readings():
    from src.data.models import ReadingSet
    return ReadingSet(ph=7.5, chlorine=3.0, alkalinity=100.0, calcium_hardness=300.0)


@pytest.fixture
def make_pool_test(now):
    """Factory for pool-test logs with a frozen verdict."""
    from src.data.models import PoolTestingLog, ReadingSet

    def _make(log_id: str, compliant: bool = True, hours_ago: float = 0.0, facility_id: str = "fac-1"):
        return PoolTestingLog(
            id=log_id,
            facility_id=facility_id,
            timestamp=now - timedelta(hours=hours_ago),
            recorded_by="u-01",
            readings=ReadingSet(ph=7.5 if compliant else 8.2, chlorine=3.0, alkalinity=100.0),
            is_compliant=compliant,
        )

    return _make


@pytest.fixture
def make_cleaning_log(now):
    """Factory for salt-cell / filter cleaning logs due `due_in` days from now."""
    from src.data.models import FilterCleaningLog, SaltCellCleaningLog

    def _make(log_id: str, due_in: float | None, kind: str = "filter", facility_id: str = "fac-1"):
        due = None if due_in is None else now + timedelta(days=due_in)
        if kind == "salt_cell":
            return SaltCellCleaningLog(
                id=log_id,
                facility_id=facility_id,
                timestamp=now - timedelta(days=20),
                recorded_by="u-02",
                cleaning_method="acid_wash",
                condition_before="scaled",
                condition_after="clean",
                next_cleaning_due=due,
            )
        return FilterCleaningLog(
            id=log_id,
            facility_id=facility_id,
            timestamp=now - timedelta(days=5),
            recorded_by="u-02",
            filter_type="sand",
            cleaning_method="backwash",
            pressure_before=20.0,
            pressure_after=13.5,
            next_cleaning_due=due,
        )

    return _make


@pytest.fixture
def out_of_range_salt_log(now):
    from src.data.models import Range, SaltLevelLog
    return SaltLevelLog(
        id="salt-log-1",
        facility_id="fac-1",
        timestamp=now,
        recorded_by="u-01",
        salt_level=2800.0,
        target_range=Range(min=3000, max=3500),
        is_in_range=False,
    )


@pytest.fixture
def hot_spa_log(now):
    from src.data.models import Range, TemperatureLog
    return TemperatureLog(
        id="temp-log-1",
        facility_id="fac-1",
        timestamp=now,
        recorded_by="u-01",
        temperature=90.0,
        location="spa",
        target_range=Range(min=78, max=84),
        is_in_range=False,
    )
