"""
tests/test_simulator.py
────────────────────────
Tests for the synthetic facility data generator.
"""

from src.analytics.compliance import DEFAULT_RANGES, evaluate
from src.data.models import LogType
from src.data.simulator import (
    ChemistryUpset,
    _upset_shift,
    generate_facility_dataset,
)


class TestGenerateFacilityDataset:
    def test_twice_daily_pool_tests(self, now):
        data = generate_facility_dataset(seed=42, days=5, facility_id="fac-1", as_of=now)
        tests = [log for log in data.logs if log.type == LogType.POOL_TESTING]
        # 5 full days plus the morning test of the current day
        assert len(tests) == 5 * 2 + 1

    def test_logs_newest_first(self, now):
        data = generate_facility_dataset(seed=42, days=5, as_of=now)
        timestamps = [log.timestamp for log in data.logs]
        assert timestamps == sorted(timestamps, reverse=True)
        assert all(ts <= now for ts in timestamps)

    def test_all_records_scoped_to_facility(self, now):
        data = generate_facility_dataset(seed=1, days=3, facility_id="fac-9", as_of=now)
        assert data.rules.facility_id == "fac-9"
        assert {log.facility_id for log in data.logs} == {"fac-9"}
        assert {i.facility_id for i in data.incidents} == {"fac-9"}
        assert {c.facility_id for c in data.checklists} == {"fac-9"}

    def test_contains_maintenance_kinds(self, now):
        data = generate_facility_dataset(seed=42, days=14, as_of=now)
        kinds = {log.type for log in data.logs}
        assert {
            "pool_testing",
            "salt_level",
            "temperature",
            "salt_cell_cleaning",
            "filter_cleaning",
        } <= kinds

    def test_frozen_verdicts_match_rules(self, now):
        data = generate_facility_dataset(seed=7, days=10, as_of=now)
        for log in data.logs:
            if log.type == LogType.POOL_TESTING:
                assert log.is_compliant == evaluate(log.readings, DEFAULT_RANGES).is_compliant

    def test_reproducibility(self, now):
        d1 = generate_facility_dataset(seed=99, days=4, as_of=now)
        d2 = generate_facility_dataset(seed=99, days=4, as_of=now)
        assert d1.logs == d2.logs
        assert d1.incidents == d2.incidents

    def test_different_seeds_differ(self, now):
        d1 = generate_facility_dataset(seed=1, days=4, as_of=now)
        d2 = generate_facility_dataset(seed=2, days=4, as_of=now)
        assert d1.logs != d2.logs


class TestUpsetShift:
    def test_zero_outside_upset(self):
        upsets = [ChemistryUpset("ph", start_day=3, duration_days=2, shift=0.6)]
        assert _upset_shift(1, "ph", upsets) == 0
        assert _upset_shift(5, "ph", upsets) == 0

    def test_applies_inside_upset(self):
        upsets = [ChemistryUpset("ph", start_day=3, duration_days=2, shift=0.6)]
        assert _upset_shift(4, "ph", upsets) == 0.6
        assert _upset_shift(4, "chlorine", upsets) == 0
