"""
tests/test_submission.py
─────────────────────────
Tests for recording-time compliance and in-range flags.
"""

from src.data.models import ComplianceRules, Range, RangeTable, ReadingSet
from src.data.submission import (
    in_range,
    record_pool_test,
    record_salt_level,
    record_temperature,
)


class TestRecordPoolTest:
    def test_compliant_test(self, now, good_readings, facility_ranges):
        rules = ComplianceRules(id="r", facility_id="fac-1", pool_testing_ranges=facility_ranges)
        log = record_pool_test("pt-1", "fac-1", good_readings, rules, "u-01", now)
        assert log.is_compliant is True
        assert log.recommendations == []
        assert log.type == "pool_testing"

    def test_non_compliant_freezes_recommendations(self, now, facility_ranges):
        rules = ComplianceRules(id="r", facility_id="fac-1", pool_testing_ranges=facility_ranges)
        readings = ReadingSet(ph=8.2, chlorine=2.0, alkalinity=100)
        log = record_pool_test("pt-1", "fac-1", readings, rules, "u-01", now, notes="cloudy")
        assert log.is_compliant is False
        assert log.recommendations == [
            "pH is too high. Add muriatic acid or sodium bisulfate to lower pH."
        ]
        assert log.notes == "cloudy"

    def test_default_standard_without_rules(self, now):
        readings = ReadingSet(ph=7.0, chlorine=2.0, alkalinity=100)
        log = record_pool_test("pt-1", "fac-1", readings, None, "u-01", now)
        assert log.is_compliant is False

    def test_verdict_reflects_rules_at_recording_time(self, now):
        strict = RangeTable.model_validate({
            "pH": {"min": 7.4, "max": 7.6},
            "chlorine": {"min": 1, "max": 3},
            "alkalinity": {"min": 80, "max": 120},
        })
        readings = ReadingSet(ph=7.3, chlorine=2.0, alkalinity=100)
        log = record_pool_test(
            "pt-1", "fac-1", readings,
            ComplianceRules(id="r", facility_id="fac-1", pool_testing_ranges=strict),
            "u-01", now,
        )
        # Relaxing the rules afterwards leaves the stored verdict unchanged
        assert log.is_compliant is False
        assert record_pool_test("pt-2", "fac-1", readings, None, "u-01", now).is_compliant


class TestInRangeFlags:
    def test_inclusive(self):
        target = Range(min=78, max=84)
        assert in_range(78.0, target)
        assert in_range(84.0, target)
        assert not in_range(84.1, target)

    def test_salt_level(self, now):
        log = record_salt_level("sl-1", "fac-1", 2600, Range(min=2700, max=3400), "u-01", now)
        assert log.is_in_range is False

    def test_temperature(self, now):
        log = record_temperature("tp-1", "fac-1", 82.5, "pool", Range(min=78, max=84), "u-01", now)
        assert log.is_in_range is True
        assert log.location == "pool"
