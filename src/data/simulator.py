"""
src/data/simulator.py
─────────────────────
Synthetic facility data generator.

Generates, for one facility:
  - Twice-daily pool tests with embedded chemistry upsets (1–3 over the period)
  - Daily salt-level and pool-temperature logs
  - Recurring salt-cell and filter cleaning logs with next-due dates
  - A handful of incident reports and daily checklists

Design:
  - Reproducible with SIMULATION_SEED for consistent demos
  - Pool tests are recorded through the submission helpers, so their
    compliance verdicts are frozen exactly as a real submission would be
  - Logs are returned newest first, matching the persistence layer's order
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

import numpy as np

from config.settings import settings
from src.analytics.compliance import DEFAULT_RANGES
from src.data.models import (
    Checklist,
    ChecklistItem,
    ComplianceRules,
    FilterCleaningLog,
    IncidentReport,
    Log,
    Range,
    ReadingSet,
    SaltCellCleaningLog,
)
from src.data.submission import record_pool_test, record_salt_level, record_temperature

# ── Baseline operating points ─────────────────────────────────────────────────

BASELINES: dict[str, float] = {
    "ph": 7.5,
    "chlorine": 3.0,
    "alkalinity": 100.0,
    "calcium_hardness": 300.0,
    "cyanuric_acid": 40.0,
    "temperature": 81.0,
}

# Noise scales for normal operation (σ)
NOISE: dict[str, float] = {
    "ph": 0.12,
    "chlorine": 0.6,
    "alkalinity": 7.0,
    "calcium_hardness": 20.0,
    "cyanuric_acid": 3.0,
    "temperature": 1.0,
}

DECIMALS: dict[str, int] = {
    "ph": 1,
    "chlorine": 1,
    "alkalinity": 0,
    "calcium_hardness": 0,
    "cyanuric_acid": 0,
    "temperature": 1,
}

SALT_TARGET = Range(min=2700.0, max=3400.0)
SALT_BASELINE, SALT_NOISE = 3100.0, 160.0
POOL_TEMP_TARGET = Range(min=78.0, max=84.0)

TEST_HOURS = (8, 17)
SALT_CELL_INTERVAL_DAYS = 30
FILTER_INTERVAL_DAYS = 7

STAFF = [("u-01", "Jordan Lee"), ("u-02", "Sam Rivera"), ("u-03", "Alex Kim")]

CHECKLIST_ITEMS = [
    "Check water clarity",
    "Inspect drain covers",
    "Verify rescue equipment",
    "Record chemical feeder levels",
]


@dataclass
class ChemistryUpset:
    parameter: str
    start_day: int      # index into the daily timeline
    duration_days: int
    shift: float        # offset applied to the parameter while active


@dataclass
class FacilityDataset:
    facility_id: str
    as_of: datetime
    rules: ComplianceRules
    logs: list[Log] = field(default_factory=list)
    incidents: list[IncidentReport] = field(default_factory=list)
    checklists: list[Checklist] = field(default_factory=list)


def _plan_upsets(days: int, rng: np.random.Generator) -> list[ChemistryUpset]:
    """Randomly plan 1–3 chemistry upsets within the history window."""
    upsets: list[ChemistryUpset] = []
    for _ in range(int(rng.integers(1, 4))):
        parameter = str(rng.choice(["ph", "chlorine", "alkalinity"]))
        start = int(rng.integers(0, max(1, days - 1)))
        duration = min(int(rng.integers(1, 4)), days - start)
        direction = 1.0 if rng.random() < 0.5 else -1.0
        shift = direction * float(rng.uniform(4.0, 6.0)) * NOISE[parameter]
        upsets.append(ChemistryUpset(parameter, start, duration, shift))
    upsets.sort(key=lambda u: u.start_day)
    return upsets


def _upset_shift(day: int, parameter: str, upsets: list[ChemistryUpset]) -> float:
    return sum(
        u.shift
        for u in upsets
        if u.parameter == parameter and u.start_day <= day < u.start_day + u.duration_days
    )


def _sample_readings(day: int, upsets: list[ChemistryUpset], rng: np.random.Generator) -> ReadingSet:
    values: dict[str, float] = {}
    for key, base in BASELINES.items():
        raw = base + rng.normal(0, NOISE[key]) + _upset_shift(day, key, upsets)
        values[key] = round(float(np.clip(raw, 0.0, None)), DECIMALS[key])
    return ReadingSet(**values)


def _staff(rng: np.random.Generator) -> tuple[str, str]:
    return STAFF[int(rng.integers(0, len(STAFF)))]


def _maintenance_logs(
    facility_id: str,
    start: datetime,
    as_of: datetime,
    rng: np.random.Generator,
) -> list[Log]:
    logs: list[Log] = []

    # Salt cell: one cleaning somewhere in the last interval
    cleaned = as_of - timedelta(days=int(rng.integers(15, SALT_CELL_INTERVAL_DAYS + 5)), hours=3)
    uid, name = _staff(rng)
    logs.append(
        SaltCellCleaningLog(
            id=f"{facility_id}-sc-0001",
            facility_id=facility_id,
            timestamp=cleaned,
            recorded_by=uid,
            recorded_by_name=name,
            cleaning_method="acid_wash",
            condition_before="moderate scale",
            condition_after="clean",
            next_cleaning_due=cleaned + timedelta(days=SALT_CELL_INTERVAL_DAYS),
        )
    )

    # Filter: weekly backwash over the history window
    n = 0
    ts = start + timedelta(hours=int(rng.integers(6, 30)))
    while ts <= as_of:
        n += 1
        uid, name = _staff(rng)
        before = round(float(rng.uniform(16.0, 22.0)), 1)
        logs.append(
            FilterCleaningLog(
                id=f"{facility_id}-fc-{n:04d}",
                facility_id=facility_id,
                timestamp=ts,
                recorded_by=uid,
                recorded_by_name=name,
                filter_type="sand",
                cleaning_method="backwash",
                pressure_before=before,
                pressure_after=round(before - float(rng.uniform(5.0, 8.0)), 1),
                next_cleaning_due=ts + timedelta(days=FILTER_INTERVAL_DAYS),
            )
        )
        ts += timedelta(days=FILTER_INTERVAL_DAYS + int(rng.integers(0, 3)))
    return logs


def _incidents(facility_id: str, as_of: datetime, rng: np.random.Generator) -> list[IncidentReport]:
    kinds = ["injury", "near_miss", "chemical_spill", "equipment_failure"]
    severities = ["minor", "moderate", "serious"]
    statuses = ["draft", "submitted", "under_review", "closed"]
    incidents: list[IncidentReport] = []
    for i in range(int(rng.integers(2, 6))):
        occurred = as_of - timedelta(days=int(rng.integers(0, 30)), hours=int(rng.integers(0, 12)))
        incidents.append(
            IncidentReport(
                id=f"{facility_id}-inc-{i + 1:04d}",
                facility_id=facility_id,
                incident_number=f"INC-{occurred:%Y%m%d}-{i + 1:03d}",
                type=str(rng.choice(kinds)),
                severity=str(rng.choice(severities)),
                status=str(rng.choice(statuses)),
                occurred_at=occurred,
                location="main pool deck",
            )
        )
    return incidents


def _checklists(facility_id: str, as_of: datetime, rng: np.random.Generator) -> list[Checklist]:
    checklists: list[Checklist] = []
    for d in range(3):
        due = (as_of - timedelta(days=d)).replace(hour=22, minute=0)
        done = int(rng.integers(0, len(CHECKLIST_ITEMS) + 1)) if d == 0 else len(CHECKLIST_ITEMS)
        items = [
            ChecklistItem(id=f"item-{k}", text=text, is_completed=k < done, order=k)
            for k, text in enumerate(CHECKLIST_ITEMS)
        ]
        if done == len(items):
            status = "completed"
        elif done:
            status = "in-progress"
        else:
            status = "pending"
        checklists.append(
            Checklist(
                id=f"{facility_id}-cl-{due:%Y%m%d}",
                facility_id=facility_id,
                name="Daily Opening Checklist",
                status=status,
                items=items,
                due_date=due,
            )
        )
    return checklists


# ── Public API ────────────────────────────────────────────────────────────────

def generate_facility_dataset(
    seed: int = settings.SIMULATION_SEED,
    days: int = settings.HISTORY_DAYS,
    facility_id: str = settings.FACILITY_ID,
    as_of: datetime | None = None,
) -> FacilityDataset:
    """
    Generate `days` of operating history for one facility ending at `as_of`.
    """
    rng = np.random.default_rng(seed)
    as_of = as_of or datetime.now(tz=UTC).replace(minute=0, second=0, microsecond=0)
    start = (as_of - timedelta(days=days)).replace(hour=0, minute=0, second=0, microsecond=0)

    rules = ComplianceRules(
        id=f"{facility_id}-rules",
        facility_id=facility_id,
        standard="MAHC",
        pool_testing_ranges=DEFAULT_RANGES,
    )
    upsets = _plan_upsets(days, rng)

    logs: list[Log] = []
    n_tests = 0
    for day in range(days + 1):
        midnight = start + timedelta(days=day)
        for hour in TEST_HOURS:
            ts = midnight + timedelta(hours=hour)
            if ts > as_of:
                break
            n_tests += 1
            uid, name = _staff(rng)
            logs.append(
                record_pool_test(
                    log_id=f"{facility_id}-pt-{n_tests:04d}",
                    facility_id=facility_id,
                    readings=_sample_readings(day, upsets, rng),
                    rules=rules,
                    recorded_by=uid,
                    recorded_by_name=name,
                    timestamp=ts,
                )
            )

        ts = midnight + timedelta(hours=7)
        if ts > as_of:
            continue
        uid, name = _staff(rng)
        salt = round(float(SALT_BASELINE + rng.normal(0, SALT_NOISE)), 0)
        logs.append(
            record_salt_level(
                log_id=f"{facility_id}-sl-{day + 1:04d}",
                facility_id=facility_id,
                salt_level=salt,
                target_range=SALT_TARGET,
                recorded_by=uid,
                recorded_by_name=name,
                timestamp=ts,
            )
        )
        temp = round(float(BASELINES["temperature"] + rng.normal(0, 1.5)), 1)
        logs.append(
            record_temperature(
                log_id=f"{facility_id}-tp-{day + 1:04d}",
                facility_id=facility_id,
                temperature=temp,
                location="pool",
                target_range=POOL_TEMP_TARGET,
                recorded_by=uid,
                recorded_by_name=name,
                timestamp=ts,
            )
        )

    logs.extend(_maintenance_logs(facility_id, start, as_of, rng))
    logs.sort(key=lambda log: log.timestamp, reverse=True)

    return FacilityDataset(
        facility_id=facility_id,
        as_of=as_of,
        rules=rules,
        logs=logs,
        incidents=_incidents(facility_id, as_of, rng),
        checklists=_checklists(facility_id, as_of, rng),
    )
