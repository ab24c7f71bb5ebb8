"""
src/data/models.py
──────────────────
Pydantic v2 data models for chemistry readings, compliance rules,
maintenance logs, incidents, checklists, alerts and dashboard rollups.

Records accept the camelCase field names stored by the document database
(``pH``, ``facilityId``, ``nextCleaningDue`` ...) as well as the
snake_case attribute names.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import (
    AwareDatetime,
    BaseModel,
    ConfigDict,
    Field,
    FiniteFloat,
    TypeAdapter,
    model_validator,
)
from pydantic.alias_generators import to_camel

from config.alerts import AlertKind, AlertSeverity, ComplianceStatus
from config.standards import Standard


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)


# ── Chemistry ─────────────────────────────────────────────────────────────────


class Range(_Record):
    min: FiniteFloat
    max: FiniteFloat

    @model_validator(mode="after")
    def _check_bounds(self) -> Range:
        if self.min > self.max:
            raise ValueError(f"range min {self.min} is greater than max {self.max}")
        return self


class ReadingSet(_Record):
    """One pool-test submission. Absent parameters are None."""
    ph: FiniteFloat | None = Field(default=None, alias="pH")
    chlorine: FiniteFloat | None = None          # ppm
    alkalinity: FiniteFloat | None = None        # ppm
    calcium_hardness: FiniteFloat | None = None  # ppm
    cyanuric_acid: FiniteFloat | None = None     # ppm
    temperature: FiniteFloat | None = None       # °F


class RangeTable(_Record):
    ph: Range = Field(alias="pH")
    chlorine: Range
    alkalinity: Range
    calcium_hardness: Range | None = None
    cyanuric_acid: Range | None = None
    temperature: Range | None = None


class ComplianceRules(_Record):
    id: str
    facility_id: str
    standard: Standard = "custom"
    pool_testing_ranges: RangeTable


class ComplianceResult(_Record):
    is_compliant: bool
    violations: list[str] = Field(default_factory=list)


# ── Logs ──────────────────────────────────────────────────────────────────────


class LogType(str, Enum):
    POOL_TESTING = "pool_testing"
    INSPECTION = "inspection"
    SALT_LEVEL = "salt_level"
    SALT_CELL_CLEANING = "salt_cell_cleaning"
    FILTER_CLEANING = "filter_cleaning"
    TEMPERATURE = "temperature"


class BaseLog(_Record):
    id: str
    facility_id: str
    timestamp: AwareDatetime
    recorded_by: str
    recorded_by_name: str = ""
    notes: str | None = None


class ChemicalAddition(_Record):
    chemical: str
    amount: float = Field(ge=0.0)
    unit: str
    time: AwareDatetime


class PoolTestingLog(BaseLog):
    type: Literal["pool_testing"] = "pool_testing"
    readings: ReadingSet
    chemicals_added: list[ChemicalAddition] = Field(default_factory=list)
    is_compliant: bool
    recommendations: list[str] = Field(default_factory=list)


class InspectionFinding(_Record):
    id: str
    area: str
    status: Literal["pass", "fail", "warning"]
    description: str
    priority: Literal["low", "medium", "high", "critical"]


class InspectionLog(BaseLog):
    type: Literal["inspection"] = "inspection"
    inspection_type: Literal["daily", "weekly", "monthly", "safety", "equipment"]
    findings: list[InspectionFinding] = Field(default_factory=list)
    overall_status: Literal["pass", "fail", "needs_attention"]
    follow_up_required: bool = False


class SaltLevelLog(BaseLog):
    type: Literal["salt_level"] = "salt_level"
    salt_level: FiniteFloat  # ppm
    target_range: Range
    is_in_range: bool
    action_taken: str | None = None


class SaltCellCleaningLog(BaseLog):
    type: Literal["salt_cell_cleaning"] = "salt_cell_cleaning"
    cleaning_method: Literal["acid_wash", "manual", "other"]
    condition_before: str
    condition_after: str
    next_cleaning_due: AwareDatetime | None = None


class FilterCleaningLog(BaseLog):
    type: Literal["filter_cleaning"] = "filter_cleaning"
    filter_type: Literal["sand", "cartridge", "de", "other"]
    cleaning_method: Literal["backwash", "replace", "deep_clean"]
    pressure_before: float | None = None  # psi
    pressure_after: float | None = None
    next_cleaning_due: AwareDatetime | None = None


class TemperatureLog(BaseLog):
    type: Literal["temperature"] = "temperature"
    temperature: FiniteFloat  # °F
    location: Literal["pool", "spa", "ambient"]
    target_range: Range
    is_in_range: bool
    action_taken: str | None = None


Log = Annotated[
    Union[
        PoolTestingLog,
        InspectionLog,
        SaltLevelLog,
        SaltCellCleaningLog,
        FilterCleaningLog,
        TemperatureLog,
    ],
    Field(discriminator="type"),
]

_LOGS = TypeAdapter(list[Log])


def parse_logs(raw: list[dict]) -> list[Log]:
    """Validate raw log documents into their typed records."""
    return _LOGS.validate_python(raw)


_INSTANT = TypeAdapter(AwareDatetime)


def check_as_of(as_of: datetime) -> datetime:
    """Validate a reference instant; naive datetimes are rejected like naive log timestamps."""
    return _INSTANT.validate_python(as_of)


# ── Incidents & checklists ────────────────────────────────────────────────────


class IncidentReport(_Record):
    id: str
    facility_id: str
    incident_number: str
    type: Literal[
        "injury", "near_miss", "property_damage", "chemical_spill", "equipment_failure", "other"
    ]
    severity: Literal["minor", "moderate", "serious", "critical"]
    status: Literal["draft", "submitted", "under_review", "closed"] = "draft"
    occurred_at: AwareDatetime
    location: str = ""
    description: str = ""
    follow_up_required: bool = False


class ChecklistItem(_Record):
    id: str
    text: str
    is_completed: bool = False
    requires_photo: bool = False
    order: int = 0


class Checklist(_Record):
    id: str
    facility_id: str
    name: str
    status: Literal["pending", "in-progress", "completed"] = "pending"
    items: list[ChecklistItem] = Field(default_factory=list)
    due_date: AwareDatetime | None = None


# ── Derived views ─────────────────────────────────────────────────────────────


class Alert(_Record):
    id: str
    kind: AlertKind
    severity: AlertSeverity
    title: str
    description: str
    source_log_id: str | None = None


class DashboardStats(_Record):
    compliance_rate: int | None = Field(default=None, ge=0, le=100)
    active_incident_count: int = 0
    pending_checklist_count: int = 0
    maintenance_alert_count: int = 0
    total_pool_test_count: int = 0
    recent_pool_test_count: int = 0


class DashboardSnapshot(_Record):
    facility_id: str
    as_of: AwareDatetime
    alerts: list[Alert] = Field(default_factory=list)
    stats: DashboardStats
    compliance_status: ComplianceStatus = ComplianceStatus.UNKNOWN
