"""
config/standards.py
───────────────────
Water-chemistry parameters and the built-in compliance standard.

The Default Standard follows the Model Aquatic Health Code (MAHC):
  pH                7.2–7.8
  Free chlorine     1.0–10.0 ppm  (ideal 1–3)
  Total alkalinity  80–120 ppm
  Calcium hardness  200–400 ppm
  Cyanuric acid     30–50 ppm
  Temperature       78–84 °F

It applies whenever a facility has not configured its own rules.
"""
from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class Parameter:
    """Display metadata for a chemistry parameter."""
    key: str
    label: str
    unit: str  # "" for unitless


# Fixed order: compliance checks and chart columns
PH = Parameter("ph", "pH", "")
CHLORINE = Parameter("chlorine", "Chlorine", "ppm")
ALKALINITY = Parameter("alkalinity", "Alkalinity", "ppm")
CALCIUM_HARDNESS = Parameter("calcium_hardness", "Calcium Hardness", "ppm")
CYANURIC_ACID = Parameter("cyanuric_acid", "Cyanuric Acid", "ppm")
TEMPERATURE = Parameter("temperature", "Temperature", "°F")

PARAMETERS: list[Parameter] = [
    PH,
    CHLORINE,
    ALKALINITY,
    CALCIUM_HARDNESS,
    CYANURIC_ACID,
    TEMPERATURE,
]

# ── MAHC default bounds ───────────────────────────────────────────────────────
MAHC_STANDARD: dict[str, dict[str, float]] = {
    "pH": {"min": 7.2, "max": 7.8},
    "chlorine": {"min": 1.0, "max": 10.0},
    "alkalinity": {"min": 80.0, "max": 120.0},
    "calciumHardness": {"min": 200.0, "max": 400.0},
    "cyanuricAcid": {"min": 30.0, "max": 50.0},
    "temperature": {"min": 78.0, "max": 84.0},
}

# Rule-set provenance recorded on a facility's compliance rules
Standard = Literal["MAHC", "state", "local", "custom"]
