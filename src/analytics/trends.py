"""
src/analytics/trends.py
────────────────────────
Pool-test history as a DataFrame for chart rendering.
"""
from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timedelta

import pandas as pd

from config.standards import PARAMETERS
from src.data.models import Log, LogType, check_as_of

READING_COLUMNS = [p.key for p in PARAMETERS]
COLUMNS = ["timestamp", "log_id", *READING_COLUMNS, "is_compliant"]


def pool_test_frame(logs: Sequence[Log], as_of: datetime, days: int = 7) -> pd.DataFrame:
    """
    Pool tests recorded within the last `days` before `as_of`.

    Returns one row per test in ascending time order, one column per
    reading parameter (NaN where not measured) plus `is_compliant`.
    """
    as_of = check_as_of(as_of)
    since = as_of - timedelta(days=days)
    rows = [
        {
            "timestamp": log.timestamp,
            "log_id": log.id,
            **log.readings.model_dump(),
            "is_compliant": log.is_compliant,
        }
        for log in logs
        if log.type == LogType.POOL_TESTING and since <= log.timestamp <= as_of
    ]
    if not rows:
        return pd.DataFrame(columns=COLUMNS)

    df = pd.DataFrame(rows, columns=COLUMNS)
    df[READING_COLUMNS] = df[READING_COLUMNS].astype(float)
    return df.sort_values("timestamp", kind="stable").reset_index(drop=True)
