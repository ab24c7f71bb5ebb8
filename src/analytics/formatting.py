"""
src/analytics/formatting.py
───────────────────────────
Number rendering shared by violation, recommendation and alert texts.
"""
from __future__ import annotations


def fmt_number(value: float) -> str:
    """
    Render a reading the way operators enter it.

    Integral values drop the trailing ``.0`` (``100.0`` → ``"100"``);
    everything else uses the shortest round-trip repr (``8.2`` → ``"8.2"``).
    """
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def fmt_range(lo: float, hi: float) -> str:
    return f"{fmt_number(lo)}-{fmt_number(hi)}"
