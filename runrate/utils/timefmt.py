"""Conversions between minute counts and short human-readable durations."""

from __future__ import annotations

import math
import re

from runrate.engine.summary import fte_percentage

_WHITESPACE = re.compile(r"\s+")
_LEADING_NUMBER = re.compile(r"\s*([-+]?(?:\d+\.?\d*|\.\d+))")


def _to_float(text: str) -> float | None:
    """Leading number of ``text``; trailing text such as "in" or "rs" is ignored."""
    match = _LEADING_NUMBER.match(text)
    if match is None:
        return None
    return float(match.group(1))


def format_minutes_to_time(minutes: float) -> str:
    """90 -> "1h 30m", 120 -> "2h", 45 -> "45m"."""
    hours = math.floor(minutes / 60)
    mins = math.floor(minutes % 60 + 0.5)

    if hours == 0:
        return f"{mins}m"
    if mins == 0:
        return f"{hours}h"
    return f"{hours}h {mins}m"


def parse_time_to_minutes(text: str) -> float:
    """Parse "1h 30m", "1:30", "1.5h" or "90" into minutes.

    Tokens that do not parse are ignored.
    """
    total = 0.0
    for part in _WHITESPACE.split(text.strip().lower()):
        if not part:
            continue
        if "h" in part:
            hours = _to_float(part.replace("h", ""))
            if hours is not None:
                total += hours * 60
        elif "m" in part:
            mins = _to_float(part.replace("m", ""))
            if mins is not None:
                total += mins
        elif ":" in part:
            pieces = part.split(":")
            if len(pieces) == 2:
                hours, mins = _to_float(pieces[0]), _to_float(pieces[1])
                if hours is not None and mins is not None:
                    total += hours * 60 + mins
        else:
            value = _to_float(part)
            if value is not None:
                total += value
    return total


def format_fte_with_context(fte: float, total_employees: int) -> str:
    """2.5 FTE of 100 employees -> "2.50 FTEs (2.50% of 100 employees)"."""
    pct = fte_percentage(fte, total_employees)
    return f"{fte:.2f} FTEs ({pct:.2f}% of {total_employees} employees)"
