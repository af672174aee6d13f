from __future__ import annotations

from datetime import date, datetime, time
from zoneinfo import ZoneInfo

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date (expected YYYY-MM-DD): {value!r}")


def normalize_time(value: str) -> str:
    """Normalize a clock string to ``HH:MM:SS``.

    Accepts ``H:M``, ``HH:MM`` and ``HH:MM:SS``; a trailing suffix after a
    space (``"08:30 AM"`` as sent by some clients) is dropped.
    """

    if not isinstance(value, str):
        raise ValidationError(f"Invalid time (expected HH:MM): {value!r}")

    parts = value.strip().split(" ")[0].split(":")
    if len(parts) not in (2, 3) or not all(p.isdigit() for p in parts):
        raise ValidationError(f"Invalid time (expected HH:MM): {value!r}")

    hours = int(parts[0])
    minutes = int(parts[1])
    seconds = int(parts[2]) if len(parts) >= 3 else 0
    if not (0 <= hours <= 23 and 0 <= minutes <= 59 and 0 <= seconds <= 59):
        raise ValidationError(f"Invalid time (expected HH:MM): {value!r}")
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def parse_time(value: str | time) -> time:
    if isinstance(value, time):
        return value
    return datetime.strptime(normalize_time(value), "%H:%M:%S").time()


def time_to_seconds(value: str | time) -> int:
    t = parse_time(value)
    return t.hour * 3600 + t.minute * 60 + t.second


def minutes_to_hours(minutes: int) -> float:
    return round(int(minutes) / 60, 2)


def now_local(tz_name: str | None = None) -> datetime:
    """Current local wall-clock time as a naive datetime.

    Kept as a function so tests can patch the clock.
    """
    if not tz_name:
        return datetime.now()
    return datetime.now(ZoneInfo(tz_name)).replace(tzinfo=None)
