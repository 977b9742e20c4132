"""Time-of-day and calendar-day helpers.

Timestamps are naive local wall-clock values. Only the hour/minute
components and the calendar date are ever read; no timezone conversion
happens anywhere in the heatmap pipeline.
"""

from __future__ import annotations

from datetime import date, datetime

MINUTES_PER_DAY = 1440
MINUTES_PER_HOUR = 60


def time_of_day(timestamp: datetime) -> int:
    """Minutes since local midnight (0-1439). Seconds are ignored."""
    return timestamp.hour * MINUTES_PER_HOUR + timestamp.minute


def date_key(timestamp: datetime) -> date:
    """Calendar date of a timestamp, used for distinct-day counting."""
    return date(timestamp.year, timestamp.month, timestamp.day)


def wrap_minute(minute: int) -> int:
    """Fold any minute offset onto the 24-hour cycle."""
    return minute % MINUTES_PER_DAY


def minutes_to_time_string(minutes: int) -> str:
    """Format minutes since midnight as ``HH:MM``."""
    hours, mins = divmod(minutes, MINUTES_PER_HOUR)
    return f"{hours:02d}:{mins:02d}"


def local_now() -> datetime:
    """Return the current local wall-clock time.

    Single source of "now" so tests can monkey-patch it.
    """
    return datetime.now()


def current_minute_of_day(now: datetime | None = None) -> int:
    """Minute of day for the live position marker."""
    return time_of_day(now if now is not None else local_now())


def format_percentage(intensity: float) -> str:
    """Format a 0-1 intensity as a whole percentage, e.g. ``85%``."""
    # Halves round up
    return f"{int(intensity * 100 + 0.5)}%"
