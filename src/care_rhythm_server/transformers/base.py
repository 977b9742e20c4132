"""Field parsing shared by the export-row transformers.

Rows come from Baby Tracker CSV exports, already split into
``{column name: text}`` mappings.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from datetime import datetime

from care_rhythm_server.models.activity import ActivityKind

Row = Mapping[str, str | None]

# "M/D/YY, HH:MM" or "M/D/YYYY, HH:MM"; the comma is optional
TIMESTAMP_PATTERN = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{2,4}),?\s*(\d{1,2}):(\d{2})$")
LEADING_INT_PATTERN = re.compile(r"^\s*([+-]?\d+)")


class RecordRejected(ValueError):
    """A single export row could not be turned into an activity record."""


class UnknownActivityFile(ValueError):
    """An export file name does not map to any activity kind."""


def detect_activity_kind(filename: str) -> ActivityKind | None:
    """Guess the activity kind from an export file name.

    Rules are checked in order; "expressed" milk exports are bottle feeds,
    other "pump" exports are pumping sessions.
    """
    lower = filename.lower()
    if "sleep" in lower:
        return ActivityKind.SLEEP
    if "nursing" in lower:
        return ActivityKind.NURSING
    if "pump" in lower and "expressed" not in lower:
        return ActivityKind.PUMPING
    if "expressed" in lower:
        return ActivityKind.BOTTLE
    if "diaper" in lower:
        return ActivityKind.DIAPER
    return None


def kind_for_filename(filename: str) -> ActivityKind:
    """Like :func:`detect_activity_kind` but raises for unknown files.

    Raises:
        UnknownActivityFile: If no kind matches
    """
    kind = detect_activity_kind(filename)
    if kind is None:
        raise UnknownActivityFile(f"Unknown file type: {filename}")
    return kind


def parse_timestamp(text: str | None) -> datetime | None:
    """Parse an export timestamp such as ``3/14/24, 21:05``.

    Two-digit years below 50 are 20xx, the rest 19xx.

    Returns:
        Naive local datetime, or None if the text is missing or invalid
    """
    if not text or not isinstance(text, str):
        return None

    cleaned = text.strip().strip('"')
    match = TIMESTAMP_PATTERN.match(cleaned)
    if not match:
        return None

    month, day, year, hours, minutes = (int(part) for part in match.groups())
    if year < 100:
        year = 2000 + year if year < 50 else 1900 + year

    if not (1 <= month <= 12 and 1 <= day <= 31 and 0 <= hours <= 23 and 0 <= minutes <= 59):
        return None

    try:
        return datetime(year, month, day, hours, minutes)
    except ValueError:
        # e.g. 2/30
        return None


def parse_int(text: str | None) -> int | None:
    """Leading integer of a field (``"45 min"`` -> 45), None if there is none."""
    if text is None:
        return None
    match = LEADING_INT_PATTERN.match(str(text))
    if not match:
        return None
    return int(match.group(1))


def parse_amount(text: str | None) -> float:
    """Numeric amount field; anything unparsable counts as 0."""
    try:
        return float(text) if text not in (None, "") else 0.0
    except (TypeError, ValueError):
        return 0.0


def require_timestamp(row: Row) -> datetime:
    """Parse the ``Time`` column or reject the row."""
    timestamp = parse_timestamp(row.get("Time"))
    if timestamp is None:
        raise RecordRejected(f"Invalid or missing Time: {row.get('Time')!r}")
    return timestamp


def require_duration(row: Row, column: str) -> int:
    """Parse a duration column; interval records need a positive value.

    Raises:
        RecordRejected: If the duration is missing, unparsable or not positive
    """
    duration = parse_int(row.get(column))
    if duration is None or duration <= 0:
        raise RecordRejected(f"Invalid {column}: {row.get(column)!r}")
    return duration


def note_of(row: Row) -> str:
    return row.get("Note") or ""
