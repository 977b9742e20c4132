"""Activity record model shared by ingestion, filtering and aggregation."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

from care_rhythm_server.core.clock import date_key, time_of_day


class ActivityKind(str, Enum):
    """Closed set of tracked infant-care activities."""

    SLEEP = "sleep"
    NURSING = "nursing"
    PUMPING = "pumping"
    BOTTLE = "bottle"  # Expressed milk
    DIAPER = "diaper"

    @property
    def is_interval(self) -> bool:
        """True for kinds recorded with a start instant and a duration."""
        return self in INTERVAL_KINDS


INTERVAL_KINDS = frozenset({ActivityKind.SLEEP, ActivityKind.NURSING, ActivityKind.PUMPING})
INSTANT_KINDS = frozenset({ActivityKind.BOTTLE, ActivityKind.DIAPER})


@dataclass(frozen=True)
class ActivityRecord:
    """One normalized activity.

    ``timestamp`` is the start of an interval kind or the occurrence of an
    instant kind. Interval kinds carry a positive ``duration_minutes``;
    instant kinds carry none. Ingestion guarantees this, nothing downstream
    re-checks it.
    """

    kind: ActivityKind
    timestamp: datetime
    duration_minutes: int | None = None
    note: str = ""

    # Kind-specific details carried through from the export
    start_side: str | None = None  # nursing
    amount_oz: float | None = None  # pumping, bottle
    status: str | None = None  # diaper

    @property
    def minute(self) -> int:
        """Minute of day of the start/occurrence instant."""
        return time_of_day(self.timestamp)

    @property
    def day(self) -> date:
        """Calendar day the record is attributed to."""
        return date_key(self.timestamp)


@dataclass(frozen=True)
class DateRange:
    """Inclusive date window; ``None`` leaves that side unbounded.

    Bounds may be plain dates (compared against the record's calendar day)
    or datetimes (compared against the record's timestamp).
    """

    start: date | None = None
    end: date | None = None

    @property
    def is_unbounded(self) -> bool:
        return self.start is None and self.end is None

    def contains(self, timestamp: datetime) -> bool:
        """Check whether a record timestamp falls inside the window."""
        if self.start is not None and _compare_key(self.start, timestamp) < self.start:
            return False
        if self.end is not None and _compare_key(self.end, timestamp) > self.end:
            return False
        return True


def _compare_key(bound: date, timestamp: datetime) -> date:
    # datetime subclasses date, so check it first
    if isinstance(bound, datetime):
        return timestamp
    return date_key(timestamp)
