"""Date-window filtering applied before aggregation."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from datetime import date, timedelta

from care_rhythm_server.core.clock import local_now
from care_rhythm_server.models.activity import ActivityKind, ActivityRecord, DateRange

DEFAULT_WINDOW_DAYS = 30

ActivitySet = Mapping[ActivityKind, Sequence[ActivityRecord]]


def filter_activities(
    activities: ActivitySet,
    date_range: DateRange | None = None,
) -> dict[ActivityKind, list[ActivityRecord]]:
    """Keep records whose start (or occurrence) instant lies inside the window.

    Every kind is present in the result; kinds with nothing left map to an
    empty list.

    Args:
        activities: Records grouped by kind
        date_range: Inclusive window, or None for no filtering

    Returns:
        New per-kind lists; the input is not modified
    """
    filtered: dict[ActivityKind, list[ActivityRecord]] = {}
    for kind in ActivityKind:
        records = activities.get(kind) or ()
        if date_range is None or date_range.is_unbounded:
            filtered[kind] = list(records)
        else:
            filtered[kind] = [r for r in records if date_range.contains(r.timestamp)]
    return filtered


def iter_records(activities: ActivitySet) -> Iterable[ActivityRecord]:
    for records in activities.values():
        yield from records


def observed_date_range(activities: ActivitySet) -> tuple[date, date] | None:
    """Earliest and latest calendar day across all kinds, or None if empty."""
    days = {record.day for record in iter_records(activities)}
    if not days:
        return None
    return min(days), max(days)


def default_window(
    activities: ActivitySet,
    today: date | None = None,
    lookback_days: int = DEFAULT_WINDOW_DAYS,
) -> DateRange | None:
    """Initial window after loading data.

    Start is the later of (latest day - ``lookback_days``) and the earliest
    day; end is the earlier of ``today`` and the latest day. The end never
    precedes the start, so the window is non-empty whenever data exists.

    Returns:
        The window, or None when there are no records at all
    """
    bounds = observed_date_range(activities)
    if bounds is None:
        return None

    earliest, latest = bounds
    if today is None:
        today = local_now().date()

    start = max(latest - timedelta(days=lookback_days), earliest)
    end = max(min(today, latest), start)
    return DateRange(start=start, end=end)
