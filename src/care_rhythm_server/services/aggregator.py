"""Minute-resolution aggregation of activity records onto a 24-hour cycle.

Each kind is folded into a :class:`MinuteDaySet` (which days were active at
which minute). Intensities are the per-minute day counts divided by the
number of distinct days observed across *all* kinds, so kinds are directly
comparable on one chart.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from datetime import date

from care_rhythm_server.core.clock import MINUTES_PER_DAY, wrap_minute
from care_rhythm_server.models.activity import ActivityKind, ActivityRecord
from care_rhythm_server.models.heatmap import HeatmapData, KindHeatmap, MinuteDaySet

# Instant events are widened to a 15-minute window so they stay visible
INSTANT_HALF_WINDOW = 7


def mark_interval(
    day_set: MinuteDaySet, start_minute: int, duration_minutes: int, day: date
) -> None:
    """Mark ``[start_minute, start_minute + duration)`` for ``day``.

    Intervals running past midnight wrap onto the start of the cycle. The
    wrapped part is still attributed to the day the activity started.
    """
    end_minute = start_minute + duration_minutes
    if end_minute <= MINUTES_PER_DAY:
        day_set.mark_range(start_minute, end_minute, day)
    else:
        day_set.mark_range(start_minute, MINUTES_PER_DAY, day)
        day_set.mark_range(0, end_minute % MINUTES_PER_DAY, day)


def mark_instant(
    day_set: MinuteDaySet, minute: int, day: date, half_window: int = INSTANT_HALF_WINDOW
) -> None:
    """Mark the ``2 * half_window + 1`` minutes centred on ``minute``, wrapping both ways."""
    for offset in range(-half_window, half_window + 1):
        day_set.mark(wrap_minute(minute + offset), day)


def aggregate_intervals(records: Iterable[ActivityRecord]) -> MinuteDaySet:
    """Build the day set for an interval kind (sleep, nursing, pumping)."""
    day_set = MinuteDaySet()
    for record in records:
        # Duration > 0 is guaranteed by ingestion
        duration = record.duration_minutes or 0
        mark_interval(day_set, record.minute, duration, record.day)
    return day_set


def aggregate_instants(
    records: Iterable[ActivityRecord], half_window: int = INSTANT_HALF_WINDOW
) -> MinuteDaySet:
    """Build the day set for an instant kind (bottle, diaper)."""
    day_set = MinuteDaySet()
    for record in records:
        mark_instant(day_set, record.minute, record.day, half_window)
    return day_set


def aggregate_kind(
    kind: ActivityKind,
    records: Iterable[ActivityRecord],
    half_window: int = INSTANT_HALF_WINDOW,
) -> MinuteDaySet:
    """Dispatch on the kind's classification."""
    if kind.is_interval:
        return aggregate_intervals(records)
    return aggregate_instants(records, half_window)


def compute_intensities(day_set: MinuteDaySet, total_days: int) -> list[float]:
    """Per-minute share of days active, clamped to 1.0; all zero when no days."""
    if total_days <= 0:
        return [0.0] * MINUTES_PER_DAY
    return [min(1.0, count / total_days) for count in day_set.counts()]


def aggregate(
    activities: Mapping[ActivityKind, Sequence[ActivityRecord]],
    half_window: int = INSTANT_HALF_WINDOW,
) -> HeatmapData:
    """Aggregate every kind and normalize by the global distinct-day count.

    Every kind gets an entry; kinds without records have all-zero curves.
    Segments are left empty for the segmenter to fill.

    Args:
        activities: Already-filtered records grouped by kind
        half_window: Half width of the instant-event window, in minutes

    Returns:
        HeatmapData with intensities for every kind
    """
    day_sets: dict[ActivityKind, MinuteDaySet] = {}
    counts: dict[ActivityKind, int] = {}
    unique_days: set[date] = set()

    for kind in ActivityKind:
        records = activities.get(kind) or ()
        day_set = aggregate_kind(kind, records, half_window)
        day_sets[kind] = day_set
        counts[kind] = len(records)
        unique_days |= day_set.observed_days

    total_days = len(unique_days)
    heatmaps = {
        kind: KindHeatmap(
            kind=kind,
            record_count=counts[kind],
            day_set=day_set,
            intensities=compute_intensities(day_set, total_days),
        )
        for kind, day_set in day_sets.items()
    }
    return HeatmapData(
        heatmaps=heatmaps,
        total_days=total_days,
        unique_days=frozenset(unique_days),
    )
