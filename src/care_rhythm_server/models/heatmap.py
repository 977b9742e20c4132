"""Heatmap result models: per-minute day sets, run segments, per-kind curves."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import NamedTuple

from care_rhythm_server.core.clock import MINUTES_PER_DAY, MINUTES_PER_HOUR
from care_rhythm_server.models.activity import ActivityKind


class KindStyle(NamedTuple):
    """Display label and color for one activity kind."""

    name: str
    color: str


# Static lookup for the rendering side, not derived from data
KIND_STYLES: dict[ActivityKind, KindStyle] = {
    ActivityKind.SLEEP: KindStyle("Sleep", "#66BB6A"),
    ActivityKind.NURSING: KindStyle("Nursing", "#F48FB1"),
    ActivityKind.PUMPING: KindStyle("Pumping", "#CE93D8"),
    ActivityKind.BOTTLE: KindStyle("Bottle", "#64B5F6"),
    ActivityKind.DIAPER: KindStyle("Diaper", "#FFB74D"),
}


class MinuteDaySet:
    """For each minute of the day, the set of calendar days it was active.

    Each distinct day is assigned a dense bit index on first sight and every
    slot stores an int bitmask over those indices. Marking the same day twice
    is idempotent, so cardinality counts distinct days, never occurrences.
    """

    __slots__ = ("_slots", "_index", "_days")

    def __init__(self) -> None:
        self._slots = [0] * MINUTES_PER_DAY
        self._index: dict[date, int] = {}
        self._days: list[date] = []

    def _bit(self, day: date) -> int:
        position = self._index.get(day)
        if position is None:
            position = len(self._days)
            self._index[day] = position
            self._days.append(day)
        return 1 << position

    def mark(self, minute: int, day: date) -> None:
        """Mark a single minute (0-1439) as active on ``day``."""
        self._slots[minute] |= self._bit(day)

    def mark_range(self, start: int, end: int, day: date) -> None:
        """Mark the half-open minute range ``[start, end)`` on ``day``."""
        bit = self._bit(day)
        slots = self._slots
        for minute in range(start, end):
            slots[minute] |= bit

    def count(self, minute: int) -> int:
        """Number of distinct days active at ``minute``."""
        return self._slots[minute].bit_count()

    def days_at(self, minute: int) -> frozenset[date]:
        """The distinct days active at ``minute``."""
        mask = self._slots[minute]
        return frozenset(day for position, day in enumerate(self._days) if mask >> position & 1)

    def counts(self) -> list[int]:
        """Distinct-day counts for all 1440 minutes."""
        return [mask.bit_count() for mask in self._slots]

    @property
    def observed_days(self) -> frozenset[date]:
        """Every day that contributed at least one record."""
        return frozenset(self._days)

    def __len__(self) -> int:
        return MINUTES_PER_DAY


class RunSegment(NamedTuple):
    """Contiguous minute range ``[start_minute, end_minute)`` drawn at one intensity."""

    start_minute: int
    end_minute: int
    intensity: float

    def split_by_hour(self) -> list[tuple[int, int, int, float]]:
        """Break the segment into per-hour row pieces.

        Returns:
            ``(hour, start_in_hour, end_in_hour, intensity)`` tuples, where the
            minute bounds are half-open within a 60-minute row.
        """
        start_hour = self.start_minute // MINUTES_PER_HOUR
        end_hour = (self.end_minute - 1) // MINUTES_PER_HOUR
        pieces = []
        for hour in range(start_hour, end_hour + 1):
            row_start = hour * MINUTES_PER_HOUR
            piece_start = max(self.start_minute, row_start) - row_start
            piece_end = min(self.end_minute, row_start + MINUTES_PER_HOUR) - row_start
            pieces.append((hour, piece_start, piece_end, self.intensity))
        return pieces


@dataclass
class KindHeatmap:
    """Aggregated 24-hour curve for one activity kind."""

    kind: ActivityKind
    record_count: int
    day_set: MinuteDaySet
    intensities: list[float]
    segments: list[RunSegment] = field(default_factory=list)

    @property
    def name(self) -> str:
        return KIND_STYLES[self.kind].name

    @property
    def color(self) -> str:
        return KIND_STYLES[self.kind].color


@dataclass
class HeatmapData:
    """Aggregation result across all kinds for one filtered dataset."""

    heatmaps: dict[ActivityKind, KindHeatmap]
    total_days: int
    unique_days: frozenset[date] = frozenset()

    @property
    def date_range(self) -> tuple[date, date] | None:
        """Earliest and latest observed day, or None when there is no data."""
        if not self.unique_days:
            return None
        return min(self.unique_days), max(self.unique_days)
