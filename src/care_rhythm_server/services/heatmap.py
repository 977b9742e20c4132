"""Heatmap pipeline service: filter, aggregate, segment."""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass
from datetime import date

import structlog

from care_rhythm_server.core.config import settings
from care_rhythm_server.models.activity import ActivityKind, DateRange
from care_rhythm_server.models.heatmap import HeatmapData
from care_rhythm_server.services.aggregator import aggregate
from care_rhythm_server.services.range_filter import ActivitySet, default_window, filter_activities
from care_rhythm_server.services.segmenter import find_intensity_runs

logger = structlog.get_logger()


@dataclass
class MinuteActivity:
    """One kind's share of days at a hovered minute."""

    kind: ActivityKind
    name: str
    color: str
    intensity: float


class HeatmapService:
    """Service for turning activity records into renderable 24-hour heatmaps.

    The whole pipeline is recomputed on every call; datasets are small
    (thousands of records, 1440 slots per kind) and no state is kept
    between calls.
    """

    def __init__(
        self,
        tolerance: float | None = None,
        half_window: int | None = None,
        window_days: int | None = None,
    ) -> None:
        """Initialize heatmap service.

        Args:
            tolerance: Segment merge tolerance (defaults to settings)
            half_window: Instant-event half window in minutes (defaults to settings)
            window_days: Default-window lookback in days (defaults to settings)
        """
        self.tolerance = settings.run_tolerance if tolerance is None else tolerance
        self.half_window = settings.instant_half_window if half_window is None else half_window
        self.window_days = settings.default_window_days if window_days is None else window_days
        self.logger = logger.bind(service="heatmap")

    def build(
        self,
        activities: ActivitySet,
        date_range: DateRange | None = None,
        visible: Collection[ActivityKind] | None = None,
    ) -> HeatmapData:
        """Run the full pipeline.

        Hidden kinds are still aggregated and still count toward the
        distinct-day denominator; they just get no segments.

        Args:
            activities: Records grouped by kind
            date_range: Optional inclusive window applied first
            visible: Kinds to segment (all kinds when None)

        Returns:
            HeatmapData with intensities for every kind and segments for visible ones
        """
        filtered = filter_activities(activities, date_range)
        self.logger.debug(
            "Activities filtered",
            date_range=_describe_range(date_range),
            counts={kind.value: len(records) for kind, records in filtered.items()},
        )

        data = aggregate(filtered, half_window=self.half_window)

        for kind, heatmap in data.heatmaps.items():
            if visible is not None and kind not in visible:
                continue
            heatmap.segments = find_intensity_runs(heatmap.intensities, self.tolerance)

        self.logger.info(
            "Heatmap built",
            total_days=data.total_days,
            records=sum(h.record_count for h in data.heatmaps.values()),
            segments={kind.value: len(h.segments) for kind, h in data.heatmaps.items()},
        )
        return data

    def describe_minute(
        self,
        data: HeatmapData,
        minute: int,
        visible: Collection[ActivityKind] | None = None,
    ) -> list[MinuteActivity]:
        """Active kinds at one minute, strongest first.

        Args:
            data: Result of :meth:`build`
            minute: Minute of day (0-1439)
            visible: Kinds to include (all kinds when None)

        Returns:
            Kinds with non-zero intensity at ``minute``, sorted by descending intensity
        """
        active = [
            MinuteActivity(
                kind=kind,
                name=heatmap.name,
                color=heatmap.color,
                intensity=heatmap.intensities[minute],
            )
            for kind, heatmap in data.heatmaps.items()
            if (visible is None or kind in visible) and heatmap.intensities[minute] > 0
        ]
        active.sort(key=lambda a: a.intensity, reverse=True)
        return active

    def default_window(
        self, activities: ActivitySet, today: date | None = None
    ) -> DateRange | None:
        """Initial date window for freshly loaded data (None when empty)."""
        window = default_window(activities, today=today, lookback_days=self.window_days)
        self.logger.debug("Default window", date_range=_describe_range(window))
        return window


def _describe_range(date_range: DateRange | None) -> dict[str, str | None] | None:
    if date_range is None:
        return None
    return {
        "start": date_range.start.isoformat() if date_range.start else None,
        "end": date_range.end.isoformat() if date_range.end else None,
    }
