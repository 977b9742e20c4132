"""Pydantic schemas for the heatmap API."""

from datetime import date, datetime

from pydantic import BaseModel, Field

from care_rhythm_server.models.activity import ActivityKind, ActivityRecord, DateRange


class ActivityIn(BaseModel):
    """One activity record as submitted by a client."""

    timestamp: datetime = Field(description="Start (interval kinds) or occurrence (instant kinds)")
    duration_minutes: int | None = Field(
        default=None, gt=0, description="Duration in minutes; interval kinds only"
    )
    note: str = Field(default="", description="Free-text note")

    def to_record(self, kind: ActivityKind) -> ActivityRecord:
        # Wall-clock components are used as given; any offset is dropped
        return ActivityRecord(
            kind=kind,
            timestamp=self.timestamp.replace(tzinfo=None),
            duration_minutes=self.duration_minutes,
            note=self.note,
        )


class ActivitiesIn(BaseModel):
    """Activity records grouped by kind."""

    activities: dict[ActivityKind, list[ActivityIn]] = Field(
        default_factory=dict, description="Records keyed by activity kind"
    )

    def to_activity_set(self) -> dict[ActivityKind, list[ActivityRecord]]:
        return {
            kind: [item.to_record(kind) for item in items]
            for kind, items in self.activities.items()
        }


class HeatmapRequest(ActivitiesIn):
    """Heatmap computation request."""

    start: date | None = Field(
        default=None, description="Inclusive first day (unbounded if omitted)"
    )
    end: date | None = Field(default=None, description="Inclusive last day (unbounded if omitted)")
    tolerance: float | None = Field(
        default=None,
        ge=0.0,
        le=1.0,
        description="Segment merge tolerance (server default if omitted)",
    )
    visible: list[ActivityKind] | None = Field(
        default=None, description="Kinds to segment (all if omitted)"
    )

    @property
    def date_range(self) -> DateRange | None:
        if self.start is None and self.end is None:
            return None
        return DateRange(start=self.start, end=self.end)


class SegmentOut(BaseModel):
    """Drawable run of near-constant intensity."""

    start_minute: int = Field(description="First minute (inclusive)")
    end_minute: int = Field(description="Last minute (exclusive)")
    intensity: float = Field(description="Share of days active, 0-1")


class KindHeatmapOut(BaseModel):
    """Heatmap for one activity kind."""

    kind: ActivityKind
    name: str = Field(description="Display label")
    color: str = Field(description="Display color (hex)")
    record_count: int = Field(description="Records inside the date window")
    segments: list[SegmentOut] = Field(default_factory=list)
    intensities: list[float] | None = Field(
        default=None, description="Per-minute intensities (only when requested)"
    )


class DateRangeOut(BaseModel):
    """Inclusive date window."""

    start: date | None
    end: date | None


class HeatmapResponse(BaseModel):
    """Heatmaps for all kinds over one filtered dataset."""

    total_days: int = Field(
        description="Distinct days across all kinds (normalization denominator)"
    )
    date_range: DateRangeOut | None = Field(description="Earliest and latest observed day")
    generated_at: datetime
    current_minute: int = Field(description="Minute of day for the live position marker")
    heatmaps: list[KindHeatmapOut]


class MinuteActivityOut(BaseModel):
    """One kind's intensity at a hovered minute."""

    kind: ActivityKind
    name: str
    color: str
    intensity: float
    percentage: str = Field(description="Intensity formatted as a whole percentage")


class MinuteResponse(BaseModel):
    """Tooltip content for one minute of the day."""

    minute: int
    label: str = Field(description="HH:MM")
    activities: list[MinuteActivityOut]


class PaletteEntry(BaseModel):
    """Static display configuration for one kind."""

    kind: ActivityKind
    name: str
    color: str
    interval: bool = Field(description="True for kinds recorded with a duration")


class NowResponse(BaseModel):
    """Current position for the live time marker."""

    minute: int
    label: str
