"""Domain models."""

from care_rhythm_server.models.activity import (
    INSTANT_KINDS,
    INTERVAL_KINDS,
    ActivityKind,
    ActivityRecord,
    DateRange,
)
from care_rhythm_server.models.heatmap import (
    KIND_STYLES,
    HeatmapData,
    KindHeatmap,
    KindStyle,
    MinuteDaySet,
    RunSegment,
)

__all__ = [
    "INSTANT_KINDS",
    "INTERVAL_KINDS",
    "KIND_STYLES",
    "ActivityKind",
    "ActivityRecord",
    "DateRange",
    "HeatmapData",
    "KindHeatmap",
    "KindStyle",
    "MinuteDaySet",
    "RunSegment",
]
