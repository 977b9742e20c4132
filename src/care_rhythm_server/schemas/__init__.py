"""Pydantic schemas for API requests and responses."""

from care_rhythm_server.schemas.heatmap import (
    ActivitiesIn,
    ActivityIn,
    DateRangeOut,
    HeatmapRequest,
    HeatmapResponse,
    KindHeatmapOut,
    MinuteActivityOut,
    MinuteResponse,
    NowResponse,
    PaletteEntry,
    SegmentOut,
)

__all__ = [
    "ActivitiesIn",
    "ActivityIn",
    "DateRangeOut",
    "HeatmapRequest",
    "HeatmapResponse",
    "KindHeatmapOut",
    "MinuteActivityOut",
    "MinuteResponse",
    "NowResponse",
    "PaletteEntry",
    "SegmentOut",
]
