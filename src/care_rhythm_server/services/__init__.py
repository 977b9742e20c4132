"""Application services."""

from care_rhythm_server.services.heatmap import HeatmapService, MinuteActivity

__all__ = [
    "HeatmapService",
    "MinuteActivity",
]
