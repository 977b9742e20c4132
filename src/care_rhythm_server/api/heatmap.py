"""Heatmap API endpoints."""

from litestar import Router, get, post
from litestar.exceptions import ValidationException
from litestar.status_codes import HTTP_200_OK

from care_rhythm_server.core.clock import (
    MINUTES_PER_DAY,
    current_minute_of_day,
    format_percentage,
    local_now,
    minutes_to_time_string,
)
from care_rhythm_server.core.config import settings
from care_rhythm_server.models.activity import ActivityKind
from care_rhythm_server.models.heatmap import KIND_STYLES, HeatmapData
from care_rhythm_server.schemas.heatmap import (
    ActivitiesIn,
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
from care_rhythm_server.services.heatmap import HeatmapService


def validate_activities(data: ActivitiesIn) -> None:
    """Check the duration contract of submitted records.

    Interval kinds need a positive duration, instant kinds must not carry one.

    Raises:
        ValidationException: If any record breaks the contract or a kind has too many records
    """
    for kind, items in data.activities.items():
        if len(items) > settings.max_records_per_kind:
            raise ValidationException(
                f"Too many {kind.value} records: {len(items)} "
                f"(max {settings.max_records_per_kind})"
            )
        for idx, item in enumerate(items):
            if kind.is_interval and item.duration_minutes is None:
                raise ValidationException(
                    f"{kind.value}[{idx}]: duration_minutes is required for interval activities"
                )
            if not kind.is_interval and item.duration_minutes is not None:
                raise ValidationException(
                    f"{kind.value}[{idx}]: duration_minutes is not allowed for instant activities"
                )


def validate_request(data: HeatmapRequest) -> None:
    """Validate a heatmap request body.

    Raises:
        ValidationException: If the records or the date window are invalid
    """
    validate_activities(data)
    if data.start is not None and data.end is not None and data.start > data.end:
        raise ValidationException("start must not be after end")


def _build(data: HeatmapRequest) -> tuple[HeatmapService, HeatmapData]:
    validate_request(data)
    service = HeatmapService(tolerance=data.tolerance)
    heatmap_data = service.build(
        data.to_activity_set(),
        date_range=data.date_range,
        visible=set(data.visible) if data.visible is not None else None,
    )
    return service, heatmap_data


@post("/heatmap", status_code=HTTP_200_OK)
async def build_heatmap(
    data: HeatmapRequest,
    include_intensities: bool = False,
) -> HeatmapResponse:
    """Compute 24-hour heatmaps for submitted activity records.

    Returns one entry per activity kind with its run segments. Kinds
    without records (or hidden via ``visible``) have no segments.

    Example:
        POST /api/v1/heatmap?include_intensities=true
    """
    _, heatmap_data = _build(data)

    bounds = heatmap_data.date_range
    return HeatmapResponse(
        total_days=heatmap_data.total_days,
        date_range=DateRangeOut(start=bounds[0], end=bounds[1]) if bounds else None,
        generated_at=local_now(),
        current_minute=current_minute_of_day(),
        heatmaps=[
            KindHeatmapOut(
                kind=kind,
                name=heatmap.name,
                color=heatmap.color,
                record_count=heatmap.record_count,
                segments=[
                    SegmentOut(
                        start_minute=s.start_minute,
                        end_minute=s.end_minute,
                        intensity=s.intensity,
                    )
                    for s in heatmap.segments
                ],
                intensities=heatmap.intensities if include_intensities else None,
            )
            for kind, heatmap in heatmap_data.heatmaps.items()
        ],
    )


@post("/heatmap/minute/{minute:int}", status_code=HTTP_200_OK)
async def describe_minute(minute: int, data: HeatmapRequest) -> MinuteResponse:
    """Get the active kinds at one minute of the day, strongest first.

    Raises:
        ValidationException: If the minute is outside 0-1439
    """
    if not 0 <= minute < MINUTES_PER_DAY:
        raise ValidationException(f"minute must be between 0 and {MINUTES_PER_DAY - 1}")

    service, heatmap_data = _build(data)
    visible = set(data.visible) if data.visible is not None else None
    return MinuteResponse(
        minute=minute,
        label=minutes_to_time_string(minute),
        activities=[
            MinuteActivityOut(
                kind=a.kind,
                name=a.name,
                color=a.color,
                intensity=a.intensity,
                percentage=format_percentage(a.intensity),
            )
            for a in service.describe_minute(heatmap_data, minute, visible=visible)
        ],
    )


@post("/heatmap/window", status_code=HTTP_200_OK)
async def get_default_window(data: ActivitiesIn) -> DateRangeOut:
    """Suggest the initial date window for freshly loaded records.

    The window covers the configured lookback (30 days by default) ending at
    the latest record, never past today or the data bounds. Both sides are
    null when there is no data.
    """
    validate_activities(data)
    window = HeatmapService().default_window(data.to_activity_set())
    if window is None:
        return DateRangeOut(start=None, end=None)
    return DateRangeOut(start=window.start, end=window.end)


@get("/heatmap/palette", status_code=HTTP_200_OK, sync_to_thread=False)
def get_palette() -> list[PaletteEntry]:
    """Get the display label and color for every activity kind."""
    return [
        PaletteEntry(
            kind=kind,
            name=KIND_STYLES[kind].name,
            color=KIND_STYLES[kind].color,
            interval=kind.is_interval,
        )
        for kind in ActivityKind
    ]


@get("/heatmap/now", status_code=HTTP_200_OK, sync_to_thread=False)
def get_now() -> NowResponse:
    """Get the current minute of day for the live time marker."""
    minute = current_minute_of_day(local_now())
    return NowResponse(minute=minute, label=minutes_to_time_string(minute))


# Router for heatmap endpoints
heatmap_router = Router(
    path="/",
    route_handlers=[
        build_heatmap,
        describe_minute,
        get_default_window,
        get_palette,
        get_now,
    ],
    tags=["Heatmap"],
)
