"""Shared test fixtures."""

from datetime import date

import pytest

from care_rhythm_server.models.activity import ActivityKind, ActivityRecord
from care_rhythm_server.services.heatmap import HeatmapService

D1 = date(2024, 3, 1)
D2 = date(2024, 3, 2)
D3 = date(2024, 3, 3)


@pytest.fixture
def service() -> HeatmapService:
    """Heatmap service with the stock tolerance, window and lookback."""
    return HeatmapService(tolerance=0.02, half_window=7, window_days=30)


@pytest.fixture
def empty_log() -> dict[ActivityKind, list[ActivityRecord]]:
    """Activity set with every kind present but no records."""
    return {kind: [] for kind in ActivityKind}


@pytest.fixture
def activity_log_21d() -> dict[ActivityKind, list[ActivityRecord]]:
    """Three weeks of generated logs starting on D1."""
    from tests.fixtures.activity_seed import seed_activity_log

    return seed_activity_log(D1, days=21)
