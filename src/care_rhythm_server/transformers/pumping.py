"""Pumping export row transformer.

Columns: Time, Start Side, Left duration (min), Right duration (min),
Total Duration (min), Left amount (oz.), Right amount (oz.),
Total amount (oz.), Note
"""

from __future__ import annotations

from care_rhythm_server.models.activity import ActivityKind, ActivityRecord
from care_rhythm_server.transformers.base import (
    Row,
    note_of,
    parse_amount,
    require_duration,
    require_timestamp,
)


class PumpingTransformer:
    """Transform a pumping export row -> ActivityRecord."""

    kind = ActivityKind.PUMPING

    @staticmethod
    def transform(row: Row) -> ActivityRecord:
        """Convert a pumping row; the amount falls back to 0 when blank."""
        return ActivityRecord(
            kind=ActivityKind.PUMPING,
            timestamp=require_timestamp(row),
            duration_minutes=require_duration(row, "Total Duration (min)"),
            note=note_of(row),
            amount_oz=parse_amount(row.get("Total amount (oz.)")),
        )
