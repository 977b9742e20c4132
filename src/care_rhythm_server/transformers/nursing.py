"""Nursing export row transformer.

Columns: Baby, Time, Start Side, Left duration (min), Right duration (min),
Total Duration (min), Note
"""

from __future__ import annotations

from care_rhythm_server.models.activity import ActivityKind, ActivityRecord
from care_rhythm_server.transformers.base import Row, note_of, require_duration, require_timestamp


class NursingTransformer:
    """Transform a nursing export row -> ActivityRecord."""

    kind = ActivityKind.NURSING

    @staticmethod
    def transform(row: Row) -> ActivityRecord:
        """Convert a nursing row using the total (left + right) duration."""
        return ActivityRecord(
            kind=ActivityKind.NURSING,
            timestamp=require_timestamp(row),
            duration_minutes=require_duration(row, "Total Duration (min)"),
            note=note_of(row),
            start_side=row.get("Start Side") or "",
        )
