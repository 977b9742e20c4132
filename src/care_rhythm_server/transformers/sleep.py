"""Sleep export row transformer.

Columns: Baby, Time, Duration(minutes), Note
"""

from __future__ import annotations

from care_rhythm_server.models.activity import ActivityKind, ActivityRecord
from care_rhythm_server.transformers.base import Row, note_of, require_duration, require_timestamp


class SleepTransformer:
    """Transform a sleep export row -> ActivityRecord."""

    kind = ActivityKind.SLEEP

    @staticmethod
    def transform(row: Row) -> ActivityRecord:
        """Convert a sleep row; rejects rows without a positive duration."""
        return ActivityRecord(
            kind=ActivityKind.SLEEP,
            timestamp=require_timestamp(row),
            duration_minutes=require_duration(row, "Duration(minutes)"),
            note=note_of(row),
        )
