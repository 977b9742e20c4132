"""Diaper export row transformer.

Columns: Baby, Time, Status, Note
"""

from __future__ import annotations

from care_rhythm_server.models.activity import ActivityKind, ActivityRecord
from care_rhythm_server.transformers.base import Row, note_of, require_timestamp


class DiaperTransformer:
    """Transform a diaper export row -> ActivityRecord."""

    kind = ActivityKind.DIAPER

    @staticmethod
    def transform(row: Row) -> ActivityRecord:
        return ActivityRecord(
            kind=ActivityKind.DIAPER,
            timestamp=require_timestamp(row),
            note=note_of(row),
            status=row.get("Status") or "Unknown",
        )
