"""Expressed-milk (bottle) export row transformer.

Columns: Baby, Time, Amount (oz.), Note
"""

from __future__ import annotations

from care_rhythm_server.models.activity import ActivityKind, ActivityRecord
from care_rhythm_server.transformers.base import Row, note_of, parse_amount, require_timestamp


class BottleTransformer:
    """Transform a bottle export row -> ActivityRecord."""

    kind = ActivityKind.BOTTLE

    @staticmethod
    def transform(row: Row) -> ActivityRecord:
        return ActivityRecord(
            kind=ActivityKind.BOTTLE,
            timestamp=require_timestamp(row),
            note=note_of(row),
            amount_oz=parse_amount(row.get("Amount (oz.)")),
        )
