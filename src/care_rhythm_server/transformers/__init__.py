"""Export row -> ActivityRecord transformers."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Protocol

import structlog

from care_rhythm_server.models.activity import ActivityKind, ActivityRecord
from care_rhythm_server.transformers.base import (
    RecordRejected,
    Row,
    UnknownActivityFile,
    detect_activity_kind,
    kind_for_filename,
    parse_timestamp,
)
from care_rhythm_server.transformers.bottle import BottleTransformer
from care_rhythm_server.transformers.diaper import DiaperTransformer
from care_rhythm_server.transformers.nursing import NursingTransformer
from care_rhythm_server.transformers.pumping import PumpingTransformer
from care_rhythm_server.transformers.sleep import SleepTransformer

logger = structlog.get_logger()


class RowTransformer(Protocol):
    kind: ActivityKind

    @staticmethod
    def transform(row: Row) -> ActivityRecord: ...


TRANSFORMERS: dict[ActivityKind, type[RowTransformer]] = {
    ActivityKind.SLEEP: SleepTransformer,
    ActivityKind.NURSING: NursingTransformer,
    ActivityKind.PUMPING: PumpingTransformer,
    ActivityKind.BOTTLE: BottleTransformer,
    ActivityKind.DIAPER: DiaperTransformer,
}


def transform_rows(kind: ActivityKind, rows: Iterable[Row]) -> list[ActivityRecord]:
    """Convert export rows of one kind, skipping rows that cannot be used.

    Args:
        kind: Activity kind of every row
        rows: Column-name -> text mappings

    Returns:
        Records for the rows that passed validation
    """
    transformer = TRANSFORMERS[kind]
    records: list[ActivityRecord] = []
    skipped: list[tuple[int, str]] = []

    for idx, row in enumerate(rows):
        try:
            records.append(transformer.transform(row))
        except RecordRejected as e:
            skipped.append((idx, str(e)))

    if skipped:
        logger.warning(
            "Skipped invalid export rows",
            kind=kind.value,
            skipped=len(skipped),
            accepted=len(records),
            reasons=skipped[:10],
        )
    return records


def merge_activities(
    *collections: Mapping[ActivityKind, Sequence[ActivityRecord]],
) -> dict[ActivityKind, list[ActivityRecord]]:
    """Concatenate per-kind record lists; every kind is present in the result."""
    merged: dict[ActivityKind, list[ActivityRecord]] = {kind: [] for kind in ActivityKind}
    for collection in collections:
        for kind, records in collection.items():
            merged[ActivityKind(kind)].extend(records)
    return merged


__all__ = [
    "TRANSFORMERS",
    "BottleTransformer",
    "DiaperTransformer",
    "NursingTransformer",
    "PumpingTransformer",
    "RecordRejected",
    "SleepTransformer",
    "UnknownActivityFile",
    "detect_activity_kind",
    "kind_for_filename",
    "merge_activities",
    "parse_timestamp",
    "transform_rows",
]
