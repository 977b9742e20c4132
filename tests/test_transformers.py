"""Tests for export row transformers.

These tests verify that Baby Tracker export rows are correctly turned into
activity records, and that unusable rows are rejected.
"""

from datetime import datetime

import pytest

from care_rhythm_server.models.activity import ActivityKind
from care_rhythm_server.transformers import (
    TRANSFORMERS,
    RecordRejected,
    UnknownActivityFile,
    detect_activity_kind,
    kind_for_filename,
    merge_activities,
    parse_timestamp,
    transform_rows,
)
from care_rhythm_server.transformers.base import parse_amount, parse_int


class TestParseTimestamp:
    """Tests for the export timestamp format."""

    def test_two_digit_year(self) -> None:
        """Test M/D/YY, HH:MM."""
        assert parse_timestamp("3/14/24, 21:05") == datetime(2024, 3, 14, 21, 5)

    def test_four_digit_year(self) -> None:
        """Test M/D/YYYY, HH:MM."""
        assert parse_timestamp("12/01/2023, 07:30") == datetime(2023, 12, 1, 7, 30)

    def test_comma_optional_and_quotes_stripped(self) -> None:
        """Test quoting and a missing comma are tolerated."""
        assert parse_timestamp(' "3/14/24 9:05" ') == datetime(2024, 3, 14, 9, 5)

    def test_century_pivot(self) -> None:
        """Test years 50-99 are 19xx."""
        assert parse_timestamp("1/1/99, 00:00") == datetime(1999, 1, 1, 0, 0)
        assert parse_timestamp("1/1/49, 00:00") == datetime(2049, 1, 1, 0, 0)

    @pytest.mark.parametrize(
        "text",
        [
            None,
            "",
            "yesterday",
            "13/1/24, 10:00",
            "1/32/24, 10:00",
            "1/1/24, 24:00",
            "1/1/24, 10:60",
            "2/30/24, 10:00",
        ],
    )
    def test_invalid(self, text: str | None) -> None:
        """Test malformed or impossible timestamps give None."""
        assert parse_timestamp(text) is None


class TestFieldParsing:
    """Tests for numeric field helpers."""

    def test_parse_int_leading_digits(self) -> None:
        """Test the leading integer is used."""
        assert parse_int("45") == 45
        assert parse_int(" 12.7") == 12
        assert parse_int("abc") is None
        assert parse_int(None) is None

    def test_parse_amount_defaults_to_zero(self) -> None:
        """Test unparsable amounts count as zero."""
        assert parse_amount("3.5") == 3.5
        assert parse_amount("") == 0.0
        assert parse_amount(None) == 0.0
        assert parse_amount("n/a") == 0.0


class TestDetectActivityKind:
    """Tests for file-name based kind detection."""

    @pytest.mark.parametrize(
        ("filename", "kind"),
        [
            ("Baby_sleep.csv", ActivityKind.SLEEP),
            ("NURSING.csv", ActivityKind.NURSING),
            ("baby_pump.csv", ActivityKind.PUMPING),
            ("baby_expressed.csv", ActivityKind.BOTTLE),
            ("pumped_expressed_milk.csv", ActivityKind.BOTTLE),
            ("diaper.csv", ActivityKind.DIAPER),
        ],
    )
    def test_known_files(self, filename: str, kind: ActivityKind) -> None:
        """Test each export file maps to its kind."""
        assert detect_activity_kind(filename) == kind
        assert kind_for_filename(filename) == kind

    def test_unknown_file(self) -> None:
        """Test unknown files return None or raise."""
        assert detect_activity_kind("growth.csv") is None
        with pytest.raises(UnknownActivityFile, match="growth.csv"):
            kind_for_filename("growth.csv")


class TestIntervalTransformers:
    """Tests for sleep, nursing and pumping rows."""

    def test_sleep(self) -> None:
        """Test a complete sleep row."""
        record = TRANSFORMERS[ActivityKind.SLEEP].transform(
            {
                "Baby": "A",
                "Time": "3/14/24, 21:05",
                "Duration(minutes)": "480",
                "Note": "good night",
            }
        )
        assert record.kind == ActivityKind.SLEEP
        assert record.timestamp == datetime(2024, 3, 14, 21, 5)
        assert record.duration_minutes == 480
        assert record.note == "good night"
        assert record.minute == 21 * 60 + 5

    def test_nursing(self) -> None:
        """Test a nursing row uses the total duration and keeps the start side."""
        record = TRANSFORMERS[ActivityKind.NURSING].transform(
            {
                "Time": "3/14/24, 02:10",
                "Start Side": "Left",
                "Left duration (min)": "8",
                "Right duration (min)": "7",
                "Total Duration (min)": "15",
            }
        )
        assert record.duration_minutes == 15
        assert record.start_side == "Left"
        assert record.note == ""

    def test_pumping(self) -> None:
        """Test a pumping row keeps the total amount."""
        record = TRANSFORMERS[ActivityKind.PUMPING].transform(
            {"Time": "3/14/24, 07:00", "Total Duration (min)": "20", "Total amount (oz.)": "4.5"}
        )
        assert record.duration_minutes == 20
        assert record.amount_oz == 4.5

    @pytest.mark.parametrize("duration", ["0", "-5", "", "abc", None])
    def test_rejects_bad_duration(self, duration: str | None) -> None:
        """Test interval rows need a positive duration."""
        with pytest.raises(RecordRejected):
            TRANSFORMERS[ActivityKind.SLEEP].transform(
                {"Time": "3/14/24, 21:05", "Duration(minutes)": duration}
            )

    def test_rejects_bad_time(self) -> None:
        """Test rows without a usable time are rejected."""
        with pytest.raises(RecordRejected, match="Time"):
            TRANSFORMERS[ActivityKind.NURSING].transform(
                {"Time": "not a time", "Total Duration (min)": "10"}
            )


class TestInstantTransformers:
    """Tests for bottle and diaper rows."""

    def test_bottle(self) -> None:
        """Test a bottle row has no duration."""
        record = TRANSFORMERS[ActivityKind.BOTTLE].transform(
            {"Time": "3/14/24, 18:00", "Amount (oz.)": "3"}
        )
        assert record.duration_minutes is None
        assert record.amount_oz == 3.0

    def test_diaper_default_status(self) -> None:
        """Test a missing status becomes Unknown."""
        record = TRANSFORMERS[ActivityKind.DIAPER].transform({"Time": "3/14/24, 18:00"})
        assert record.status == "Unknown"
        assert not record.kind.is_interval


class TestTransformRows:
    """Tests for batch conversion and merging."""

    def test_skips_invalid_rows(self) -> None:
        """Test invalid rows are dropped and valid ones kept in order."""
        rows = [
            {"Time": "3/14/24, 21:05", "Duration(minutes)": "60"},
            {"Time": "3/14/24, 23:00", "Duration(minutes)": "0"},
            {"Time": "garbage", "Duration(minutes)": "60"},
            {"Time": "3/15/24, 01:00", "Duration(minutes)": "30"},
        ]
        records = transform_rows(ActivityKind.SLEEP, rows)
        assert [r.timestamp.hour for r in records] == [21, 1]

    def test_merge_activities(self) -> None:
        """Test per-kind lists are concatenated and every kind is present."""
        diaper = ActivityKind.DIAPER
        first = {diaper: transform_rows(diaper, [{"Time": "1/1/24, 1:00"}])}
        second = {diaper: transform_rows(diaper, [{"Time": "1/2/24, 1:00"}])}
        merged = merge_activities(first, second)
        assert set(merged) == set(ActivityKind)
        assert len(merged[ActivityKind.DIAPER]) == 2
        assert merged[ActivityKind.SLEEP] == []
