"""Tests for duration and clock-time formatting."""

from datetime import UTC, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from gomate.domain.formatters import (
    format_clock_time,
    format_duration,
    parse_timestamp,
    to_local_time,
)

ZURICH = ZoneInfo("Europe/Zurich")


class TestFormatDuration:
    """Tests for format_duration."""

    def test_when_duration_has_days_then_days_fold_into_hours(self) -> None:
        """Given "01d02:03:04", when formatting, then days are added to the hours."""
        assert format_duration("01d02:03:04") == "26h 03m 04s"

    def test_when_duration_has_no_days_then_hours_are_not_padded(self) -> None:
        """Given "05:06:07", when formatting, then hours lose the leading zero."""
        assert format_duration("05:06:07") == "5h 06m 07s"

    def test_when_duration_is_zero_days_then_hours_kept(self) -> None:
        """Given the usual upstream shape "00d00:56:00", when formatting, then 0h 56m."""
        assert format_duration("00d00:56:00") == "0h 56m 00s"

    @pytest.mark.parametrize("value", ["N/A", "", "56 min", "1:2", "01d02:03:04 extra"])
    def test_when_duration_does_not_match_then_returned_unchanged(self, value: str) -> None:
        """Given a non-duration string, when formatting, then it is returned as is."""
        assert format_duration(value) == value


class TestParseTimestamp:
    """Tests for parse_timestamp."""

    def test_when_offset_has_no_colon_then_parses(self) -> None:
        """Given the upstream "+0100" offset style, when parsing, then an aware datetime results."""
        result = parse_timestamp("2024-03-10T14:05:00+0100")

        assert result == datetime(2024, 3, 10, 14, 5, tzinfo=timezone(timedelta(hours=1)))

    def test_when_zulu_suffix_then_parses_as_utc(self) -> None:
        """Given a "Z" suffix, when parsing, then the result is UTC."""
        result = parse_timestamp("2024-03-10T13:05:00Z")

        assert result == datetime(2024, 3, 10, 13, 5, tzinfo=UTC)

    @pytest.mark.parametrize("value", [None, "", "not a date", "2024-13-45T99:00:00+0100"])
    def test_when_value_invalid_then_returns_none(self, value: str | None) -> None:
        """Given a missing or malformed value, when parsing, then returns None."""
        assert parse_timestamp(value) is None


class TestFormatClockTime:
    """Tests for format_clock_time and to_local_time."""

    def test_when_timestamp_in_zurich_offset_then_formats_local_hhmm(self) -> None:
        """Given a +0100 timestamp and the Zurich zone in winter, then the clock time is kept."""
        assert format_clock_time("2024-01-15T08:07:00+0100", ZURICH) == "08:07"

    def test_when_timestamp_is_utc_then_converted_to_local_zone(self) -> None:
        """Given a UTC timestamp in summer, when formatting for Zurich, then +2h is applied."""
        assert format_clock_time("2024-07-01T06:30:00Z", ZURICH) == "08:30"

    def test_when_datetime_given_then_formats_directly(self) -> None:
        """Given a datetime object, when formatting, then no parsing is needed."""
        moment = datetime(2024, 7, 1, 21, 4, tzinfo=ZURICH)

        assert format_clock_time(moment, ZURICH) == "21:04"

    def test_when_value_unparseable_then_returns_none(self) -> None:
        """Given garbage, when formatting, then returns None."""
        assert format_clock_time("garbage", ZURICH) is None
        assert format_clock_time(None, ZURICH) is None

    def test_when_naive_datetime_then_taken_as_local(self) -> None:
        """Given a naive datetime, when converting, then it is tagged with the zone."""
        result = to_local_time(datetime(2024, 1, 1, 12, 0), ZURICH)

        assert result.tzinfo is ZURICH
        assert result.hour == 12
