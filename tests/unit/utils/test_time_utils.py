"""Unit tests for time parsing and formatting."""

import pytest

from yt_transcript.core.exceptions import (
    InvalidRangeFormatError,
    InvalidRangeOrderError,
    InvalidTimeFormatError
)
from yt_transcript.models import ExcludeRange
from yt_transcript.utils.time_utils import (
    format_timestamp,
    parse_exclude_range,
    parse_exclude_ranges,
    parse_only_times,
    parse_time
)


class TestParseTime:
    """Tests for parse_time."""

    @pytest.mark.parametrize("value,expected", [
        ("0:00", 0),
        ("1:30", 90),
        ("01:30", 90),
        ("59:59", 3599),
        ("1:01:01", 3661),
        ("00:00:05", 5),
        ("100:00:00", 360000),
        ("  2:05  ", 125),
    ])
    def test_valid_times(self, value, expected):
        """Test MM:SS and HH:MM:SS inputs."""
        assert parse_time(value) == expected

    @pytest.mark.parametrize("value", [
        "",
        "90",
        "1:2:3:4",
        "1:60",
        "60:00",
        "1:60:00",
        "1:00:60",
        "-1:30",
        "1:-30",
        "a:30",
        "1: 30",
        "1 :30",
        "1:30.5",
        ":30",
        "1:",
        "+1:30",
    ])
    def test_invalid_times(self, value):
        """Test inputs that must be rejected."""
        with pytest.raises(InvalidTimeFormatError):
            parse_time(value)

    def test_error_carries_input(self):
        """Test the error message names the bad input."""
        with pytest.raises(InvalidTimeFormatError) as exc_info:
            parse_time("abc")
        assert exc_info.value.value == "abc"
        assert "abc" in str(exc_info.value)


class TestParseExcludeRange:
    """Tests for exclude range parsing."""

    def test_simple_range(self):
        assert parse_exclude_range("0:58-0:59") == ExcludeRange(58, 59)

    def test_hour_range(self):
        assert parse_exclude_range("59:00-1:02:00") == ExcludeRange(3540, 3720)

    def test_single_point_range(self):
        assert parse_exclude_range("1:00-1:00") == ExcludeRange(60, 60)

    def test_surrounding_whitespace(self):
        assert parse_exclude_range(" 1:00-2:00 ") == ExcludeRange(60, 120)

    @pytest.mark.parametrize("value", ["", "1:00", "-1:00", "1:00-", "-"])
    def test_missing_separator(self, value):
        with pytest.raises(InvalidRangeFormatError):
            parse_exclude_range(value)

    def test_invalid_side(self):
        with pytest.raises(InvalidTimeFormatError):
            parse_exclude_range("1:00-2:99")

    def test_leading_dash_is_not_separator(self):
        """A leading '-' is skipped, so the remaining text must still split."""
        with pytest.raises(InvalidTimeFormatError):
            parse_exclude_range("-1:00-2:00")

    def test_reversed_range(self):
        with pytest.raises(InvalidRangeOrderError):
            parse_exclude_range("2:00-1:00")

    def test_multiple_ranges(self):
        ranges = parse_exclude_ranges(["0:00-0:10 1:00-1:10", "2:00-2:30"])
        assert ranges == (ExcludeRange(0, 10), ExcludeRange(60, 70), ExcludeRange(120, 150))


class TestParseOnlyTimes:
    """Tests for only-time lists."""

    def test_space_and_comma_separated(self):
        assert parse_only_times(["1:00 1:05,1:10", "2:00"]) == frozenset({60, 65, 70, 120})

    def test_duplicates_collapse(self):
        assert parse_only_times(["1:00", "01:00"]) == frozenset({60})

    def test_invalid_member(self):
        with pytest.raises(InvalidTimeFormatError):
            parse_only_times(["1:00", "soon"])


class TestFormatTimestamp:
    """Tests for format_timestamp."""

    @pytest.mark.parametrize("seconds,expected", [
        (0, "00:00"),
        (5, "00:05"),
        (90, "01:30"),
        (3599, "59:59"),
        (3600, "01:00:00"),
        (3661, "01:01:01"),
        (360000, "100:00:00"),
        (59.999, "00:59"),
        (3725.9, "01:02:05"),
    ])
    def test_format(self, seconds, expected):
        assert format_timestamp(seconds) == expected

    @pytest.mark.parametrize("seconds", [0, 1, 59, 60, 61, 599, 3599, 3600, 3661, 45296, 86399])
    def test_round_trip(self, seconds):
        """Formatting then parsing returns the same whole seconds."""
        assert parse_time(format_timestamp(seconds)) == seconds

    @pytest.mark.parametrize("value", ["0:00", "12:34", "59:59", "00:01"])
    def test_mm_ss_has_no_hour_segment(self, value):
        seconds = parse_time(value)
        assert seconds < 3600
        assert format_timestamp(seconds).count(":") == 1
