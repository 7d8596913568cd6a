"""Canonical formatting tests."""

from datetime import timedelta

import pytest

import pydurationstring
from pydurationstring import DurationOverflowError, DurationString, parse
from pydurationstring._constants import MAX_DURATION_NANOS, UNITS
from pydurationstring._formatter import format_nanoseconds


class TestLargestUnit:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("100ms", "100ms"),
            ("1000ms", "1s"),
            ("60000ms", "1m"),
            ("61000ms", "61s"),
            ("1h30m", "90m"),
            ("24h", "1d"),
            ("7d", "1w"),
            ("8d", "8d"),
            ("365d", "365d"),
            ("1y", "1y"),
            ("1ms100us", "1100us"),
            ("1s1ns", "1000000001ns"),
        ],
    )
    def test_from_string(self, text, expected):
        assert str(parse(text)) == expected

    def test_zero_uses_first_unit(self):
        assert format_nanoseconds(0) == "0y"

    def test_year_wins_over_week(self):
        # 52 weeks is not a whole number of years
        assert format_nanoseconds(52 * UNITS["w"]) == "52w"

    def test_max_duration(self):
        assert format_nanoseconds(MAX_DURATION_NANOS) == f"{MAX_DURATION_NANOS}ns"


class TestFormatFunction:
    def test_duration_string(self):
        assert pydurationstring.format(DurationString(100 * 10**6)) == "100ms"

    def test_int_nanoseconds(self):
        assert pydurationstring.format(1500) == "1500ns"

    def test_timedelta(self):
        assert pydurationstring.format(timedelta(milliseconds=100)) == "100ms"

    def test_timedelta_days(self):
        assert pydurationstring.format(timedelta(days=14)) == "2w"

    def test_negative_int(self):
        with pytest.raises(DurationOverflowError):
            pydurationstring.format(-1)

    def test_negative_timedelta(self):
        with pytest.raises(DurationOverflowError):
            pydurationstring.format(timedelta(seconds=-1))

    def test_wrong_type(self):
        with pytest.raises(TypeError):
            pydurationstring.format(1.5)


SAMPLE_NANOS = [
    0,
    1,
    999,
    1_000,
    1_500_000,
    61 * 10**9,
    3_600 * 10**9,
    90 * 60 * 10**9,
    86_400 * 10**9 + 1,
    604_800 * 10**9,
    31_556_926 * 10**9,
    2 * 31_556_926 * 10**9 + 10**9,
]


class TestRoundTrip:
    @pytest.mark.parametrize("nanos", SAMPLE_NANOS)
    def test_parse_format_is_identity(self, nanos):
        value = DurationString(nanos)
        assert parse(pydurationstring.format(value)) == value

    @pytest.mark.parametrize("nanos", SAMPLE_NANOS)
    def test_canonical_form_is_stable(self, nanos):
        text = pydurationstring.format(nanos)
        assert pydurationstring.format(parse(text)) == text
