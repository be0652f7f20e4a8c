"""Tests for Day/Night period classification."""

from datetime import datetime

import pytest

from src.fleet.period import Period, classify_period, parse_timestamp


class TestClassifyPeriod:
    """Day is [06:00, 18:00) local wall-clock time."""

    @pytest.mark.parametrize(
        "timestamp, expected",
        [
            ("2024-03-04 00:00:00", Period.NIGHT),
            ("2024-03-04 05:59:59", Period.NIGHT),
            ("2024-03-04 06:00:00", Period.DAY),
            ("2024-03-04 12:30:00", Period.DAY),
            ("2024-03-04 17:59:59", Period.DAY),
            ("2024-03-04 18:00:00", Period.NIGHT),
            ("2024-03-04 23:45:00", Period.NIGHT),
        ],
    )
    def test_hour_boundaries(self, timestamp, expected):
        assert classify_period(timestamp) == expected

    def test_iso_t_separator(self):
        assert classify_period("2024-03-04T19:10:00") == Period.NIGHT

    def test_offset_not_converted(self):
        """The wall-clock hour is used as written, whatever the offset."""
        assert classify_period("2024-03-04T07:00:00+08:00") == Period.DAY
        assert classify_period("2024-03-04T07:00:00Z") == Period.DAY
        assert classify_period("2024-03-04T20:00:00-05:00") == Period.NIGHT

    def test_day_first_slash_format(self):
        assert classify_period("04/03/2024 21:15") == Period.NIGHT

    @pytest.mark.parametrize("bad", ["", "   ", "not a date", "2024-13-45 99:00", None, 12345])
    def test_unparseable_falls_back_to_day(self, bad):
        assert classify_period(bad) == Period.DAY

    def test_period_compares_to_plain_string(self):
        assert classify_period("2024-03-04 22:00:00") == "Night"


class TestParseTimestamp:
    def test_parses_space_separated(self):
        assert parse_timestamp("2024-03-04 08:15:00") == datetime(2024, 3, 4, 8, 15)

    def test_parses_year_first_slash(self):
        assert parse_timestamp("2024/03/04 08:15") == datetime(2024, 3, 4, 8, 15)

    def test_returns_none_on_garbage(self):
        assert parse_timestamp("yesterday") is None
        assert parse_timestamp(None) is None

    @pytest.mark.parametrize(
        "text, micro",
        [
            ("2024-03-04T08:15:00.250", 250000),
            ("2024-03-04 08:15:00.000250", 250),
        ],
    )
    def test_parses_fractional_seconds(self, text, micro):
        assert parse_timestamp(text) == datetime(2024, 3, 4, 8, 15, 0, micro)
