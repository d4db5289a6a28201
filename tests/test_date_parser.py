"""Tests for month, timestamp and amount parsing."""

import pytest
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from dateutil import tz

from finanzas.utils.amount_parser import parse_amount
from finanzas.utils.date_parser import (
    current_month,
    format_month,
    get_timezone,
    month_bounds,
    parse_month,
    parse_timestamp,
)


class TestGetTimezone:
    """Tests for timezone resolution."""

    def test_default_is_local(self):
        assert isinstance(get_timezone(None), tz.tzlocal)
        assert isinstance(get_timezone("local"), tz.tzlocal)

    def test_utc(self):
        assert get_timezone("utc") is tz.UTC

    def test_named_zone(self):
        zone = get_timezone("America/Montevideo")
        assert datetime(2024, 5, 1, tzinfo=zone).utcoffset() == timedelta(hours=-3)

    def test_unknown_zone(self):
        with pytest.raises(ValueError, match="Unknown timezone"):
            get_timezone("Nowhere/Special")


class TestParseMonth:
    """Tests for month parsing."""

    def test_absolute_month(self):
        assert parse_month("2024-05") == (2024, 4)
        assert parse_month("May 2024") == (2024, 4)
        assert parse_month("2024/01") == (2024, 0)

    def test_relative_months(self):
        year, month = current_month(tz.UTC)
        assert parse_month("this month", tz=tz.UTC) == (year, month)
        assert parse_month("Current", tz=tz.UTC) == (year, month)

        last_year, last_month = parse_month("last month", tz=tz.UTC)
        assert last_year * 12 + last_month == year * 12 + month - 1

        next_year, next_month = parse_month("next month", tz=tz.UTC)
        assert next_year * 12 + next_month == year * 12 + month + 1

    def test_invalid_month(self):
        with pytest.raises(ValueError, match="Could not parse month"):
            parse_month("sometime")


class TestParseTimestamp:
    """Tests for timestamp parsing."""

    def test_naive_value_uses_timezone(self):
        zone = timezone(timedelta(hours=-3))
        assert parse_timestamp("2024-05-31 22:00", tz=zone) == datetime(
            2024, 6, 1, 1, 0, tzinfo=timezone.utc
        )

    def test_explicit_offset_is_kept(self):
        result = parse_timestamp("2024-05-31T22:00:00+02:00", tz=tz.UTC)
        assert result.utcoffset() == timedelta(hours=2)

    def test_relative_dates(self):
        now = datetime.now(tz.UTC)
        today = parse_timestamp("today", tz=tz.UTC)
        yesterday = parse_timestamp("yesterday", tz=tz.UTC)

        assert abs(today - now) < timedelta(seconds=5)
        assert abs(today - yesterday - timedelta(days=1)) < timedelta(seconds=5)

    def test_invalid_timestamp(self):
        with pytest.raises(ValueError, match="Could not parse date"):
            parse_timestamp("not a date")


def test_format_month():
    assert format_month(2024, 0) == "January 2024"
    assert format_month(2023, 11) == "December 2023"


class TestParseAmount:
    """Tests for amount parsing."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("1234.50", Decimal("1234.50")),
            ("$1,234.50", Decimal("1234.50")),
            ("UYU 1234", Decimal("1234")),
            ("usd 10", Decimal("10")),
            ("-123.45", Decimal("-123.45")),
            ("€ 99", Decimal("99")),
            ("$ 1.234,50", Decimal("1234.50")),
            ("12,5", Decimal("12.5")),
            ("$1,500", Decimal("1500")),
        ],
    )
    def test_valid_amounts(self, text, expected):
        assert parse_amount(text) == expected

    @pytest.mark.parametrize("text", ["", "   ", "abc", "NaN", "Infinity"])
    def test_invalid_amounts(self, text):
        with pytest.raises(ValueError):
            parse_amount(text)


class TestMonthBounds:
    """Tests for month start/end instants."""

    def test_december_rolls_into_next_year(self):
        start, end = month_bounds(2024, 11, tz.UTC)
        assert start == datetime(2024, 12, 1, tzinfo=timezone.utc)
        assert end == datetime(2025, 1, 1, tzinfo=timezone.utc)

    def test_bounds_are_local_midnight(self):
        start, end = month_bounds(2024, 4, timezone(timedelta(hours=-3)))
        assert start == datetime(2024, 5, 1, 3, 0, tzinfo=timezone.utc)
        assert end == datetime(2024, 6, 1, 3, 0, tzinfo=timezone.utc)
