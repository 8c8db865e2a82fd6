"""
Unit tests for parsing and formatting helpers.
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from tradejournal.core.errors import InvalidInput
from tradejournal.core.utils import (
    calculate_rr_ratio,
    format_money,
    format_signed,
    from_storage_date,
    parse_amount,
    parse_optional_amount,
    to_storage_date,
)


class TestParseAmount:
    """Strict numeric parsing."""

    @pytest.mark.parametrize("value,expected", [
        (5, 5.0),
        (2.5, 2.5),
        ("  -3.25 ", -3.25),
        ("1,000", 1000.0),
        ("-12,345,678.9", -12345678.9),
        ("1e3", 1000.0),
        (Decimal("0.1"), 0.1),
    ])
    def test_accepts_numbers(self, value, expected):
        assert parse_amount(value, "x") == expected

    @pytest.mark.parametrize("value", [
        None, "", "abc", "1.2.3", True, False, float("nan"), float("-inf"),
        "nan", "Infinity", Decimal("NaN"), [1],
        "1,5", "1,2,3", "1000,000", "1,00.5",
    ])
    def test_rejects_non_numbers(self, value):
        with pytest.raises(InvalidInput) as exc_info:
            parse_amount(value, "price")

        assert exc_info.value.field == "price"

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_optional_absent(self, value):
        assert parse_optional_amount(value, "x") is None

    def test_optional_zero_is_not_absent(self):
        assert parse_optional_amount(0, "x") == 0.0


class TestRiskReward:
    """R:R ratio derivation."""

    def test_long(self):
        assert calculate_rr_ratio(100, 110, 95) == "1:2.00"

    def test_short(self):
        assert calculate_rr_ratio(100, 90, 105) == "1:2.00"

    def test_fractional(self):
        assert calculate_rr_ratio(100, 101, 97) == "1:0.33"

    @pytest.mark.parametrize("entry,tp,sl", [
        (0, 110, 95), (100, 0, 95), (100, 110, 0), (None, 110, 95),
    ])
    def test_missing_price(self, entry, tp, sl):
        assert calculate_rr_ratio(entry, tp, sl) is None

    def test_zero_risk(self):
        assert calculate_rr_ratio(100, 110, 100) is None


class TestStorageDates:
    """ISO-8601 text for the date column."""

    def test_fixed_width_utc(self):
        value = datetime(2026, 1, 5, 8, 0, tzinfo=timezone.utc)

        assert to_storage_date(value) == "2026-01-05T08:00:00.000000+00:00"

    def test_naive_taken_as_utc(self):
        text = to_storage_date(datetime(2026, 1, 5, 8, 0))

        assert from_storage_date(text) == datetime(2026, 1, 5, 8, 0, tzinfo=timezone.utc)

    def test_offset_converted(self):
        value = datetime(2026, 1, 5, 15, 0, tzinfo=timezone(timedelta(hours=7)))

        assert to_storage_date(value).startswith("2026-01-05T08:00:00")

    def test_text_order_is_chronological(self):
        a = datetime(2026, 1, 5, 8, 0, 0, tzinfo=timezone.utc)
        b = a + timedelta(microseconds=1)
        c = a + timedelta(seconds=1)

        assert to_storage_date(a) < to_storage_date(b) < to_storage_date(c)

    def test_rejects_non_datetime(self):
        with pytest.raises(InvalidInput):
            to_storage_date("2026-01-05")


class TestFormatting:
    def test_money(self):
        assert format_money(30, "USD") == "USD 30.00"
        assert format_money(-1.5) == "-1.50"

    def test_signed(self):
        assert format_signed(50) == "+50.00"
        assert format_signed(0) == "+0.00"
        assert format_signed(-20) == "-20.00"
