"""Tests for lenient integer parsing (core/numbers.py)."""

import pytest

from core.numbers import leading_int


class TestLeadingInt:

    @pytest.mark.parametrize(
        "value, expected",
        [
            (5, 5),
            (4.9, 4),
            ("3 days", 3),
            ("  12", 12),
            ("-2", -2),
            ("+7 nights", 7),
            ("3.5", 3),
        ],
    )
    def test_reads_leading_integer(self, value, expected):
        assert leading_int(value) == expected

    @pytest.mark.parametrize("value", ["lots", "", "days: 3", None, float("nan")])
    def test_no_leading_integer_is_zero(self, value):
        assert leading_int(value) == 0
