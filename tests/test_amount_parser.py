"""Tests for amount parsing."""

import pytest

from spendbook.utils.amount_parser import parse_amount_to_minor


@pytest.mark.parametrize(
    "value, expected",
    [
        ("123.45", 12345),
        ("$123.45", 12345),
        ("1,234.56", 123456),
        ("7", 700),
        ("0.5", 50),
        (" £12 ", 1200),
        ("-4.20", -420),
    ],
)
def test_parse_amount(value, expected):
    """Test parsing common amount formats."""
    assert parse_amount_to_minor(value) == expected


def test_rounds_half_up_to_cent():
    """Test sub-cent amounts round half-up."""
    assert parse_amount_to_minor("1.005") == 101
    assert parse_amount_to_minor("1.004") == 100


@pytest.mark.parametrize("value", ["", "   ", "abc", "12.3.4", "nan", "inf"])
def test_parse_invalid_amount(value):
    """Test unparseable amounts raise ValueError."""
    with pytest.raises(ValueError):
        parse_amount_to_minor(value)
