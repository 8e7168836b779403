"""Tests for ja-JP display formatting."""

from datetime import date

import pytest

from shussan.sdk.formatting import (
    format_currency,
    format_date,
    format_date_short,
    format_number,
    format_percent,
    parse_formatted_number,
)


def test_format_number():
    assert format_number(300000) == "300,000"
    assert format_number(0) == "0"
    assert format_number(-12628) == "-12,628"


def test_format_currency():
    assert format_currency(653268) == "653,268円"


def test_format_percent():
    assert format_percent(84) == "約84%"
    assert format_percent(None) == "-"


def test_format_dates():
    assert format_date(date(2026, 3, 5)) == "2026年3月5日"
    assert format_date_short(date(2026, 3, 5)) == "3月5日"


@pytest.mark.parametrize("text,expected", [
    ("300,000", 300000),
    ("1,500,000円", 1500000),
    ("42", 42),
    ("", 0),
    ("abc", 0),
    (None, 0),
])
def test_parse_formatted_number(text, expected):
    assert parse_formatted_number(text) == expected
