"""Display formatting for the ja-JP locale."""

import re
from datetime import date


def format_number(value: int) -> str:
    """3-digit comma grouping: 300000 -> '300,000'."""
    return f"{value:,}"


def format_currency(value: int) -> str:
    """Yen amount: 300000 -> '300,000円'."""
    return f"{format_number(value)}円"


def format_percent(value) -> str:
    """Approximate percentage: 84 -> '約84%'. None renders as '-'."""
    if value is None:
        return "-"
    return f"約{value}%"


def format_date(day: date) -> str:
    """Full date: '2026年3月15日'."""
    return f"{day.year}年{day.month}月{day.day}日"


def format_date_short(day: date) -> str:
    """Month and day: '3月15日'."""
    return f"{day.month}月{day.day}日"


def parse_formatted_number(value: str) -> int:
    """Parse a comma-grouped integer; anything unparseable is 0."""
    match = re.match(r"\s*([+-]?\d+)", (value or "").replace(",", ""))
    return int(match.group(1)) if match else 0
