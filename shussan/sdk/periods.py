"""Leave period calculations.

The prenatal window ends on the due date (the due date counts as a prenatal
day) and spans 42 days, or 98 for a multiple pregnancy. The postnatal window
starts the day after the due date and spans 56 days. All arithmetic is in
whole calendar days.
"""

import calendar
from datetime import date, datetime, timedelta
from typing import Optional, Union

from .rules import load_rules
from .schemas import LeavePeriods, Period, Rules


def calculate_prenatal_period(due_date: date, is_multiple: bool, rules: Optional[Rules] = None) -> Period:
    """Calculate the prenatal window ending on the due date (inclusive)."""
    rules = rules or load_rules()
    days = rules.maternity.prenatal_days(is_multiple)
    return Period(
        start=due_date - timedelta(days=days - 1),
        end=due_date,
        days=days,
    )


def calculate_postnatal_period(due_date: date, rules: Optional[Rules] = None) -> Period:
    """Calculate the postnatal window starting the day after the due date."""
    rules = rules or load_rules()
    days = rules.maternity.postnatal_days
    return Period(
        start=due_date + timedelta(days=1),
        end=due_date + timedelta(days=days),
        days=days,
    )


def calculate_periods(due_date: date, is_multiple: bool, rules: Optional[Rules] = None) -> LeavePeriods:
    """Calculate both leave windows for a due date.

    Args:
        due_date: Expected due date
        is_multiple: True for twins or more
        rules: Rules to use (default: load_rules())

    Returns:
        LeavePeriods with prenatal and postnatal Period
    """
    rules = rules or load_rules()
    return LeavePeriods(
        prenatal=calculate_prenatal_period(due_date, is_multiple, rules),
        postnatal=calculate_postnatal_period(due_date, rules),
    )


def calculate_total_days(is_multiple: bool, rules: Optional[Rules] = None) -> int:
    """Total benefit days: prenatal days plus postnatal days."""
    rules = rules or load_rules()
    return rules.maternity.prenatal_days(is_multiple) + rules.maternity.postnatal_days


def add_months(day: date, months: int) -> date:
    """Add calendar months, clamping to the last day of the target month."""
    month_index = day.month - 1 + months
    year = day.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def is_valid_due_date(
    due_date: date,
    today: Optional[date] = None,
    rules: Optional[Rules] = None,
) -> bool:
    """Check the due date is today or later and within the allowed window."""
    rules = rules or load_rules()
    today = today or date.today()
    latest = add_months(today, rules.validation.due_date_window_months)
    return today <= due_date <= latest


def parse_due_date(value: Union[date, datetime, str, None]) -> Optional[date]:
    """Parse a due date from a date, datetime, or YYYY-MM-DD string.

    Returns:
        date, or None if the value is empty or unparseable
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except ValueError:
        return None
