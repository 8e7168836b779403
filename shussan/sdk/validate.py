"""Input validation for the maternity calculator.

Returns field-scoped ValidationIssue entries instead of raising. Entries
with severity 'error' block calculation; 'warning' entries are
informational only. Each field is checked independently, so errors on
different fields can appear together.
"""

import logging
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, List, Optional

import yaml
from pydantic import ValidationError

from .periods import is_valid_due_date, parse_due_date
from .rules import load_builtin_rules, load_rules
from .schemas import PREGNANCY_TYPES, Rules, ShussanError, ValidationIssue

logger = logging.getLogger(__name__)

SALARY_REQUIRED = "月額総支給額を入力してください"
SALARY_NEGATIVE = "月額総支給額は0以上の金額を入力してください"
SALARY_NOT_WHOLE_YEN = "月額総支給額は1円単位の整数で入力してください"
SALARY_TOO_LOW = "金額が低すぎます。出産手当金の受給要件を満たさない可能性があります"
SALARY_TOO_HIGH = "金額が高すぎます。入力内容をご確認ください"
DUE_DATE_REQUIRED = "出産予定日を選択してください"
DUE_DATE_OUT_OF_RANGE = "出産予定日は今日以降1年以内の日付を選択してください"
PREGNANCY_TYPE_REQUIRED = "妊娠タイプを選択してください"


def coerce_salary(value: Any) -> Optional[Decimal]:
    """Turn form-ish salary input into a number, or None if missing/garbage."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.replace(",", "").strip()
        if not value:
            return None
    try:
        number = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None
    if not number.is_finite():
        return None
    return number


def validate_salary(salary: Any, rules: Optional[Rules] = None) -> List[ValidationIssue]:
    rules = rules or load_rules()
    limits = rules.validation
    amount = coerce_salary(salary)

    if amount is None or amount == 0:
        return [ValidationIssue(field="salary", message=SALARY_REQUIRED, severity="error")]
    if amount < 0:
        return [ValidationIssue(field="salary", message=SALARY_NEGATIVE, severity="error")]
    if amount != amount.to_integral_value():
        return [ValidationIssue(field="salary", message=SALARY_NOT_WHOLE_YEN, severity="error")]
    if amount < limits.salary_min:
        return [ValidationIssue(field="salary", message=SALARY_TOO_LOW, severity="warning")]
    if amount > limits.salary_max:
        return [ValidationIssue(field="salary", message=SALARY_TOO_HIGH, severity="error")]
    return []


def validate_due_date(due_date: Any, today: Optional[date] = None, rules: Optional[Rules] = None) -> List[ValidationIssue]:
    parsed = parse_due_date(due_date)
    if parsed is None:
        return [ValidationIssue(field="due_date", message=DUE_DATE_REQUIRED, severity="error")]
    if not is_valid_due_date(parsed, today=today, rules=rules):
        return [ValidationIssue(field="due_date", message=DUE_DATE_OUT_OF_RANGE, severity="error")]
    return []


def validate_pregnancy_type(pregnancy_type: Any) -> List[ValidationIssue]:
    if pregnancy_type not in PREGNANCY_TYPES:
        return [ValidationIssue(field="pregnancy_type", message=PREGNANCY_TYPE_REQUIRED, severity="error")]
    return []


def _rules_for_validation() -> Rules:
    try:
        return load_rules()
    except (ShussanError, ValidationError, yaml.YAMLError) as e:
        logger.warning(f"Configured rules unavailable ({e}); validating against built-in rules")
        return load_builtin_rules()


def validate_maternity_input(
    salary: Any,
    due_date: Any,
    pregnancy_type: Any,
    today: Optional[date] = None,
    rules: Optional[Rules] = None,
) -> List[ValidationIssue]:
    """Validate raw calculator input. Never raises.

    Args:
        salary: Monthly gross salary (number or numeric string, commas allowed)
        due_date: date, datetime, or YYYY-MM-DD string
        pregnancy_type: 'single' or 'multiple'
        today: Reference date for the due-date window (default: date.today())
        rules: Rules to use (default: load_rules(), falling back to the
            built-in rules if the configured ones cannot be loaded)

    Returns:
        Issues in field order salary, due_date, pregnancy_type (empty if valid)
    """
    rules = rules or _rules_for_validation()
    issues = []
    issues.extend(validate_salary(salary, rules))
    issues.extend(validate_due_date(due_date, today=today, rules=rules))
    issues.extend(validate_pregnancy_type(pregnancy_type))
    return issues


def has_blocking_errors(issues: List[ValidationIssue]) -> bool:
    """True if any issue has severity 'error'."""
    return any(issue.is_blocking for issue in issues)
