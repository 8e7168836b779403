"""Maternity benefit calculation entry point.

Combines the benefit, leave period and take-home pay calculations into one
MaternityResult, and derives the maintenance rate: the monthly benefit as a
percentage of normal take-home pay.

Usage:
    from shussan.sdk import MaternityInput, calculate_maternity

    result = calculate_maternity(
        MaternityInput(salary=300000, due_date=date(2027, 3, 15))
    )
    print(result.total_benefit, result.maintenance_rate)
"""

import logging
import math
from typing import Optional

from .benefit import calculate_benefit
from .income import calculate_current_income
from .periods import calculate_periods, parse_due_date
from .rules import load_rules
from .schemas import InvalidInputError, MaternityInput, MaternityResult, Rules

logger = logging.getLogger(__name__)

RATING_GOOD = 80
RATING_FAIR = 60


def calculate_maintenance_rate(monthly_equivalent: int, net_income: int) -> Optional[int]:
    """Monthly benefit as a whole percentage of net income, rounded half up.

    Returns:
        Percentage, or None when net income is zero (ratio undefined)
    """
    if net_income == 0:
        return None
    return math.floor(monthly_equivalent / net_income * 100 + 0.5)


def rate_maintenance(maintenance_rate: Optional[int]) -> str:
    """Classify a maintenance rate as 'good' (>= 80), 'fair' (>= 60) or 'low'."""
    if maintenance_rate is None:
        return "undefined"
    if maintenance_rate >= RATING_GOOD:
        return "good"
    if maintenance_rate >= RATING_FAIR:
        return "fair"
    return "low"


def calculate_maternity(maternity_input: MaternityInput, rules: Optional[Rules] = None) -> MaternityResult:
    """Calculate the maternity benefit and compare it with current take-home pay.

    The input is expected to have passed validate_maternity_input() with no
    blocking errors; the engine only checks its own preconditions.

    Args:
        maternity_input: Input record
        rules: Rules to use (default: load_rules())

    Returns:
        MaternityResult

    Raises:
        InvalidInputError: If maternity_input is not a MaternityInput
    """
    if not isinstance(maternity_input, MaternityInput):
        raise InvalidInputError(
            f"calculate_maternity expects MaternityInput, got {type(maternity_input).__name__}"
        )

    rules = rules or load_rules()

    benefit = calculate_benefit(maternity_input, rules)
    periods = calculate_periods(maternity_input.due_date, maternity_input.is_multiple, rules)
    current_income = calculate_current_income(maternity_input.salary, rules)
    maintenance_rate = calculate_maintenance_rate(benefit.monthly_equivalent, current_income.net_income)

    logger.debug(
        f"salary {maternity_input.salary} ({maternity_input.pregnancy_type}): "
        f"benefit {benefit.total_benefit} over {benefit.total_days} days, "
        f"net {current_income.net_income}, rate {maintenance_rate}"
    )

    return MaternityResult(
        input=maternity_input,
        rules_year=rules.year,
        standard_monthly_remuneration=benefit.standard_monthly_remuneration,
        standard_daily_wage=benefit.standard_daily_wage,
        benefit_daily_amount=benefit.benefit_daily_amount,
        prenatal_period=periods.prenatal,
        postnatal_period=periods.postnatal,
        total_days=benefit.total_days,
        total_benefit=benefit.total_benefit,
        monthly_equivalent=benefit.monthly_equivalent,
        current_income=current_income,
        current_net_income=current_income.net_income,
        maintenance_rate=maintenance_rate,
    )


def calculate_maternity_from_values(
    salary,
    due_date,
    pregnancy_type: str = "single",
    rules: Optional[Rules] = None,
) -> MaternityResult:
    """Build a MaternityInput from raw values and calculate.

    due_date accepts whatever the validator accepts (date, datetime, or a
    YYYY-M-D string); it is reduced to a plain date first.

    Raises:
        InvalidInputError: If the values break MaternityInput's constraints
    """
    parsed = parse_due_date(due_date)
    if parsed is not None:
        due_date = parsed
    return calculate_maternity(MaternityInput.from_values(salary, due_date, pregnancy_type), rules)
