"""Maternity benefit (出産手当金) amounts.

    standard daily wage = floor(standard monthly remuneration / 30)
    daily benefit       = floor(standard daily wage * benefit rate)
    total benefit       = daily benefit * total days
    monthly equivalent  = daily benefit * 30 (for comparison with take-home pay)

All amounts are whole yen. The benefit rate is an exact fraction so the
floor never sees a binary rounding artifact.
"""

from typing import Optional

from .periods import calculate_total_days
from .remuneration import standard_remuneration
from .rules import load_rules
from .schemas import BenefitBreakdown, MaternityInput, Rules

DAYS_PER_MONTH = 30


def standard_daily_wage(remuneration: int) -> int:
    """Standard daily wage (標準報酬日額) from the monthly grade."""
    return remuneration // DAYS_PER_MONTH


def benefit_daily_amount(daily_wage: int, rules: Optional[Rules] = None) -> int:
    """Daily benefit: floor(daily_wage * numerator / denominator)."""
    rules = rules or load_rules()
    rate = rules.maternity.benefit_rate
    return daily_wage * rate.numerator // rate.denominator


def calculate_benefit(maternity_input: MaternityInput, rules: Optional[Rules] = None) -> BenefitBreakdown:
    """Calculate benefit amounts for an input.

    Args:
        maternity_input: Validated input
        rules: Rules to use (default: load_rules())

    Returns:
        BenefitBreakdown with daily wage, daily benefit, days, totals
    """
    rules = rules or load_rules()

    remuneration = standard_remuneration(maternity_input.salary, rules)
    daily_wage = standard_daily_wage(remuneration)
    daily_benefit = benefit_daily_amount(daily_wage, rules)
    total_days = calculate_total_days(maternity_input.is_multiple, rules)

    return BenefitBreakdown(
        standard_monthly_remuneration=remuneration,
        standard_daily_wage=daily_wage,
        benefit_daily_amount=daily_benefit,
        total_days=total_days,
        total_benefit=daily_benefit * total_days,
        monthly_equivalent=daily_benefit * rules.maternity.monthly_equivalent_days,
    )
