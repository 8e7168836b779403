"""Current take-home pay estimate.

Simplified model of a salaried employee's monthly deductions, used to put
the maternity benefit next to normal take-home pay.

Social insurance (employee share):
- Health and pension: half the full rate, applied to the standard monthly
  remuneration grade
- Care: zero (model assumes an employee under 40)
- Employment: employee rate applied to the raw salary, not the grade

Taxes (annualized, then divided by 12):
1. Salary income = annual salary - salary-income deduction (給与所得控除)
2. Income tax on salary income - basic deduction - annual social insurance,
   from the quick-calculation table, then the 2.1% reconstruction surtax
3. Resident tax on salary income - resident basic deduction - annual social
   insurance at a flat rate, plus the per-capita levy

Every step floors to whole yen. Net income is not clamped at zero.
"""

import logging
import math
from decimal import Decimal
from typing import Optional

from .remuneration import standard_remuneration
from .rules import load_rules
from .schemas import CurrentIncome, Rules, SocialInsurance, Tax

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12


def calculate_social_insurance(salary: int, rules: Optional[Rules] = None) -> SocialInsurance:
    """Calculate the employee's monthly social insurance premiums."""
    rules = rules or load_rules()
    rates = rules.insurance_rates
    remuneration = Decimal(standard_remuneration(salary, rules))

    health = math.floor(remuneration * rates.health / 2)
    care = 0
    pension = math.floor(remuneration * rates.pension / 2)
    employment = math.floor(Decimal(salary) * rates.employment)

    return SocialInsurance(
        health_insurance=health,
        care_insurance=care,
        pension_insurance=pension,
        employment_insurance=employment,
        total=health + care + pension + employment,
    )


def calculate_salary_income_deduction(annual_income: int, rules: Optional[Rules] = None) -> int:
    """Salary-income deduction (給与所得控除) for an annual salary.

    Uses the first row whose ceiling covers the income; the last row has
    no ceiling.
    """
    rules = rules or load_rules()
    rows = rules.tax.salary_deduction

    row = next(
        (r for r in rows if r.up_to is None or annual_income <= r.up_to),
        rows[-1],
    )
    if row.fixed is not None:
        return row.fixed
    return math.floor(Decimal(annual_income) * row.rate - row.subtraction)


def calculate_income_tax(taxable_income: int, rules: Optional[Rules] = None) -> int:
    """Annual income tax including the reconstruction surtax."""
    if taxable_income <= 0:
        return 0

    rules = rules or load_rules()
    brackets = rules.tax.income_tax_brackets

    bracket = next(
        (b for b in brackets if b.up_to is None or taxable_income <= b.up_to),
        brackets[-1],
    )
    base_tax = max(0, math.floor(Decimal(taxable_income) * bracket.rate - bracket.subtraction))
    return math.floor(base_tax * (1 + rules.tax.reconstruction_surtax_rate))


def calculate_resident_tax(taxable_income: int, rules: Optional[Rules] = None) -> int:
    """Annual resident tax: flat levy plus income portion."""
    rules = rules or load_rules()
    income_portion = math.floor(Decimal(max(0, taxable_income)) * rules.tax.resident_income_rate)
    return rules.tax.resident_flat_levy + income_portion


def calculate_tax(salary: int, social_insurance: SocialInsurance, rules: Optional[Rules] = None) -> Tax:
    """Calculate monthly income tax and resident tax.

    Args:
        salary: Monthly gross salary
        social_insurance: Monthly premiums (deductible in full)
        rules: Rules to use (default: load_rules())

    Returns:
        Tax with monthly amounts
    """
    rules = rules or load_rules()
    annual_salary = salary * MONTHS_PER_YEAR
    annual_insurance = social_insurance.total * MONTHS_PER_YEAR

    deduction = calculate_salary_income_deduction(annual_salary, rules)
    salary_income = max(0, annual_salary - deduction)

    taxable_national = max(0, salary_income - (rules.tax.basic_deduction + annual_insurance))
    annual_income_tax = calculate_income_tax(taxable_national, rules)

    taxable_resident = max(0, salary_income - (rules.tax.resident_basic_deduction + annual_insurance))
    annual_resident_tax = calculate_resident_tax(taxable_resident, rules)

    logger.debug(
        f"annual salary {annual_salary}: deduction {deduction}, "
        f"taxable {taxable_national} (national) / {taxable_resident} (resident)"
    )

    income_tax = annual_income_tax // MONTHS_PER_YEAR
    resident_tax = annual_resident_tax // MONTHS_PER_YEAR
    return Tax(
        income_tax=income_tax,
        resident_tax=resident_tax,
        total=income_tax + resident_tax,
    )


def calculate_current_income(salary: int, rules: Optional[Rules] = None) -> CurrentIncome:
    """Estimate current monthly take-home pay.

    Args:
        salary: Monthly gross salary in yen
        rules: Rules to use (default: load_rules())

    Returns:
        CurrentIncome with premiums, taxes and net income
    """
    rules = rules or load_rules()
    social_insurance = calculate_social_insurance(salary, rules)
    tax = calculate_tax(salary, social_insurance, rules)

    return CurrentIncome(
        gross_salary=salary,
        social_insurance=social_insurance,
        tax=tax,
        net_income=salary - social_insurance.total - tax.total,
    )
