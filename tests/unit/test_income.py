"""Tests for the current take-home pay estimate.

Expected figures use the built-in 2024 rules:
health 9.98%, pension 18.3% (employee pays half), employment 0.6%,
basic deduction 480,000 / resident 430,000, resident levy 5,000 + 10%.
"""

import pytest
from pydantic import ValidationError

from shussan.sdk import (
    SocialInsurance,
    Tax,
    calculate_current_income,
    calculate_income_tax,
    calculate_resident_tax,
    calculate_salary_income_deduction,
    calculate_social_insurance,
    calculate_tax,
)


class TestSocialInsurance:
    """Employee share of premiums."""

    def test_salary_300000(self, rules):
        si = calculate_social_insurance(300000, rules)

        assert si.health_insurance == 14970
        assert si.care_insurance == 0
        assert si.pension_insurance == 27450
        assert si.employment_insurance == 1800
        assert si.total == 44220

    def test_health_and_pension_use_grade_employment_uses_salary(self, rules):
        """305,000 sits in the 300,000 grade but employment premium tracks the raw salary."""
        at_grade = calculate_social_insurance(300000, rules)
        above = calculate_social_insurance(305000, rules)

        assert above.health_insurance == at_grade.health_insurance
        assert above.pension_insurance == at_grade.pension_insurance
        assert above.employment_insurance == 1830

    def test_low_salary_uses_first_grade(self, rules):
        si = calculate_social_insurance(50000, rules)

        assert si.health_insurance == 2894
        assert si.pension_insurance == 5307
        assert si.employment_insurance == 300
        assert si.total == 8501

    @pytest.mark.parametrize("salary", [0, 58000, 123456, 300000, 777777, 2000000])
    def test_total_is_sum_of_components(self, rules, salary):
        si = calculate_social_insurance(salary, rules)
        assert si.total == (
            si.health_insurance + si.care_insurance + si.pension_insurance + si.employment_insurance
        )

    def test_model_rejects_wrong_total(self):
        with pytest.raises(ValidationError):
            SocialInsurance(
                health_insurance=1, care_insurance=0, pension_insurance=1,
                employment_insurance=1, total=4,
            )


class TestSalaryIncomeDeduction:
    """給与所得控除 table lookup."""

    def test_fixed_minimum(self, rules):
        assert calculate_salary_income_deduction(1000000, rules) == 550000
        assert calculate_salary_income_deduction(1625000, rules) == 550000

    def test_rate_rows(self, rules):
        assert calculate_salary_income_deduction(1700000, rules) == 580000
        assert calculate_salary_income_deduction(2400000, rules) == 800000
        assert calculate_salary_income_deduction(3600000, rules) == 1160000
        assert calculate_salary_income_deduction(6000000, rules) == 1640000

    def test_fixed_maximum_above_all_ceilings(self, rules):
        assert calculate_salary_income_deduction(12000000, rules) == 1950000


class TestIncomeTax:
    """Progressive income tax with reconstruction surtax."""

    def test_zero_or_negative_taxable_is_zero(self, rules):
        assert calculate_income_tax(0, rules) == 0
        assert calculate_income_tax(-1000, rules) == 0

    def test_first_bracket(self, rules):
        # 1,000,000 * 5% = 50,000; * 1.021 = 51,050
        assert calculate_income_tax(1000000, rules) == 51050

    def test_middle_bracket_floors_surtax(self, rules):
        # 5,000,000 * 20% - 427,500 = 572,500; * 1.021 = 584,522.5
        assert calculate_income_tax(5000000, rules) == 584522

    def test_top_bracket(self, rules):
        # 50,000,000 * 45% - 4,796,000 = 17,704,000; * 1.021
        assert calculate_income_tax(50000000, rules) == 18075784


class TestResidentTax:
    """Flat levy plus 10%."""

    def test_levy_applies_with_no_taxable_income(self, rules):
        assert calculate_resident_tax(0, rules) == 5000

    def test_income_portion(self, rules):
        assert calculate_resident_tax(1000000, rules) == 105000


class TestCalculateTax:
    """Monthly taxes from monthly salary."""

    def test_salary_300000(self, rules):
        si = calculate_social_insurance(300000, rules)
        tax = calculate_tax(300000, si, rules)

        assert tax.income_tax == 6080
        assert tax.resident_tax == 12744
        assert tax.total == 18824

    def test_low_salary_only_pays_levy(self, rules):
        si = calculate_social_insurance(50000, rules)
        tax = calculate_tax(50000, si, rules)

        assert tax.income_tax == 0
        assert tax.resident_tax == 416

    def test_model_rejects_wrong_total(self):
        with pytest.raises(ValidationError):
            Tax(income_tax=100, resident_tax=100, total=150)


class TestCurrentIncome:
    """Net take-home pay."""

    @pytest.mark.parametrize("salary,net", [
        (50000, 41083),
        (200000, 160043),
        (300000, 236956),
        (500000, 383313),
    ])
    def test_net_income(self, rules, salary, net):
        assert calculate_current_income(salary, rules).net_income == net

    @pytest.mark.parametrize("salary", [50000, 200000, 300000, 500000, 1000000])
    def test_net_is_gross_minus_deductions(self, rules, salary):
        income = calculate_current_income(salary, rules)

        assert income.gross_salary == salary
        assert income.net_income == salary - income.social_insurance.total - income.tax.total
        assert income.tax.total == income.tax.income_tax + income.tax.resident_tax

    def test_net_income_is_not_clamped(self, rules):
        """A pathological levy drives net income negative without error."""
        tax_rules = rules.tax.model_copy(update={"resident_flat_levy": 3000000})
        custom = rules.model_copy(update={"tax": tax_rules})

        income = calculate_current_income(300000, custom)
        assert income.net_income < 0
