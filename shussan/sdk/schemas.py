"""Pydantic schemas for shussan-calc.

Two groups live here:

1. Rules schemas - validate the rules/*.yaml files and give typed access to
   the remuneration table, premium rates and tax tables.
2. Engine records - the immutable inputs and outputs of the calculation
   engine (MaternityInput, Period, SocialInsurance, Tax, CurrentIncome,
   MaternityResult, ValidationIssue).

All schemas use extra='forbid' so typos in rules files cause clear errors
rather than silent ignoring, and frozen=True so nothing is mutated after
construction.
"""

from datetime import date
from decimal import Decimal
from typing import Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator


PregnancyType = Literal["single", "multiple"]
PREGNANCY_TYPES = ("single", "multiple")


class ShussanError(Exception):
    """Base class for shussan-calc errors."""
    pass


class InvalidInputError(ShussanError, ValueError):
    """Raised when the engine is called with input that breaks its preconditions."""
    pass


# =============================================================================
# Rules Schemas - loaded from rules/<year>.yaml
# =============================================================================


class BenefitRate(BaseModel):
    """Benefit rate as an exact fraction of the standard daily wage."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    numerator: int = Field(..., gt=0)
    denominator: int = Field(..., gt=0)


class MaternityRules(BaseModel):
    """Leave lengths and benefit rate."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    benefit_rate: BenefitRate
    prenatal_days_single: int = Field(..., gt=0)
    prenatal_days_multiple: int = Field(..., gt=0)
    postnatal_days: int = Field(..., gt=0)
    monthly_equivalent_days: int = Field(..., gt=0, description="Days per month for the monthly benefit figure")

    def prenatal_days(self, is_multiple: bool) -> int:
        return self.prenatal_days_multiple if is_multiple else self.prenatal_days_single


class InsuranceRates(BaseModel):
    """Full (employer + employee) premium rates, except employment which is employee-only."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    health: Decimal = Field(..., ge=0, le=1)
    pension: Decimal = Field(..., ge=0, le=1)
    employment: Decimal = Field(..., ge=0, le=1)
    care: Decimal = Field(default=Decimal("0"), ge=0, le=1)


class DeductionRow(BaseModel):
    """Salary-income deduction row: fixed amount or annual * rate - subtraction."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    up_to: Optional[int] = Field(default=None, description="Annual income ceiling (None for the open top row)")
    fixed: Optional[int] = Field(default=None, ge=0)
    rate: Optional[Decimal] = Field(default=None, ge=0, le=1)
    subtraction: int = 0

    @model_validator(mode="after")
    def check_formula(self) -> "DeductionRow":
        if (self.fixed is None) == (self.rate is None):
            raise ValueError("deduction row needs exactly one of 'fixed' or 'rate'")
        return self


class TaxBracket(BaseModel):
    """Progressive tax bracket in quick-calculation form (rate, subtraction)."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    up_to: Optional[int] = Field(default=None, description="Taxable income ceiling (None for the top bracket)")
    rate: Decimal = Field(..., ge=0, le=1)
    subtraction: int = 0


def _check_ceilings(rows, name: str) -> None:
    if not rows:
        raise ValueError(f"{name} must not be empty")
    ceilings = [row.up_to for row in rows]
    if any(c is None for c in ceilings[:-1]):
        raise ValueError(f"{name}: only the last row may omit 'up_to'")
    bounded = [c for c in ceilings if c is not None]
    if bounded != sorted(set(bounded)):
        raise ValueError(f"{name}: 'up_to' ceilings must be strictly ascending")


class TaxRules(BaseModel):
    """Income tax and resident tax parameters."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    basic_deduction: int = Field(..., ge=0)
    resident_basic_deduction: int = Field(..., ge=0)
    resident_flat_levy: int = Field(..., ge=0)
    resident_income_rate: Decimal = Field(..., ge=0, le=1)
    reconstruction_surtax_rate: Decimal = Field(..., ge=0, le=1)
    salary_deduction: Tuple[DeductionRow, ...]
    income_tax_brackets: Tuple[TaxBracket, ...]

    @model_validator(mode="after")
    def check_tables(self) -> "TaxRules":
        _check_ceilings(self.salary_deduction, "salary_deduction")
        _check_ceilings(self.income_tax_brackets, "income_tax_brackets")
        return self


class ValidationLimits(BaseModel):
    """Sanity bounds used by the input validator."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    salary_min: int = Field(..., ge=0)
    salary_max: int = Field(..., gt=0)
    due_date_window_months: int = Field(..., gt=0)


class Rules(BaseModel):
    """Complete rules for one rules year."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    year: int
    standard_remuneration_table: Tuple[int, ...]
    maternity: MaternityRules
    insurance_rates: InsuranceRates
    tax: TaxRules
    validation: ValidationLimits

    @model_validator(mode="after")
    def check_remuneration_table(self) -> "Rules":
        table = self.standard_remuneration_table
        if not table:
            raise ValueError("standard_remuneration_table must not be empty")
        if any(a >= b for a, b in zip(table, table[1:])):
            raise ValueError("standard_remuneration_table must be strictly ascending")
        return self


# =============================================================================
# Engine Records
# =============================================================================


class MaternityInput(BaseModel):
    """Validated calculator input."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    salary: int = Field(..., ge=0, description="Monthly gross salary in yen")
    due_date: date = Field(..., description="Expected due date")
    pregnancy_type: PregnancyType = Field(default="single")

    @property
    def is_multiple(self) -> bool:
        return self.pregnancy_type == "multiple"

    @classmethod
    def from_values(cls, salary, due_date, pregnancy_type="single") -> "MaternityInput":
        """Build an input, raising InvalidInputError instead of pydantic's ValidationError."""
        try:
            return cls(salary=salary, due_date=due_date, pregnancy_type=pregnancy_type)
        except ValidationError as e:
            raise InvalidInputError(str(e)) from e


class Period(BaseModel):
    """Inclusive calendar window."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    start: date
    end: date
    days: int = Field(..., gt=0)

    @model_validator(mode="after")
    def check_days(self) -> "Period":
        span = (self.end - self.start).days + 1
        if span != self.days:
            raise ValueError(f"days ({self.days}) != inclusive span {self.start}..{self.end} ({span})")
        return self

    def __contains__(self, day: date) -> bool:
        return self.start <= day <= self.end


class LeavePeriods(BaseModel):
    """Prenatal and postnatal leave windows."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    prenatal: Period
    postnatal: Period

    @property
    def total_days(self) -> int:
        return self.prenatal.days + self.postnatal.days


class SocialInsurance(BaseModel):
    """Employee-borne monthly social insurance premiums."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    health_insurance: int = Field(..., ge=0)
    care_insurance: int = Field(..., ge=0)
    pension_insurance: int = Field(..., ge=0)
    employment_insurance: int = Field(..., ge=0)
    total: int = Field(..., ge=0)

    @model_validator(mode="after")
    def check_total(self) -> "SocialInsurance":
        expected = (
            self.health_insurance + self.care_insurance
            + self.pension_insurance + self.employment_insurance
        )
        if self.total != expected:
            raise ValueError(f"total ({self.total}) != sum of premiums ({expected})")
        return self


class Tax(BaseModel):
    """Monthly income tax and resident tax."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    income_tax: int = Field(..., ge=0)
    resident_tax: int = Field(..., ge=0)
    total: int = Field(..., ge=0)

    @model_validator(mode="after")
    def check_total(self) -> "Tax":
        if self.total != self.income_tax + self.resident_tax:
            raise ValueError(f"total ({self.total}) != income_tax + resident_tax")
        return self


class CurrentIncome(BaseModel):
    """Estimated take-home pay at the current salary."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    gross_salary: int
    social_insurance: SocialInsurance
    tax: Tax
    net_income: int = Field(..., description="Not clamped at zero")

    @model_validator(mode="after")
    def check_net(self) -> "CurrentIncome":
        expected = self.gross_salary - self.social_insurance.total - self.tax.total
        if self.net_income != expected:
            raise ValueError(f"net_income ({self.net_income}) != gross - insurance - tax ({expected})")
        return self


class BenefitBreakdown(BaseModel):
    """Benefit amounts derived from the standard remuneration."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    standard_monthly_remuneration: int = Field(..., gt=0)
    standard_daily_wage: int = Field(..., ge=0)
    benefit_daily_amount: int = Field(..., ge=0)
    total_days: int = Field(..., gt=0)
    total_benefit: int = Field(..., ge=0)
    monthly_equivalent: int = Field(..., ge=0)


class MaternityResult(BaseModel):
    """Full calculation result. A fresh instance is built on every call."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    input: MaternityInput
    rules_year: int
    standard_monthly_remuneration: int
    standard_daily_wage: int
    benefit_daily_amount: int
    prenatal_period: Period
    postnatal_period: Period
    total_days: int
    total_benefit: int
    monthly_equivalent: int
    current_income: CurrentIncome
    current_net_income: int
    maintenance_rate: Optional[int] = Field(
        ..., description="Benefit as % of net income; None when net income is zero"
    )

    @property
    def maintenance_rate_defined(self) -> bool:
        return self.maintenance_rate is not None


class ValidationIssue(BaseModel):
    """A field-scoped validation finding. Errors block calculation; warnings do not."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    field: Literal["salary", "due_date", "pregnancy_type"]
    message: str
    severity: Literal["error", "warning"]

    @property
    def is_blocking(self) -> bool:
        return self.severity == "error"
