"""Shussan Calc SDK - maternity benefit calculation engine."""

from .config import (
    get_config_dir,
    get_settings_path,
    load_settings,
    save_settings,
    get_setting,
    set_setting,
    unset_setting,
    KNOWN_SETTINGS,
)

from .rules import (
    load_rules,
    load_builtin_rules,
    clear_rules_cache,
    get_available_years,
    get_rules_dir,
    get_builtin_rules_dir,
    RulesNotFoundError,
)

from .schemas import (
    ShussanError,
    InvalidInputError,
    PregnancyType,
    PREGNANCY_TYPES,
    Rules,
    MaternityInput,
    Period,
    LeavePeriods,
    SocialInsurance,
    Tax,
    CurrentIncome,
    BenefitBreakdown,
    MaternityResult,
    ValidationIssue,
)

from .remuneration import standard_remuneration, list_brackets
from .benefit import calculate_benefit, standard_daily_wage, benefit_daily_amount
from .periods import (
    calculate_periods,
    calculate_prenatal_period,
    calculate_postnatal_period,
    calculate_total_days,
    is_valid_due_date,
    parse_due_date,
)
from .income import (
    calculate_current_income,
    calculate_social_insurance,
    calculate_tax,
    calculate_salary_income_deduction,
    calculate_income_tax,
    calculate_resident_tax,
)
from .validate import validate_maternity_input, has_blocking_errors
from .maternity import (
    calculate_maternity,
    calculate_maternity_from_values,
    calculate_maintenance_rate,
    rate_maintenance,
)

__all__ = [
    # Config
    "get_config_dir",
    "get_settings_path",
    "load_settings",
    "save_settings",
    "get_setting",
    "set_setting",
    "unset_setting",
    "KNOWN_SETTINGS",
    # Rules
    "load_rules",
    "load_builtin_rules",
    "clear_rules_cache",
    "get_available_years",
    "get_rules_dir",
    "get_builtin_rules_dir",
    "RulesNotFoundError",
    # Schemas
    "ShussanError",
    "InvalidInputError",
    "PregnancyType",
    "PREGNANCY_TYPES",
    "Rules",
    "MaternityInput",
    "Period",
    "LeavePeriods",
    "SocialInsurance",
    "Tax",
    "CurrentIncome",
    "BenefitBreakdown",
    "MaternityResult",
    "ValidationIssue",
    # Engine
    "standard_remuneration",
    "list_brackets",
    "calculate_benefit",
    "standard_daily_wage",
    "benefit_daily_amount",
    "calculate_periods",
    "calculate_prenatal_period",
    "calculate_postnatal_period",
    "calculate_total_days",
    "is_valid_due_date",
    "parse_due_date",
    "calculate_current_income",
    "calculate_social_insurance",
    "calculate_tax",
    "calculate_salary_income_deduction",
    "calculate_income_tax",
    "calculate_resident_tax",
    "validate_maternity_input",
    "has_blocking_errors",
    "calculate_maternity",
    "calculate_maternity_from_values",
    "calculate_maintenance_rate",
    "rate_maintenance",
]
