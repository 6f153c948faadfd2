"""PAYE Calc SDK - Core functionality for legacy vs reform PAYE comparison."""

from .config import (
    get_config_dir,
    get_settings_path,
    load_settings,
    save_settings,
    get_setting,
    set_setting,
    unset_setting,
    validate_setting,
    InvalidSettingError,
    get_profile_path,
    load_profile,
    save_profile,
    get_profile_value,
    set_profile_value,
    get_default_deductions,
    ProfileNotFoundError,
)

from .taxes import (
    TaxBracket,
    TaxRegime,
    AdditionalDeductions,
    BracketBreakdown,
    CalculationResult,
    Savings,
    Results,
    LEGACY_BRACKETS,
    REFORM_BRACKETS,
    normalize_deductions,
    calculate_allowances,
    calculate_tax_by_brackets,
    calculate_paye,
    round_cents,
)

from .comparison import compare, calculate_savings

from .income import (
    parse_gross_income,
    compare_income,
    InvalidIncomeError,
)

from .formatting import format_currency, format_percent

from .scenarios import (
    Scenario,
    QUICK_SCENARIOS,
    adjust_gross,
    build_scenario,
    quick_scenarios,
    scenario_chart_rows,
)

from .employees import (
    Employee,
    EmployeeResult,
    RosterError,
    load_employees,
    compare_employees,
    summarize_roster,
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
    "validate_setting",
    "InvalidSettingError",
    "get_profile_path",
    "load_profile",
    "save_profile",
    "get_profile_value",
    "set_profile_value",
    "get_default_deductions",
    "ProfileNotFoundError",
    # Taxes
    "TaxBracket",
    "TaxRegime",
    "AdditionalDeductions",
    "BracketBreakdown",
    "CalculationResult",
    "Savings",
    "Results",
    "LEGACY_BRACKETS",
    "REFORM_BRACKETS",
    "normalize_deductions",
    "calculate_allowances",
    "calculate_tax_by_brackets",
    "calculate_paye",
    "round_cents",
    # Comparison
    "compare",
    "calculate_savings",
    # Income input
    "parse_gross_income",
    "compare_income",
    "InvalidIncomeError",
    # Formatting
    "format_currency",
    "format_percent",
    # Scenarios
    "Scenario",
    "QUICK_SCENARIOS",
    "adjust_gross",
    "build_scenario",
    "quick_scenarios",
    "scenario_chart_rows",
    # Employees
    "Employee",
    "EmployeeResult",
    "RosterError",
    "load_employees",
    "compare_employees",
    "summarize_roster",
]
