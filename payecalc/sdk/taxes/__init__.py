"""taxes - PAYE regime tables and per-regime calculation.

Scope:
- Legacy and reform bracket tables (annual cumulative thresholds)
- Deduction normalization, allowances, progressive bracket accumulation
- Per-regime CalculationResult with 2 dp rounding

Constraints:
- Pure calculation - no config or profile access
- No validation of gross income (callers guard, see sdk.income)

Usage:
    from payecalc.sdk.taxes import calculate_paye, LEGACY_BRACKETS

    result = calculate_paye(500_000, LEGACY_BRACKETS, is_reform=False)
"""

from .schemas import (
    TaxBracket,
    TaxRegime,
    AdditionalDeductions,
    NormalizedDeductions,
    BracketBreakdown,
    CalculationResult,
    Savings,
    Results,
)

from .regimes import (
    LEGACY_REGIME,
    REFORM_REGIME,
    LEGACY_BRACKETS,
    REFORM_BRACKETS,
    REGIMES,
    get_regime,
)

from .paye import (
    round_cents,
    parse_amount,
    normalize_deductions,
    calculate_consolidated_relief,
    calculate_allowances,
    calculate_tax_by_brackets,
    calculate_paye,
)

__all__ = [
    # Schemas
    "TaxBracket",
    "TaxRegime",
    "AdditionalDeductions",
    "NormalizedDeductions",
    "BracketBreakdown",
    "CalculationResult",
    "Savings",
    "Results",
    # Regimes
    "LEGACY_REGIME",
    "REFORM_REGIME",
    "LEGACY_BRACKETS",
    "REFORM_BRACKETS",
    "REGIMES",
    "get_regime",
    # Calculation
    "round_cents",
    "parse_amount",
    "normalize_deductions",
    "calculate_consolidated_relief",
    "calculate_allowances",
    "calculate_tax_by_brackets",
    "calculate_paye",
]
