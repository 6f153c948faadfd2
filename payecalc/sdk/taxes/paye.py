"""PAYE calculation for a single regime.

Pipeline: normalize deductions -> allowances/taxable income -> progressive
bracket accumulation -> rounding and net pay.

All functions here are pure. Nothing validates monthly_gross: callers must
reject negative or non-numeric gross income first (see sdk.income).
"""

import logging
import math
import re
from typing import Mapping, Sequence, Union

from ..formatting import format_currency
from .schemas import (
    AdditionalDeductions,
    BracketBreakdown,
    CalculationResult,
    NormalizedDeductions,
    TaxBracket,
)

logger = logging.getLogger(__name__)

CONSOLIDATED_RELIEF_FLOOR = 200_000
CONSOLIDATED_RELIEF_RATE = 0.01
GROSS_INCOME_ALLOWANCE_RATE = 0.20
MONTHS_PER_YEAR = 12

# Leading decimal number, optional exponent; trailing text is ignored
_NUMBER_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

DeductionsInput = Union[AdditionalDeductions, Mapping[str, object], None]


def round_cents(amount: float) -> float:
    """Round to 2 decimal places, halves away from zero.

    Example: 0.125 -> 0.13, -0.125 -> -0.13
    """
    scaled = amount * 100
    rounded = int(scaled + 0.5) if scaled >= 0 else int(scaled - 0.5)
    return rounded / 100


def parse_amount(value: object) -> float:
    """Parse a free-form amount, returning 0 for anything unusable.

    Numbers pass through. Text is read up to the first character that can't
    continue a number, so "5000" -> 5000.0, " 12.5kg" -> 12.5, "abc" -> 0.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        match = _NUMBER_PREFIX.match(str(value))
        if not match:
            return 0.0
        number = float(match.group(1))
    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


def normalize_deductions(deductions: DeductionsInput = None) -> NormalizedDeductions:
    """Convert raw monthly deduction inputs into numbers.

    Accepts AdditionalDeductions or a plain mapping with pension/nhf/insurance
    keys. Missing, empty or non-numeric values become 0. Never raises.
    """
    if deductions is None:
        return NormalizedDeductions()
    if isinstance(deductions, AdditionalDeductions):
        raw = deductions.model_dump()
    else:
        raw = deductions

    return NormalizedDeductions(
        pension=parse_amount(raw.get("pension")),
        nhf=parse_amount(raw.get("nhf")),
        insurance=parse_amount(raw.get("insurance")),
    )


def calculate_consolidated_relief(annual_gross: float) -> float:
    """Consolidated relief allowance: the greater of ₦200,000 or 1% of gross."""
    return max(CONSOLIDATED_RELIEF_FLOOR, annual_gross * CONSOLIDATED_RELIEF_RATE)


def calculate_allowances(
    annual_gross: float,
    is_reform: bool,
    total_additional_deductions: float,
) -> tuple[float, float]:
    """Compute allowances and taxable income for a regime.

    Legacy: consolidated relief + 20% of gross + additional deductions.
    Reform: consolidated relief + additional deductions (no 20% allowance).

    Args:
        annual_gross: Annual gross income
        is_reform: True for the reform regime
        total_additional_deductions: Annual pension + NHF + insurance

    Returns:
        Tuple of (total_allowances, taxable_income). Taxable income is
        floored at 0; allowances are not.
    """
    consolidated_relief = calculate_consolidated_relief(annual_gross)

    if is_reform:
        total_allowances = consolidated_relief + total_additional_deductions
        taxable_income = max(0, annual_gross - consolidated_relief - total_additional_deductions)
        return total_allowances, taxable_income

    gross_income_allowance = annual_gross * GROSS_INCOME_ALLOWANCE_RATE
    total_allowances = consolidated_relief + gross_income_allowance + total_additional_deductions
    return total_allowances, max(0, annual_gross - total_allowances)


def _bracket_range_label(lower: float, bracket: TaxBracket) -> str:
    upper = "Above" if bracket.is_unbounded else format_currency(bracket.limit)
    return f"{format_currency(lower)} - {upper}"


def calculate_tax_by_brackets(
    taxable_income: float,
    brackets: Sequence[TaxBracket],
) -> tuple[float, list[BracketBreakdown]]:
    """Calculate progressive tax on taxable income.

    Brackets are walked in ascending order. A line is added for every
    bracket that receives a nonzero amount of income, including 0% brackets.

    Returns:
        Tuple of (total tax, per-bracket breakdown). Neither is rounded.
    """
    tax = 0.0
    previous_limit = 0.0
    breakdown = []

    for bracket in brackets:
        if taxable_income <= previous_limit:
            break

        if bracket.is_unbounded:
            taxable_in_bracket = taxable_income - previous_limit
        else:
            taxable_in_bracket = min(taxable_income, bracket.limit) - previous_limit
        tax_for_bracket = taxable_in_bracket * bracket.rate

        if taxable_in_bracket > 0:
            breakdown.append(BracketBreakdown(
                range=_bracket_range_label(previous_limit, bracket),
                rate=f"{bracket.rate * 100:.0f}%",
                taxable_amount=taxable_in_bracket,
                tax=tax_for_bracket,
            ))

        tax += tax_for_bracket

        if bracket.is_unbounded or taxable_income <= bracket.limit:
            break
        previous_limit = bracket.limit

    return tax, breakdown


def calculate_paye(
    monthly_gross: float,
    brackets: Sequence[TaxBracket],
    is_reform: bool = False,
    deductions: DeductionsInput = None,
) -> CalculationResult:
    """Calculate PAYE and net pay for one regime.

    Each output field is rounded on its own: monthly_paye comes from the
    unrounded annual tax / 12, not from annual_paye / 12, so the two need not
    reconcile to the cent. net_annual_pay is built from the rounded monthly
    net pay.

    Args:
        monthly_gross: Monthly gross income (assumed >= 0)
        brackets: Regime bracket table, ascending
        is_reform: True to apply the reform allowance rule
        deductions: Monthly pension/NHF/insurance (raw text or numbers)

    Returns:
        CalculationResult with amounts rounded to 2 dp
    """
    annual_gross = monthly_gross * MONTHS_PER_YEAR
    normalized = normalize_deductions(deductions)
    total_additional_deductions = normalized.total * MONTHS_PER_YEAR

    _, taxable_income = calculate_allowances(annual_gross, is_reform, total_additional_deductions)
    tax, breakdown = calculate_tax_by_brackets(taxable_income, brackets)

    monthly_tax = tax / MONTHS_PER_YEAR
    effective_tax_rate = (tax / annual_gross * 100) if annual_gross > 0 else 0
    net_monthly_pay = (
        monthly_gross
        - monthly_tax
        - normalized.pension
        - normalized.nhf
        - normalized.insurance
    )
    rounded_net_monthly = round_cents(net_monthly_pay)

    logger.debug(
        f"{'reform' if is_reform else 'legacy'}: annual gross {annual_gross:,.2f}, "
        f"taxable {taxable_income:,.2f}, tax {tax:,.2f} across {len(breakdown)} bracket(s)"
    )

    return CalculationResult(
        monthly_paye=round_cents(monthly_tax),
        annual_paye=round_cents(tax),
        effective_tax_rate=round_cents(effective_tax_rate),
        taxable_income=round_cents(taxable_income),
        # Reported as gross minus taxable so allowances + taxable == gross
        total_allowances=round_cents(annual_gross - taxable_income),
        bracket_breakdown=tuple(breakdown),
        net_monthly_pay=rounded_net_monthly,
        net_annual_pay=round_cents(rounded_net_monthly * MONTHS_PER_YEAR),
    )
