"""Legacy vs reform PAYE comparison."""

import logging

from .taxes.paye import DeductionsInput, calculate_paye
from .taxes.regimes import LEGACY_REGIME, REFORM_REGIME
from .taxes.schemas import CalculationResult, Results, Savings

logger = logging.getLogger(__name__)


def calculate_savings(legacy: CalculationResult, reform: CalculationResult) -> Savings:
    """Savings from moving to the reform regime (negative = reform costs more).

    Percentage is relative to legacy annual PAYE, 0 when legacy PAYE is 0.
    Values are left unrounded.
    """
    annual = legacy.annual_paye - reform.annual_paye
    percentage = (annual / legacy.annual_paye) * 100 if legacy.annual_paye > 0 else 0
    return Savings(
        monthly=legacy.monthly_paye - reform.monthly_paye,
        annual=annual,
        percentage=percentage,
    )


def compare(monthly_gross: float, deductions: DeductionsInput = None) -> Results:
    """Calculate PAYE under both regimes for the same income and deductions.

    Args:
        monthly_gross: Monthly gross income, already validated as >= 0
        deductions: Monthly pension/NHF/insurance (AdditionalDeductions or dict)

    Returns:
        Results with both regime outcomes and the savings between them
    """
    legacy = calculate_paye(monthly_gross, LEGACY_REGIME.brackets, LEGACY_REGIME.is_reform, deductions)
    reform = calculate_paye(monthly_gross, REFORM_REGIME.brackets, REFORM_REGIME.is_reform, deductions)
    savings = calculate_savings(legacy, reform)

    logger.debug(
        f"compare {monthly_gross:,.2f}/month: legacy {legacy.monthly_paye:,.2f}, "
        f"reform {reform.monthly_paye:,.2f}, savings {savings.monthly:,.2f}"
    )

    return Results(
        legacy=legacy,
        reform=reform,
        savings=savings,
        monthly_gross=monthly_gross,
    )
