"""Gross income input handling.

The comparison engine assumes a valid monthly gross. This module is the
guard in front of it: it parses what the user typed, rejects anything that
isn't a non-negative finite number, and converts annual figures to monthly.
"""

import math
from typing import Literal, Union

from .comparison import compare
from .taxes.paye import DeductionsInput
from .taxes.schemas import Results

InputType = Literal["monthly", "annual"]
INPUT_TYPES = ("monthly", "annual")


class InvalidIncomeError(ValueError):
    """Raised when gross income input is empty, non-numeric or negative."""
    pass


def parse_gross_income(value: Union[str, int, float], input_type: InputType = "monthly") -> float:
    """Parse gross income and return it as a monthly figure.

    Args:
        value: Gross income as entered (text or number)
        input_type: 'monthly' or 'annual' (annual is divided by 12)

    Returns:
        Monthly gross income

    Raises:
        InvalidIncomeError: If value is empty, non-numeric, not finite or negative
        ValueError: If input_type is not recognized
    """
    if input_type not in INPUT_TYPES:
        raise ValueError(f"Invalid input type '{input_type}'. Must be 'monthly' or 'annual'.")

    if isinstance(value, bool):
        raise InvalidIncomeError(f"Gross income must be a number, got {value!r}")

    if isinstance(value, str):
        text = value.strip().replace(",", "")
        if not text:
            raise InvalidIncomeError("Gross income is required")
        try:
            amount = float(text)
        except ValueError:
            raise InvalidIncomeError(f"Gross income must be a number, got '{value}'") from None
    else:
        amount = float(value)

    if math.isnan(amount) or math.isinf(amount):
        raise InvalidIncomeError(f"Gross income must be finite, got {value!r}")
    if amount < 0:
        raise InvalidIncomeError(f"Gross income cannot be negative, got {amount:,.2f}")

    if input_type == "annual":
        return amount / 12
    return amount


def compare_income(
    value: Union[str, int, float],
    input_type: InputType = "monthly",
    deductions: DeductionsInput = None,
) -> Results:
    """Validate gross income input and compare both regimes for it."""
    return compare(parse_gross_income(value, input_type), deductions)
