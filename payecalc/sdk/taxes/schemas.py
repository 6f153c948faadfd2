"""Pydantic schemas for PAYE regimes and calculation results.

Every model is frozen: a calculation builds a fresh result tree and nothing
mutates it afterwards. Bracket tables reject unknown fields so typos in a
regime definition cause clear errors rather than silent ignoring.

Field names are snake_case. Results.to_record() dumps the camelCase layout
used for stored scenario and history records.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


# =============================================================================
# Regime definitions
# =============================================================================


class TaxBracket(BaseModel):
    """Single tax bracket entry (annual cumulative threshold)."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    limit: Optional[float] = Field(default=None, gt=0, description="Upper bound (None if unbounded top bracket)")
    rate: float = Field(..., ge=0, le=1, description="Marginal tax rate as decimal")

    @property
    def is_unbounded(self) -> bool:
        return self.limit is None


class TaxRegime(BaseModel):
    """A named bracket table plus the allowance rule it is taxed under."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    key: str = Field(..., description="Short identifier ('legacy' or 'reform')")
    label: str
    is_reform: bool = Field(
        default=False,
        description="Reform regime drops the 20%-of-gross allowance",
    )
    brackets: tuple[TaxBracket, ...] = Field(..., min_length=1)

    @model_validator(mode="after")
    def check_brackets(self) -> "TaxRegime":
        """Limits must strictly increase and only the last bracket is unbounded."""
        *bounded, top = self.brackets
        if not top.is_unbounded:
            raise ValueError(f"{self.key}: last bracket must be unbounded (limit omitted)")

        previous = 0.0
        for i, bracket in enumerate(bounded):
            if bracket.is_unbounded:
                raise ValueError(f"{self.key}: bracket {i} is unbounded but not last")
            if bracket.limit <= previous:
                raise ValueError(
                    f"{self.key}: bracket {i} limit {bracket.limit:,.0f} "
                    f"does not exceed previous limit {previous:,.0f}"
                )
            previous = bracket.limit
        return self


# =============================================================================
# Inputs
# =============================================================================


class AdditionalDeductions(BaseModel):
    """Raw monthly pre-tax deductions as entered (numeric text or empty)."""
    model_config = ConfigDict(frozen=True)

    pension: str = ""
    nhf: str = ""
    insurance: str = ""


class NormalizedDeductions(BaseModel):
    """Monthly deductions parsed to numbers."""
    model_config = ConfigDict(frozen=True)

    pension: float = 0.0
    nhf: float = 0.0
    insurance: float = 0.0

    @property
    def total(self) -> float:
        """Total monthly deductions."""
        return self.pension + self.nhf + self.insurance


# =============================================================================
# Results
# =============================================================================


class BracketBreakdown(BaseModel):
    """Tax assessed within one bracket. Amounts are unrounded."""
    model_config = ConfigDict(frozen=True)

    range: str = Field(..., description="Display label, e.g. '₦0 - ₦300,000'")
    rate: str = Field(..., description="Integer percentage label, e.g. '7%'")
    taxable_amount: float = Field(..., serialization_alias="taxableAmount")
    tax: float


class CalculationResult(BaseModel):
    """PAYE outcome for one regime. Monetary fields are rounded to 2 dp."""
    model_config = ConfigDict(frozen=True)

    monthly_paye: float = Field(..., serialization_alias="monthlyPAYE")
    annual_paye: float = Field(..., serialization_alias="annualPAYE")
    effective_tax_rate: float = Field(..., serialization_alias="effectiveTaxRate")
    taxable_income: float = Field(..., serialization_alias="taxableIncome")
    total_allowances: float = Field(
        ..., serialization_alias="totalAllowances",
        description="Annual gross minus taxable income",
    )
    bracket_breakdown: tuple[BracketBreakdown, ...] = Field(
        default=(), serialization_alias="bracketBreakdown",
    )
    net_monthly_pay: float = Field(..., serialization_alias="netMonthlyPay")
    net_annual_pay: float = Field(..., serialization_alias="netAnnualPay")


class Savings(BaseModel):
    """Legacy minus reform PAYE. Positive means the reform regime costs less."""
    model_config = ConfigDict(frozen=True)

    monthly: float
    annual: float
    percentage: float


class Results(BaseModel):
    """Side-by-side comparison of both regimes for one monthly gross."""
    model_config = ConfigDict(frozen=True)

    legacy: CalculationResult
    reform: CalculationResult
    savings: Savings
    monthly_gross: float = Field(..., serialization_alias="monthlyGross")

    def to_record(self) -> dict:
        """Dump as a plain camelCase dict suitable for JSON storage."""
        return self.model_dump(mode="json", by_alias=True)
