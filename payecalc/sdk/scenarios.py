"""What-if scenarios: recompute the comparison for an adjusted salary.

A scenario is a labelled Results for a gross derived from the current one,
either by a percentage change (raise/pay cut) or a fixed monthly amount.
"""

import hashlib
import math
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from .comparison import compare
from .taxes.paye import DeductionsInput
from .taxes.schemas import Results

ChangeType = Literal["percentage", "fixed"]
CHART_LABEL_LENGTH = 15

# (label, change, change_type)
QUICK_SCENARIOS = [
    ("+10% Raise", 10, "percentage"),
    ("+20% Raise", 20, "percentage"),
    ("-10% Pay Cut", -10, "percentage"),
    ("+₦100k Bonus", 100_000, "fixed"),
]


class Scenario(BaseModel):
    """A labelled comparison for an adjusted monthly gross."""
    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    monthly_gross: float = Field(..., serialization_alias="monthlyGross")
    results: Results

    def to_record(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


def adjust_gross(base_monthly_gross: float, change: float, change_type: ChangeType) -> float:
    """Apply a percentage or fixed change to a monthly gross, floored at 0.

    Raises:
        ValueError: If change_type is not recognized or the result is not finite
    """
    if change_type == "percentage":
        adjusted = base_monthly_gross * (1 + change / 100)
    elif change_type == "fixed":
        adjusted = base_monthly_gross + change
    else:
        raise ValueError(f"Invalid change type '{change_type}'. Must be 'percentage' or 'fixed'.")
    if not math.isfinite(adjusted):
        raise ValueError(f"Scenario change {change!r} gives a non-finite salary")
    return max(0, adjusted)


def _scenario_id(label: str, monthly_gross: float) -> str:
    digest = hashlib.sha256(f"{label}|{monthly_gross!r}".encode("utf-8")).hexdigest()
    return digest[:8]


def build_scenario(
    label: str,
    base_monthly_gross: float,
    change: float,
    change_type: ChangeType = "percentage",
    deductions: DeductionsInput = None,
) -> Scenario:
    """Compare both regimes for an adjusted salary.

    Args:
        label: Display label (required)
        base_monthly_gross: Current monthly gross
        change: Percentage points or fixed monthly amount
        change_type: 'percentage' or 'fixed'
        deductions: Monthly deductions, held constant across scenarios

    Raises:
        ValueError: If label is empty or change_type is not recognized
    """
    label = (label or "").strip()
    if not label:
        raise ValueError("Scenario label is required")

    monthly_gross = adjust_gross(base_monthly_gross, change, change_type)
    return Scenario(
        id=_scenario_id(label, monthly_gross),
        label=label,
        monthly_gross=monthly_gross,
        results=compare(monthly_gross, deductions),
    )


def quick_scenarios(base_monthly_gross: float, deductions: DeductionsInput = None) -> list[Scenario]:
    """Build the standard raise / pay cut / bonus scenarios."""
    return [
        build_scenario(label, base_monthly_gross, change, change_type, deductions)
        for label, change, change_type in QUICK_SCENARIOS
    ]


def _chart_label(label: str) -> str:
    if len(label) > CHART_LABEL_LENGTH:
        return label[:CHART_LABEL_LENGTH] + "..."
    return label


def scenario_chart_rows(current: Optional[Results], scenarios: list[Scenario]) -> list[dict]:
    """Rows comparing monthly gross, PAYE and reform net pay across scenarios.

    The first row is the current salary. Returns [] when there are no
    scenarios to compare against.
    """
    if not scenarios:
        return []

    rows = [{
        "name": "Current",
        "monthly_gross": current.monthly_gross if current else 0,
        "legacy_tax": current.legacy.monthly_paye if current else 0,
        "reform_tax": current.reform.monthly_paye if current else 0,
        "net_pay": current.reform.net_monthly_pay if current else 0,
    }]
    for scenario in scenarios:
        rows.append({
            "name": _chart_label(scenario.label),
            "monthly_gross": scenario.monthly_gross,
            "legacy_tax": scenario.results.legacy.monthly_paye,
            "reform_tax": scenario.results.reform.monthly_paye,
            "net_pay": scenario.results.reform.net_monthly_pay,
        })
    return rows
