"""Employee roster comparison.

Reads an employee list from profile.yaml and runs the legacy vs reform
comparison for each entry:

    employees:
      - name: Ada Obi
        email: ada@example.com
        department: Finance
        monthly_gross: 450000
        deductions:
          pension: 36000
          nhf: 11250

Entries without deductions fall back to the profile's top-level
'deductions' section.
"""

import logging
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .comparison import compare
from .config import load_profile
from .taxes.schemas import AdditionalDeductions, Results

logger = logging.getLogger(__name__)


class RosterError(ValueError):
    """Raised when one or more roster entries fail validation."""

    def __init__(self, errors: list):
        self.errors = errors
        super().__init__("Invalid employee roster:\n" + "\n".join(f"  - {e}" for e in errors))


class Employee(BaseModel):
    """A roster entry."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: Optional[str] = None
    name: str = Field(..., min_length=1)
    email: str = ""
    department: str = ""
    monthly_gross: float = Field(..., ge=0, allow_inf_nan=False)
    deductions: Optional[AdditionalDeductions] = None

    @field_validator("deductions", mode="before")
    @classmethod
    def stringify_deductions(cls, value):
        """YAML gives numbers; deductions are held as entered text."""
        if isinstance(value, dict):
            return {k: "" if v is None else str(v) for k, v in value.items()}
        return value


class EmployeeResult(BaseModel):
    """An employee with their comparison results."""
    model_config = ConfigDict(frozen=True)

    employee: Employee
    results: Results


def load_employees(profile: Optional[dict] = None) -> list[Employee]:
    """Validate the profile's employee roster.

    Entries missing an id get 'emp-N' (1-based position). Entries without
    deductions take the profile's default 'deductions' section.

    Args:
        profile: Profile dict (loaded from profile.yaml if not provided)

    Raises:
        RosterError: Listing every invalid entry
    """
    if profile is None:
        profile = load_profile(require_exists=True)

    entries = profile.get("employees") or []
    if not isinstance(entries, list):
        raise RosterError(["'employees' must be a list"])

    default_deductions = profile.get("deductions") or {}

    employees = []
    errors = []
    for i, entry in enumerate(entries, start=1):
        if not isinstance(entry, dict):
            errors.append(f"entry {i}: expected a mapping, got {type(entry).__name__}")
            continue
        data = dict(entry)
        data.setdefault("id", f"emp-{i}")
        if data.get("deductions") is None:
            data["deductions"] = default_deductions
        try:
            employees.append(Employee.model_validate(data))
        except ValidationError as e:
            for err in e.errors():
                loc = ".".join(str(part) for part in err["loc"])
                errors.append(f"entry {i} ({entry.get('name', '?')}): {loc}: {err['msg']}")

    if errors:
        raise RosterError(errors)

    logger.debug(f"loaded {len(employees)} employee(s)")
    return employees


def compare_employees(employees: list[Employee]) -> list[EmployeeResult]:
    """Compare both regimes for every employee."""
    return [
        EmployeeResult(employee=emp, results=compare(emp.monthly_gross, emp.deductions))
        for emp in employees
    ]


def summarize_roster(results: list[EmployeeResult]) -> dict:
    """Monthly totals across the roster."""
    summary = {
        "headcount": len(results),
        "monthly_gross": 0.0,
        "legacy_monthly_paye": 0.0,
        "reform_monthly_paye": 0.0,
        "monthly_savings": 0.0,
    }
    for item in results:
        res = item.results
        summary["monthly_gross"] += res.monthly_gross
        summary["legacy_monthly_paye"] += res.legacy.monthly_paye
        summary["reform_monthly_paye"] += res.reform.monthly_paye
        summary["monthly_savings"] += res.savings.monthly
    return summary
