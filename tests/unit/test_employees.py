"""Tests for employee roster validation and comparison."""

import pytest

from payecalc.sdk import (
    RosterError,
    compare,
    compare_employees,
    load_employees,
    summarize_roster,
)


@pytest.fixture
def roster_profile():
    return {
        "deductions": {"pension": 10000},
        "employees": [
            {
                "id": "E001",
                "name": "Ada Obi",
                "email": "ada@example.com",
                "department": "Finance",
                "monthly_gross": 500000,
                "deductions": {"pension": 40000, "nhf": 12500},
            },
            {
                "name": "Tunde Bello",
                "department": "Engineering",
                "monthly_gross": 250000,
            },
        ],
    }


class TestLoadEmployees:

    def test_valid_roster(self, roster_profile):
        employees = load_employees(roster_profile)

        assert [e.name for e in employees] == ["Ada Obi", "Tunde Bello"]
        assert employees[0].id == "E001"
        assert employees[0].deductions.pension == "40000"
        assert employees[0].deductions.nhf == "12500"
        assert employees[0].deductions.insurance == ""

    def test_missing_id_gets_position(self, roster_profile):
        employees = load_employees(roster_profile)
        assert employees[1].id == "emp-2"

    def test_missing_deductions_use_profile_default(self, roster_profile):
        employees = load_employees(roster_profile)
        assert employees[1].deductions.pension == "10000"

    def test_empty_roster(self):
        assert load_employees({}) == []

    def test_invalid_entries_all_reported(self):
        profile = {"employees": [
            {"monthly_gross": 100000},
            {"name": "Negative", "monthly_gross": -5},
            {"name": "Fine", "monthly_gross": 1000},
        ]}
        with pytest.raises(RosterError) as exc_info:
            load_employees(profile)

        errors = exc_info.value.errors
        assert len(errors) == 2
        assert errors[0].startswith("entry 1 (?): name")
        assert errors[1].startswith("entry 2 (Negative): monthly_gross")

    def test_non_finite_gross_rejected(self):
        profile = {"employees": [
            {"name": "Huge", "monthly_gross": float("inf")},
            {"name": "Blank", "monthly_gross": float("nan")},
        ]}
        with pytest.raises(RosterError) as exc_info:
            load_employees(profile)

        errors = exc_info.value.errors
        assert errors[0].startswith("entry 1 (Huge): monthly_gross")
        assert errors[-1].startswith("entry 2 (Blank): monthly_gross")

    def test_unknown_field_rejected(self):
        with pytest.raises(RosterError, match="salary"):
            load_employees({"employees": [{"name": "X", "monthly_gross": 1, "salary": 2}]})

    def test_non_mapping_entry(self):
        with pytest.raises(RosterError, match="expected a mapping"):
            load_employees({"employees": ["Ada"]})

    def test_employees_not_a_list(self):
        with pytest.raises(RosterError, match="must be a list"):
            load_employees({"employees": {"name": "Ada"}})


class TestCompareEmployees:

    def test_results_per_employee(self, roster_profile):
        results = compare_employees(load_employees(roster_profile))

        assert len(results) == 2
        assert results[0].results == compare(500_000, {"pension": "40000", "nhf": "12500"})
        assert results[1].results == compare(250_000, {"pension": "10000"})

    def test_summary_totals(self, roster_profile):
        results = compare_employees(load_employees(roster_profile))
        summary = summarize_roster(results)

        assert summary["headcount"] == 2
        assert summary["monthly_gross"] == 750_000
        assert summary["legacy_monthly_paye"] == pytest.approx(
            sum(r.results.legacy.monthly_paye for r in results)
        )
        assert summary["monthly_savings"] == pytest.approx(
            summary["legacy_monthly_paye"] - summary["reform_monthly_paye"]
        )

    def test_summary_empty(self):
        summary = summarize_roster([])
        assert summary["headcount"] == 0
        assert summary["monthly_gross"] == 0
