"""Tests for the MCP server tools (requires the 'mcp' extra)."""

import asyncio
import json

import pytest

pytest.importorskip("mcp")

from payecalc.mcp import server  # noqa: E402


def run(coro):
    return asyncio.run(coro)


class TestComparePaye:

    def test_monthly(self):
        record = run(server.compare_paye(
            gross="500000", input_type="monthly", pension="", nhf="", insurance="",
        ))

        assert record["monthlyGross"] == 500000
        assert record["legacy"]["monthlyPAYE"] == pytest.approx(74666.67)
        assert record["reform"]["monthlyPAYE"] == pytest.approx(69500)

    def test_annual_with_deductions(self):
        record = run(server.compare_paye(
            gross="6000000", input_type="annual", pension="20000", nhf="5000", insurance="",
        ))

        assert record["monthlyGross"] == 500000
        assert record["legacy"]["annualPAYE"] == pytest.approx(824000)

    def test_invalid_gross(self):
        record = run(server.compare_paye(
            gross="-1", input_type="monthly", pension="", nhf="", insurance="",
        ))
        assert "cannot be negative" in record["error"]

    def test_invalid_input_type(self):
        record = run(server.compare_paye(
            gross="500000", input_type="weekly", pension="", nhf="", insurance="",
        ))
        assert "Invalid input type" in record["error"]


class TestWhatIf:

    def test_quick_only(self):
        output = run(server.what_if(
            gross="500000", input_type="monthly", label="", change=0, change_type="percentage",
            pension="", nhf="", insurance="",
        ))

        assert len(output["scenarios"]) == 4
        assert output["chart"][0]["name"] == "Current"

    def test_custom(self):
        output = run(server.what_if(
            gross="500000", input_type="monthly", label="Promotion", change=35, change_type="percentage",
            pension="", nhf="", insurance="",
        ))

        assert output["scenarios"][-1]["label"] == "Promotion"
        assert output["scenarios"][-1]["monthlyGross"] == pytest.approx(675000)

    def test_invalid_change_type(self):
        output = run(server.what_if(
            gross="500000", input_type="monthly", label="X", change=1, change_type="ratio",
            pension="", nhf="", insurance="",
        ))
        assert "Invalid change type" in output["error"]

    def test_deductions_apply_to_every_scenario(self):
        output = run(server.what_if(
            gross="500000", input_type="monthly", label="", change=0, change_type="percentage",
            pension="20000", nhf="5000", insurance="",
        ))

        assert output["current"]["legacy"]["monthlyPAYE"] == pytest.approx(68666.67)
        baseline = run(server.what_if(
            gross="500000", input_type="monthly", label="", change=0, change_type="percentage",
            pension="", nhf="", insurance="",
        ))
        for with_deductions, without in zip(output["scenarios"], baseline["scenarios"]):
            assert with_deductions["legacy"]["monthlyPAYE"] < without["legacy"]["monthlyPAYE"]

    def test_infinite_change_is_an_error(self):
        output = run(server.what_if(
            gross="500000", input_type="monthly", label="Huge", change=float("inf"), change_type="fixed",
            pension="", nhf="", insurance="",
        ))
        assert "non-finite" in output["error"]


class TestRegimesResource:

    def test_tables(self):
        regimes = json.loads(run(server.regimes_resource()))

        assert set(regimes) == {"legacy", "reform"}
        assert regimes["legacy"]["brackets"][-1] == {"limit": None, "rate": 0.24}
        assert regimes["reform"]["is_reform"] is True
