"""PAYE Calc MCP Server - FastMCP implementation for PAYE comparison tools."""

import json
import logging
from typing import Any

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from payecalc.sdk import (
    build_scenario,
    compare,
    parse_gross_income,
    quick_scenarios,
    scenario_chart_rows,
)
from payecalc.sdk.taxes import REGIMES

logger = logging.getLogger(__name__)

# Initialize FastMCP server
mcp = FastMCP("paye-calc")


# --- Tools ---

@mcp.tool()
async def compare_paye(
    gross: str = Field(description="Gross salary in Naira (e.g., '500000')"),
    input_type: str = Field(default="monthly", description="'monthly' or 'annual'"),
    pension: str = Field(default="", description="Monthly pension contribution"),
    nhf: str = Field(default="", description="Monthly National Housing Fund contribution"),
    insurance: str = Field(default="", description="Monthly insurance premium"),
) -> dict[str, Any]:
    """Compare legacy and reform PAYE for a salary. Returns both regime results, bracket breakdowns and savings."""
    try:
        monthly_gross = parse_gross_income(gross, input_type)
    except ValueError as e:
        logger.error(f"Invalid compare_paye input: {e}")
        return {"error": str(e)}

    results = compare(monthly_gross, {"pension": pension, "nhf": nhf, "insurance": insurance})
    return results.to_record()


@mcp.tool()
async def what_if(
    gross: str = Field(description="Current gross salary in Naira"),
    input_type: str = Field(default="monthly", description="'monthly' or 'annual'"),
    label: str = Field(default="", description="Custom scenario label (omit for quick scenarios only)"),
    change: float = Field(default=0, description="Percentage points or fixed monthly amount"),
    change_type: str = Field(default="percentage", description="'percentage' or 'fixed'"),
    pension: str = Field(default="", description="Monthly pension contribution, held constant across scenarios"),
    nhf: str = Field(default="", description="Monthly National Housing Fund contribution"),
    insurance: str = Field(default="", description="Monthly insurance premium"),
) -> dict[str, Any]:
    """Compare PAYE across salary scenarios: +10%, +20%, -10%, +₦100k, plus an optional custom change."""
    deductions = {"pension": pension, "nhf": nhf, "insurance": insurance}
    try:
        monthly_gross = parse_gross_income(gross, input_type)
        scenarios = quick_scenarios(monthly_gross, deductions)
        if label:
            scenarios.append(build_scenario(label, monthly_gross, change, change_type, deductions))
    except ValueError as e:
        logger.error(f"Invalid what_if input: {e}")
        return {"error": str(e)}

    current = compare(monthly_gross, deductions)
    return {
        "current": current.to_record(),
        "scenarios": [s.to_record() for s in scenarios],
        "chart": scenario_chart_rows(current, scenarios),
    }


# --- Resources ---

@mcp.resource("payecalc://regimes")
async def regimes_resource() -> str:
    """Bracket tables for both regimes (limit null = unbounded)."""
    return json.dumps(
        {key: regime.model_dump(mode="json") for key, regime in REGIMES.items()},
        indent=2,
        ensure_ascii=False,
    )


# --- Server Entry Point ---

def run_server():
    """Run the MCP server in stdio mode."""
    mcp.run(transport="stdio")


if __name__ == "__main__":
    run_server()
