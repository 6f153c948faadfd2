"""Renderers for regime comparison output.

Transforms SDK results into ASCII tables (single comparison), CSV rows, or
Rich tables (scenarios and employee roster).
"""

import csv
import io

from rich import box
from rich.console import Console
from rich.table import Table

from payecalc.sdk.formatting import format_currency, format_percent
from payecalc.sdk.taxes.schemas import CalculationResult, Results, TaxRegime


def _money(amount: float) -> str:
    return format_currency(amount, decimals=2)


def _format_regime_lines(title: str, result: CalculationResult, breakdown: bool) -> list:
    lines = [title, "-" * 60]
    lines.append(f"  {'Total allowances':<24} {_money(result.total_allowances):>20}")
    lines.append(f"  {'Taxable income':<24} {_money(result.taxable_income):>20}")
    lines.append(f"  {'Annual PAYE':<24} {_money(result.annual_paye):>20}")
    lines.append(f"  {'Monthly PAYE':<24} {_money(result.monthly_paye):>20}")
    lines.append(f"  {'Effective tax rate':<24} {format_percent(result.effective_tax_rate):>20}")
    lines.append(f"  {'Net monthly pay':<24} {_money(result.net_monthly_pay):>20}")
    lines.append(f"  {'Net annual pay':<24} {_money(result.net_annual_pay):>20}")

    if breakdown:
        lines.append("")
        lines.append(f"  {'Bracket':<28} {'Rate':>5} {'Taxable':>16} {'Tax':>16}")
        lines.append(f"  {'-'*28} {'-'*5} {'-'*16} {'-'*16}")
        if not result.bracket_breakdown:
            lines.append("  (no taxable income)")
        for line in result.bracket_breakdown:
            lines.append(
                f"  {line.range:<28} {line.rate:>5} "
                f"{_money(line.taxable_amount):>16} {_money(line.tax):>16}"
            )
    lines.append("")
    return lines


def format_comparison_text(results: Results, breakdown: bool = False) -> str:
    """Format a comparison as ASCII tables for terminal display."""
    lines = []
    lines.append(f"PAYE COMPARISON FOR {format_currency(results.monthly_gross)}/MONTH")
    lines.append("=" * 60)
    lines.append("")

    lines.extend(_format_regime_lines("LEGACY REGIME", results.legacy, breakdown))
    lines.extend(_format_regime_lines("REFORM REGIME", results.reform, breakdown))

    savings = results.savings
    caption = "saves" if savings.monthly >= 0 else "costs"
    lines.append("SAVINGS UNDER REFORM")
    lines.append("-" * 60)
    lines.append(f"  {'Monthly':<24} {_money(savings.monthly):>20}")
    lines.append(f"  {'Annual':<24} {_money(savings.annual):>20}")
    lines.append(f"  {'Percentage':<24} {format_percent(savings.percentage):>20}")
    lines.append("")
    lines.append(f"Reform {caption} {format_currency(abs(savings.monthly))} per month.")
    return "\n".join(lines)


def format_bracket_table(regime: TaxRegime) -> str:
    """Format a regime's annual bracket table."""
    lines = [regime.label.upper(), "-" * 40]
    lines.append(f"  {'Annual taxable income':<30} {'Rate':>6}")
    previous = 0.0
    for bracket in regime.brackets:
        if bracket.is_unbounded:
            band = f"Above {format_currency(previous)}"
        else:
            band = f"{format_currency(previous)} - {format_currency(bracket.limit)}"
            previous = bracket.limit
        lines.append(f"  {band:<30} {bracket.rate:>6.0%}")
    lines.append("")
    return "\n".join(lines)


CSV_FIELDS = [
    "regime",
    "monthly_gross",
    "total_allowances",
    "taxable_income",
    "annual_paye",
    "monthly_paye",
    "effective_tax_rate",
    "net_monthly_pay",
    "net_annual_pay",
]


def comparison_to_csv_string(results: Results) -> str:
    """One CSV row per regime."""
    output = io.StringIO()
    writer = csv.DictWriter(output, fieldnames=CSV_FIELDS, lineterminator="\n")
    writer.writeheader()
    for regime, result in (("legacy", results.legacy), ("reform", results.reform)):
        row = result.model_dump(include=set(CSV_FIELDS))
        row["regime"] = regime
        row["monthly_gross"] = results.monthly_gross
        writer.writerow(row)
    return output.getvalue()


def render_scenarios(console: Console, rows: list) -> None:
    """Render scenario comparison rows (from scenario_chart_rows) as a table."""
    table = Table(title="What-If Scenarios", box=box.SIMPLE_HEAVY)
    table.add_column("Scenario")
    table.add_column("Monthly Gross", justify="right")
    table.add_column("Legacy PAYE", justify="right")
    table.add_column("Reform PAYE", justify="right")
    table.add_column("Savings", justify="right")
    table.add_column("Net Pay (Reform)", justify="right")

    for row in rows:
        savings = row["legacy_tax"] - row["reform_tax"]
        style = "green" if savings >= 0 else "red"
        table.add_row(
            row["name"],
            format_currency(row["monthly_gross"]),
            format_currency(row["legacy_tax"]),
            format_currency(row["reform_tax"]),
            f"[{style}]{format_currency(savings)}[/{style}]",
            format_currency(row["net_pay"]),
        )

    console.print(table)


def render_roster(console: Console, employee_results: list, summary: dict) -> None:
    """Render per-employee comparison plus roster totals."""
    table = Table(title="Employee PAYE Comparison", box=box.SIMPLE_HEAVY)
    table.add_column("ID", style="dim")
    table.add_column("Name")
    table.add_column("Department")
    table.add_column("Monthly Gross", justify="right")
    table.add_column("Legacy PAYE", justify="right")
    table.add_column("Reform PAYE", justify="right")
    table.add_column("Savings", justify="right")

    for item in employee_results:
        emp = item.employee
        res = item.results
        table.add_row(
            emp.id or "",
            emp.name,
            emp.department,
            format_currency(res.monthly_gross),
            format_currency(res.legacy.monthly_paye),
            format_currency(res.reform.monthly_paye),
            format_currency(res.savings.monthly),
        )

    table.add_section()
    table.add_row(
        "",
        f"[bold]Total ({summary['headcount']})[/bold]",
        "",
        format_currency(summary["monthly_gross"]),
        format_currency(summary["legacy_monthly_paye"]),
        format_currency(summary["reform_monthly_paye"]),
        format_currency(summary["monthly_savings"]),
    )
    console.print(table)
