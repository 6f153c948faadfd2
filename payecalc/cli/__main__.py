"""PAYE Calc CLI - Command-line interface for legacy vs reform PAYE comparison."""

import json
import logging
import os

import click
from rich.console import Console

from payecalc import __version__
from payecalc.sdk import (
    InvalidIncomeError,
    ProfileNotFoundError,
    RosterError,
    compare,
    compare_employees,
    get_default_deductions,
    get_setting,
    load_employees,
    parse_gross_income,
    scenario_chart_rows,
    summarize_roster,
)

from .settings_commands import settings as settings_group
from .renderers.comparison_renderer import (
    comparison_to_csv_string,
    format_bracket_table,
    format_comparison_text,
    render_roster,
    render_scenarios,
)


def _configure_logging() -> None:
    """Configure logging from the LOG_LEVEL environment variable."""
    log_level = os.environ.get("LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )


@click.group()
@click.version_option(version=__version__, prog_name="paye-calc")
def cli():
    """PAYE Calc - Compare legacy and reform PAYE for a salary.

    Configuration is loaded from (in order):

    \b
    1. PAYE_CALC_CONFIG_PATH environment variable
    2. settings.json 'profile' key (if set via CLI)
    3. ~/.config/paye-calc/profile.yaml (XDG default)

    Set LOG_LEVEL=DEBUG to trace calculation steps.
    """
    _configure_logging()


cli.add_command(settings_group)


def _resolve_monthly_gross(gross: str, annual) -> float:
    """Parse GROSS using --annual/--monthly, else the default_input_type setting."""
    if annual is None:
        input_type = get_setting("default_input_type", "monthly")
    else:
        input_type = "annual" if annual else "monthly"

    try:
        return parse_gross_income(gross, input_type)
    except InvalidIncomeError as e:
        raise click.BadParameter(str(e), param_hint="GROSS")


def _resolve_deductions(pension, nhf, insurance) -> dict:
    """Command-line deductions, falling back to profile defaults per field."""
    try:
        defaults = get_default_deductions()
    except ValueError as e:
        raise click.ClickException(str(e))
    return {
        "pension": defaults["pension"] if pension is None else pension,
        "nhf": defaults["nhf"] if nhf is None else nhf,
        "insurance": defaults["insurance"] if insurance is None else insurance,
    }


def _resolve_format(output_format) -> str:
    return output_format or get_setting("default_output_format", "text")


def deduction_options(f):
    """Shared --pension/--nhf/--insurance options (monthly amounts)."""
    f = click.option("--insurance", default=None, help="Monthly insurance premium")(f)
    f = click.option("--nhf", default=None, help="Monthly National Housing Fund contribution")(f)
    f = click.option("--pension", default=None, help="Monthly pension contribution")(f)
    return f


def gross_options(f):
    f = click.option("--annual/--monthly", "annual", default=None,
                     help="Treat GROSS as annual or monthly (default: settings, else monthly)")(f)
    f = click.argument("gross")(f)
    return f


@cli.command("compare")
@gross_options
@deduction_options
@click.option("--breakdown", is_flag=True, help="Show tax assessed per bracket")
@click.option("--format", "output_format", type=click.Choice(["text", "json", "csv"]), default=None,
              help="Output format (default: settings, else text)")
def compare_cmd(gross, annual, pension, nhf, insurance, breakdown, output_format):
    """Compare legacy and reform PAYE for a gross salary.

    Deductions are monthly, pre-tax amounts. Values not given on the
    command line come from the profile's 'deductions' section.

    \b
    Output formats:
      --format=text  ASCII tables (default, for terminal viewing)
      --format=json  Result record (camelCase, for storage or piping)
      --format=csv   One row per regime (for spreadsheet import)

    \b
    Examples:
      paye-calc compare 500000
      paye-calc compare 6000000 --annual --pension 40000 --breakdown
    """
    monthly_gross = _resolve_monthly_gross(gross, annual)
    results = compare(monthly_gross, _resolve_deductions(pension, nhf, insurance))

    output_format = _resolve_format(output_format)
    if output_format == "json":
        click.echo(json.dumps(results.to_record(), indent=2, ensure_ascii=False))
    elif output_format == "csv":
        click.echo(comparison_to_csv_string(results), nl=False)
    else:
        click.echo(format_comparison_text(results, breakdown=breakdown))


@cli.command("what-if")
@gross_options
@deduction_options
@click.option("--quick/--no-quick", default=True,
              help="Include the standard raise/pay cut/bonus scenarios (default: on)")
@click.option("--label", default=None, help="Label for a custom scenario")
@click.option("--change", type=float, default=None,
              help="Custom scenario change: percentage points or fixed monthly amount")
@click.option("--type", "change_type", type=click.Choice(["percentage", "fixed"]), default="percentage",
              help="How --change applies (default: percentage)")
@click.option("--format", "output_format", type=click.Choice(["text", "json"]), default="text",
              help="Output format (default: text)")
def what_if_cmd(gross, annual, pension, nhf, insurance, quick, label, change, change_type, output_format):
    """Compare PAYE across salary scenarios.

    Deductions stay fixed while the salary changes.

    \b
    Examples:
      paye-calc what-if 500000
      paye-calc what-if 500000 --no-quick --label "Promotion" --change 35
      paye-calc what-if 500000 --label "Allowance" --change 50000 --type fixed
    """
    from payecalc.sdk import build_scenario, quick_scenarios

    if (label is None) != (change is None):
        raise click.UsageError("--label and --change must be given together.")

    monthly_gross = _resolve_monthly_gross(gross, annual)
    deductions = _resolve_deductions(pension, nhf, insurance)

    scenarios = quick_scenarios(monthly_gross, deductions) if quick else []
    if label is not None:
        try:
            scenarios.append(build_scenario(label, monthly_gross, change, change_type, deductions))
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="--label")

    if not scenarios:
        raise click.UsageError("No scenarios selected. Drop --no-quick or add --label/--change.")

    current = compare(monthly_gross, deductions)

    if output_format == "json":
        output = {
            "current": current.to_record(),
            "scenarios": [s.to_record() for s in scenarios],
        }
        click.echo(json.dumps(output, indent=2, ensure_ascii=False))
        return

    render_scenarios(Console(), scenario_chart_rows(current, scenarios))


@cli.command("brackets")
@click.argument("regime", required=False, type=click.Choice(["legacy", "reform"]))
def brackets_cmd(regime):
    """Show the annual bracket table for one or both regimes."""
    from payecalc.sdk.taxes import REGIMES, get_regime

    regimes = [get_regime(regime)] if regime else list(REGIMES.values())
    click.echo("\n".join(format_bracket_table(r) for r in regimes))


@cli.command("employees")
@click.option("--format", "output_format", type=click.Choice(["text", "json"]), default="text",
              help="Output format (default: text)")
def employees_cmd(output_format):
    """Compare PAYE for every employee in the profile roster."""
    try:
        employees = load_employees()
    except (ProfileNotFoundError, RosterError) as e:
        raise click.ClickException(str(e))

    if not employees:
        raise click.ClickException("No employees in profile. Add an 'employees:' list to profile.yaml.")

    employee_results = compare_employees(employees)
    summary = summarize_roster(employee_results)

    if output_format == "json":
        output = {
            "employees": [
                {
                    **item.employee.model_dump(mode="json"),
                    "results": item.results.to_record(),
                }
                for item in employee_results
            ],
            "summary": summary,
        }
        click.echo(json.dumps(output, indent=2, ensure_ascii=False))
        return

    render_roster(Console(), employee_results, summary)


def main():
    cli()


if __name__ == "__main__":
    main()
