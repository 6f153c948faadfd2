"""Settings CLI commands for PAYE Calc.

Manages settings.json - profile path and output preferences.
"""

import click

from payecalc.sdk import (
    load_settings,
    set_setting,
    unset_setting,
    get_settings_path,
    get_profile_path,
    InvalidSettingError,
)
from payecalc.sdk.config import SETTINGS_CHOICES


@click.group()
def settings():
    """Manage settings (settings.json).

    \b
    Available settings:
    - profile: path to profile.yaml
    - default_input_type: monthly | annual
    - default_output_format: text | json | csv
    """
    pass


@settings.command("show")
def settings_show():
    """Show current settings and their values."""
    settings_path = get_settings_path()
    current = load_settings()

    click.echo(f"Settings file: {settings_path}")
    click.echo(f"File exists: {settings_path.exists()}")
    click.echo()

    if not current:
        click.echo("No settings configured (using defaults).")
    else:
        click.echo("Current settings:")
        for key, value in current.items():
            click.echo(f"  {key}: {value}")

    click.echo()
    click.echo(f"Effective profile: {get_profile_path()}")


@settings.command("set")
@click.argument("key", type=click.Choice(list(SETTINGS_CHOICES)))
@click.argument("value")
def settings_set(key, value):
    """Set a setting value.

    Examples:
        paye-calc settings set default_input_type annual
        paye-calc settings set profile ~/payroll/profile.yaml
    """
    try:
        path = set_setting(key, value)
    except InvalidSettingError as e:
        raise click.BadParameter(str(e), param_hint="VALUE")
    click.echo(f"Set {key}: {value}")
    click.echo(f"Saved to: {path}")


@settings.command("unset")
@click.argument("key", type=click.Choice(list(SETTINGS_CHOICES)))
def settings_unset(key):
    """Clear a setting, reverting to its default."""
    if unset_setting(key):
        click.echo(f"Cleared {key} setting.")
    else:
        click.echo(f"{key} was not set.")
