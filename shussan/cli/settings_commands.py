"""Settings CLI commands for Shussan Calc.

Manages settings.json - rules year, custom rules directory, output format.
"""

import click
from pathlib import Path

from shussan.sdk import (
    KNOWN_SETTINGS,
    get_rules_dir,
    get_settings_path,
    load_settings,
    set_setting,
    unset_setting,
)


@click.group()
def settings():
    """Manage settings (settings.json).

    Available settings:
    - rules_year: rules year used when --year is not given
    - rules_dir: directory of custom <year>.yaml rules files
    - default_output_format: text or json
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
    click.echo("Effective paths:")
    click.echo(f"  rules_dir: {get_rules_dir()}")


@settings.command("set")
@click.argument("key", type=click.Choice(KNOWN_SETTINGS))
@click.argument("value")
def settings_set(key, value):
    """Set a setting.

    Examples:
        shussan-calc settings set rules_year 2024
        shussan-calc settings set rules_dir ~/shussan-rules
        shussan-calc settings set default_output_format json
    """
    if key == "rules_year":
        if not value.isdigit() or len(value) != 4:
            raise click.BadParameter(f"Invalid year '{value}'. Must be 4 digits.")
        stored = int(value)
    elif key == "rules_dir":
        rules_path = Path(value).expanduser().resolve()
        if not rules_path.is_dir():
            raise click.ClickException(f"Not a directory: {rules_path}")
        stored = str(rules_path)
    else:
        if value not in ("text", "json"):
            raise click.BadParameter(f"Invalid format '{value}'. Must be 'text' or 'json'.")
        stored = value

    set_setting(key, stored)
    click.echo(f"Set {key}: {stored}")
    click.echo(f"Saved to: {get_settings_path()}")


@settings.command("unset")
@click.argument("key", type=click.Choice(KNOWN_SETTINGS))
def settings_unset(key):
    """Remove a setting, reverting to its default."""
    if unset_setting(key):
        click.echo(f"Cleared {key} setting.")
    else:
        click.echo(f"{key} was not set.")
