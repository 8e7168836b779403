"""Rules CLI commands - inspect the rules/<year>.yaml data in use."""

import json

import click

from shussan.sdk import (
    RulesNotFoundError,
    get_available_years,
    get_builtin_rules_dir,
    get_rules_dir,
    load_rules,
)


@click.group()
def rules():
    """Inspect calculation rules (remuneration table, rates, tax tables)."""
    pass


@rules.command("years")
def rules_years():
    """List available rules years."""
    rules_dir = get_rules_dir()
    years = get_available_years(rules_dir)
    source = "built-in" if rules_dir == get_builtin_rules_dir() else "custom"

    click.echo(f"Rules directory: {rules_dir} ({source})")
    if not years:
        click.echo("No rules files found.")
        return
    for year in years:
        click.echo(f"  {year}")


@rules.command("show")
@click.option("--year", "rules_year", type=int, help="Rules year (default: rules_year setting or newest).")
def rules_show(rules_year):
    """Show the rules for a year as JSON."""
    try:
        loaded = load_rules(rules_year)
    except RulesNotFoundError as e:
        raise click.ClickException(str(e))

    click.echo(json.dumps(loaded.model_dump(mode="json"), indent=2))
