"""Shussan Calc CLI - Command-line interface for maternity benefit estimates."""

import json
import logging

import click
from rich.console import Console
from rich.table import Table
from rich import box

from shussan import __version__
from shussan.sdk import (
    InvalidInputError,
    RulesNotFoundError,
    calculate_maternity_from_values,
    get_setting,
    has_blocking_errors,
    list_brackets,
    load_rules,
    rate_maintenance,
    validate_maternity_input,
)
from shussan.sdk.validate import coerce_salary

from .renderers.result_renderer import render_issues, render_result
from .rules_commands import rules as rules_group
from .settings_commands import settings as settings_group


OUTPUT_FORMATS = ["text", "json"]


@click.group()
@click.version_option(version=__version__, prog_name="shussan-calc")
@click.option("--debug", is_flag=True, help="Log calculation details to stderr.")
def cli(debug):
    """Shussan Calc - Japanese maternity benefit (出産手当金) estimates.

    Computes the benefit from monthly gross salary and due date, the leave
    periods, and how the benefit compares with current take-home pay.

    Settings are loaded from (in order):

    \b
    1. SHUSSAN_CALC_CONFIG_PATH/settings.json
    2. ~/.config/shussan-calc/settings.json (XDG default)
    """
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


cli.add_command(rules_group)
cli.add_command(settings_group)


def _resolve_format(output_format):
    return output_format or get_setting("default_output_format", "text")


def _load_rules_or_fail(year):
    try:
        return load_rules(year)
    except RulesNotFoundError as e:
        raise click.ClickException(str(e))


def _issues_to_json(issues) -> list:
    return [issue.model_dump() for issue in issues]


@cli.command("calc")
@click.argument("salary")
@click.argument("due_date")
@click.option("--multiple", is_flag=True, help="Multiple pregnancy (twins or more): 98 prenatal days.")
@click.option("--year", "rules_year", type=int, help="Rules year (default: rules_year setting or newest).")
@click.option("--format", "output_format", type=click.Choice(OUTPUT_FORMATS), default=None,
              help="Output format (default: default_output_format setting or text).")
def calc(salary, due_date, multiple, rules_year, output_format):
    """Calculate the maternity benefit.

    SALARY is the monthly gross salary in yen (commas allowed).
    DUE_DATE is the expected due date (YYYY-MM-DD).

    Examples:
        shussan-calc calc 300000 2027-03-15
        shussan-calc calc 300,000 2027-03-15 --multiple --format json
    """
    output_format = _resolve_format(output_format)
    rules = _load_rules_or_fail(rules_year)
    pregnancy_type = "multiple" if multiple else "single"

    issues = validate_maternity_input(salary, due_date, pregnancy_type, rules=rules)
    if has_blocking_errors(issues):
        if output_format == "json":
            click.echo(json.dumps({"issues": _issues_to_json(issues)}, indent=2, ensure_ascii=False))
        else:
            render_issues(Console(), issues)
        raise click.ClickException("Input has errors; nothing was calculated.")

    try:
        result = calculate_maternity_from_values(
            int(coerce_salary(salary)), due_date, pregnancy_type, rules=rules
        )
    except InvalidInputError as e:
        raise click.ClickException(str(e))

    if output_format == "json":
        output = result.model_dump(mode="json")
        output["maintenance_rating"] = rate_maintenance(result.maintenance_rate)
        output["issues"] = _issues_to_json(issues)
        click.echo(json.dumps(output, indent=2, ensure_ascii=False))
        return

    render_result(Console(), result, issues)


@cli.command("validate")
@click.argument("salary")
@click.argument("due_date")
@click.option("--type", "pregnancy_type", default="single", help="Pregnancy type: single or multiple.")
@click.option("--year", "rules_year", type=int, help="Rules year (default: rules_year setting or newest).")
@click.option("--format", "output_format", type=click.Choice(OUTPUT_FORMATS), default=None)
def validate(salary, due_date, pregnancy_type, rules_year, output_format):
    """Check input without calculating.

    Exits with status 1 if any blocking error is found. Warnings are
    reported but do not change the exit status.
    """
    output_format = _resolve_format(output_format)
    rules = _load_rules_or_fail(rules_year)
    issues = validate_maternity_input(salary, due_date, pregnancy_type, rules=rules)

    if output_format == "json":
        click.echo(json.dumps(
            {"valid": not has_blocking_errors(issues), "issues": _issues_to_json(issues)},
            indent=2, ensure_ascii=False,
        ))
    elif issues:
        render_issues(Console(), issues)
    else:
        click.echo("Input OK.")

    if has_blocking_errors(issues):
        raise SystemExit(1)


@cli.command("brackets")
@click.option("--year", "rules_year", type=int, help="Rules year (default: rules_year setting or newest).")
@click.option("--format", "output_format", type=click.Choice(OUTPUT_FORMATS), default=None)
def brackets(rules_year, output_format):
    """Show the standard monthly remuneration table and salary ranges."""
    output_format = _resolve_format(output_format)
    rules = _load_rules_or_fail(rules_year)
    rows = list_brackets(rules)

    if output_format == "json":
        click.echo(json.dumps({"year": rules.year, "brackets": rows}, indent=2))
        return

    table = Table(title=f"標準報酬月額 ({rules.year})", box=box.SIMPLE)
    table.add_column("Grade", justify="right")
    table.add_column("Remuneration", justify="right")
    table.add_column("Salary from", justify="right")
    table.add_column("Salary below", justify="right")
    for row in rows:
        table.add_row(
            str(row["grade"]),
            f"{row['remuneration']:,}",
            f"{row['salary_from']:,.0f}" if row["salary_from"] is not None else "-",
            f"{row['salary_below']:,.0f}" if row["salary_below"] is not None else "-",
        )
    Console().print(table)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
