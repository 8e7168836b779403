"""Rich renderer for maternity calculation results.

Transforms SDK MaternityResult objects into formatted Rich tables.
"""

from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box

from shussan.sdk import MaternityResult, ValidationIssue, rate_maintenance
from shussan.sdk.formatting import format_currency, format_date, format_percent


RATING_STYLES = {
    "good": "green",
    "fair": "yellow",
    "low": "red",
    "undefined": "dim",
}


def render_issues(console: Console, issues: List[ValidationIssue]) -> None:
    """Render validation issues as panels (errors red, warnings yellow)."""
    for issue in issues:
        if issue.is_blocking:
            console.print(Panel(f"[red]{issue.message}[/red]", title=f"Error: {issue.field}", border_style="red"))
        else:
            console.print(Panel(f"[yellow]{issue.message}[/yellow]", title=f"Note: {issue.field}", border_style="yellow"))


def render_result(console: Console, result: MaternityResult, issues: Optional[List[ValidationIssue]] = None) -> None:
    """Render a calculation result.

    Args:
        console: Rich Console instance
        result: SDK output from calculate_maternity()
        issues: Non-blocking validation issues to show first
    """
    if issues:
        render_issues(console, issues)

    _render_benefit_table(console, result)
    _render_periods_table(console, result)
    _render_income_table(console, result)


def _render_benefit_table(console: Console, result: MaternityResult) -> None:
    pregnancy = "多胎" if result.input.is_multiple else "単胎"

    table = Table(title=f"出産手当金 ({pregnancy}, {result.rules_year}年度)", box=box.SIMPLE_HEAVY)
    table.add_column("項目")
    table.add_column("金額", justify="right")

    table.add_row("月額総支給額", format_currency(result.input.salary))
    table.add_row("標準報酬月額", format_currency(result.standard_monthly_remuneration))
    table.add_row("標準報酬日額", format_currency(result.standard_daily_wage))
    table.add_row("出産手当金日額", format_currency(result.benefit_daily_amount))
    table.add_row("支給日数", f"{result.total_days}日")
    table.add_row("[bold]総支給額[/bold]", f"[bold]{format_currency(result.total_benefit)}[/bold]")
    table.add_row("月換算額", format_currency(result.monthly_equivalent))

    console.print(table)


def _render_periods_table(console: Console, result: MaternityResult) -> None:
    table = Table(title="産休期間", box=box.SIMPLE_HEAVY)
    table.add_column("期間")
    table.add_column("開始")
    table.add_column("終了")
    table.add_column("日数", justify="right")

    for label, period in (("産前休業", result.prenatal_period), ("産後休業", result.postnatal_period)):
        table.add_row(label, format_date(period.start), format_date(period.end), f"{period.days}日")

    console.print(table)


def _render_income_table(console: Console, result: MaternityResult) -> None:
    income = result.current_income
    insurance = income.social_insurance

    table = Table(title="現在の手取りとの比較", box=box.SIMPLE_HEAVY)
    table.add_column("項目")
    table.add_column("金額", justify="right")

    table.add_row("健康保険料", f"-{format_currency(insurance.health_insurance)}")
    table.add_row("介護保険料", f"-{format_currency(insurance.care_insurance)}")
    table.add_row("厚生年金保険料", f"-{format_currency(insurance.pension_insurance)}")
    table.add_row("雇用保険料", f"-{format_currency(insurance.employment_insurance)}")
    table.add_row("所得税", f"-{format_currency(income.tax.income_tax)}")
    table.add_row("住民税", f"-{format_currency(income.tax.resident_tax)}")
    table.add_row("[bold]通常時の手取り[/bold]", f"[bold]{format_currency(income.net_income)}[/bold]")
    table.add_row("手当金（月換算）", format_currency(result.monthly_equivalent))

    style = RATING_STYLES[rate_maintenance(result.maintenance_rate)]
    table.add_row("手取り維持率", f"[{style}]{format_percent(result.maintenance_rate)}[/{style}]")

    console.print(table)
