"""Tests for the shussan-calc CLI."""

import json
from datetime import date, timedelta

import pytest
from click.testing import CliRunner

from shussan.cli.__main__ import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def due_date():
    """A due date safely inside the 12-month window."""
    return (date.today() + timedelta(days=180)).isoformat()


class TestCalc:
    """calc command."""

    def test_json_output(self, runner, due_date):
        result = runner.invoke(cli, ["calc", "300000", due_date, "--format", "json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["total_benefit"] == 653268
        assert data["benefit_daily_amount"] == 6666
        assert data["maintenance_rate"] == 84
        assert data["maintenance_rating"] == "good"
        assert data["prenatal_period"]["end"] == due_date
        assert data["issues"] == []

    def test_multiple_flag(self, runner, due_date):
        result = runner.invoke(cli, ["calc", "300000", due_date, "--multiple", "--format", "json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["total_days"] == 154
        assert data["input"]["pregnancy_type"] == "multiple"

    def test_commas_in_salary(self, runner, due_date):
        result = runner.invoke(cli, ["calc", "300,000", due_date, "--format", "json"])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["input"]["salary"] == 300000

    def test_warning_does_not_block(self, runner, due_date):
        result = runner.invoke(cli, ["calc", "30000", due_date, "--format", "json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["standard_monthly_remuneration"] == 58000
        assert [i["severity"] for i in data["issues"]] == ["warning"]

    def test_blocking_error_exits_nonzero(self, runner):
        result = runner.invoke(cli, ["calc", "0", "2000-01-01", "--format", "json"])

        assert result.exit_code == 1
        assert "nothing was calculated" in result.output

    def test_unpadded_due_date(self, runner):
        day = date.today() + timedelta(days=180)
        result = runner.invoke(cli, ["calc", "300000", f"{day.year}-{day.month}-{day.day}", "--format", "json"])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["input"]["due_date"] == day.isoformat()

    def test_fractional_salary_is_rejected(self, runner, due_date):
        result = runner.invoke(cli, ["calc", "300000.9", due_date, "--format", "json"])

        assert result.exit_code == 1
        assert "nothing was calculated" in result.output

    def test_text_output(self, runner, due_date):
        result = runner.invoke(cli, ["calc", "300000", due_date])

        assert result.exit_code == 0, result.output
        assert "653,268円" in result.output
        assert "約84%" in result.output

    def test_default_format_setting(self, runner, due_date):
        runner.invoke(cli, ["settings", "set", "default_output_format", "json"])
        result = runner.invoke(cli, ["calc", "300000", due_date])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["total_benefit"] == 653268

    def test_unknown_year(self, runner, due_date):
        result = runner.invoke(cli, ["calc", "300000", due_date, "--year", "1999"])

        assert result.exit_code == 1
        assert "1999" in result.output


class TestValidate:
    """validate command."""

    def test_valid_input(self, runner, due_date):
        result = runner.invoke(cli, ["validate", "300000", due_date])

        assert result.exit_code == 0
        assert "Input OK" in result.output

    def test_errors_json(self, runner):
        result = runner.invoke(cli, ["validate", "0", "bad-date", "--type", "twins", "--format", "json"])

        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["valid"] is False
        assert [i["field"] for i in data["issues"]] == ["salary", "due_date", "pregnancy_type"]

    def test_warning_only_exits_zero(self, runner, due_date):
        result = runner.invoke(cli, ["validate", "30000", due_date, "--format", "json"])

        assert result.exit_code == 0
        assert json.loads(result.output)["valid"] is True


class TestBrackets:
    """brackets command."""

    def test_json(self, runner):
        result = runner.invoke(cli, ["brackets", "--format", "json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert len(data["brackets"]) == 30
        assert data["brackets"][0]["remuneration"] == 58000
        assert data["brackets"][0]["salary_below"] == 63000
        assert isinstance(data["brackets"][0]["salary_below"], int)

    def test_text(self, runner):
        result = runner.invoke(cli, ["brackets"])

        assert result.exit_code == 0
        assert "500,000" in result.output


class TestRulesAndSettings:
    """rules and settings groups."""

    def test_rules_years(self, runner):
        result = runner.invoke(cli, ["rules", "years"])

        assert result.exit_code == 0
        assert "2024" in result.output
        assert "built-in" in result.output

    def test_rules_show(self, runner):
        result = runner.invoke(cli, ["rules", "show", "--year", "2024"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["maternity"]["postnatal_days"] == 56

    def test_settings_set_show_unset(self, runner):
        result = runner.invoke(cli, ["settings", "set", "rules_year", "2024"])
        assert result.exit_code == 0

        result = runner.invoke(cli, ["settings", "show"])
        assert "rules_year: 2024" in result.output

        result = runner.invoke(cli, ["settings", "unset", "rules_year"])
        assert "Cleared rules_year" in result.output

    def test_settings_rejects_bad_year(self, runner):
        result = runner.invoke(cli, ["settings", "set", "rules_year", "24"])
        assert result.exit_code != 0

    def test_settings_rejects_unknown_key(self, runner):
        result = runner.invoke(cli, ["settings", "set", "favorite_color", "blue"])
        assert result.exit_code != 0
