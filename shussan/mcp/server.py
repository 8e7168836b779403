"""Shussan Calc MCP Server - FastMCP implementation for maternity benefit tools."""

import json
import logging
from typing import Any

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from shussan.sdk import (
    ShussanError,
    calculate_maternity_from_values,
    has_blocking_errors,
    load_rules,
    rate_maintenance,
    validate_maternity_input,
)
from shussan.sdk.validate import coerce_salary

logger = logging.getLogger(__name__)

# Initialize FastMCP server
mcp = FastMCP("shussan-calc")


# --- Tools ---

@mcp.tool()
async def calculate_maternity_benefit(
    salary: int = Field(description="Monthly gross salary in yen (e.g., 300000)"),
    due_date: str = Field(description="Expected due date (YYYY-MM-DD)"),
    pregnancy_type: str = Field(default="single", description="'single' or 'multiple' (twins or more)"),
) -> dict[str, Any]:
    """Calculate the Japanese maternity benefit (出産手当金), leave periods, and comparison with current take-home pay."""
    try:
        rules = load_rules()
        issues = validate_maternity_input(salary, due_date, pregnancy_type, rules=rules)
        issue_dicts = [issue.model_dump() for issue in issues]

        if has_blocking_errors(issues):
            return {"error": "Input has errors; nothing was calculated.", "issues": issue_dicts}

        result = calculate_maternity_from_values(int(coerce_salary(salary)), due_date, pregnancy_type, rules=rules)
        output = result.model_dump(mode="json")
        output["maintenance_rating"] = rate_maintenance(result.maintenance_rate)
        output["issues"] = issue_dicts
        return output

    except ShussanError as e:
        logger.error(f"Error calculating benefit: {e}")
        return {"error": str(e)}


@mcp.tool()
async def validate_input(
    salary: int = Field(description="Monthly gross salary in yen"),
    due_date: str = Field(description="Expected due date (YYYY-MM-DD)"),
    pregnancy_type: str = Field(default="single", description="'single' or 'multiple'"),
) -> dict[str, Any]:
    """Validate calculator input. Errors block calculation; warnings are informational."""
    try:
        issues = validate_maternity_input(salary, due_date, pregnancy_type)
    except ShussanError as e:
        logger.error(f"Error validating input: {e}")
        return {"error": str(e), "valid": False, "issues": []}

    return {
        "valid": not has_blocking_errors(issues),
        "issues": [issue.model_dump() for issue in issues],
    }


# --- Resources ---

@mcp.resource("shussan://rules")
def current_rules() -> str:
    """Rules in use: remuneration table, premium rates, tax tables."""
    try:
        return json.dumps(load_rules().model_dump(mode="json"), indent=2)
    except ShussanError as e:
        return json.dumps({"error": str(e)})


# --- Server Entry Point ---

def run_server():
    """Run the MCP server in stdio mode."""
    mcp.run(transport="stdio")


if __name__ == "__main__":
    run_server()
