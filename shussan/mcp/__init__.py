"""MCP server exposing the calculator as tools."""
