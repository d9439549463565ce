"""MCP tool handlers."""

from phpunit_mcp.mcp.tools import testing

__all__ = ["testing"]
