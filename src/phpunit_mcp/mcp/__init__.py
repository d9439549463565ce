"""MCP server module - FastMCP tool registration and wiring."""

from phpunit_mcp.mcp.context import AppContext
from phpunit_mcp.mcp.registry import ToolRegistry, ToolSpec
from phpunit_mcp.mcp.server import create_mcp_server

__all__ = ["AppContext", "ToolRegistry", "ToolSpec", "create_mcp_server"]
