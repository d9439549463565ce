"""Core module exports."""

from phpunit_mcp.core.errors import (
    ConfigError,
    ErrorCode,
    InternalError,
    PhpunitMcpError,
    TestError,
)
from phpunit_mcp.core.logging import (
    clear_request_id,
    configure_logging,
    get_request_id,
    set_request_id,
)

__all__ = [
    # Errors
    "ConfigError",
    "ErrorCode",
    "InternalError",
    "PhpunitMcpError",
    "TestError",
    # Logging
    "clear_request_id",
    "configure_logging",
    "get_request_id",
    "set_request_id",
]
