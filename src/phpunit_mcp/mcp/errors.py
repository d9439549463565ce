"""Structured error system for MCP tools.

Provides typed exceptions with error codes and remediation hints.
Enables agents to understand failures and self-correct.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from fastmcp.exceptions import ToolError

from phpunit_mcp.core.errors import ErrorCode, PhpunitMcpError
from phpunit_mcp.core.logging import get_log_file_path


class MCPErrorCode(StrEnum):
    """Machine-readable error codes for MCP tool failures."""

    # Validation errors - agent should fix input
    INVALID_PARAMS = "INVALID_PARAMS"
    INVALID_MODE = "INVALID_MODE"
    UNKNOWN_TOOL = "UNKNOWN_TOOL"

    # Report errors - the runner did not produce a usable report
    REPORT_MISSING = "REPORT_MISSING"
    REPORT_INVALID = "REPORT_INVALID"

    # Environment errors - project setup must change
    RUNNER_NOT_FOUND = "RUNNER_NOT_FOUND"
    RUNNER_TIMEOUT = "RUNNER_TIMEOUT"
    EXECUTION_FAILED = "EXECUTION_FAILED"
    CONFIG_INVALID = "CONFIG_INVALID"

    # System errors
    IO_ERROR = "IO_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


@dataclass
class ErrorResponse:
    """Structured error response for MCP tools."""

    code: MCPErrorCode
    message: str
    remediation: str
    context: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "code": self.code.value,
            "message": self.message,
            "remediation": self.remediation,
            "context": self.context,
        }


class MCPError(ToolError):
    """Base exception for MCP tool errors with structured response.

    Extends FastMCP's ToolError so FastMCP passes it through unchanged
    instead of wrapping it in a generic ToolError.
    """

    def __init__(
        self,
        code: MCPErrorCode,
        message: str,
        remediation: str,
        **context: Any,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.remediation = remediation
        self.context = context

    def to_response(self) -> ErrorResponse:
        """Convert to ErrorResponse."""
        return ErrorResponse(
            code=self.code,
            message=self.message,
            remediation=self.remediation,
            context=self.context,
        )


class UnknownToolError(MCPError):
    """Raised when dispatching a tool name nobody registered."""

    def __init__(self, name: str, available: list[str]) -> None:
        super().__init__(
            code=MCPErrorCode.UNKNOWN_TOOL,
            message=f"Unknown tool: {name}",
            remediation=f"Use one of: {', '.join(sorted(available))}.",
            tool=name,
        )


# =============================================================================
# Domain Error Mapping
# =============================================================================

_DOMAIN_CODES: dict[ErrorCode, tuple[MCPErrorCode, str]] = {
    ErrorCode.TEST_MISSING_PARAMETER: (
        MCPErrorCode.INVALID_PARAMS,
        "Provide the missing parameter and call the tool again.",
    ),
    ErrorCode.TEST_UNSUPPORTED_MODE: (
        MCPErrorCode.INVALID_MODE,
        "Use one of: default, summary, detailed, by-file, by-class.",
    ),
    ErrorCode.TEST_EMPTY_REPORT: (
        MCPErrorCode.REPORT_MISSING,
        "PHPUnit exited before writing its report. Check that the file, filter and "
        "bootstrap are valid, or run the same command in a terminal to see the crash.",
    ),
    ErrorCode.TEST_INVALID_REPORT: (
        MCPErrorCode.REPORT_INVALID,
        "The JUnit report was truncated or corrupted. Re-run the tests; if it "
        "persists, check for output written by the bootstrap file.",
    ),
    ErrorCode.TEST_RUNNER_NOT_FOUND: (
        MCPErrorCode.RUNNER_NOT_FOUND,
        "Install PHPUnit with 'composer require --dev phpunit/phpunit' or put "
        "'phpunit' on PATH.",
    ),
    ErrorCode.TEST_TIMEOUT: (
        MCPErrorCode.RUNNER_TIMEOUT,
        "Raise runner.timeout_sec or narrow the run with a file or a filter.",
    ),
    ErrorCode.TEST_REPORT_ALLOCATION_FAILED: (
        MCPErrorCode.IO_ERROR,
        "Make sure the system temp directory exists and is writable.",
    ),
    ErrorCode.TEST_EXECUTION_FAILED: (
        MCPErrorCode.EXECUTION_FAILED,
        "Check that the PHP interpreter and the PHPUnit binary are executable.",
    ),
}


# Failures whose cause is only visible in the server log
_POINT_TO_LOG = frozenset({MCPErrorCode.REPORT_MISSING, MCPErrorCode.INTERNAL_ERROR})


def from_domain_error(error: PhpunitMcpError) -> MCPError:
    """Translate a domain error into an MCPError with a remediation hint."""
    if error.code in _DOMAIN_CODES:
        code, remediation = _DOMAIN_CODES[error.code]
    elif 2000 <= error.code.value < 3000:
        code = MCPErrorCode.CONFIG_INVALID
        remediation = "Fix .phpunit-mcp/config.yaml or the PHPUNIT_MCP__* environment variables."
    else:
        code, remediation = MCPErrorCode.INTERNAL_ERROR, "Check the server log."

    if code in _POINT_TO_LOG and (log_file := get_log_file_path()) is not None:
        remediation = f"{remediation} See {log_file} for details."
    return MCPError(code, error.message, remediation, **error.details)
