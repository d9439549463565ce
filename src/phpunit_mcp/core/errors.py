"""phpunit-mcp error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 7xxx: Test execution
- 9xxx: Internal
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Test (7xxx) - invalid requests
    TEST_MISSING_PARAMETER = 7001
    TEST_UNSUPPORTED_MODE = 7002
    TEST_EMPTY_REPORT = 7003
    TEST_INVALID_REPORT = 7004

    # Test (7xxx) - environment
    TEST_RUNNER_NOT_FOUND = 7101
    TEST_REPORT_ALLOCATION_FAILED = 7102
    TEST_EXECUTION_FAILED = 7103
    TEST_TIMEOUT = 7104

    # Internal (9xxx)
    INTERNAL_ERROR = 9001


@dataclass(frozen=True, slots=True)
class PhpunitMcpError(Exception):
    """Base error with structured context for MCP responses."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'TEST_EMPTY_REPORT')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON/MCP responses."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(PhpunitMcpError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class TestError(PhpunitMcpError):
    """Errors raised while running, parsing, or formatting PHPUnit results."""

    __test__ = False  # not a pytest test class

    @classmethod
    def missing_parameter(cls, parameter: str, operation: str) -> "TestError":
        return cls(
            code=ErrorCode.TEST_MISSING_PARAMETER,
            message=f'The "{parameter}" parameter is required for {operation}.',
            details={"parameter": parameter, "operation": operation},
        )

    @classmethod
    def unsupported_mode(cls, mode: str, supported: tuple[str, ...]) -> "TestError":
        return cls(
            code=ErrorCode.TEST_UNSUPPORTED_MODE,
            message=f"Unknown format mode: {mode}",
            details={"mode": mode, "supported": list(supported)},
        )

    @classmethod
    def empty_report(cls) -> "TestError":
        return cls(
            code=ErrorCode.TEST_EMPTY_REPORT,
            message="Empty JUnit XML provided",
        )

    @classmethod
    def invalid_report(cls, reason: str) -> "TestError":
        return cls(
            code=ErrorCode.TEST_INVALID_REPORT,
            message=f"Malformed JUnit XML: {reason}",
            details={"reason": reason},
        )

    @classmethod
    def runner_not_found(cls, command: str, searched: list[str]) -> "TestError":
        return cls(
            code=ErrorCode.TEST_RUNNER_NOT_FOUND,
            message=f"Could not find a usable '{command}' binary",
            details={"command": command, "searched": searched},
        )

    @classmethod
    def report_allocation_failed(cls, reason: str) -> "TestError":
        return cls(
            code=ErrorCode.TEST_REPORT_ALLOCATION_FAILED,
            message=f"Failed to create temporary file for JUnit XML: {reason}",
            details={"reason": reason},
        )

    @classmethod
    def execution_failed(cls, command: list[str], reason: str) -> "TestError":
        return cls(
            code=ErrorCode.TEST_EXECUTION_FAILED,
            message=f"Failed to launch test runner: {reason}",
            details={"command": command, "reason": reason},
        )

    @classmethod
    def runner_timeout(cls, timeout_sec: int) -> "TestError":
        return cls(
            code=ErrorCode.TEST_TIMEOUT,
            message=f"PHPUnit did not finish within {timeout_sec} seconds and wrote no report",
            retryable=True,
            details={"timeout_sec": timeout_sec},
        )


class InternalError(PhpunitMcpError):
    """Internal/unexpected errors."""

    @classmethod
    def unexpected(cls, reason: str, **details: Any) -> "InternalError":
        return cls(
            code=ErrorCode.INTERNAL_ERROR,
            message=f"Internal error: {reason}",
            details=details,
        )
