"""PHPUnit discovery, execution, and result reporting."""

from phpunit_mcp.testing.config_detector import ConfigurationDetector
from phpunit_mcp.testing.discovery import TestDiscovery
from phpunit_mcp.testing.executor import ProcessExecutor, resolve_binary
from phpunit_mcp.testing.formatter import Formatter
from phpunit_mcp.testing.models import (
    IssueRecord,
    ProcessResult,
    RunArguments,
    RunResult,
    TestDescriptor,
    TestResult,
)
from phpunit_mcp.testing.ops import TestOps, build_runner_args, method_filter
from phpunit_mcp.testing.parsers import ResultParser, parse_junit_xml
from phpunit_mcp.testing.runner import Runner

__all__ = [
    "ConfigurationDetector",
    "Formatter",
    "IssueRecord",
    "ProcessExecutor",
    "ProcessResult",
    "ResultParser",
    "RunArguments",
    "RunResult",
    "Runner",
    "TestDescriptor",
    "TestDiscovery",
    "TestOps",
    "TestResult",
    "build_runner_args",
    "method_filter",
    "parse_junit_xml",
    "resolve_binary",
]
