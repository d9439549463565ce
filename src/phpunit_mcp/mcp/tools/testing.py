"""Testing MCP tools - PHPUnit discovery and execution.

Verb-first tools, one per operation:
- phpunit-run-suite: Run the whole suite
- phpunit-run-file: Run one test file
- phpunit-run-method: Run one test method
- phpunit-list-tests: List discoverable tests
- phpunit-get-config: Describe the project's PHPUnit setup

Every operation blocks on the PHPUnit process, so handlers run it in a
worker thread.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from pydantic import ConfigDict, Field

from phpunit_mcp.mcp.registry import registry
from phpunit_mcp.mcp.tools.base import BaseParams

if TYPE_CHECKING:
    from phpunit_mcp.mcp.context import AppContext

_MODE_DESCRIPTION = (
    'Output mode: "default" (summary + failures/errors), "summary" (totals and status only), '
    '"detailed" (full class names and paths), "by-file" (issues grouped by file), '
    '"by-class" (issues grouped by test class). Defaults to the configured mode.'
)


# =============================================================================
# Parameter Models
# =============================================================================


class RunSuiteParams(BaseParams):
    """Parameters for phpunit-run-suite."""

    configuration: str | None = Field(
        default=None,
        description="Path to a PHPUnit config file. Auto-detected when omitted.",
    )
    filter: str | None = Field(default=None, description="PHPUnit --filter pattern.")
    stop_on_failure: bool = Field(default=False, description="Stop at the first failure.")
    mode: str | None = Field(default=None, description=_MODE_DESCRIPTION)


class RunFileParams(BaseParams):
    """Parameters for phpunit-run-file."""

    file: str | None = Field(default=None, description="Test file path relative to the project root.")
    filter: str | None = Field(default=None, description="PHPUnit --filter pattern.")
    stop_on_failure: bool = Field(default=False, description="Stop at the first failure.")
    mode: str | None = Field(default=None, description=_MODE_DESCRIPTION)


class RunMethodParams(BaseParams):
    """Parameters for phpunit-run-method.

    Exposed on the wire as ``class``; ``class_name`` is accepted too.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    class_name: str | None = Field(
        default=None,
        alias="class",
        description=r"Fully qualified test class, e.g. App\Tests\UserTest.",
    )
    method: str | None = Field(default=None, description="Test method name, e.g. testCreate.")
    mode: str | None = Field(default=None, description=_MODE_DESCRIPTION)


class ListTestsParams(BaseParams):
    """Parameters for phpunit-list-tests."""

    directory: str | None = Field(
        default=None,
        description="Directory to scan. Defaults to the directories declared in phpunit.xml.",
    )


class GetConfigParams(BaseParams):
    """Parameters for phpunit-get-config."""


# =============================================================================
# Tool Handlers
# =============================================================================


@registry.register(
    "phpunit-run-suite",
    "Run the full PHPUnit test suite. Returns token-optimized output. "
    "Use for: running all tests, CI validation, checking overall test health.",
    RunSuiteParams,
)
async def run_suite(ctx: AppContext, params: RunSuiteParams) -> str:
    return await asyncio.to_thread(
        ctx.test_ops.run_suite,
        configuration=params.configuration,
        filter=params.filter,
        stop_on_failure=params.stop_on_failure,
        mode=params.mode,
    )


@registry.register(
    "phpunit-run-file",
    "Run PHPUnit tests from a specific file. Returns token-optimized output. "
    "Use for: testing changes to a single test file, debugging a specific test class.",
    RunFileParams,
)
async def run_file(ctx: AppContext, params: RunFileParams) -> str:
    return await asyncio.to_thread(
        ctx.test_ops.run_file,
        params.file,
        filter=params.filter,
        stop_on_failure=params.stop_on_failure,
        mode=params.mode,
    )


@registry.register(
    "phpunit-run-method",
    "Run a single PHPUnit test method. Returns token-optimized output. "
    "Use for: debugging one failing test, verifying a fix, fast iteration.",
    RunMethodParams,
)
async def run_method(ctx: AppContext, params: RunMethodParams) -> str:
    return await asyncio.to_thread(
        ctx.test_ops.run_method,
        params.class_name,
        params.method,
        mode=params.mode,
    )


@registry.register(
    "phpunit-list-tests",
    "List available PHPUnit tests as files, classes and methods without running them. "
    "Optionally restricted to one directory.",
    ListTestsParams,
)
async def list_tests(ctx: AppContext, params: ListTestsParams) -> str:
    return await asyncio.to_thread(ctx.test_ops.list_tests, params.directory)


@registry.register(
    "phpunit-get-config",
    "Describe the project's PHPUnit setup: project root, config file, test directories, "
    "bootstrap file and raw config content.",
    GetConfigParams,
)
async def get_config(ctx: AppContext, params: GetConfigParams) -> str:  # noqa: ARG001
    return await asyncio.to_thread(ctx.test_ops.get_config)
