"""FastMCP server creation and wiring.

Two-phase tool logging: tool_start with params, tool_complete with elapsed
time. Expected failures (bad input, domain errors) are logged as warnings
without a traceback; anything else is an internal error with the traceback
at DEBUG.
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import TYPE_CHECKING, Any, Literal

import structlog
from fastmcp.utilities.json_schema import dereference_refs
from pydantic import BaseModel, Field

from phpunit_mcp.config.constants import CONFIG_RESOURCE_URI

if TYPE_CHECKING:
    from fastmcp import FastMCP

    from phpunit_mcp.mcp.context import AppContext
    from phpunit_mcp.mcp.registry import ToolSpec

log = structlog.get_logger(__name__)

Transport = Literal["stdio", "http", "sse"]


class ToolResponse(BaseModel):
    """Standardized tool response envelope."""

    result: Any = None
    meta: dict[str, Any] = Field(default_factory=dict)
    success: bool
    error: str | None = None


def _extract_log_params(kwargs: dict[str, Any]) -> dict[str, Any]:
    """Extract parameters for the tool_start log, shortening long values."""
    params: dict[str, Any] = {}
    for key, value in kwargs.items():
        if isinstance(value, str) and len(value) > 50:
            params[key] = value[:50] + "..."
        elif value is not None:
            params[key] = value
    return params


def create_mcp_server(context: AppContext) -> FastMCP:
    """Create FastMCP server with all tools wired to context.

    Args:
        context: AppContext with all ops instances

    Returns:
        Configured FastMCP server ready to run
    """
    from fastmcp import FastMCP

    from phpunit_mcp.mcp.registry import registry

    # Import tools to trigger registration
    from phpunit_mcp.mcp.tools import testing  # noqa: F401

    log.info("mcp_server_creating", repo_root=str(context.repo_root))

    mcp = FastMCP(
        "phpunit-mcp",
        instructions="Run and inspect PHPUnit tests of a PHP project with token-efficient output.",
    )

    tool_count = 0
    for spec in registry.get_all():
        _wire_tool(mcp, spec, context)
        tool_count += 1

    _wire_config_resource(mcp, context)

    log.info("mcp_server_created", tool_count=tool_count)

    return mcp


def _wire_config_resource(mcp: FastMCP, context: AppContext) -> None:
    @mcp.resource(
        CONFIG_RESOURCE_URI,
        name="phpunit-configuration",
        description="PHPUnit project configuration: project root, config file path, "
        "test directories, bootstrap file and full config content.",
        mime_type="text/plain",
    )
    def phpunit_configuration() -> str:
        return context.test_ops.get_config()


def _wire_tool(mcp: FastMCP, spec: ToolSpec, context: AppContext) -> None:
    """Wire a single tool spec to FastMCP.

    Creates a handler function with the params model's fields as direct
    parameters, ensuring FastMCP generates a flat schema compatible with
    all MCP clients.
    """
    from fastmcp.tools.tool import FunctionTool
    from pydantic import ValidationError

    from phpunit_mcp.core.errors import InternalError, PhpunitMcpError
    from phpunit_mcp.core.logging import clear_request_id, set_request_id
    from phpunit_mcp.mcp.errors import MCPError, from_domain_error

    params_model = spec.params_model
    spec_handler = spec.handler

    # dereference_refs inlines all $refs and removes $defs for full compatibility
    raw_schema = params_model.model_json_schema()
    flat_schema = dereference_refs(raw_schema)

    async def handler(**kwargs: Any) -> dict[str, Any]:
        tool_name = spec.name
        start_time = time.perf_counter()
        request_id = set_request_id()

        log.info("tool_start", tool=tool_name, **_extract_log_params(kwargs))

        try:
            try:
                params = params_model(**kwargs)
            except ValidationError as e:
                # User input error - no traceback needed
                elapsed_ms = int((time.perf_counter() - start_time) * 1000)
                first = e.errors()[0]["msg"] if e.errors() else str(e)
                log.warning(
                    "tool_validation_error",
                    tool=tool_name,
                    error=first,
                    elapsed_ms=elapsed_ms,
                )
                return ToolResponse(
                    success=False,
                    result=None,
                    error=f"Validation error: {first}",
                    meta={
                        "request_id": request_id,
                        "error_type": "validation",
                        "validation_errors": [
                            {"field": ".".join(str(x) for x in err["loc"]), "message": err["msg"]}
                            for err in e.errors()[:5]  # Limit to first 5 errors
                        ],
                    },
                ).model_dump()

            try:
                try:
                    result_data = await spec_handler(context, params)
                except PhpunitMcpError as e:
                    raise from_domain_error(e) from e

                elapsed_ms = int((time.perf_counter() - start_time) * 1000)
                log.info("tool_complete", tool=tool_name, elapsed_ms=elapsed_ms)

                return ToolResponse(
                    success=True,
                    result=result_data,
                    meta={
                        "request_id": request_id,
                        "timestamp": int(time.time() * 1000),
                    },
                ).model_dump()

            except MCPError as e:
                # Expected error - log warning, no traceback
                elapsed_ms = int((time.perf_counter() - start_time) * 1000)
                log.warning(
                    "tool_error",
                    tool=tool_name,
                    error_code=e.code.value,
                    error=e.message,
                    elapsed_ms=elapsed_ms,
                )
                return ToolResponse(
                    success=False,
                    result=None,
                    error=e.message,
                    meta={
                        "request_id": request_id,
                        "error": e.to_response().to_dict(),
                    },
                ).model_dump()

            except Exception as e:
                # Internal error - summary at ERROR, full traceback at DEBUG
                elapsed_ms = int((time.perf_counter() - start_time) * 1000)
                log.error(
                    "tool_internal_error",
                    tool=tool_name,
                    error=str(e),
                    elapsed_ms=elapsed_ms,
                )
                log.debug("tool_internal_error_traceback", tool=tool_name, exc_info=True)
                internal = from_domain_error(
                    InternalError.unexpected(f"{type(e).__name__}: {e}", tool=tool_name)
                )
                return ToolResponse(
                    success=False,
                    result=None,
                    error=internal.message,
                    meta={
                        "request_id": request_id,
                        "error": internal.to_response().to_dict(),
                    },
                ).model_dump()
        finally:
            clear_request_id()

    tool = FunctionTool(
        name=spec.name,
        description=spec.description,
        parameters=flat_schema,
        fn=handler,
    )

    mcp.add_tool(tool)


def run_server(repo_root: Path, transport: Transport = "stdio", port: int = 8765) -> None:
    """Create and run the MCP server."""
    from phpunit_mcp.config.constants import SETTINGS_DIR
    from phpunit_mcp.config.loader import load_config
    from phpunit_mcp.config.models import LoggingConfig, LogOutputConfig
    from phpunit_mcp.core.logging import configure_logging
    from phpunit_mcp.mcp.context import AppContext

    repo_root = repo_root.resolve()
    config = load_config(repo_root)

    # Console at the configured level, full DEBUG detail in the project log file
    log_file = repo_root / SETTINGS_DIR / "mcp-server.log"
    log_file.parent.mkdir(parents=True, exist_ok=True)
    configure_logging(
        config=LoggingConfig(
            level="DEBUG",
            outputs=[
                LogOutputConfig(destination="stderr", format="console", level=config.logging.level),
                LogOutputConfig(destination=str(log_file), format="json", level="DEBUG"),
            ],
        )
    )

    log.info(
        "mcp_server_starting",
        repo_root=str(repo_root),
        transport=transport,
        log_file=str(log_file),
    )

    context = AppContext.create(repo_root, config)
    mcp = create_mcp_server(context)

    log.info("mcp_server_running")
    if transport == "stdio":
        mcp.run()
    else:
        mcp.run(transport=transport, port=port)
