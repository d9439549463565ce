"""structlog setup for the CLI and the MCP server.

Every output is a stdlib handler with a ProcessorFormatter, so structlog
events and third-party stdlib records (fastmcp, mcp) share one format.
Console outputs always write to stderr: stdout carries the MCP stdio
transport and the CLI reports.
"""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from pathlib import Path
from typing import TYPE_CHECKING, Any
from uuid import uuid4

import structlog

if TYPE_CHECKING:
    from phpunit_mcp.config.models import LoggingConfig, LogOutputConfig

_CONSOLE_DESTINATIONS = ("stderr", "stdout")

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)

# First file output of the active configuration, quoted in error hints
_log_file_path: Path | None = None


def get_request_id() -> str | None:
    return _request_id.get()


def set_request_id(request_id: str | None = None) -> str:
    """Bind a correlation id to the current tool call; generated when omitted."""
    rid = request_id or uuid4().hex[:12]
    _request_id.set(rid)
    return rid


def clear_request_id() -> None:
    _request_id.set(None)


def get_log_file_path() -> Path | None:
    return _log_file_path


def _add_request_id(
    _logger: structlog.types.WrappedLogger,
    _method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    if rid := get_request_id():
        event_dict["request_id"] = rid
    return event_dict


def _level(name: str | None, default: int) -> int:
    if name is None:
        return default
    return logging.getLevelNamesMapping().get(name.upper(), default)


def configure_logging(*, config: LoggingConfig | None = None, level: str = "INFO") -> None:
    """Route structlog through stdlib logging.

    Args:
        config: Outputs and levels. When omitted, a single console output
            on stderr at ``level``.
        level: Root level used only without ``config``.
    """
    from phpunit_mcp.config.models import LoggingConfig

    global _log_file_path

    if config is None:
        config = LoggingConfig(level=level.upper())  # type: ignore[arg-type]

    root_level = _level(config.level, logging.INFO)
    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", key="timestamp"),
        _add_request_id,  # type: ignore[list-item]
    ]

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.make_filtering_bound_logger(root_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(root_level)
    # The MCP SDK logs every request at INFO
    logging.getLogger("mcp.server.lowlevel.server").setLevel(logging.WARNING)

    _log_file_path = None
    for output in config.outputs:
        handler = _handler_for(output, pre_chain)
        handler.setLevel(_level(output.level, root_level))
        root.addHandler(handler)
        if _log_file_path is None and output.destination not in _CONSOLE_DESTINATIONS:
            _log_file_path = Path(output.destination)


def _handler_for(
    output: LogOutputConfig,
    pre_chain: list[structlog.types.Processor],
) -> logging.Handler:
    handler: logging.Handler
    if output.destination in _CONSOLE_DESTINATIONS:
        handler = logging.StreamHandler(sys.stderr)
        colors = sys.stderr.isatty()
    else:
        path = Path(output.destination)
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, mode="a", encoding="utf-8")
        colors = False

    renderer: structlog.types.Processor
    if output.format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=colors, pad_event_to=0, pad_level=False)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(processor=renderer, foreign_pre_chain=pre_chain)
    )
    return handler
