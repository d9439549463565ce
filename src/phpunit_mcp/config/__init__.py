"""Config module exports."""

from phpunit_mcp.config.loader import PhpunitMcpSettings, load_config
from phpunit_mcp.config.models import (
    LoggingConfig,
    LogOutputConfig,
    OutputConfig,
    PhpunitMcpConfig,
    RunnerConfig,
)

__all__ = [
    "load_config",
    "PhpunitMcpConfig",
    "PhpunitMcpSettings",
    "LoggingConfig",
    "LogOutputConfig",
    "OutputConfig",
    "RunnerConfig",
]
