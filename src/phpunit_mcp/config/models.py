"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (PHPUNIT_MCP__SECTION__KEY)
3. Repo YAML (.phpunit-mcp/config.yaml)
4. Global YAML (~/.config/phpunit-mcp/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    PHPUNIT_MCP__<SECTION>__<KEY>=<VALUE>

Examples:
    PHPUNIT_MCP__LOGGING__LEVEL=DEBUG
    PHPUNIT_MCP__RUNNER__TIMEOUT_SEC=600
    PHPUNIT_MCP__OUTPUT__DEFAULT_MODE=summary
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from phpunit_mcp.config.constants import (
    CONFIG_CANDIDATES,
    DEFAULT_FORMAT_MODE,
    DEFAULT_TEST_DIRECTORY,
    FORMAT_MODES,
    LOCAL_BINARY_CANDIDATES,
    MESSAGE_MAX_LENGTH,
)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        PHPUNIT_MCP__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG includes full runner argv and report paths.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class RunnerConfig(BaseModel):
    """PHPUnit process configuration.

    Env vars:
        PHPUNIT_MCP__RUNNER__BINARY: Runner command name looked up on PATH
        PHPUNIT_MCP__RUNNER__INTERPRETER: PHP interpreter used for local binaries
        PHPUNIT_MCP__RUNNER__USE_INTERPRETER: Prefix local binaries with the interpreter
        PHPUNIT_MCP__RUNNER__TIMEOUT_SEC: Hard wall-clock timeout per run
    """

    binary: str = Field(
        default="phpunit",
        description="Runner command. Looked up on PATH when no local copy exists.",
    )
    local_candidates: list[str] = Field(
        default_factory=lambda: list(LOCAL_BINARY_CANDIDATES),
        description="Project-relative paths checked before PATH, in order.",
    )
    interpreter: str = Field(
        default="php",
        description="PHP interpreter used to launch project-local runner scripts.",
    )
    use_interpreter: bool = Field(
        default=True,
        description="Launch project-local runner scripts through the interpreter.",
    )
    timeout_sec: int = Field(
        default=300,
        description="Hard timeout (5 min). The runner is killed when it expires. "
        "RISK: Too low kills slow integration suites.",
    )
    config_candidates: list[str] = Field(
        default_factory=lambda: list(CONFIG_CANDIDATES),
        description="PHPUnit config file names, most specific first.",
    )
    default_test_directory: str = Field(
        default=DEFAULT_TEST_DIRECTORY,
        description="Test directory used when no config declares any.",
    )

    @field_validator("timeout_sec")
    @classmethod
    def validate_timeout(cls, v: int) -> int:
        if v <= 0:
            raise ValueError(f"Timeout must be positive, got {v}")
        return v


class OutputConfig(BaseModel):
    """Report rendering configuration.

    Env vars:
        PHPUNIT_MCP__OUTPUT__DEFAULT_MODE: Mode used when a caller passes none
        PHPUNIT_MCP__OUTPUT__MESSAGE_MAX_LENGTH: Failure message cap
    """

    default_mode: str = Field(
        default=DEFAULT_FORMAT_MODE,
        description=f"Default output mode. One of: {', '.join(FORMAT_MODES)}.",
    )
    message_max_length: int = Field(
        default=MESSAGE_MAX_LENGTH,
        description="Failure/error message cap in characters. "
        f"Cannot exceed {MESSAGE_MAX_LENGTH}.",
    )

    @field_validator("default_mode")
    @classmethod
    def validate_mode(cls, v: str) -> str:
        if v not in FORMAT_MODES:
            raise ValueError(f"Mode must be one of {', '.join(FORMAT_MODES)}, got {v}")
        return v

    @field_validator("message_max_length")
    @classmethod
    def validate_message_length(cls, v: int) -> int:
        if not (1 <= v <= MESSAGE_MAX_LENGTH):
            raise ValueError(f"Message length must be 1-{MESSAGE_MAX_LENGTH}, got {v}")
        return v


class PhpunitMcpConfig(BaseModel):
    """Root configuration for phpunit-mcp.

    All settings can be configured via:
    1. Environment variables: PHPUNIT_MCP__SECTION__KEY
    2. YAML config files (repo or global)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    runner: RunnerConfig = Field(default_factory=RunnerConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
