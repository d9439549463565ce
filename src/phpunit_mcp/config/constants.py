"""Configuration constants.

This module contains truly constant values that should NOT be user-configurable.
These are protocol constraints and implementation details.

For configurable values, see models.py (RunnerConfig, OutputConfig, etc.).
"""

# =============================================================================
# Output Modes
# =============================================================================

FORMAT_MODES: tuple[str, ...] = ("default", "summary", "detailed", "by-file", "by-class")
"""Rendering strategies accepted by the formatter, in documentation order."""

DEFAULT_FORMAT_MODE = "default"

# =============================================================================
# Report Handling
# =============================================================================

MESSAGE_MAX_LENGTH = 200
"""Upper bound for failure/error messages extracted from the JUnit report."""

JUNIT_LOG_FLAG = "--log-junit"
"""Runner flag that makes PHPUnit write its JUnit XML report to a path."""

JUNIT_TEMP_PREFIX = "phpunit_junit_"

TIMEOUT_EXIT_CODE = 124
"""Exit code reported when the runner is killed by the wall-clock timeout."""

# =============================================================================
# Project Layout
# =============================================================================

CONFIG_CANDIDATES: tuple[str, ...] = ("phpunit.xml", "phpunit.xml.dist", "phpunit.dist.xml")
"""PHPUnit configuration file names, most specific first."""

DEFAULT_TEST_DIRECTORY = "tests"

LOCAL_BINARY_CANDIDATES: tuple[str, ...] = ("vendor/bin/phpunit",)

SETTINGS_DIR = ".phpunit-mcp"
"""Per-project directory holding config.yaml and log files."""

# =============================================================================
# MCP
# =============================================================================

CONFIG_RESOURCE_URI = "phpunit://config"
