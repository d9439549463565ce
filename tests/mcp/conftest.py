"""Shared fixtures for MCP tests."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from phpunit_mcp.mcp.registry import ToolRegistry, registry


@pytest.fixture
def clean_registry() -> Generator[ToolRegistry, None, None]:
    """Clear and yield the global registry, restore after test."""
    # Store existing registrations
    original_tools = dict(registry._tools)
    registry.clear()
    yield registry
    # Restore
    registry._tools = original_tools


@pytest.fixture
def mock_test_ops() -> MagicMock:
    """Create a mock TestOps returning encoded strings."""
    mock = MagicMock()
    mock.run_suite.return_value = '{"summary":{"tests":3},"status":"OK"}'
    mock.run_file.return_value = '{"summary":{"tests":1},"status":"OK"}'
    mock.run_method.return_value = '{"summary":{"tests":1},"status":"FAILED"}'
    mock.list_tests.return_value = '{"tests":[]}'
    mock.get_config.return_value = '{"project_root":"/tmp/app","config_exists":false}'
    return mock


@pytest.fixture
def mock_context(tmp_path: Path, mock_test_ops: MagicMock) -> MagicMock:
    """Create a mocked AppContext."""
    ctx = MagicMock()
    ctx.repo_root = tmp_path
    ctx.test_ops = mock_test_ops
    return ctx
