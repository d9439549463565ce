"""Tests for MCP AppContext."""

from dataclasses import fields, is_dataclass
from pathlib import Path
from unittest.mock import MagicMock, patch

from phpunit_mcp.config.models import PhpunitMcpConfig
from phpunit_mcp.mcp.context import AppContext
from phpunit_mcp.testing.ops import TestOps


class TestAppContext:
    """Tests for AppContext dataclass."""

    def test_is_dataclass(self):
        assert is_dataclass(AppContext)

    def test_fields(self):
        assert {f.name for f in fields(AppContext)} == {"repo_root", "config", "test_ops"}

    def test_manual_construction(self, tmp_path: Path):
        ctx = AppContext(repo_root=tmp_path, config=PhpunitMcpConfig(), test_ops=MagicMock())
        assert ctx.repo_root == tmp_path


class TestAppContextCreate:
    """Tests for AppContext.create factory."""

    def test_uses_given_config(self, tmp_path: Path):
        config = PhpunitMcpConfig()

        ctx = AppContext.create(tmp_path, config)

        assert ctx.config is config
        assert isinstance(ctx.test_ops, TestOps)
        assert ctx.test_ops.repo_root == tmp_path

    def test_loads_config_when_omitted(self, tmp_path: Path):
        with patch("phpunit_mcp.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "none.yaml"):
            ctx = AppContext.create(tmp_path)

        assert ctx.config.runner.binary == "phpunit"
