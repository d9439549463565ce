"""Application context for MCP handlers.

Single object passed to all tool handlers with access to ops classes.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from phpunit_mcp.config.models import PhpunitMcpConfig
    from phpunit_mcp.testing.ops import TestOps


@dataclass
class AppContext:
    """Context object passed to all MCP tool handlers."""

    repo_root: Path
    config: PhpunitMcpConfig
    test_ops: TestOps

    @classmethod
    def create(cls, repo_root: Path, config: PhpunitMcpConfig | None = None) -> AppContext:
        """Factory to create context with all ops wired together.

        Args:
            repo_root: PHP project root
            config: Resolved config; loaded from repo_root when omitted
        """
        from phpunit_mcp.config.loader import load_config
        from phpunit_mcp.testing.ops import TestOps

        if config is None:
            config = load_config(repo_root)

        return cls(
            repo_root=repo_root,
            config=config,
            test_ops=TestOps(repo_root, config),
        )
