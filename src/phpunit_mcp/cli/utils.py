"""CLI utilities."""

from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

import click
from rich.console import Console

from phpunit_mcp.config.constants import CONFIG_CANDIDATES
from phpunit_mcp.core.errors import PhpunitMcpError
from phpunit_mcp.testing.ops import TestOps

PROJECT_MARKERS = ("composer.json", *CONFIG_CANDIDATES)

T = TypeVar("T")


def find_project_root(start_path: Path | None = None) -> Path:
    """Find the PHP project root from the given path.

    Walks up the directory tree looking for composer.json or a PHPUnit
    config file. Falls back to the start path when neither is found, so a
    bare directory of tests still works.
    """
    if start_path is None:
        start_path = Path.cwd()

    start = start_path.resolve()
    for current in (start, *start.parents):
        if any((current / marker).is_file() for marker in PROJECT_MARKERS):
            return current
    return start


def get_test_ops(ctx: click.Context) -> TestOps:
    """Build TestOps for the project selected on the command line."""
    from phpunit_mcp.config.loader import load_config

    root: Path = ctx.obj["root"]
    config = run_or_exit(lambda: load_config(root))
    return TestOps(root, config)


def run_or_exit(fn: Callable[[], T]) -> T:
    """Call fn; print domain errors to stderr and exit with status 1."""
    try:
        return fn()
    except PhpunitMcpError as e:
        console = Console(stderr=True)
        console.print(f"[red]Error:[/red] {e.message}", highlight=False)
        if e.details:
            for key, value in e.details.items():
                console.print(f"  [dim]{key}:[/dim] {value}", highlight=False)
        raise SystemExit(1) from e
