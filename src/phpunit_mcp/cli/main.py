"""phpunit-mcp CLI - phpunit-mcp command."""

from pathlib import Path

import click

from phpunit_mcp.cli.inspect import config_command, list_tests_command
from phpunit_mcp.cli.run import run_file_command, run_method_command, run_suite_command
from phpunit_mcp.cli.serve import serve_command
from phpunit_mcp.cli.utils import find_project_root
from phpunit_mcp.core.logging import configure_logging


@click.group()
@click.version_option(version="0.1.0", prog_name="phpunit-mcp")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option(
    "--root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="PHP project root (default: nearest directory with composer.json or phpunit.xml)",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, root: Path | None) -> None:
    """phpunit-mcp - PHPUnit test execution for AI coding agents."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["root"] = root.resolve() if root is not None else find_project_root()
    configure_logging(level="DEBUG" if verbose else "INFO")


cli.add_command(serve_command, name="serve")
cli.add_command(run_suite_command, name="run-suite")
cli.add_command(run_file_command, name="run-file")
cli.add_command(run_method_command, name="run-method")
cli.add_command(list_tests_command, name="list-tests")
cli.add_command(config_command, name="config")


if __name__ == "__main__":
    cli()
