"""phpunit-mcp list-tests and config commands."""

import json

import click
from rich.console import Console
from rich.table import Table

from phpunit_mcp.cli.utils import get_test_ops, run_or_exit
from phpunit_mcp.core.formatting import pluralize


@click.command()
@click.option("-d", "--directory", default=None, help="Directory to scan (default: from phpunit.xml)")
@click.option("--table", "as_table", is_flag=True, help="Render as a table instead of structured text")
@click.pass_context
def list_tests_command(ctx: click.Context, directory: str | None, as_table: bool) -> None:
    """List discoverable tests without running them."""
    ops = get_test_ops(ctx)

    if not as_table:
        click.echo(run_or_exit(lambda: ops.list_tests(directory)))
        return

    tests = ops.discover(directory)
    table = Table(show_header=True, header_style="bold")
    table.add_column("File", style="cyan")
    table.add_column("Class")
    table.add_column("Method", style="green")
    for test in tests:
        table.add_row(test.file, test.class_name, test.method)

    console = Console()
    console.print(table)
    console.print(f"[dim]{pluralize(len(tests), 'test')}[/dim]")


@click.command()
@click.option("--json", "as_json", is_flag=True, help="Pretty-printed JSON")
@click.pass_context
def config_command(ctx: click.Context, as_json: bool) -> None:
    """Show the project's PHPUnit configuration."""
    ops = get_test_ops(ctx)
    if as_json:
        click.echo(json.dumps(ops.config_info(), indent=2))
    else:
        click.echo(run_or_exit(ops.get_config))
