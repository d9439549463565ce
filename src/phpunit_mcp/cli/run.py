"""phpunit-mcp run-* commands - run tests and print the formatted report."""

import click

from phpunit_mcp.cli.utils import get_test_ops, run_or_exit
from phpunit_mcp.config.constants import FORMAT_MODES

_mode_option = click.option(
    "--mode",
    type=click.Choice(FORMAT_MODES),
    default=None,
    help="Output mode (default: configured output.default_mode)",
)
_filter_option = click.option("--filter", "filter_", default=None, help="PHPUnit --filter pattern")
_stop_option = click.option("--stop-on-failure", is_flag=True, help="Stop at the first failure")


@click.command()
@click.option("-c", "--configuration", default=None, help="PHPUnit config file (auto-detected)")
@_filter_option
@_stop_option
@_mode_option
@click.pass_context
def run_suite_command(
    ctx: click.Context,
    configuration: str | None,
    filter_: str | None,
    stop_on_failure: bool,
    mode: str | None,
) -> None:
    """Run the full PHPUnit test suite."""
    ops = get_test_ops(ctx)
    click.echo(
        run_or_exit(
            lambda: ops.run_suite(
                configuration=configuration,
                filter=filter_,
                stop_on_failure=stop_on_failure,
                mode=mode,
            )
        )
    )


@click.command()
@click.argument("file")
@_filter_option
@_stop_option
@_mode_option
@click.pass_context
def run_file_command(
    ctx: click.Context,
    file: str,
    filter_: str | None,
    stop_on_failure: bool,
    mode: str | None,
) -> None:
    """Run the tests in FILE (relative to the project root)."""
    ops = get_test_ops(ctx)
    click.echo(
        run_or_exit(
            lambda: ops.run_file(file, filter=filter_, stop_on_failure=stop_on_failure, mode=mode)
        )
    )


@click.command()
@click.argument("class_name", metavar="CLASS")
@click.argument("method")
@_mode_option
@click.pass_context
def run_method_command(ctx: click.Context, class_name: str, method: str, mode: str | None) -> None:
    """Run a single test METHOD of the fully qualified test CLASS."""
    ops = get_test_ops(ctx)
    click.echo(run_or_exit(lambda: ops.run_method(class_name, method, mode=mode)))
