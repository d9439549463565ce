"""phpunit-mcp serve command - run the MCP server."""

import click

from phpunit_mcp.cli.utils import run_or_exit


@click.command()
@click.option(
    "--transport",
    type=click.Choice(["stdio", "http", "sse"]),
    default="stdio",
    show_default=True,
    help="MCP transport",
)
@click.option("--port", type=int, default=8765, show_default=True, help="Port for http/sse")
@click.pass_context
def serve_command(ctx: click.Context, transport: str, port: int) -> None:
    """Serve the phpunit-* tools over MCP.

    Logs go to stderr and .phpunit-mcp/mcp-server.log; stdout is reserved for
    the stdio transport.
    """
    from phpunit_mcp.mcp.server import run_server

    run_or_exit(lambda: run_server(ctx.obj["root"], transport=transport, port=port))  # type: ignore[arg-type]
