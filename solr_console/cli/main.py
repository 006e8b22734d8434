"""Main CLI entry point for Solr Console."""

import click

from solr_console.cli.config import get_config, set_config
from solr_console.cli.utils import console, echo_error
from solr_console.core.logging import setup_logging


@click.group(invoke_without_command=True)
@click.option("-v", "--version", is_flag=True, help="Show version information")
@click.option("--verbose", is_flag=True, help="Log upstream calls to stderr")
@click.pass_context
def cli(ctx, version, verbose):
    """Solr Console - administration API and tools for Apache Solr.

    Examples:
        solr-console -v                                  # Show version
        solr-console serve                               # Start the API
        solr-console ping http://localhost:8983/solr     # Probe a server
        solr-console collections http://localhost:8983/solr
        solr-console config show                         # Show configuration
    """
    if version:
        from solr_console.cli import __version__

        console.print(f"Solr Console v{__version__}")
        ctx.exit()

    # If no subcommand is provided, show help
    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        ctx.exit()

    ctx.ensure_object(dict)

    config = get_config()
    ctx.obj["config"] = config
    set_config(config)

    setup_logging("DEBUG" if verbose else "WARNING")

    if not config.color:
        console.no_color = True


def register_commands():
    """Register all commands."""
    try:
        from solr_console.cli.commands.serve import serve

        cli.add_command(serve)
    except ImportError as e:
        echo_error(f"Failed to load serve command: {e}")

    try:
        from solr_console.cli.commands.solr import collections, ping

        cli.add_command(ping)
        cli.add_command(collections)
    except ImportError as e:
        echo_error(f"Failed to load Solr commands: {e}")

    try:
        from solr_console.cli.commands.config import config

        cli.add_command(config)
    except ImportError as e:
        echo_error(f"Failed to load config commands: {e}")


# Register commands when module is imported
register_commands()


if __name__ == "__main__":
    cli()
