"""Configuration commands for the Solr Console CLI."""

from pathlib import Path

import click
from rich.table import Table

from solr_console.cli.config import get_config
from solr_console.cli.utils import console, echo_info, echo_success, echo_warning


@click.group()
def config():
    """Show or initialize the console configuration.

    Examples:
        solr-console config show          # Show current configuration
        solr-console config init          # Write ~/.solr-console/config.yaml
    """
    pass


@config.command()
def show():
    """Show current configuration."""
    settings = get_config()

    table = Table(title="Solr Console Configuration", show_header=False)
    table.add_column("Setting", style="bold cyan", width=22)
    table.add_column("Value", style="white")

    table.add_row("Server", f"{settings.server.host}:{settings.server.port}")
    table.add_row("Log level", settings.server.log_level)
    table.add_row("CORS origins", ", ".join(settings.server.cors_origins))
    table.add_row("Solr read timeout", f"{settings.read_timeout}s")
    table.add_row("AI timeout", f"{settings.ai_timeout}s")
    table.add_row("OpenRouter URL", settings.openrouter_url)
    table.add_row("Default Ollama URL", settings.default_ollama_url)
    table.add_row("Config directory", str(settings.config_dir))

    console.print(table)


@config.command()
@click.option(
    "--path",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Where to write the file (defaults to the config directory)",
)
@click.option("--force", is_flag=True, help="Overwrite an existing file")
def init(config_path, force):
    """Write the current configuration to a YAML file."""
    settings = get_config()
    target = config_path or settings.config_dir / "config.yaml"

    if target.exists() and not force:
        echo_warning(f"{target} already exists; use --force to overwrite")
        return

    written = settings.save_to_file(target)
    echo_success(f"Configuration written to {written}")
    echo_info("Environment variables prefixed SOLR_CONSOLE_ override file values")
