"""Run the console API server."""

import click

from solr_console.cli.config import get_config
from solr_console.cli.utils import echo_info


@click.command()
@click.option("--host", default=None, help="Bind address (defaults to configured host)")
@click.option("--port", type=int, default=None, help="Port (defaults to configured port)")
@click.option("--reload", is_flag=True, help="Restart on code changes")
def serve(host, port, reload):
    """Start the Solr Console API with uvicorn."""
    import uvicorn

    server = get_config().server
    host = host or server.host
    port = port or server.port

    echo_info(f"API available at: http://{host}:{port}")
    echo_info(f"API docs at: http://{host}:{port}/docs")

    uvicorn.run(
        "solr_console.api.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level=server.log_level.lower(),
    )
