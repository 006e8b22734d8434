"""Commands that talk to a Solr server directly."""

import asyncio

import click

from solr_console.cli.config import get_config
from solr_console.cli.utils import (
    console,
    echo_error,
    echo_info,
    echo_success,
    print_table,
)
from solr_console.core.solr import SolrService, translate_error
from solr_console.core.solr.connection import ConnectionContext
from solr_console.core.solr.errors import ErrorScope, UnavailableError
from solr_console.models.domain import ServerStatus, SolrServer


def _service(connection: ConnectionContext) -> SolrService:
    return SolrService(connection, read_timeout=get_config().read_timeout)


def _server_options(func):
    func = click.option("--password", "-p", default=None, help="Basic auth password")(func)
    func = click.option("--username", "-u", default=None, help="Basic auth username")(func)
    func = click.argument("url")(func)
    return func


@click.command()
@_server_options
@click.option("--name", "-n", default=None, help="Display name for the server")
def ping(url, username, password, name):
    """Check that URL is a reachable Solr server.

    Prints version and mode information from the system info handler and
    the resulting server status.

    Examples:
        solr-console ping http://localhost:8983/solr
        solr-console ping http://solr:8983/solr -u admin -p secret
    """
    server = SolrServer(
        name=name or url, url=url, username=username, password=password
    )

    async def probe() -> SolrServer:
        try:
            # Like the connectivity check endpoint, ping always starts on plain http
            info = await _service(server.connection().with_plain_http()).system_info()
        except Exception as e:
            error = translate_error(e, ErrorScope("Solr server"))
            echo_error(error.message)
            status = (
                ServerStatus.OFFLINE
                if isinstance(error, UnavailableError)
                else ServerStatus.ERROR
            )
            return server.with_status(status)

        print_table(
            [
                {"Setting": "Solr version", "Value": info.solr_version or "unknown"},
                {
                    "Setting": "Lucene version",
                    "Value": info.lucene.get("lucene-spec-version", "unknown"),
                },
                {"Setting": "Mode", "Value": info.mode or "unknown"},
                {"Setting": "Solr home", "Value": info.solr_home},
            ],
            title=f"Solr server {server.name}",
        )
        return server.with_status(ServerStatus.ONLINE)

    checked = asyncio.run(probe())
    if checked.status == ServerStatus.ONLINE:
        echo_success(f"{checked.name} is {checked.status.value}")
    else:
        echo_info(f"{checked.name} is {checked.status.value}")
        raise SystemExit(1)


@click.command()
@_server_options
def collections(url, username, password):
    """List the collections on the Solr server at URL."""
    server = SolrServer(name=url, url=url, username=username, password=password)

    async def list_collections() -> bool:
        try:
            names = await _service(server.connection()).list_collections()
        except Exception as e:
            echo_error(translate_error(e, ErrorScope("Collection")).message)
            return False

        print_table([{"Collection": name} for name in names], title="Collections")
        if names:
            console.print(f"[dim]{len(names)} collection(s)[/dim]")
        return True

    if not asyncio.run(list_collections()):
        raise SystemExit(1)
