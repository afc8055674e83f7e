"""
Put command for artifact-transport CLI.

This module provides the put command for uploading a local file.
"""

import sys

import click

from ..exceptions import TransportError
from ..utils.error_handling import handle_generic_error, handle_transport_error
from .common import connect, load_settings


@click.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
@click.argument("resource")
@click.pass_context
def put(ctx: click.Context, source: str, resource: str) -> None:
    """Upload the local file SOURCE to the repository as RESOURCE."""
    settings = load_settings(ctx)

    try:
        with connect(settings) as transport:
            transport.put(source, resource)
        click.echo(f"Uploaded {source} as {resource}")
    except TransportError as e:
        handle_transport_error(e, "put operation")
        sys.exit(1)
    except Exception as e:  # pylint: disable=broad-except
        handle_generic_error(e, "put operation")
        sys.exit(1)


__all__ = ["put"]
