"""
Get command for artifact-transport CLI.

This module provides the get command for downloading a resource.
"""

import sys
from typing import Optional

import click

from ..exceptions import TransportError
from ..utils.error_handling import handle_generic_error, handle_transport_error
from .common import connect, load_settings


@click.command()
@click.argument("resource")
@click.argument("destination", type=click.Path(dir_okay=False))
@click.option(
    "--if-newer-than",
    type=int,
    help="Only download when the remote copy is newer than this time (milliseconds since the epoch)",
)
@click.pass_context
def get(ctx: click.Context, resource: str, destination: str, if_newer_than: Optional[int]) -> None:
    """Download RESOURCE from the repository into DESTINATION."""
    settings = load_settings(ctx)

    try:
        with connect(settings) as transport:
            if if_newer_than is not None:
                if not transport.get_if_newer(resource, destination, if_newer_than):
                    click.echo(f"{resource} is up to date")
                    return
            else:
                transport.get(resource, destination)
        click.echo(f"Downloaded {resource} to {destination}")
    except TransportError as e:
        handle_transport_error(e, "get operation")
        sys.exit(1)
    except Exception as e:  # pylint: disable=broad-except
        handle_generic_error(e, "get operation")
        sys.exit(1)


__all__ = ["get"]
