"""
List command for artifact-transport CLI.

This module provides the ls command for listing a repository directory.
"""

import sys

import click

from ..exceptions import TransportError
from ..utils.error_handling import handle_generic_error, handle_transport_error
from .common import connect, load_settings


@click.command()
@click.argument("directory")
@click.pass_context
def ls(ctx: click.Context, directory: str) -> None:
    """List the entries of DIRECTORY, one per line."""
    settings = load_settings(ctx)

    try:
        with connect(settings) as transport:
            entries = transport.get_file_list(directory)
    except TransportError as e:
        handle_transport_error(e, "list operation")
        sys.exit(1)
    except Exception as e:  # pylint: disable=broad-except
        handle_generic_error(e, "list operation")
        sys.exit(1)

    for entry in entries:
        click.echo(entry)


__all__ = ["ls"]
