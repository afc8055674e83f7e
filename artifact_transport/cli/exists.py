"""
Exists command for artifact-transport CLI.

This module provides the exists command for checking a resource.
"""

import sys

import click

from ..exceptions import TransportError
from ..utils.error_handling import handle_generic_error, handle_transport_error
from .common import connect, load_settings

# Exit code when the resource is missing
EXIT_MISSING = 2


@click.command()
@click.argument("resource")
@click.pass_context
def exists(ctx: click.Context, resource: str) -> None:
    """Check whether RESOURCE exists; exits with 2 when it does not."""
    settings = load_settings(ctx)

    try:
        with connect(settings) as transport:
            found = transport.resource_exists(resource)
    except TransportError as e:
        handle_transport_error(e, "exists operation")
        sys.exit(1)
    except Exception as e:  # pylint: disable=broad-except
        handle_generic_error(e, "exists operation")
        sys.exit(1)

    click.echo(f"{resource}: {'found' if found else 'missing'}")
    if not found:
        sys.exit(EXIT_MISSING)


__all__ = ["exists"]
