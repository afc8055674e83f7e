"""
Unified CLI entry point for artifact-transport operations using Click.

The command group holds the options every subcommand shares.
"""

import sys
from typing import Optional

import click

from . import exists, get, ls, put
from .._version import __version__


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="artifact-transport")
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to configuration file (default: ~/.config/artifact-transport/config.toml)",
)
@click.option("--url", help="Repository base URL (overrides [repository].url)")
@click.option(
    "-d",
    "--debug",
    count=True,
    help="Increase verbosity (use -d for INFO, -dd for DEBUG, -ddd for DEBUG with HTTP logs)",
)
@click.pass_context
def cli(ctx: click.Context, config: Optional[str], url: Optional[str], debug: int) -> None:
    """Artifact Transport - Fetch, list, check and upload repository resources over HTTP."""
    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["url"] = url
    ctx.obj["debug"] = debug


# Register subcommands
cli.add_command(get.get)
cli.add_command(put.put)
cli.add_command(ls.ls)
cli.add_command(exists.exists)


def main() -> None:
    """Run the CLI, turning Ctrl-C into a clean exit."""
    try:
        cli()  # pylint: disable=no-value-for-parameter  # Click handles parameters
    except KeyboardInterrupt:
        click.echo("\n\nOperation cancelled by user", err=True)
        sys.exit(130)


__all__ = ["cli", "main"]
