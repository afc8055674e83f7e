"""
Shared helpers for the CLI commands.

This module turns the group options into transport settings and opens
the connection session every command runs in.
"""

import logging
from contextlib import contextmanager
from typing import Iterator

import click

from ..api import HttpTransport
from ..exceptions import TransportError
from ..models.context import TransportSettings
from ..models.repository import Repository, Resource
from ..models.transfer import RequestType
from ..utils.config_manager import ConfigManager
from ..utils.error_handling import log_and_exit
from ..utils.logger import setup_logging


class LoggingTransferListener:
    """Transfer listener that reports each transfer through logging."""

    def __init__(self) -> None:
        self.transferred = 0

    def transfer_started(self, resource: Resource, request_type: RequestType) -> None:
        self.transferred = 0
        logging.info("Starting %s of %s", request_type.value.upper(), resource.name)

    def transfer_progress(self, resource: Resource, request_type: RequestType, length: int) -> None:
        self.transferred += length

    def transfer_completed(self, resource: Resource, request_type: RequestType) -> None:
        logging.info("Finished %s of %s (%d bytes)", request_type.value.upper(), resource.name, self.transferred)

    def transfer_error(self, resource: Resource, request_type: RequestType, error: TransportError) -> None:
        logging.debug("%s of %s failed: %s", request_type.value.upper(), resource.name, error)


def load_settings(ctx: click.Context) -> TransportSettings:
    """
    Build transport settings from the group options.

    Reads the configuration file given with --config, or the default one
    when it exists; --url overrides the repository URL. Exits when no
    repository URL is known.
    """
    setup_logging(ctx.obj["debug"], use_wrapping=True)

    config = ConfigManager(ctx.obj["config"])
    if ctx.obj["config"] or config.config_path.is_file():
        try:
            settings = TransportSettings.from_config(config, url=ctx.obj["url"])
        except (FileNotFoundError, ValueError) as e:
            log_and_exit(f"Invalid configuration {config.config_path}: {e}")
    else:
        logging.debug("No configuration file at %s", config.config_path)
        url = ctx.obj["url"]
        settings = TransportSettings(repository=Repository(url=url) if url else None)

    if settings.repository is None:
        log_and_exit("No repository URL given; use --url or set [repository].url in the configuration file")
    return settings


@contextmanager
def connect(settings: TransportSettings) -> Iterator[HttpTransport]:
    """Open a transport session for the configured repository and close it afterwards."""
    transport = HttpTransport(settings)
    transport.add_transfer_listener(LoggingTransferListener())
    transport.open(settings.repository, settings.proxy, settings.authentication)  # type: ignore[arg-type]
    with transport:
        yield transport


__all__ = ["LoggingTransferListener", "load_settings", "connect"]
