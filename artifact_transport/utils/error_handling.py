"""
Error handling utilities for standardized error logging.

This module turns transport failures into consistent log messages
for the command line interface.
"""

import logging
import sys
import traceback
from typing import NoReturn

from ..exceptions import (
    AuthorizationError,
    ResourceDoesNotExistError,
    TransferFailedError,
    TransportConnectionError,
    TransportError,
)


def handle_transport_error(error: TransportError, operation: str, *, log_traceback: bool = True) -> None:
    """
    Handle transport errors with standardized logging.

    Args:
        error: The transport error to handle
        operation: Description of the operation that failed
        log_traceback: Whether to log the full traceback
    """
    if isinstance(error, AuthorizationError):
        logging.error(
            "Authorization failed during %s: %s. Please check the credentials in the configuration file.",
            operation,
            error,
        )
    elif isinstance(error, ResourceDoesNotExistError):
        logging.error("Resource not found during %s: %s", operation, error)
    elif isinstance(error, TransportConnectionError):
        logging.error("Connection error during %s: %s", operation, error)
    elif isinstance(error, TransferFailedError):
        logging.error("Transfer failed during %s: %s", operation, error)
    else:
        logging.error("Transport error during %s: %s", operation, error)

    if error.cause is not None:
        logging.debug("Caused by: %r", error.cause)

    if log_traceback:
        logging.debug("Traceback: %s", traceback.format_exc())


def handle_generic_error(error: Exception, operation: str, *, log_traceback: bool = True) -> None:
    """
    Log an exception that is not a transport error.

    Args:
        error: The unexpected exception
        operation: Command or step that was running
        log_traceback: Whether to include the traceback
    """
    logging.error("Unexpected %s during %s: %s", type(error).__name__, operation, error)

    if log_traceback:
        logging.error("Traceback: %s", traceback.format_exc())


def log_and_exit(message: str, exit_code: int = 1) -> NoReturn:
    """
    Report a fatal CLI condition and terminate.

    Args:
        message: What went wrong
        exit_code: Process exit status
    """
    logging.error(message)
    sys.exit(exit_code)


__all__ = ["handle_transport_error", "handle_generic_error", "log_and_exit"]
