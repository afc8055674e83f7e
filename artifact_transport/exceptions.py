"""
Exception hierarchy for artifact transfers.

Every failure surfaced by a transport operation is one of the classes below.
Callers can treat ResourceDoesNotExistError as "not present" and
AuthorizationError as "needs different credentials"; everything else that
went wrong during a transfer is a TransferFailedError.
"""

from typing import Optional


class TransportError(Exception):
    """Base exception for all transport errors."""

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause


class TransferFailedError(TransportError):
    """I/O failure, unexpected status code or unreadable listing."""


class ResourceDoesNotExistError(TransportError):
    """The resource is absent server-side or its URL is malformed."""


class AuthorizationError(TransportError):
    """The server refused access to the resource (HTTP 403)."""


class TransportConnectionError(TransportError):
    """The transport was used outside of an open connection session."""


__all__ = [
    "TransportError",
    "TransferFailedError",
    "ResourceDoesNotExistError",
    "AuthorizationError",
    "TransportConnectionError",
]
