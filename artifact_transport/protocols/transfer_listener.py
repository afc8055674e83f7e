"""
Transfer listener protocol.

Listeners registered on a transport are told when a GET or PUT of a
resource starts, how many bytes each chunk carried, and how it ended.
"""

from typing import Protocol

from ..exceptions import TransportError
from ..models.repository import Resource
from ..models.transfer import RequestType


class TransferListener(Protocol):
    """Protocol for objects observing transfers."""

    def transfer_started(self, resource: Resource, request_type: RequestType) -> None:
        """Called before the request for the resource is issued."""
        ...

    def transfer_progress(self, resource: Resource, request_type: RequestType, length: int) -> None:
        """Called for every chunk copied, with the chunk size in bytes."""
        ...

    def transfer_completed(self, resource: Resource, request_type: RequestType) -> None:
        """Called once the whole body has been transferred."""
        ...

    def transfer_error(self, resource: Resource, request_type: RequestType, error: TransportError) -> None:
        """Called when the transfer fails; the error is raised afterwards."""
        ...


__all__ = ["TransferListener"]
