"""
Protocols for the transport's collaborators.

This package provides the protocols a transport depends on, enabling
type checking without requiring inheritance.
"""

from .listing_protocol import FileListParser
from .transfer_listener import TransferListener

__all__ = ["FileListParser", "TransferListener"]
