"""
Artifact Transport - fetch, list, check and upload repository resources over HTTP.

This package provides a lightweight HTTP transport for artifact
repositories, with per-session proxy and credential handling.
"""

from ._version import __version__

__author__ = "Artifact Transport Developers"

# Import main classes and functions for easy access
from .api import HttpTransport, ChallengeAuth, CredentialResolver, UploadHandle, UploadState
from .exceptions import (
    TransportError,
    TransferFailedError,
    ResourceDoesNotExistError,
    AuthorizationError,
    TransportConnectionError,
)
from .models import (
    Repository,
    Resource,
    AuthenticationInfo,
    ProxyInfo,
    TransportSettings,
)
from .utils import build_url, setup_logging, HtmlFileListParser, proxy_properties
from .cli import main as cli_main, cli as cli_group

__all__ = [
    "__version__",
    "HttpTransport",
    "ChallengeAuth",
    "CredentialResolver",
    "UploadHandle",
    "UploadState",
    "TransportError",
    "TransferFailedError",
    "ResourceDoesNotExistError",
    "AuthorizationError",
    "TransportConnectionError",
    "Repository",
    "Resource",
    "AuthenticationInfo",
    "ProxyInfo",
    "TransportSettings",
    "build_url",
    "setup_logging",
    "HtmlFileListParser",
    "proxy_properties",
    "cli_main",
    "cli_group",
]
