"""
HTTP transport API.

This package provides the transport that moves resources between a local
process and an HTTP repository:
- HttpTransport: connection session lifecycle, GET/PUT/HEAD and listings
- ChallengeAuth / CredentialResolver: per-session credential resolution
- UploadHandle / UploadBody / UploadState: the two-step upload state machine
"""

from .auth import ChallengeAuth, CredentialResolver
from .upload import UploadBody, UploadHandle, UploadState
from .http_transport import HttpTransport

__all__ = [
    "HttpTransport",
    "ChallengeAuth",
    "CredentialResolver",
    "UploadBody",
    "UploadHandle",
    "UploadState",
]
