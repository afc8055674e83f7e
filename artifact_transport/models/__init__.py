"""
Pydantic models for artifact-transport.

This package contains the models shared by the transport:
- repository: Repository and Resource
- auth: AuthenticationInfo and ProxyInfo descriptors
- transfer: transfer payloads and the proxy snapshot
- context: TransportSettings
"""

from .base import TransportBaseModel
from .repository import Repository, Resource, normalize_resource_name
from .auth import AuthenticationInfo, ProxyInfo
from .transfer import RequestType, ProxySnapshot, InputData, OutputData
from .context import TransportSettings

__all__ = [
    "TransportBaseModel",
    "Repository",
    "Resource",
    "normalize_resource_name",
    "AuthenticationInfo",
    "ProxyInfo",
    "RequestType",
    "ProxySnapshot",
    "InputData",
    "OutputData",
    "TransportSettings",
]
