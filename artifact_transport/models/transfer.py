"""Transfer and session-state models for artifact-transport."""

from enum import Enum
from typing import Any, Optional

from pydantic import ConfigDict

from .base import TransportBaseModel
from .repository import Resource


class RequestType(str, Enum):
    """Direction of a transfer, as reported to transfer listeners."""

    GET = "get"
    PUT = "put"


class ProxySnapshot(TransportBaseModel):
    """
    Ambient proxy configuration captured when a connection is opened.

    A value of None means the setting was unset at capture time.

    Attributes:
        host: Previous proxy host
        port: Previous proxy port
        non_proxy_hosts: Previous proxy exclusion list
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    host: Optional[str] = None
    port: Optional[str] = None
    non_proxy_hosts: Optional[str] = None


class InputData(TransportBaseModel):
    """
    A resource paired with the readable body stream a fetch produced.

    Attributes:
        resource: Resource being fetched; populated with response metadata
        stream: Binary stream over the response body (None until fetched)
    """

    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    resource: Resource
    stream: Optional[Any] = None


class OutputData(TransportBaseModel):
    """
    A resource paired with the writable stream an upload accepts.

    Attributes:
        resource: Resource being uploaded
        stream: Binary stream the caller writes the body to (None until opened)
    """

    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    resource: Resource
    stream: Optional[Any] = None


__all__ = ["RequestType", "ProxySnapshot", "InputData", "OutputData"]
