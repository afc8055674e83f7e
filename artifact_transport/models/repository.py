"""Repository and resource models for artifact-transport."""

from typing import Any, Optional
from urllib.parse import urlsplit

from pydantic import ConfigDict, field_validator, model_validator

from .base import TransportBaseModel


class Repository(TransportBaseModel):
    """
    Remote store that transfers run against.

    The repository is read-only for the lifetime of a connection session.

    Attributes:
        url: Base URL of the repository (e.g., "https://repo.example.com/releases")
        host: Host name of the repository, derived from the URL when omitted
        id: Optional identifier used in log messages
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    url: str
    host: str = ""
    id: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def derive_host(cls, data: Any) -> Any:
        """Fill in the host from the URL when it was not given explicitly."""
        if isinstance(data, dict) and not data.get("host") and data.get("url"):
            data = dict(data)
            data["host"] = urlsplit(str(data["url"])).hostname or ""
        return data


def normalize_resource_name(name: str) -> str:
    """
    Canonicalize a resource name into a forward-slash relative path.

    Args:
        name: Resource name as given by the caller

    Returns:
        The name with every backslash replaced by a forward slash
    """
    return name.replace("\\", "/")


class Resource(TransportBaseModel):
    """
    A named artifact addressable under a repository base URL.

    Attributes:
        name: Relative path of the resource (backslashes are normalized to "/")
        last_modified: Last modification time in milliseconds since the epoch (0 if unknown)
        content_length: Size of the body in bytes (-1 if unknown)
    """

    name: str
    last_modified: int = 0
    content_length: int = -1

    @field_validator("name")
    @classmethod
    def normalize_name(cls, v: str) -> str:
        """Normalize the resource name to a forward-slash path."""
        return normalize_resource_name(v)


__all__ = ["Repository", "Resource", "normalize_resource_name"]
