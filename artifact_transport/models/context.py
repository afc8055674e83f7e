"""Context and configuration models for artifact-transport operations."""

from typing import TYPE_CHECKING, Dict, Optional

from pydantic import Field

from ..utils.constants import DEFAULT_TIMEOUT
from .auth import AuthenticationInfo, ProxyInfo
from .base import TransportBaseModel
from .repository import Repository

if TYPE_CHECKING:
    from ..utils.config_manager import ConfigManager


class TransportSettings(TransportBaseModel):
    """
    Settings for an HTTP transport and the session it opens.

    Attributes:
        repository: Repository to connect to
        authentication: Optional repository credentials
        proxy: Optional HTTP proxy
        use_cache: Whether intermediate caches may answer GET requests
        http_headers: Headers applied to every outbound request
        timeout: Total request timeout in seconds
    """

    repository: Optional[Repository] = None
    authentication: Optional[AuthenticationInfo] = None
    proxy: Optional[ProxyInfo] = None
    use_cache: bool = False
    http_headers: Dict[str, str] = Field(default_factory=dict)
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)

    @classmethod
    def from_config(cls, config: "ConfigManager", url: Optional[str] = None) -> "TransportSettings":
        """
        Build settings from a loaded configuration file.

        Args:
            config: Configuration manager for the TOML file
            url: Optional repository URL overriding [repository].url

        Returns:
            TransportSettings populated from the [repository], [auth], [proxy]
            and [http] sections
        """
        repository_section = config.get_section("repository")
        repository_url = url or repository_section.get("url")
        repository = None
        if repository_url:
            repository = Repository(url=repository_url, id=repository_section.get("id"))

        auth_section = config.get_section("auth")
        proxy_section = config.get_section("proxy")
        http_section = config.get_section("http")

        return cls(
            repository=repository,
            authentication=AuthenticationInfo(**auth_section) if auth_section else None,
            proxy=ProxyInfo(**proxy_section) if proxy_section else None,
            use_cache=http_section.get("use_cache", False),
            http_headers={str(k): str(v) for k, v in http_section.get("headers", {}).items()},
            timeout=http_section.get("timeout", DEFAULT_TIMEOUT),
        )


__all__ = ["TransportSettings"]
