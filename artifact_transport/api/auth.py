"""
Challenge-driven authentication for repository connections.

Credentials are resolved per connection session and attached to the
session's HTTP client; nothing is installed process-wide. The server (401)
or proxy (407) must challenge first, after which the request is sent once
more with Basic credentials for the challenging host.
"""

# Standard library imports
import base64
import logging
from typing import Generator, Optional, Tuple

# Third-party imports
import httpx

# Local imports
from ..models.auth import AuthenticationInfo, ProxyInfo
from ..utils.constants import HTTP_PROXY_AUTH_REQUIRED, HTTP_UNAUTHORIZED

DEFAULT_PORTS = {"http": 80, "https": 443}


def basic_auth_header(username: str, password: str) -> str:
    """Encode a username/password pair as a Basic authorization value."""
    token = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


def request_port(url: httpx.URL) -> int:
    """Get the port a URL connects to, falling back to the scheme default."""
    if url.port is not None:
        return url.port
    return DEFAULT_PORTS.get(url.scheme, 80)


class CredentialResolver:
    """
    Picks the credentials answering a challenge from a given host and port.

    The proxy's credentials win when the challenge comes from the proxy
    itself; otherwise the repository credentials are used.
    """

    def __init__(
        self,
        proxy_info: Optional[ProxyInfo] = None,
        authentication_info: Optional[AuthenticationInfo] = None,
    ) -> None:
        self.proxy_info = proxy_info
        self.authentication_info = authentication_info
        self.has_proxy = proxy_info is not None and proxy_info.username is not None
        self.has_authentication = authentication_info is not None and authentication_info.username is not None

    @property
    def enabled(self) -> bool:
        """Whether there are any credentials to hand out."""
        return self.has_proxy or self.has_authentication

    def resolve(self, requesting_host: str, requesting_port: int) -> Optional[Tuple[str, str]]:
        """
        Resolve credentials for a challenge.

        Args:
            requesting_host: Host that issued the challenge
            requesting_port: Port of the challenging host

        Returns:
            (username, password) with an empty password when none is set,
            or None when there is nothing to answer with
        """
        if (
            self.has_proxy
            and self.proxy_info is not None
            and requesting_host == self.proxy_info.host
            and requesting_port == self.proxy_info.port
        ):
            return str(self.proxy_info.username), self.proxy_info.password or ""

        if self.has_authentication and self.authentication_info is not None:
            return str(self.authentication_info.username), self.authentication_info.password or ""

        return None


class ChallengeAuth(httpx.Auth):
    """
    httpx authentication flow answering 401 and 407 challenges.

    The request is resent as is, so upload bodies must be replayable
    (see UploadBody).
    """

    def __init__(self, resolver: CredentialResolver) -> None:
        self._resolver = resolver

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        response = yield request

        proxy_info = self._resolver.proxy_info
        if response.status_code == HTTP_PROXY_AUTH_REQUIRED and proxy_info is not None:
            credentials = self._resolver.resolve(proxy_info.host, proxy_info.port)
            header = "Proxy-Authorization"
        elif response.status_code == HTTP_UNAUTHORIZED:
            credentials = self._resolver.resolve(request.url.host, request_port(request.url))
            header = "Authorization"
        else:
            return

        if credentials is None:
            logging.debug("No credentials for challenge %d from %s", response.status_code, request.url)
            return

        logging.debug("Answering %d challenge for %s as %s", response.status_code, request.url, credentials[0])
        request.headers[header] = basic_auth_header(*credentials)
        yield request


__all__ = ["CredentialResolver", "ChallengeAuth", "basic_auth_header", "request_port"]
