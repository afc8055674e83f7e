"""
Session utilities for repository transfers.

Each connection session gets its own httpx client: pooled connections,
connect retries, a total timeout, and optionally a proxy and a challenge
authentication flow.
"""

import importlib.util
import logging
from typing import Optional, Tuple

import httpx

from .constants import CONNECT_TIMEOUT, DEFAULT_TIMEOUT, MAX_CONNECT_RETRIES


def http2_available() -> bool:
    """Check whether the optional h2 package is installed."""
    return importlib.util.find_spec("h2") is not None


def create_http_client(
    proxy_url: Optional[str] = None,
    proxy_auth: Optional[Tuple[str, str]] = None,
    auth: Optional[httpx.Auth] = None,
    timeout: float = DEFAULT_TIMEOUT,
    max_connections: int = 10,
    verify: bool = True,
) -> httpx.Client:
    """
    Create an httpx client for one connection session.

    Environment proxy variables are ignored; the caller decides on the proxy
    from the ambient proxy properties.

    Args:
        proxy_url: Optional proxy URL (e.g., "http://proxy.example.com:3128")
        proxy_auth: Optional (username, password) sent to the proxy for tunnelled requests
        auth: Optional httpx.Auth resolving credentials when the server challenges
        timeout: Total timeout in seconds; connecting is capped at CONNECT_TIMEOUT
        max_connections: Size of the connection pool
        verify: Whether to verify TLS certificates

    Raises:
        ValueError: If the proxy URL has an unsupported scheme

    Example:
        >>> client = create_http_client()
        >>> response = client.head("https://repo.example.com/releases/a.jar")
        >>> # Through a proxy
        >>> client = create_http_client(proxy_url="http://proxy:3128", timeout=300.0)
    """
    proxy = httpx.Proxy(proxy_url, auth=proxy_auth) if proxy_url else None
    if proxy is not None:
        logging.debug("Routing requests through proxy %s", proxy_url)

    use_http2 = http2_available()
    if not use_http2:
        logging.debug("h2 is not installed, using HTTP/1.1 only")

    pool = httpx.HTTPTransport(
        verify=verify,
        http2=use_http2,
        limits=httpx.Limits(max_connections=max_connections, max_keepalive_connections=max_connections),
        trust_env=False,
        proxy=proxy,
        retries=MAX_CONNECT_RETRIES,
    )

    return httpx.Client(
        transport=pool,
        auth=auth,
        timeout=httpx.Timeout(timeout, connect=CONNECT_TIMEOUT),
        follow_redirects=True,
        trust_env=False,
    )


__all__ = ["create_http_client", "http2_available"]
