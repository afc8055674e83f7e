"""Authentication and proxy descriptors for artifact-transport."""

from typing import Optional

from pydantic import Field

from .base import TransportBaseModel


class AuthenticationInfo(TransportBaseModel):
    """
    Credentials for the repository itself.

    Attributes:
        username: User name; anonymous access when None
        password: Password (an empty password is sent when None)
        private_key: Optional path to a private key
        passphrase: Optional passphrase for the private key
    """

    username: Optional[str] = None
    password: Optional[str] = Field(default=None, repr=False)
    private_key: Optional[str] = None
    passphrase: Optional[str] = Field(default=None, repr=False)


class ProxyInfo(TransportBaseModel):
    """
    HTTP proxy descriptor.

    Attributes:
        host: Proxy host name
        port: Proxy port
        username: Optional proxy user name
        password: Optional proxy password
        non_proxy_hosts: Hosts that bypass the proxy, separated by "|" with "*" wildcards
    """

    host: str
    port: int = Field(default=8080, ge=1, le=65535)
    username: Optional[str] = None
    password: Optional[str] = Field(default=None, repr=False)
    non_proxy_hosts: Optional[str] = None


__all__ = ["AuthenticationInfo", "ProxyInfo"]
