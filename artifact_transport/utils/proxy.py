"""
Process-wide proxy configuration.

The ambient proxy properties play the role of JVM-style system properties:
a connection session overrides them while it is open and puts the previous
values back when it closes. HTTP clients created during a session consult
them to decide whether, and through which proxy, a host is reached.

The properties are global to the process. Two sessions opened concurrently
in the same process with different proxies will overwrite each other's
values; use one session at a time per process when proxies differ.
"""

import logging
import re
from typing import Dict, Optional

from ..models.auth import ProxyInfo
from ..models.transfer import ProxySnapshot
from .constants import (
    DEFAULT_PROXY_PORT,
    NON_PROXY_HOSTS_PROPERTY,
    PROXY_HOST_PROPERTY,
    PROXY_PORT_PROPERTY,
)


def matches_non_proxy_hosts(host: str, non_proxy_hosts: Optional[str]) -> bool:
    """
    Check whether a host is excluded from proxying.

    Args:
        host: Host name to check
        non_proxy_hosts: Patterns separated by "|" (or ","), where "*" matches any characters

    Returns:
        True if the host matches one of the patterns (case-insensitive)

    Example:
        >>> matches_non_proxy_hosts("build.internal", "localhost|*.internal")
        True
    """
    if not host or not non_proxy_hosts:
        return False

    for pattern in re.split(r"[|,]", non_proxy_hosts):
        pattern = pattern.strip()
        if not pattern:
            continue
        regex = re.escape(pattern.lower()).replace(r"\*", ".*")
        if re.fullmatch(regex, host.lower()):
            return True
    return False


def select_proxy(proxy_info: Optional[ProxyInfo], host: str) -> Optional[ProxyInfo]:
    """
    Return the proxy to use for a repository host.

    Args:
        proxy_info: Configured proxy, if any
        host: Repository host

    Returns:
        The proxy, or None when no proxy is configured or the host is excluded
    """
    if proxy_info is None:
        return None
    if matches_non_proxy_hosts(host, proxy_info.non_proxy_hosts):
        logging.debug("Host %s matches non-proxy hosts, connecting directly", host)
        return None
    return proxy_info


class ProxyProperties:
    """Ambient proxy host, port and exclusion list shared by the whole process."""

    def __init__(self) -> None:
        self._values: Dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        """Get a property value, or None if unset."""
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        """Set a property value."""
        self._values[key] = value

    def clear(self, key: str) -> None:
        """Unset a property."""
        self._values.pop(key, None)

    def snapshot(self) -> ProxySnapshot:
        """Capture the current host, port and exclusion list."""
        return ProxySnapshot(
            host=self.get(PROXY_HOST_PROPERTY),
            port=self.get(PROXY_PORT_PROPERTY),
            non_proxy_hosts=self.get(NON_PROXY_HOSTS_PROPERTY),
        )

    def apply(self, proxy_info: ProxyInfo) -> None:
        """Point the ambient configuration at a proxy."""
        self.set(PROXY_HOST_PROPERTY, proxy_info.host)
        self.set(PROXY_PORT_PROPERTY, str(proxy_info.port))
        if proxy_info.non_proxy_hosts is not None:
            self.set(NON_PROXY_HOSTS_PROPERTY, proxy_info.non_proxy_hosts)

    def restore(self, snapshot: ProxySnapshot) -> None:
        """
        Put back the values captured in a snapshot.

        Only values that were set when the snapshot was taken are written;
        a property that was unset at capture time keeps its current value.
        """
        if snapshot.host is not None:
            self.set(PROXY_HOST_PROPERTY, snapshot.host)
        if snapshot.port is not None:
            self.set(PROXY_PORT_PROPERTY, snapshot.port)
        if snapshot.non_proxy_hosts is not None:
            self.set(NON_PROXY_HOSTS_PROPERTY, snapshot.non_proxy_hosts)

    def proxy_url(self, host: str) -> Optional[str]:
        """
        Get the proxy URL the ambient configuration selects for a host.

        Args:
            host: Host about to be contacted

        Returns:
            "http://proxy-host:port", or None for a direct connection
        """
        proxy_host = self.get(PROXY_HOST_PROPERTY)
        if not proxy_host:
            return None
        if matches_non_proxy_hosts(host, self.get(NON_PROXY_HOSTS_PROPERTY)):
            return None
        port = self.get(PROXY_PORT_PROPERTY) or str(DEFAULT_PROXY_PORT)
        return f"http://{proxy_host}:{port}"


# Shared by every transport in the process
proxy_properties = ProxyProperties()


__all__ = ["ProxyProperties", "proxy_properties", "matches_non_proxy_hosts", "select_proxy"]
