"""
Tests for session utilities.

This module tests HTTP client creation and configuration.
"""

from unittest.mock import patch

import httpx
import pytest

from artifact_transport.api import ChallengeAuth, CredentialResolver
from artifact_transport.models import AuthenticationInfo
from artifact_transport.utils import create_http_client
from artifact_transport.utils.session import http2_available


class TestCreateHttpClient:
    """Test create_http_client."""

    def test_defaults(self):
        """Test a client is created with the default timeouts."""
        client = create_http_client()

        assert isinstance(client, httpx.Client)
        assert client.timeout.connect == 10.0
        assert client.timeout.read == 30.0
        assert client.follow_redirects is True
        assert client.auth is None
        assert not client.is_closed
        client.close()

    def test_custom_timeout(self):
        """Test the total timeout is configurable."""
        client = create_http_client(timeout=300.0)

        assert client.timeout.read == 300.0
        assert client.timeout.connect == 10.0
        client.close()

    def test_auth_attached(self):
        """Test the challenge handler becomes the client auth."""
        auth = ChallengeAuth(CredentialResolver(None, AuthenticationInfo(username="deployer")))
        client = create_http_client(auth=auth)

        assert client.auth is auth
        client.close()

    def test_proxy_configured(self):
        """Test a proxy URL and credentials are handed to httpx."""
        with patch("artifact_transport.utils.session.httpx.Proxy", wraps=httpx.Proxy) as mock_proxy:
            client = create_http_client(proxy_url="http://proxy.example.com:3128", proxy_auth=("puser", "ppass"))

        mock_proxy.assert_called_once_with("http://proxy.example.com:3128", auth=("puser", "ppass"))
        client.close()

    def test_no_proxy(self):
        """Test no proxy is configured without a URL."""
        with patch("artifact_transport.utils.session.httpx.Proxy") as mock_proxy:
            client = create_http_client()

        mock_proxy.assert_not_called()
        client.close()

    def test_invalid_proxy_url(self):
        """Test a proxy URL with an unsupported scheme is rejected."""
        with pytest.raises(ValueError):
            create_http_client(proxy_url="ftp://proxy.example.com:21")

    def test_http2_detection(self):
        """Test HTTP/2 is only enabled when h2 is importable."""
        with patch("artifact_transport.utils.session.importlib.util.find_spec", return_value=None):
            assert http2_available() is False
            client = create_http_client()
        client.close()
