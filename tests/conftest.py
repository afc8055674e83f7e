"""
Pytest configuration and shared fixtures for artifact-transport tests.
"""

import gzip

import pytest
import respx

from artifact_transport.api import HttpTransport
from artifact_transport.models import Repository, TransportSettings
from artifact_transport.utils.proxy import proxy_properties

REPO_URL = "https://repo.example.com/releases"


@pytest.fixture(autouse=True)
def reset_proxy_properties():
    """Start and finish every test with unset ambient proxy properties."""
    proxy_properties._values.clear()
    yield
    proxy_properties._values.clear()


@pytest.fixture
def httpx_mock():
    """Mock httpx requests using respx."""
    with respx.mock:
        yield respx


@pytest.fixture
def repo_url():
    """Base URL of the test repository."""
    return REPO_URL


@pytest.fixture
def repository():
    """Repository every transport test connects to."""
    return Repository(url=REPO_URL, id="releases")


@pytest.fixture
def settings(repository):
    """Default transport settings."""
    return TransportSettings(repository=repository)


@pytest.fixture
def transport(httpx_mock, repository):
    """An open transport without proxy or credentials."""
    transport = HttpTransport()
    transport.open(repository)
    yield transport
    transport.close()


@pytest.fixture
def gzip_body():
    """Factory compressing a payload the way a server would."""

    def _compress(data: bytes) -> bytes:
        return gzip.compress(data)

    return _compress


@pytest.fixture
def index_page():
    """Apache-style directory index for the "org/example/" directory."""
    return b"""<html><head><title>Index of /releases/org/example</title></head>
<body>
<h1>Index of /releases/org/example</h1>
<table>
<tr><th><a href="?C=N;O=D">Name</a></th><th><a href="?C=M;O=A">Last modified</a></th></tr>
<tr><td><a href="/releases/org/">Parent Directory</a></td></tr>
<tr><td><a href="../">Up</a></td></tr>
<tr><td><a href="lib/">lib/</a></td></tr>
<tr><td><a href="lib-1.0.jar">lib-1.0.jar</a></td></tr>
<tr><td><a href="lib-1.0.jar#sha">lib-1.0.jar</a></td></tr>
<tr><td><a href="lib%201.0.pom">lib 1.0.pom</a></td></tr>
<tr><td><a href="https://repo.example.com/releases/org/example/maven-metadata.xml">maven-metadata.xml</a></td></tr>
<tr><td><a href="mailto:admin@example.com">admin</a></td></tr>
<tr><td><a href="https://elsewhere.example.org/">elsewhere</a></td></tr>
</table>
</body></html>
"""
