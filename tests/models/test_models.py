"""
Tests for the pydantic models.

This module tests validation, defaults and derived fields.
"""

import pytest
from pydantic import ValidationError

from artifact_transport.models import (
    AuthenticationInfo,
    InputData,
    OutputData,
    ProxyInfo,
    ProxySnapshot,
    Repository,
    RequestType,
    Resource,
    TransportSettings,
)
from artifact_transport.utils.config_manager import ConfigManager


class TestRepository:
    """Tests for Repository."""

    def test_host_derived_from_url(self):
        """Test the host comes from the URL when omitted."""
        repository = Repository(url="https://Repo.Example.com:8443/releases")
        assert repository.host == "repo.example.com"
        assert repository.id is None

    def test_explicit_host(self):
        """Test an explicit host is kept."""
        repository = Repository(url="https://repo.example.com/releases", host="mirror")
        assert repository.host == "mirror"

    def test_url_without_host(self):
        """Test a URL without a host yields an empty host."""
        assert Repository(url="file-or-garbage").host == ""

    def test_frozen(self):
        """Test repositories cannot change during a session."""
        repository = Repository(url="https://repo.example.com/releases")
        with pytest.raises(ValidationError):
            repository.url = "https://other.example.com"

    def test_extra_fields_forbidden(self):
        """Test unknown fields are rejected."""
        with pytest.raises(ValidationError):
            Repository(url="https://repo.example.com", layout="default")


class TestResource:
    """Tests for Resource."""

    def test_defaults(self):
        """Test unknown metadata defaults."""
        resource = Resource(name="a.jar")
        assert resource.last_modified == 0
        assert resource.content_length == -1

    def test_name_normalized(self):
        """Test backslashes are normalized on creation and assignment."""
        resource = Resource(name="org\\example\\a.jar")
        assert resource.name == "org/example/a.jar"

        resource.name = "org\\other\\b.jar"
        assert resource.name == "org/other/b.jar"

    def test_mutable_metadata(self):
        """Test metadata is filled in after a fetch."""
        resource = Resource(name="a.jar")
        resource.last_modified = 1000
        resource.content_length = 12
        assert resource.last_modified == 1000
        assert resource.content_length == 12


class TestAuthModels:
    """Tests for AuthenticationInfo and ProxyInfo."""

    def test_authentication_defaults(self):
        """Test every credential is optional."""
        info = AuthenticationInfo()
        assert info.username is None
        assert info.password is None

    def test_passwords_hidden_from_repr(self):
        """Test secrets are not shown in repr."""
        auth = AuthenticationInfo(username="deployer", password="secret", passphrase="phrase")
        proxy = ProxyInfo(host="proxy.example.com", username="puser", password="ppass")

        assert "secret" not in repr(auth)
        assert "phrase" not in repr(auth)
        assert "ppass" not in repr(proxy)
        assert "deployer" in repr(auth)

    def test_proxy_defaults(self):
        """Test proxy defaults."""
        proxy = ProxyInfo(host="proxy.example.com")
        assert proxy.port == 8080
        assert proxy.non_proxy_hosts is None

    @pytest.mark.parametrize("port", [0, 65536, -1])
    def test_proxy_port_range(self, port):
        """Test invalid proxy ports."""
        with pytest.raises(ValidationError):
            ProxyInfo(host="proxy.example.com", port=port)


class TestTransferModels:
    """Tests for transfer payloads and snapshots."""

    def test_input_data_keeps_resource(self):
        """Test the payload shares the resource instance."""
        resource = Resource(name="a.jar")
        input_data = InputData(resource=resource)

        assert input_data.resource is resource
        assert input_data.stream is None

    def test_output_data_stream(self):
        """Test any stream object can be attached."""
        output_data = OutputData(resource=Resource(name="a.jar"))
        output_data.stream = object()
        assert output_data.stream is not None

    def test_snapshot_frozen(self):
        """Test snapshots cannot be modified."""
        snapshot = ProxySnapshot(host="proxy.example.com")
        with pytest.raises(ValidationError):
            snapshot.host = "other"

    def test_request_type_values(self):
        """Test request type values."""
        assert RequestType.GET.value == "get"
        assert RequestType.PUT.value == "put"


class TestTransportSettings:
    """Tests for TransportSettings."""

    def test_defaults(self):
        """Test default settings."""
        settings = TransportSettings()
        assert settings.repository is None
        assert settings.use_cache is False
        assert settings.http_headers == {}
        assert settings.timeout == 30.0

    def test_timeout_positive(self):
        """Test the timeout must be positive."""
        with pytest.raises(ValidationError):
            TransportSettings(timeout=0)

    def test_from_config(self, tmp_path):
        """Test settings are read from every section."""
        path = tmp_path / "config.toml"
        path.write_text(
            """
[repository]
url = "https://repo.example.com/releases"
id = "releases"

[auth]
username = "deployer"
password = "secret"

[proxy]
host = "proxy.example.com"
port = 3128
non_proxy_hosts = "localhost|*.internal"

[http]
use_cache = true
timeout = 60

[http.headers]
User-Agent = "artifact-transport"
"""
        )

        settings = TransportSettings.from_config(ConfigManager(str(path)))

        assert settings.repository == Repository(url="https://repo.example.com/releases", id="releases")
        assert settings.authentication.username == "deployer"
        assert settings.proxy.port == 3128
        assert settings.proxy.non_proxy_hosts == "localhost|*.internal"
        assert settings.use_cache is True
        assert settings.timeout == 60
        assert settings.http_headers == {"User-Agent": "artifact-transport"}

    def test_from_config_url_override(self, tmp_path):
        """Test an explicit URL wins over the file."""
        path = tmp_path / "config.toml"
        path.write_text('[repository]\nurl = "https://repo.example.com/releases"\n')

        settings = TransportSettings.from_config(ConfigManager(str(path)), url="https://mirror.example.com/m2")

        assert settings.repository.url == "https://mirror.example.com/m2"
        assert settings.repository.host == "mirror.example.com"
        assert settings.authentication is None
        assert settings.proxy is None

    def test_from_config_unknown_key(self, tmp_path):
        """Test typos in the configuration are reported."""
        path = tmp_path / "config.toml"
        path.write_text('[proxy]\nhots = "proxy.example.com"\n')

        with pytest.raises(ValidationError):
            TransportSettings.from_config(ConfigManager(str(path)))
