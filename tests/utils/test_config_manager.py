"""Tests for ConfigManager class."""

from pathlib import Path

import pytest

from artifact_transport.utils.config_manager import CONFIG_PATH_ENV, ConfigManager
from artifact_transport.utils.constants import DEFAULT_CONFIG_PATH

CONFIG = """
[repository]
url = "https://repo.example.com/releases"
id = "releases"

[proxy]
host = "proxy.example.com"
port = 3128

[http]
use_cache = true

[http.headers]
User-Agent = "artifact-transport"
"""


@pytest.fixture
def config_file(tmp_path):
    """Write a sample configuration file."""
    path = tmp_path / "config.toml"
    path.write_text(CONFIG)
    return path


class TestConfigManagerInit:
    """Tests for ConfigManager initialization."""

    def test_init_with_path(self):
        """Test initialization with an explicit path."""
        manager = ConfigManager("~/custom.toml")
        assert manager.config_path == Path("~/custom.toml").expanduser()
        assert manager._config is None

    def test_init_from_environment(self, monkeypatch, tmp_path):
        """Test the environment variable overrides the default path."""
        monkeypatch.setenv(CONFIG_PATH_ENV, str(tmp_path / "env.toml"))
        assert ConfigManager().config_path == tmp_path / "env.toml"

    def test_init_default(self, monkeypatch):
        """Test the default path."""
        monkeypatch.delenv(CONFIG_PATH_ENV, raising=False)
        assert ConfigManager().config_path == Path(DEFAULT_CONFIG_PATH).expanduser()


class TestConfigManagerLoad:
    """Tests for ConfigManager.load()."""

    def test_load_success(self, config_file):
        """Test a file is parsed and cached."""
        manager = ConfigManager(str(config_file))
        result = manager.load()

        assert result["repository"]["url"] == "https://repo.example.com/releases"
        assert manager.load() is result

    def test_load_file_not_found(self, tmp_path):
        """Test a missing file."""
        path = tmp_path / "missing.toml"
        with pytest.raises(FileNotFoundError) as exc_info:
            ConfigManager(str(path)).load()
        assert str(path) in str(exc_info.value)

    def test_load_invalid_toml(self, tmp_path):
        """Test a file that is not TOML."""
        path = tmp_path / "config.toml"
        path.write_text("invalid toml content [unclosed")

        with pytest.raises(ValueError, match="Invalid TOML"):
            ConfigManager(str(path)).load()

    def test_reload(self, config_file):
        """Test reload picks up changes on disk."""
        manager = ConfigManager(str(config_file))
        manager.load()

        config_file.write_text('[repository]\nurl = "https://mirror.example.com/releases"\n')
        manager.reload()

        assert manager.get("repository.url") == "https://mirror.example.com/releases"


class TestConfigManagerLookup:
    """Tests for get, get_section and has_key."""

    def test_get(self, config_file):
        """Test dotted lookups and defaults."""
        manager = ConfigManager(str(config_file))

        assert manager.get("proxy.port") == 3128
        assert manager.get("http.headers.User-Agent") == "artifact-transport"
        assert manager.get("auth.username") is None
        assert manager.get("auth.username", "anonymous") == "anonymous"
        assert manager.get("proxy.port.value", 0) == 0

    def test_get_section(self, config_file):
        """Test sections are returned as copies."""
        manager = ConfigManager(str(config_file))

        section = manager.get_section("proxy")
        section["host"] = "changed"

        assert manager.get_section("proxy") == {"host": "proxy.example.com", "port": 3128}
        assert manager.get_section("auth") == {}

    def test_get_section_not_a_table(self, config_file):
        """Test a scalar cannot be read as a section."""
        with pytest.raises(ValueError, match="is not a table"):
            ConfigManager(str(config_file)).get_section("repository.url")

    def test_has_key(self, config_file, tmp_path):
        """Test key presence, including for unreadable files."""
        manager = ConfigManager(str(config_file))

        assert manager.has_key("repository.id")
        assert not manager.has_key("repository.missing")
        assert not ConfigManager(str(tmp_path / "missing.toml")).has_key("repository.url")
