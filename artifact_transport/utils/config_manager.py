"""
Loading of the TOML settings file shared by CLI commands.

The configuration is a TOML file with optional [repository], [auth],
[proxy] and [http] tables:

    [repository]
    url = "https://repo.example.com/releases"

    [auth]
    username = "deployer"
    password = "secret"

    [proxy]
    host = "proxy.example.com"
    port = 3128
    non_proxy_hosts = "localhost|*.internal"

    [http]
    use_cache = false
    timeout = 60

    [http.headers]
    User-Agent = "artifact-transport"
"""

import logging
import os
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional

from .constants import DEFAULT_CONFIG_PATH

# Environment variable overriding the default configuration path
CONFIG_PATH_ENV = "ARTIFACT_TRANSPORT_CONFIG"

_MISSING = object()


class ConfigManager:
    """Loads the TOML configuration once and answers lookups against it."""

    def __init__(self, config_path: Optional[str] = None) -> None:
        """
        Remember the settings path; nothing is read until first use.

        Args:
            config_path: Path to the configuration file. Falls back to
                $ARTIFACT_TRANSPORT_CONFIG, then to the default path.
        """
        path = config_path or os.environ.get(CONFIG_PATH_ENV) or DEFAULT_CONFIG_PATH
        self.config_path = Path(path).expanduser()
        self._config: Optional[Dict[str, Any]] = None

    def load(self) -> Dict[str, Any]:
        """
        Load the configuration file, reading it only on first use.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file is not valid TOML or cannot be read
        """
        if self._config is not None:
            return self._config

        if not self.config_path.is_file():
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

        try:
            with self.config_path.open("rb") as fp:
                self._config = tomllib.load(fp)
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid TOML in configuration file {self.config_path}: {e}") from e
        except OSError as e:
            raise ValueError(f"Failed to read configuration file {self.config_path}: {e}") from e

        logging.debug("Loaded configuration from %s", self.config_path)
        return self._config

    def _lookup(self, key: str) -> Any:
        value: Any = self.load()
        for part in key.split("."):
            if not isinstance(value, dict) or part not in value:
                return _MISSING
            value = value[part]
        return value

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a value by dotted key, e.g. "proxy.port".

        Args:
            key: Dotted path into the configuration tables
            default: Value returned when the key is absent

        Example:
            >>> config = ConfigManager("~/.config/artifact-transport/config.toml")
            >>> config.get("repository.url")
            'https://repo.example.com/releases'
        """
        value = self._lookup(key)
        return default if value is _MISSING else value

    def get_section(self, section: str) -> Dict[str, Any]:
        """
        Get a copy of a top-level table, or an empty dict if it is absent.

        Raises:
            ValueError: If the key exists but is not a table
        """
        value = self._lookup(section)
        if value is _MISSING:
            return {}
        if not isinstance(value, dict):
            raise ValueError(f"Configuration key '{section}' in {self.config_path} is not a table")
        return dict(value)

    def has_key(self, key: str) -> bool:
        """Check if a dotted key exists; an unreadable file has no keys."""
        try:
            return self._lookup(key) is not _MISSING
        except (FileNotFoundError, ValueError):
            return False

    def reload(self) -> None:
        """Discard the cached settings and read the file again."""
        self._config = None
        self.load()


__all__ = ["ConfigManager", "CONFIG_PATH_ENV"]
