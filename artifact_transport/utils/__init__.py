"""
Utility modules for artifact transfers.
"""

from .logger import setup_logging, WrappingFormatter
from .session import create_http_client
from .url import build_url, directory_path
from .proxy import ProxyProperties, proxy_properties, matches_non_proxy_hosts, select_proxy
from .listing import HtmlFileListParser

from . import constants
from . import config_manager
from . import error_handling
from . import response_utils
from . import streams

__all__ = [
    "setup_logging",
    "WrappingFormatter",
    "create_http_client",
    "build_url",
    "directory_path",
    "ProxyProperties",
    "proxy_properties",
    "matches_non_proxy_hosts",
    "select_proxy",
    "HtmlFileListParser",
    "constants",
    "config_manager",
    "error_handling",
    "response_utils",
    "streams",
]
