"""
Central constants for the artifact-transport package.

Defaults for timeouts, status codes and header names used by the
transport and the CLI.
"""

# ============================================================================
# Configuration
# ============================================================================

# Default location of the TOML configuration file
DEFAULT_CONFIG_PATH = "~/.config/artifact-transport/config.toml"

# ============================================================================
# Network defaults
# ============================================================================

# Default total timeout for HTTP requests (seconds)
DEFAULT_TIMEOUT = 30.0

# Connect timeout for HTTP requests (seconds)
CONNECT_TIMEOUT = 10.0

# Connection attempts retried by the HTTP transport on connect failures
MAX_CONNECT_RETRIES = 3

# Default proxy port when the ambient port is unset
DEFAULT_PROXY_PORT = 80

# ============================================================================
# Ambient Proxy Properties
# ============================================================================

PROXY_HOST_PROPERTY = "http.proxyHost"
PROXY_PORT_PROPERTY = "http.proxyPort"
NON_PROXY_HOSTS_PROPERTY = "http.nonProxyHosts"

# ============================================================================
# HTTP Status Codes
# ============================================================================

HTTP_OK = 200
HTTP_CREATED = 201
HTTP_ACCEPTED = 202
HTTP_NO_CONTENT = 204
HTTP_UNAUTHORIZED = 401
HTTP_FORBIDDEN = 403
HTTP_NOT_FOUND = 404
HTTP_PROXY_AUTH_REQUIRED = 407
HTTP_GONE = 410

# Status codes that complete an upload
PUT_SUCCESS_CODES = frozenset({HTTP_OK, HTTP_CREATED, HTTP_ACCEPTED, HTTP_NO_CONTENT})

# Status codes that mean a fetched resource is missing
GET_NOT_FOUND_CODES = frozenset({HTTP_NOT_FOUND, HTTP_GONE})

# ============================================================================
# Streaming
# ============================================================================

# Chunk size for reading response bodies and copying streams
DEFAULT_CHUNK_SIZE = 64 * 1024

# Upload bodies above this size are spooled to disk instead of memory
UPLOAD_SPOOL_SIZE = 8 * 1024 * 1024
