"""
URL utilities for repository transfers.

This module composes resource URLs from a repository base URL
and a relative resource path.
"""

from ..models.repository import normalize_resource_name


def build_url(base_url: str, relative_path: str) -> str:
    """
    Build a complete resource URL from a repository URL and a relative path.

    The two parts are concatenated as-is; a "/" is inserted only when the
    base URL does not already end with one. Paths are neither normalized
    nor percent-encoded, so callers must pass already-encoded segments.

    Args:
        base_url: Repository base URL
        relative_path: Resource path relative to the repository

    Returns:
        The complete URL

    Example:
        >>> build_url("http://host/repo", "a/b.jar")
        'http://host/repo/a/b.jar'
        >>> build_url("http://host/repo/", "a/b.jar")
        'http://host/repo/a/b.jar'
    """
    if not base_url.endswith("/"):
        return f"{base_url}/{relative_path}"
    return base_url + relative_path


def directory_path(path: str) -> str:
    """Return the path with a trailing slash, as directory listings expect."""
    return path if path.endswith("/") else path + "/"


__all__ = ["build_url", "directory_path", "normalize_resource_name"]
