"""
Basic tests for artifact-transport package.

This module contains basic tests to verify the package structure and imports.
"""

import artifact_transport


def test_package_import():
    """Test that the package can be imported."""
    assert artifact_transport is not None


def test_version():
    """Test that version is accessible."""
    assert hasattr(artifact_transport, "__version__")
    assert artifact_transport.__version__ is not None


def test_version_module():
    """Test that _version module can be imported and has correct version."""
    from artifact_transport._version import __version__

    assert __version__ == "1.0.0"


def test_main_classes_import():
    """Test that main classes can be imported."""
    from artifact_transport import HttpTransport, Repository, Resource, TransportSettings

    assert HttpTransport is not None
    assert Repository is not None
    assert Resource is not None
    assert TransportSettings is not None


def test_exceptions_import():
    """Test that the exception hierarchy is exported."""
    from artifact_transport import (
        AuthorizationError,
        ResourceDoesNotExistError,
        TransferFailedError,
        TransportError,
    )

    assert issubclass(AuthorizationError, TransportError)
    assert issubclass(ResourceDoesNotExistError, TransportError)
    assert issubclass(TransferFailedError, TransportError)


def test_utility_functions_import():
    """Test that utility functions can be imported."""
    from artifact_transport import build_url, proxy_properties, setup_logging

    assert build_url("http://host/repo", "a.jar") == "http://host/repo/a.jar"
    assert proxy_properties is not None
    assert setup_logging is not None


def test_cli_import():
    """Test that the CLI entry points are exported."""
    from artifact_transport import cli_group, cli_main

    assert callable(cli_main)
    assert cli_group.name == "cli"
