"""Version information for artifact-transport."""

__version__ = "1.0.0"
