"""Build-time localization and asset tooling."""

__version__ = "0.1.0"
