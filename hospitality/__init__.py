"""Hospitality domain core: accounts, authentication and postal addresses."""

__version__ = "0.1.0"
