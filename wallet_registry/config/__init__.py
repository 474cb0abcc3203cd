"""
Configuration management for Wallet Registry.

Loads settings from environment variables and an optional .env file at the
project root. Exposes a single Settings object for the API, store and CLI.
"""

from wallet_registry.config.settings import Settings, get_settings  # noqa: F401

__all__ = ["Settings", "get_settings"]
