"""
Application settings.

Typed snapshot of the environment (store backend, file path, database URL,
API bind address) used by the API server, store factory and CLI.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from wallet_registry.config.env import (
    get_api_host,
    get_api_port,
    get_database_url,
    get_registrations_path,
    get_registry_url,
    get_store_backend,
)


@dataclass(frozen=True)
class Settings:
    store_backend: str
    registrations_path: Path
    database_url: str
    api_host: str
    api_port: int
    registry_url: str


def get_settings() -> Settings:
    """
    Return the current application settings, read fresh from the environment.

    Returns:
        Settings with store_backend, registrations_path, database_url,
        api_host, api_port and registry_url.
    """
    return Settings(
        store_backend=get_store_backend(),
        registrations_path=get_registrations_path(),
        database_url=get_database_url(),
        api_host=get_api_host(),
        api_port=get_api_port(),
        registry_url=get_registry_url(),
    )
