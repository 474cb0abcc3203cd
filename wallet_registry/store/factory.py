"""
Store selection from Settings.store_backend.
"""

from __future__ import annotations

from wallet_registry.config import Settings
from wallet_registry.registry_logging import get_logger
from wallet_registry.store.base import RegistrationStore
from wallet_registry.store.json_file import JsonFileRegistrationStore
from wallet_registry.store.memory import InMemoryRegistrationStore
from wallet_registry.store.sql import SqlRegistrationStore

logger = get_logger(__name__)


def build_store(settings: Settings) -> RegistrationStore:
    backend = settings.store_backend
    if backend == "json":
        store: RegistrationStore = JsonFileRegistrationStore(settings.registrations_path)
    elif backend == "memory":
        store = InMemoryRegistrationStore()
    elif backend == "sql":
        store = SqlRegistrationStore(settings.database_url)
    else:
        raise ValueError(f"Unknown store backend: {backend!r}")
    logger.info("registrations_store_selected", backend=backend)
    return store
