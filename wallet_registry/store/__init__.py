"""
Registration record stores.

All backends implement RegistrationStore (load / append / find / add_if_absent).
build_store() picks one from Settings.
"""

from wallet_registry.store.base import RegistrationStore
from wallet_registry.store.factory import build_store
from wallet_registry.store.json_file import JsonFileRegistrationStore
from wallet_registry.store.memory import InMemoryRegistrationStore
from wallet_registry.store.sql import SqlRegistrationStore

__all__ = [
    "InMemoryRegistrationStore",
    "JsonFileRegistrationStore",
    "RegistrationStore",
    "SqlRegistrationStore",
    "build_store",
]
