"""
In-memory store. Used by tests and REGISTRY_STORE=memory; lost on restart.
"""

from __future__ import annotations

import threading
from typing import Iterable

from wallet_registry.models import RegistrationRecord
from wallet_registry.store.base import RegistrationStore


class InMemoryRegistrationStore(RegistrationStore):
    def __init__(self, records: Iterable[RegistrationRecord] = ()):
        self._records: list[RegistrationRecord] = list(records)
        self._lock = threading.Lock()

    def load(self) -> list[RegistrationRecord]:
        with self._lock:
            return list(self._records)

    def append(self, record: RegistrationRecord) -> None:
        with self._lock:
            self._records.append(record)

    def add_if_absent(self, record: RegistrationRecord) -> bool:
        with self._lock:
            if any(r.key == record.key for r in self._records):
                return False
            self._records.append(record)
            return True
