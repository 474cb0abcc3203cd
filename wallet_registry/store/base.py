"""
Store contract shared by every backend.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from wallet_registry.models import RegistrationRecord, address_key


class RegistrationStore(ABC):
    """
    Ordered sequence of registration records (insertion order).

    add_if_absent is the operation the registration flow uses: it performs
    the duplicate check and the append as one step so two concurrent
    requests for the same address cannot both succeed.
    """

    @abstractmethod
    def load(self) -> list[RegistrationRecord]:
        """Return all records in insertion order."""

    @abstractmethod
    def append(self, record: RegistrationRecord) -> None:
        """Add one record at the end of the sequence."""

    @abstractmethod
    def add_if_absent(self, record: RegistrationRecord) -> bool:
        """Append `record` unless its address is already stored. Returns True if appended."""

    def find(self, address: str) -> RegistrationRecord | None:
        key = address_key(address)
        for record in self.load():
            if record.key == key:
                return record
        return None
