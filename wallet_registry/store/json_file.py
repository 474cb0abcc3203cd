"""
Flat-file store: one JSON array of registration records.

The whole file is read on every load and rewritten on every write
(load -> append -> overwrite), pretty-printed with 2-space indentation.

An absent or undecodable file loads as an empty list; the two cases are
logged differently so corruption is visible in the logs. Before the first
write over an undecodable file, it is moved aside to `<name>.corrupt`.

Entries are validated one by one. An entry that does not fit
RegistrationRecord (e.g. walletType "evm") is logged with its index, left
out of load(), and written back unchanged on the next rewrite; its address
still counts for the duplicate check.
"""

from __future__ import annotations

import json
import threading
from pathlib import Path
from typing import Any, Union

from pydantic import ValidationError

from wallet_registry.models import RegistrationRecord, address_key, short_address
from wallet_registry.registry_logging import get_logger
from wallet_registry.store.base import RegistrationStore

logger = get_logger(__name__)

# A file entry: a validated record, or the raw JSON value kept as-is
_Entry = Union[RegistrationRecord, Any]


def _first_line(e: Exception) -> str:
    text = str(e)
    return text.splitlines()[0] if text else type(e).__name__


def _entry_key(entry: _Entry) -> str | None:
    if isinstance(entry, RegistrationRecord):
        return entry.key
    if isinstance(entry, dict) and isinstance(entry.get("address"), str) and entry["address"].strip():
        return address_key(entry["address"])
    return None


class JsonFileRegistrationStore(RegistrationStore):
    def __init__(self, path: Path | str):
        self.path = Path(path)
        # Guards check-and-append within this process only; other processes sharing the file are not serialized.
        self._lock = threading.Lock()

    @property
    def corrupt_path(self) -> Path:
        return self.path.with_name(self.path.name + ".corrupt")

    def _read_entries(self) -> tuple[list[_Entry], bool]:
        """Return (entries, decodable). decodable is False when the file exists but is not a JSON array."""
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError:
            logger.debug("registrations_store_missing", path=str(self.path))
            return [], True
        except OSError as e:
            logger.warning("registrations_store_unreadable", path=str(self.path), error=str(e))
            return [], False
        try:
            data = json.loads(raw.decode("utf-8"))
        except ValueError as e:
            logger.warning("registrations_store_unreadable", path=str(self.path), error=_first_line(e))
            return [], False
        if not isinstance(data, list):
            logger.warning(
                "registrations_store_unreadable",
                path=str(self.path),
                error=f"expected a JSON array, got {type(data).__name__}",
            )
            return [], False

        entries: list[_Entry] = []
        for index, item in enumerate(data):
            try:
                entries.append(RegistrationRecord.model_validate(item))
            except ValidationError as e:
                logger.warning(
                    "registrations_store_entry_rejected",
                    path=str(self.path),
                    index=index,
                    error=_first_line(e),
                )
                entries.append(item)
        return entries, True

    def load(self) -> list[RegistrationRecord]:
        entries, _ = self._read_entries()
        return [e for e in entries if isinstance(e, RegistrationRecord)]

    def _write(self, entries: list[_Entry], decodable: bool) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        if not decodable and self.path.exists():
            self.path.replace(self.corrupt_path)
            logger.warning("registrations_store_moved_aside", path=str(self.path), backup=str(self.corrupt_path))
        payload = [e.to_json_dict() if isinstance(e, RegistrationRecord) else e for e in entries]
        self.path.write_text(json.dumps(payload, indent=2), encoding="utf-8")

    def append(self, record: RegistrationRecord) -> None:
        with self._lock:
            entries, decodable = self._read_entries()
            entries.append(record)
            self._write(entries, decodable)
        logger.debug("registrations_store_written", path=str(self.path), count=len(entries))

    def add_if_absent(self, record: RegistrationRecord) -> bool:
        with self._lock:
            entries, decodable = self._read_entries()
            if any(_entry_key(e) == record.key for e in entries):
                return False
            entries.append(record)
            self._write(entries, decodable)
        logger.debug(
            "registrations_store_written",
            path=str(self.path),
            count=len(entries),
            address=short_address(record.address),
        )
        return True
