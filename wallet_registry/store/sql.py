"""
SQLAlchemy-backed store.

Uses DATABASE_URL (PostgreSQL or any SQLAlchemy URL); SQLite by default.
A unique constraint on the lower-cased address enforces one record per
address, so add_if_absent is a single insert whose IntegrityError means
"already registered".
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Any, Iterator

from sqlalchemy import BigInteger, Boolean, Column, Integer, String, create_engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from wallet_registry.core.exceptions import AlreadyRegisteredError
from wallet_registry.models import RegistrationRecord, WalletType, address_key, short_address
from wallet_registry.registry_logging import get_logger
from wallet_registry.store.base import RegistrationStore

logger = get_logger(__name__)

Base = declarative_base()


class Registration(Base):
    """One row per registered wallet; id preserves insertion order."""

    __tablename__ = "registrations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    wallet_type = Column(String(16), nullable=False)
    address = Column(String(128), nullable=False)
    address_key = Column(String(128), unique=True, nullable=False, index=True)
    timestamp = Column(BigInteger, nullable=False)  # ms since epoch
    verified = Column(Boolean, nullable=False, default=False)

    def to_record(self) -> RegistrationRecord:
        return RegistrationRecord(
            wallet_type=WalletType(self.wallet_type),
            address=self.address,
            timestamp=self.timestamp,
            verified=bool(self.verified),
        )

    @classmethod
    def from_record(cls, record: RegistrationRecord) -> "Registration":
        return cls(
            wallet_type=record.wallet_type.value,
            address=record.address,
            address_key=record.key,
            timestamp=record.timestamp,
            verified=record.verified,
        )


def _ensure_sqlite_dir(url: str) -> None:
    """Create the parent directory of a file-based SQLite URL."""
    if not url.startswith("sqlite:///"):
        return
    path = url.replace("sqlite:///", "", 1).split("?")[0]
    if not path or path == ":memory:":
        return
    parent = os.path.dirname(os.path.abspath(path))
    if parent and not os.path.exists(parent):
        os.makedirs(parent, exist_ok=True)


class SqlRegistrationStore(RegistrationStore):
    def __init__(self, url: str):
        self.url = url
        connect_args: dict[str, Any] = {}
        if url.startswith("sqlite"):
            connect_args["check_same_thread"] = False
            _ensure_sqlite_dir(url)
        self._engine = create_engine(url, connect_args=connect_args, pool_pre_ping=True)
        self._session_factory = sessionmaker(autocommit=False, autoflush=False, bind=self._engine)
        self.init_db()

    def init_db(self) -> None:
        """Create the registrations table if it does not exist. Safe to call on every startup."""
        try:
            Base.metadata.create_all(bind=self._engine)
            logger.info("registrations_db_ready", url=self.url.split("?")[0].split("//")[-1])
        except Exception as e:
            logger.exception("registrations_db_init_failed", error=str(e))
            raise

    @contextmanager
    def _session_scope(self) -> Iterator[Session]:
        """Commits on success, rolls back on error."""
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def load(self) -> list[RegistrationRecord]:
        with self._session_scope() as session:
            rows = session.query(Registration).order_by(Registration.id).all()
            return [r.to_record() for r in rows]

    def find(self, address: str) -> RegistrationRecord | None:
        key = address_key(address)
        with self._session_scope() as session:
            row = session.query(Registration).filter(Registration.address_key == key).first()
            return row.to_record() if row else None

    def add_if_absent(self, record: RegistrationRecord) -> bool:
        try:
            with self._session_scope() as session:
                session.add(Registration.from_record(record))
                session.flush()
        except IntegrityError:
            logger.info("registration_already_exists", address=short_address(record.address))
            return False
        return True

    def append(self, record: RegistrationRecord) -> None:
        """Insert `record`. Raises AlreadyRegisteredError if the address is already stored."""
        if not self.add_if_absent(record):
            raise AlreadyRegisteredError()

    def dispose(self) -> None:
        self._engine.dispose()
