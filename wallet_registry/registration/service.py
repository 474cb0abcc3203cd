"""
Registration service — the whole POST /register flow, independent of HTTP.

Steps, in order:
1. walletType and address must be present (400), walletType must be known (400).
   The address is stored and verified with surrounding whitespace removed.
2. EVM: both signatures must recover to the claimed address (401 / 500).
   Movement: no proof is available; the record is stored with verified=False.
3-4. store.add_if_absent: duplicate address (any case) -> 409, else appended.

Failures are raised as RegistrationError subclasses; the API maps them to responses.
"""

from __future__ import annotations

import time
from dataclasses import dataclass

from wallet_registry.core.exceptions import (
    AlreadyRegisteredError,
    MissingFieldsError,
    UnsupportedWalletTypeError,
)
from wallet_registry.models import RegisterRequest, RegistrationRecord, WalletType, short_address
from wallet_registry.registry_logging import get_logger
from wallet_registry.signatures import verify_evm_ownership
from wallet_registry.store.base import RegistrationStore

logger = get_logger(__name__)

SUCCESS_MESSAGE = "Wallet registered successfully."
UNVERIFIED_SUCCESS_MESSAGE = "Wallet registered successfully (unverified)."


@dataclass(frozen=True)
class RegistrationOutcome:
    record: RegistrationRecord
    message: str

    @property
    def verified(self) -> bool:
        return self.record.verified


def _now_ms() -> int:
    return int(time.time() * 1000)


def _parse_wallet_type(raw: str) -> WalletType:
    try:
        return WalletType(raw)
    except ValueError:
        raise UnsupportedWalletTypeError() from None


def register_wallet(
    request: RegisterRequest,
    store: RegistrationStore,
    now_ms: int | None = None,
) -> RegistrationOutcome:
    """Validate, verify and store one registration. Raises RegistrationError on any rejection."""
    if not request.walletType or not (request.address or "").strip():
        raise MissingFieldsError()
    wallet_type = _parse_wallet_type(request.walletType)
    address = request.address.strip()

    if wallet_type is WalletType.EVM:
        verify_evm_ownership(address, request.connectionSignature, request.registrationSignature)
        verified = True
    else:
        # TODO: verify Movement (Aptos-style ed25519) signatures once the wallet adapter is integrated.
        logger.warning("movement_registration_unverified", address=short_address(address))
        verified = False

    record = RegistrationRecord(
        wallet_type=wallet_type,
        address=address,
        timestamp=now_ms if now_ms is not None else _now_ms(),
        verified=verified,
    )
    if not store.add_if_absent(record):
        logger.info("wallet_already_registered", address=short_address(address))
        raise AlreadyRegisteredError()

    logger.info(
        "wallet_registered",
        address=short_address(address),
        wallet_type=wallet_type.value,
        verified=verified,
    )
    return RegistrationOutcome(
        record=record,
        message=SUCCESS_MESSAGE if verified else UNVERIFIED_SUCCESS_MESSAGE,
    )
