"""
Registration data model and request/response schemas.

RegistrationRecord is the only persisted entity. It serializes with the
camelCase keys used on the wire and in the JSON store:
{"walletType": "EVM", "address": "0x...", "timestamp": 1700000000000, "verified": true}
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class WalletType(str, Enum):
    EVM = "EVM"
    MOVEMENT = "Movement"


def address_key(address: str) -> str:
    """Comparison key for an address; all address matching is case-insensitive."""
    return address.strip().lower()


def short_address(address: str) -> str:
    """Truncated address for log fields."""
    return address[:10] + "..." if len(address) > 10 else address


class RegistrationRecord(BaseModel):
    """One registered wallet. Created once by POST /register; never updated or deleted."""

    model_config = ConfigDict(populate_by_name=True)

    wallet_type: WalletType = Field(..., alias="walletType", description="EVM or Movement")
    address: str = Field(..., min_length=1, description="Address exactly as submitted")
    timestamp: int = Field(..., ge=0, description="Creation time, ms since epoch")
    verified: bool = Field(
        False,
        description="True when ownership was proven by signatures; False for unverified (Movement) registrations",
    )

    @property
    def key(self) -> str:
        return address_key(self.address)

    def to_json_dict(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")


class RegisterRequest(BaseModel):
    """
    POST /register body. Every field is optional here; the registration
    service decides which are required so missing fields map to one 400 message.
    """

    model_config = ConfigDict(extra="ignore")

    walletType: str | None = None
    address: str | None = None
    connectionSignature: str | None = None
    registrationSignature: str | None = None


class MessageResponse(BaseModel):
    """Every POST /register response: a human-readable message, plus verification status on success."""

    message: str
    verified: bool | None = None
