"""
Wallet connectors.

EvmWalletConnector signs with a local eth_account key exactly as a browser
wallet does with personal_sign. MovementWalletConnector only asks for an
address: there is no ownership proof for Movement wallets yet.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from eth_account import Account
from eth_account.messages import encode_defunct
from eth_account.signers.local import LocalAccount

from wallet_registry.connector.client import RegistrationClient
from wallet_registry.models import WalletType
from wallet_registry.signatures import REGISTRATION_CHALLENGE, connection_message


@dataclass(frozen=True)
class WalletConnection:
    wallet_type: WalletType
    address: str
    connection_signature: str = ""


def _sign_text(account: LocalAccount, text: str) -> str:
    signed = account.sign_message(encode_defunct(text=text))
    return "0x" + bytes(signed.signature).hex()


class EvmWalletConnector:
    wallet_type = WalletType.EVM

    def __init__(self, account: LocalAccount):
        self.account = account

    @classmethod
    def from_key(cls, private_key: str) -> "EvmWalletConnector":
        return cls(Account.from_key(private_key))

    def connect(self) -> WalletConnection:
        """Reveal the address and sign the connection message."""
        address = self.account.address
        return WalletConnection(
            wallet_type=self.wallet_type,
            address=address,
            connection_signature=_sign_text(self.account, connection_message(address)),
        )

    def sign_registration(self) -> str:
        return _sign_text(self.account, REGISTRATION_CHALLENGE)


class MovementWalletConnector:
    """Placeholder: the address comes from `prompt` and is not proven."""

    wallet_type = WalletType.MOVEMENT

    def __init__(self, prompt: Callable[[str], str] = input):
        self._prompt = prompt

    def connect(self) -> WalletConnection:
        address = (self._prompt("Enter your Movement wallet address: ") or "").strip()
        if not address:
            raise ValueError("No Movement wallet address entered")
        return WalletConnection(wallet_type=self.wallet_type, address=address)

    def sign_registration(self) -> str:
        return ""


def register_with_connector(
    client: RegistrationClient,
    connector: EvmWalletConnector | MovementWalletConnector,
) -> dict[str, Any]:
    """Connect, sign the registration challenge, and submit."""
    connection = connector.connect()
    return client.register(
        connection.wallet_type.value,
        connection.address,
        connection_signature=connection.connection_signature,
        registration_signature=connector.sign_registration(),
    )
