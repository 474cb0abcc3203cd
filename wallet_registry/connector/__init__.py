"""
Wallet connector — Python counterpart of the registration page.

Connects a wallet (EVM private key or a prompted Movement address), produces
the connection and registration signatures, and submits them with RegistrationClient.
"""

from wallet_registry.connector.client import RegistrationClient, RegistrationClientError
from wallet_registry.connector.wallets import (
    EvmWalletConnector,
    MovementWalletConnector,
    WalletConnection,
    register_with_connector,
)

__all__ = [
    "EvmWalletConnector",
    "MovementWalletConnector",
    "RegistrationClient",
    "RegistrationClientError",
    "WalletConnection",
    "register_with_connector",
]
