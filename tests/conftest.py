"""
Pytest fixtures for Wallet Registry tests. Uses a temporary JSON store file
and real eth_account keys; nothing cryptographic is mocked.
"""

from __future__ import annotations

import pytest
from eth_account import Account
from eth_account.messages import encode_defunct

# Well-known throwaway test keys; never fund these.
PRIVATE_KEY = "0x4c0883a69102937d6231471b5dbb6204fe5129617082792ae468d01a3f362318"
OTHER_PRIVATE_KEY = "0x8da4ef21b864d2cc526dbdb2a120bd2874c36c9d0a1fb7f8c63d7f7a8b41de8f"


def sign_text(account, text: str) -> str:
    """personal_sign equivalent: 0x-prefixed 65-byte signature hex."""
    return "0x" + bytes(account.sign_message(encode_defunct(text=text)).signature).hex()


@pytest.fixture
def account():
    return Account.from_key(PRIVATE_KEY)


@pytest.fixture
def other_account():
    return Account.from_key(OTHER_PRIVATE_KEY)


@pytest.fixture
def registrations_path(tmp_path):
    return tmp_path / "data" / "registrations.json"


@pytest.fixture
def json_store(registrations_path):
    from wallet_registry.store import JsonFileRegistrationStore

    return JsonFileRegistrationStore(registrations_path)


@pytest.fixture
def app(json_store):
    from wallet_registry.api_server.server import create_app

    return create_app(store=json_store)


@pytest.fixture
def client(app):
    """FastAPI TestClient over an app whose store is the temporary JSON file."""
    from fastapi.testclient import TestClient

    return TestClient(app)


@pytest.fixture
def evm_body(account):
    """Valid EVM registration body for `account`."""
    from wallet_registry.signatures import REGISTRATION_CHALLENGE, connection_message

    return {
        "walletType": "EVM",
        "address": account.address,
        "connectionSignature": sign_text(account, connection_message(account.address)),
        "registrationSignature": sign_text(account, REGISTRATION_CHALLENGE),
    }
