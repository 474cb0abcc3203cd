"""
Pytest tests for the Python wallet connector and RegistrationClient, run against
the in-process app (TestClient is an httpx.Client).
"""

from __future__ import annotations

import pytest

from tests.conftest import PRIVATE_KEY
from wallet_registry.connector import (
    EvmWalletConnector,
    MovementWalletConnector,
    RegistrationClient,
    RegistrationClientError,
    register_with_connector,
)
from wallet_registry.models import WalletType
from wallet_registry.signatures import REGISTRATION_CHALLENGE, connection_message, recover_address


@pytest.fixture
def registration_client(client):
    return RegistrationClient("http://testserver", http_client=client)


def test_evm_connector_signs_both_messages(account):
    connector = EvmWalletConnector.from_key(PRIVATE_KEY)
    connection = connector.connect()
    assert connection.wallet_type is WalletType.EVM
    assert connection.address == account.address
    assert recover_address(connection_message(account.address), connection.connection_signature) == account.address
    assert recover_address(REGISTRATION_CHALLENGE, connector.sign_registration()) == account.address


def test_register_with_evm_connector(registration_client, json_store, account):
    result = register_with_connector(registration_client, EvmWalletConnector(account))
    assert result == {"message": "Wallet registered successfully.", "verified": True}
    assert [r.address for r in json_store.load()] == [account.address]

    with pytest.raises(RegistrationClientError) as exc:
        register_with_connector(registration_client, EvmWalletConnector(account))
    assert exc.value.status_code == 409
    assert exc.value.message == "Wallet already registered."


def test_register_with_movement_connector(registration_client, json_store):
    prompts: list[str] = []

    def prompt(text: str) -> str:
        prompts.append(text)
        return "  0xmovement  "

    result = register_with_connector(registration_client, MovementWalletConnector(prompt=prompt))
    assert result["verified"] is False
    assert prompts == ["Enter your Movement wallet address: "]
    assert json_store.load()[0].address == "0xmovement"


def test_movement_connector_requires_address():
    with pytest.raises(ValueError, match="No Movement wallet address"):
        MovementWalletConnector(prompt=lambda _: "").connect()


def test_client_error_carries_server_message(registration_client):
    with pytest.raises(RegistrationClientError) as exc:
        registration_client.register("EVM", "")
    assert exc.value.status_code == 400
    assert str(exc.value) == "Missing required fields."


def test_client_health(registration_client):
    assert registration_client.health() == {"status": "ok"}
