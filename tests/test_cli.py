"""
Pytest tests for the wallet-registry command line.
"""

from __future__ import annotations

import json

from tests.conftest import PRIVATE_KEY
from wallet_registry import cli
from wallet_registry.models import RegistrationRecord, WalletType
from wallet_registry.store import JsonFileRegistrationStore


def test_list_prints_stored_records(monkeypatch, capsys, registrations_path):
    monkeypatch.setenv("REGISTRY_STORE", "json")
    monkeypatch.setenv("REGISTRATIONS_PATH", str(registrations_path))
    JsonFileRegistrationStore(registrations_path).append(
        RegistrationRecord(wallet_type=WalletType.EVM, address="0xAAA1", timestamp=5, verified=True)
    )
    assert cli.main(["list"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out == [{"walletType": "EVM", "address": "0xAAA1", "timestamp": 5, "verified": True}]


def test_register_requires_private_key(monkeypatch, capsys):
    monkeypatch.delenv("WALLET_PRIVATE_KEY", raising=False)
    assert cli.main(["register", "--wallet-type", "EVM"]) == 1
    assert "WALLET_PRIVATE_KEY" in capsys.readouterr().err


def _patch_client(monkeypatch, client):
    """Route the CLI's RegistrationClient through the in-process TestClient."""
    import wallet_registry.connector as connector

    real = connector.RegistrationClient
    monkeypatch.setattr(
        connector,
        "RegistrationClient",
        lambda url: real("http://testserver", http_client=client),
    )


def test_register_evm(monkeypatch, capsys, client, json_store, account):
    _patch_client(monkeypatch, client)
    monkeypatch.setenv("WALLET_PRIVATE_KEY", PRIVATE_KEY)
    assert cli.main(["register", "--wallet-type", "EVM"]) == 0
    assert capsys.readouterr().out.strip() == "Success: Wallet registered successfully."
    assert [r.address for r in json_store.load()] == [account.address]

    assert cli.main(["register", "--wallet-type", "EVM"]) == 1
    assert "Error: Wallet already registered." in capsys.readouterr().err


def test_register_movement(monkeypatch, capsys, client, json_store):
    _patch_client(monkeypatch, client)
    assert cli.main(["register", "--wallet-type", "Movement", "--address", "0xmove"]) == 0
    assert "(unverified)" in capsys.readouterr().out
    assert json_store.load()[0].verified is False


def test_register_server_unreachable(monkeypatch, capsys):
    """Connection failures print the connector's generic message instead of a traceback."""
    import httpx

    import wallet_registry.connector as connector

    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    real = connector.RegistrationClient
    monkeypatch.setattr(
        connector,
        "RegistrationClient",
        lambda url: real(url, http_client=httpx.Client(transport=httpx.MockTransport(refuse))),
    )
    assert cli.main(["register", "--wallet-type", "Movement", "--address", "0xmove", "--url", "http://down.local"]) == 1
    assert "Error registering wallet." in capsys.readouterr().err
