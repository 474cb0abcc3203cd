"""
Pytest tests for environment-driven settings and store selection.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from wallet_registry.config import get_settings
from wallet_registry.store import (
    InMemoryRegistrationStore,
    JsonFileRegistrationStore,
    SqlRegistrationStore,
    build_store,
)

_ENV_VARS = ("REGISTRY_STORE", "REGISTRATIONS_PATH", "DATABASE_URL", "API_HOST", "API_PORT", "REGISTRY_URL")


@pytest.fixture
def clean_env(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = get_settings()
    assert settings.store_backend == "json"
    assert settings.registrations_path == Path("data/registrations.json")
    assert settings.database_url == "sqlite:///registrations.db"
    assert settings.api_host == "0.0.0.0"
    assert settings.api_port == 8000
    assert settings.registry_url == "http://localhost:8000"


def test_env_overrides(clean_env, tmp_path):
    clean_env.setenv("REGISTRY_STORE", " SQL ")
    clean_env.setenv("REGISTRATIONS_PATH", str(tmp_path / "r.json"))
    clean_env.setenv("API_PORT", "9001")
    clean_env.setenv("REGISTRY_URL", "http://registry.local:9001/")
    settings = get_settings()
    assert settings.store_backend == "sql"
    assert settings.registrations_path == tmp_path / "r.json"
    assert settings.api_port == 9001
    assert settings.registry_url == "http://registry.local:9001"


def test_unknown_store_backend_rejected(clean_env):
    clean_env.setenv("REGISTRY_STORE", "redis")
    with pytest.raises(ValueError, match="REGISTRY_STORE"):
        get_settings()


def test_build_store_per_backend(clean_env, tmp_path):
    clean_env.setenv("REGISTRATIONS_PATH", str(tmp_path / "r.json"))
    clean_env.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'r.db'}")

    assert isinstance(build_store(get_settings()), JsonFileRegistrationStore)

    clean_env.setenv("REGISTRY_STORE", "memory")
    assert isinstance(build_store(get_settings()), InMemoryRegistrationStore)

    clean_env.setenv("REGISTRY_STORE", "sql")
    store = build_store(get_settings())
    assert isinstance(store, SqlRegistrationStore)
    assert store.load() == []
    store.dispose()
