"""
Environment variable loading for Wallet Registry.

- REGISTRY_STORE: json | memory | sql (default: json)
- REGISTRATIONS_PATH: JSON store file (default: data/registrations.json)
- DATABASE_URL: SQLAlchemy URL for the sql store (default: sqlite:///registrations.db)
- API_HOST / API_PORT: bind address for `wallet-registry serve`
- REGISTRY_URL: base URL used by the registration client
- Loads .env from project root when available.
"""

from __future__ import annotations

import os
from pathlib import Path

# Project root: config is wallet_registry/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_PACKAGE_DIR = _CONFIG_DIR.parent
_ROOT = _PACKAGE_DIR.parent
_ENV_PATH = _ROOT / ".env"

STORE_BACKENDS = ("json", "memory", "sql")

DEFAULT_STORE_BACKEND = "json"
DEFAULT_REGISTRATIONS_PATH = "data/registrations.json"
DEFAULT_DATABASE_URL = "sqlite:///registrations.db"
DEFAULT_API_HOST = "0.0.0.0"
DEFAULT_API_PORT = 8000
DEFAULT_REGISTRY_URL = "http://localhost:8000"


def load_registry_env() -> None:
    """Load .env from project root. Safe to call multiple times; existing env vars win."""
    from dotenv import load_dotenv

    load_dotenv(_ENV_PATH, override=False)


def get_store_backend() -> str:
    """
    Return REGISTRY_STORE from env: json | memory | sql.
    Unknown values raise ValueError so a typo never silently drops records into memory.
    """
    load_registry_env()
    raw = (os.getenv("REGISTRY_STORE") or DEFAULT_STORE_BACKEND).strip().lower()
    if raw not in STORE_BACKENDS:
        raise ValueError(f"REGISTRY_STORE must be one of {', '.join(STORE_BACKENDS)}, got {raw!r}")
    return raw


def get_registrations_path() -> Path:
    load_registry_env()
    return Path((os.getenv("REGISTRATIONS_PATH") or "").strip() or DEFAULT_REGISTRATIONS_PATH)


def get_database_url() -> str:
    load_registry_env()
    return (os.getenv("DATABASE_URL") or "").strip() or DEFAULT_DATABASE_URL


def get_api_host() -> str:
    load_registry_env()
    return (os.getenv("API_HOST") or "").strip() or DEFAULT_API_HOST


def get_api_port() -> int:
    load_registry_env()
    raw = (os.getenv("API_PORT") or "").strip()
    return int(raw) if raw else DEFAULT_API_PORT


def get_registry_url() -> str:
    """Base URL of the registration API, without trailing slash."""
    load_registry_env()
    return ((os.getenv("REGISTRY_URL") or "").strip() or DEFAULT_REGISTRY_URL).rstrip("/")
