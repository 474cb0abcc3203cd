"""
HTML pages: landing page and the registration page (browser-side wallet connector).

The registration page's script signs the same messages the server verifies;
they are injected from wallet_registry.signatures when the page is rendered.
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path

from wallet_registry.signatures import CONNECTION_MESSAGE_TEMPLATE, REGISTRATION_CHALLENGE

STATIC_DIR = Path(__file__).resolve().parent / "static"


@lru_cache(maxsize=None)
def _read_page(name: str) -> str:
    return (STATIC_DIR / name).read_text(encoding="utf-8")


def render_index() -> str:
    return _read_page("index.html")


def render_register() -> str:
    html = _read_page("register.html")
    html = html.replace("__CONNECTION_MESSAGE_TEMPLATE__", json.dumps(CONNECTION_MESSAGE_TEMPLATE))
    html = html.replace("__REGISTRATION_CHALLENGE__", json.dumps(REGISTRATION_CHALLENGE))
    return html
