"""
Wallet Registry API client.

Uses httpx. Pass http_client to reuse a session or to target an in-process
app (fastapi.testclient.TestClient is an httpx.Client).

Usage:
    client = RegistrationClient("http://localhost:8000")
    client.register("EVM", address, connection_signature, registration_signature)
"""

from __future__ import annotations

from typing import Any

import httpx


class RegistrationClientError(Exception):
    """Raised when the API returns an error response; message is the server's message verbatim."""

    def __init__(self, message: str, status_code: int | None = None, response: httpx.Response | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response = response


class RegistrationClient:
    """Client for the wallet registration API."""

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        timeout: float = 30.0,
        http_client: httpx.Client | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._http = http_client or httpx.Client(timeout=timeout)
        self._owns_http = http_client is None

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "RegistrationClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _request(self, method: str, path: str, *, json: dict[str, Any] | None = None) -> httpx.Response:
        url = f"{self.base_url}{path}"
        resp = self._http.request(method, url, json=json)
        if resp.is_error:
            if resp.headers.get("content-type", "").startswith("application/json"):
                message = resp.json().get("message", resp.text)
            else:
                message = resp.text
            raise RegistrationClientError(message, status_code=resp.status_code, response=resp)
        return resp

    def register(
        self,
        wallet_type: str,
        address: str,
        connection_signature: str = "",
        registration_signature: str = "",
    ) -> dict[str, Any]:
        """POST /register. Returns {"message": ..., "verified": ...}."""
        body = {
            "walletType": wallet_type,
            "address": address,
            "connectionSignature": connection_signature,
            "registrationSignature": registration_signature,
        }
        return self._request("POST", "/register", json=body).json()

    def health(self) -> dict[str, str]:
        """Liveness probe."""
        return self._request("GET", "/health").json()
