"""
Application-level exceptions.

Each registration failure carries the HTTP status code and the message the
API returns verbatim as {"message": ...}.
"""

from __future__ import annotations


class RegistrationError(Exception):
    """Base class for failures surfaced to the caller of POST /register."""

    status_code = 500
    default_message = "Server error."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingFieldsError(RegistrationError):
    status_code = 400
    default_message = "Missing required fields."


class UnsupportedWalletTypeError(RegistrationError):
    status_code = 400
    default_message = "Unsupported wallet type."


class SignatureMismatchError(RegistrationError):
    """Recovered signer differs from the claimed address."""

    status_code = 401
    default_message = "Signature verification failed."


class SignatureVerificationError(RegistrationError):
    """Signature missing or malformed; recovery itself failed."""

    status_code = 500
    default_message = "Error verifying signatures."


class AlreadyRegisteredError(RegistrationError):
    status_code = 409
    default_message = "Wallet already registered."
