"""
Registration flow: shape validation, ownership verification, duplicate check, append.
"""

from wallet_registry.registration.service import (
    SUCCESS_MESSAGE,
    UNVERIFIED_SUCCESS_MESSAGE,
    RegistrationOutcome,
    register_wallet,
)

__all__ = [
    "SUCCESS_MESSAGE",
    "UNVERIFIED_SUCCESS_MESSAGE",
    "RegistrationOutcome",
    "register_wallet",
]
