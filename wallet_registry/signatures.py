"""
Ownership proof for EVM wallets.

The browser signs two fixed messages with personal_sign (EIP-191): a connection
message embedding the address and a registration challenge. The server
recovers the signer of each and compares it to the claimed address.
"""

from __future__ import annotations

from eth_account import Account
from eth_account.messages import encode_defunct

from wallet_registry.core.exceptions import SignatureMismatchError, SignatureVerificationError
from wallet_registry.models import address_key, short_address
from wallet_registry.registry_logging import get_logger

logger = get_logger(__name__)

CONNECTION_MESSAGE_TEMPLATE = "I approve connecting my wallet {address} to this application."
REGISTRATION_CHALLENGE = "Please sign this message to verify wallet ownership for registration."


def connection_message(address: str) -> str:
    """Message signed when the wallet is connected; embeds the address exactly as the wallet reported it."""
    return CONNECTION_MESSAGE_TEMPLATE.format(address=address)


def recover_address(message: str, signature: str | None) -> str:
    """
    Return the checksummed address that signed `message` (personal_sign).

    Raises SignatureVerificationError when the signature is missing or cannot be decoded.
    """
    if not signature:
        raise SignatureVerificationError()
    try:
        return Account.recover_message(encode_defunct(text=message), signature=signature)
    except Exception as e:
        logger.warning("signature_recovery_failed", error=str(e))
        raise SignatureVerificationError() from e


def addresses_match(a: str, b: str) -> bool:
    return address_key(a) == address_key(b)


def verify_evm_ownership(
    address: str,
    connection_signature: str | None,
    registration_signature: str | None,
) -> None:
    """
    Check both signatures were produced by `address`.

    The connection signature is checked first; a mismatch raises
    SignatureMismatchError naming the signature that failed.
    """
    recovered = recover_address(connection_message(address), connection_signature)
    if not addresses_match(recovered, address):
        logger.info(
            "connection_signature_mismatch",
            address=short_address(address),
            recovered=short_address(recovered),
        )
        raise SignatureMismatchError("Connection signature verification failed.")

    recovered = recover_address(REGISTRATION_CHALLENGE, registration_signature)
    if not addresses_match(recovered, address):
        logger.info(
            "registration_signature_mismatch",
            address=short_address(address),
            recovered=short_address(recovered),
        )
        raise SignatureMismatchError("Registration signature verification failed.")
