"""Validation utilities for API key material."""

import re
from typing import Union

from ..constants import P256_ORDER, PRIVATE_KEY_BYTES, PUBLIC_KEY_BYTES, DIGEST_BYTES
from ..exceptions import InvalidKeyMaterial, ValidationError

__all__ = [
    "is_valid_private_key",
    "validate_private_key",
    "is_valid_public_key",
    "validate_public_key",
    "is_valid_payload_hash",
    "validate_payload_hash",
]

HEX_PATTERN = re.compile(r"[0-9a-fA-F]*")
PAYLOAD_HASH_PATTERN = re.compile(r"[0-9a-f]{64}")


def _key_to_bytes(key: Union[str, bytes], label: str) -> bytes:
    if isinstance(key, (bytes, bytearray)):
        return bytes(key)
    if not isinstance(key, str):
        raise InvalidKeyMaterial(f"{label} must be a hex string, got {type(key).__name__}")
    if not key:
        raise InvalidKeyMaterial(f"{label} is empty")
    if not HEX_PATTERN.fullmatch(key) or len(key) % 2:
        raise InvalidKeyMaterial(f"{label} must be hexadecimal")
    return bytes.fromhex(key)


def is_valid_private_key(key: Union[str, bytes]) -> bool:
    """
    Check if private key format is valid.

    Args:
        key: Private key as hex string or bytes

    Returns:
        True if valid, False otherwise
    """
    try:
        validate_private_key(key)
        return True
    except ValidationError:
        return False


def validate_private_key(key: Union[str, bytes]) -> bytes:
    """
    Validate a P-256 private key and return it as bytes.

    Args:
        key: Private key as 64-char hex string or 32 bytes

    Returns:
        Private key as 32 bytes

    Raises:
        InvalidKeyMaterial: If the key is empty, not hex, the wrong length,
            zero, or not below the curve order
    """
    key = _key_to_bytes(key, "Private key")

    if len(key) != PRIVATE_KEY_BYTES:
        raise InvalidKeyMaterial(f"Private key must be {PRIVATE_KEY_BYTES} bytes, got {len(key)}")

    key_int = int.from_bytes(key, "big")
    if key_int == 0:
        raise InvalidKeyMaterial("Private key cannot be zero")
    if key_int >= P256_ORDER:
        raise InvalidKeyMaterial("Private key exceeds curve order")

    return key


def is_valid_public_key(key: Union[str, bytes]) -> bool:
    """Check if a compressed public key has a valid format."""
    try:
        validate_public_key(key)
        return True
    except ValidationError:
        return False


def validate_public_key(key: Union[str, bytes]) -> bytes:
    """
    Validate a compressed public key's encoding and return it as bytes.

    Only the length and prefix are checked here; whether the point lies on
    the curve is checked when the key is loaded.

    Args:
        key: Public key as 66-char hex string or 33 bytes

    Returns:
        Public key as 33 bytes

    Raises:
        InvalidKeyMaterial: If the key format is invalid
    """
    key = _key_to_bytes(key, "Public key")

    if len(key) != PUBLIC_KEY_BYTES:
        raise InvalidKeyMaterial(f"Public key must be {PUBLIC_KEY_BYTES} bytes, got {len(key)}")
    if key[0] not in (0x02, 0x03):
        raise InvalidKeyMaterial("Compressed public key must start with 0x02 or 0x03")

    return key


def is_valid_payload_hash(payload_hash: str) -> bool:
    """Check if a string is a lowercase 64-char SHA-256 hex digest."""
    return isinstance(payload_hash, str) and bool(PAYLOAD_HASH_PATTERN.fullmatch(payload_hash))


def validate_payload_hash(payload_hash: Union[str, bytes]) -> bytes:
    """
    Validate a payload digest and return its raw bytes.

    Raises:
        ValidationError: If the digest is not 32 bytes / 64 lowercase hex chars
    """
    if isinstance(payload_hash, (bytes, bytearray)):
        if len(payload_hash) != DIGEST_BYTES:
            raise ValidationError(f"Payload hash must be {DIGEST_BYTES} bytes, got {len(payload_hash)}")
        return bytes(payload_hash)
    if not is_valid_payload_hash(payload_hash):
        raise ValidationError(f"Invalid payload hash: {payload_hash!r}")
    return bytes.fromhex(payload_hash)
