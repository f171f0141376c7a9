"""ECDSA signature utilities for API stamps."""

import logging
from typing import Tuple, Union

from ..constants import P256_HALF_ORDER, P256_ORDER
from ..crypto.keys import PrivateKey, PublicKey
from ..exceptions import CryptoError
from ..types.common import DerSignature
from ..utils.validation import validate_payload_hash

__all__ = [
    "sign_digest",
    "verify_digest",
    "parse_der_signature",
    "encode_der_signature",
    "normalize_s",
    "is_low_s",
]

logger = logging.getLogger(__name__)


def normalize_s(s: int) -> int:
    """Return the low-S form of an ECDSA ``s`` value."""
    return P256_ORDER - s if s > P256_HALF_ORDER else s


def is_low_s(s: int) -> bool:
    """Check whether ``s`` lies in the lower half of the curve order."""
    return 0 < s <= P256_HALF_ORDER


def sign_digest(
    private_key: PrivateKey,
    message_hash: Union[str, bytes],
    deterministic: bool = True
) -> DerSignature:
    """
    Sign a payload digest.

    Args:
        private_key: Private key to sign with
        message_hash: 32-byte digest or its 64-char hex form
        deterministic: Use RFC 6979 deterministic nonces

    Returns:
        DER-encoded low-S signature

    Raises:
        SigningFailure: If signing fails
    """
    hash_bytes = validate_payload_hash(message_hash)
    r, s = private_key.sign(hash_bytes, deterministic=deterministic)
    return DerSignature(encode_der_signature(r, normalize_s(s)))


def verify_digest(
    public_key: PublicKey,
    message_hash: Union[str, bytes],
    signature: bytes,
    require_low_s: bool = True
) -> bool:
    """
    Verify a DER signature over a payload digest.

    Args:
        public_key: Public key the signature should belong to
        message_hash: 32-byte digest or its 64-char hex form
        signature: DER-encoded signature
        require_low_s: Reject signatures whose s is in the upper half

    Returns:
        True if signature is valid
    """
    hash_bytes = validate_payload_hash(message_hash)
    try:
        r, s = parse_der_signature(signature)
    except CryptoError as e:
        logger.debug(f"Rejecting malformed signature: {e}")
        return False

    if not (0 < r < P256_ORDER and 0 < s < P256_ORDER):
        return False
    if require_low_s and not is_low_s(s):
        return False

    return public_key.verify(bytes(signature), hash_bytes)


def parse_der_signature(signature: bytes) -> Tuple[int, int]:
    """
    Parse DER-encoded signature.

    Args:
        signature: DER-encoded ``SEQUENCE { INTEGER r, INTEGER s }``

    Returns:
        Tuple of (r, s)

    Raises:
        CryptoError: If signature format is invalid
    """
    try:
        if signature[0] != 0x30:
            raise ValueError("missing sequence tag")

        length = signature[1]
        if length & 0x80 or length + 2 != len(signature):
            raise ValueError("incorrect length")

        r, offset = _parse_der_integer(signature, 2)
        s, offset = _parse_der_integer(signature, offset)
        if r == 0 or s == 0:
            raise ValueError("zero integer")

        if offset != len(signature):
            raise ValueError("trailing bytes")

        return r, s

    except (IndexError, ValueError) as e:
        raise CryptoError(f"Invalid DER signature: {e}") from e


def _parse_der_integer(data: bytes, offset: int) -> Tuple[int, int]:
    if data[offset] != 0x02:
        raise ValueError("missing integer tag")

    length = data[offset + 1]
    if length == 0 or length & 0x80:
        raise ValueError("invalid integer length")

    start = offset + 2
    end = start + length
    if end > len(data):
        raise ValueError("integer exceeds signature")

    value = data[start:end]
    if value[0] & 0x80:
        raise ValueError("negative integer")
    if length > 1 and value[0] == 0x00 and not value[1] & 0x80:
        raise ValueError("non-minimal integer encoding")

    return int.from_bytes(value, "big"), end


def encode_der_signature(r: int, s: int) -> bytes:
    """
    Encode signature as DER.

    Args:
        r: Signature r value
        s: Signature s value

    Returns:
        DER-encoded signature
    """
    sequence = _encode_der_integer(r) + _encode_der_integer(s)
    return b"\x30" + bytes([len(sequence)]) + sequence


def _encode_der_integer(value: int) -> bytes:
    if value < 0:
        raise CryptoError("DER integers must be non-negative")
    value_bytes = value.to_bytes(max(1, (value.bit_length() + 7) // 8), "big")
    if value_bytes[0] & 0x80:
        value_bytes = b"\x00" + value_bytes
    return b"\x02" + bytes([len(value_bytes)]) + value_bytes
