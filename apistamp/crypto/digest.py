"""Payload digests for API stamps."""

import hashlib

from ..types.common import PayloadHash
from ..utils.encoding import text_to_bytes

__all__ = ["digest", "digest_bytes"]


def digest_bytes(payload: str) -> bytes:
    """
    Hash a payload with SHA-256.

    Args:
        payload: Text to hash; encoded as UTF-8 first

    Returns:
        32-byte digest
    """
    return hashlib.sha256(text_to_bytes(payload)).digest()


def digest(payload: str) -> PayloadHash:
    """Return the SHA-256 digest of a payload as 64 lowercase hex characters."""
    return PayloadHash(digest_bytes(payload).hex())
