"""Cryptographic primitives for API stamps."""

from ..crypto.digest import digest, digest_bytes
from ..crypto.keys import PrivateKey, PublicKey, generate_key_pair, random_bytes, secure_random
from ..crypto.signature import (
    sign_digest,
    verify_digest,
    parse_der_signature,
    encode_der_signature,
    normalize_s,
    is_low_s,
)

__all__ = [
    # Digest
    "digest",
    "digest_bytes",

    # Keys
    "PrivateKey",
    "PublicKey",
    "generate_key_pair",
    "secure_random",
    "random_bytes",

    # Signatures
    "sign_digest",
    "verify_digest",
    "parse_der_signature",
    "encode_der_signature",
    "normalize_s",
    "is_low_s",
]
