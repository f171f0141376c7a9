"""Protocol constants for API key stamping."""

__all__ = [
    "P256_ORDER",
    "P256_HALF_ORDER",
    "SIGNATURE_SCHEME",
    "TEXT_ENCODING",
    "PRIVATE_KEY_BYTES",
    "PUBLIC_KEY_BYTES",
    "DIGEST_BYTES",
    "CHALLENGE_BYTES",
    "ENV_PREFIX",
]


# NIST P-256 (secp256r1) group order
P256_ORDER = 0xFFFFFFFF00000000FFFFFFFFFFFFFFFFBCE6FAADA7179E84F3B9CAC2FC632551
P256_HALF_ORDER = P256_ORDER // 2

SIGNATURE_SCHEME = "SIGNATURE_SCHEME_TK_API_P256"

# Payloads and envelopes are always turned into bytes with this encoding
TEXT_ENCODING = "utf-8"

PRIVATE_KEY_BYTES = 32
PUBLIC_KEY_BYTES = 33
DIGEST_BYTES = 32
CHALLENGE_BYTES = 32

ENV_PREFIX = "APISTAMP_"
