"""Type definitions for API stamping."""

# Common types
from ..types.common import (
    HexStr,
    Base64UrlStr,
    PrivateKeyHex,
    PublicKeyHex,
    PrivateKeyBytes,
    PublicKeyBytes,
    PayloadHash,
    DerSignature,
    RandomSource,
)

# Stamp types
from ..types.stamp import (
    KeyPair,
    SignatureEnvelope,
    SignatureDetails,
    SignatureResult,
)

__all__ = [
    # Common
    "HexStr",
    "Base64UrlStr",
    "PrivateKeyHex",
    "PublicKeyHex",
    "PrivateKeyBytes",
    "PublicKeyBytes",
    "PayloadHash",
    "DerSignature",
    "RandomSource",

    # Stamp
    "KeyPair",
    "SignatureEnvelope",
    "SignatureDetails",
    "SignatureResult",
]
