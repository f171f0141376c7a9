"""
API Stamp Python Library

Signs request payloads with a P-256 API key pair so a backend can verify
possession of the private key, and mints new key pairs.
"""

from .config import StamperConfig
from .constants import SIGNATURE_SCHEME
from .exceptions import (
    StampError,
    ValidationError,
    InvalidKeyMaterial,
    CryptoError,
    KeyMismatch,
    SigningFailure,
    RandomnessUnavailable,
    SerializationError,
    SchemeMismatch,
)
from .crypto import PrivateKey, PublicKey, digest, generate_key_pair
from .stamper import Stamper, sign, verify, decode_stamp, encode_stamp, generate_challenge
from .types import (
    KeyPair,
    SignatureEnvelope,
    SignatureDetails,
    SignatureResult,
)
from .utils import (
    encode_base64url,
    encode_base64url_text,
    decode_base64url,
    decode_base64url_text,
)

__version__ = "1.0.0"

__all__ = [
    # Stamping
    "Stamper",
    "StamperConfig",
    "sign",
    "verify",
    "decode_stamp",
    "encode_stamp",
    "generate_key_pair",
    "generate_challenge",
    "digest",

    # Constants
    "SIGNATURE_SCHEME",

    # Exceptions
    "StampError",
    "ValidationError",
    "InvalidKeyMaterial",
    "CryptoError",
    "KeyMismatch",
    "SigningFailure",
    "RandomnessUnavailable",
    "SerializationError",
    "SchemeMismatch",

    # Crypto
    "PrivateKey",
    "PublicKey",

    # Types
    "KeyPair",
    "SignatureEnvelope",
    "SignatureDetails",
    "SignatureResult",

    # Encoding
    "encode_base64url",
    "encode_base64url_text",
    "decode_base64url",
    "decode_base64url_text",
]
