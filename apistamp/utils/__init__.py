"""Encoding and validation helpers."""

from ..utils.encoding import (
    hex_to_bytes,
    bytes_to_hex,
    text_to_bytes,
    encode_base64url,
    encode_base64url_text,
    decode_base64url,
    decode_base64url_text,
    canonical_json,
)
from ..utils.validation import (
    is_valid_private_key,
    validate_private_key,
    is_valid_public_key,
    validate_public_key,
)

__all__ = [
    "hex_to_bytes",
    "bytes_to_hex",
    "text_to_bytes",
    "encode_base64url",
    "encode_base64url_text",
    "decode_base64url",
    "decode_base64url_text",
    "canonical_json",
    "is_valid_private_key",
    "validate_private_key",
    "is_valid_public_key",
    "validate_public_key",
]
