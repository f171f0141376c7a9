"""Encoding and decoding utilities for API stamps."""

import base64
import binascii
import json
import re
from typing import Any, Union

from ..constants import TEXT_ENCODING
from ..exceptions import SerializationError, ValidationError
from ..types.common import Base64UrlStr, HexStr

__all__ = [
    "hex_to_bytes",
    "bytes_to_hex",
    "text_to_bytes",
    "encode_base64url",
    "encode_base64url_text",
    "decode_base64url",
    "decode_base64url_text",
    "canonical_json",
]

BASE64URL_PATTERN = re.compile(r"[A-Za-z0-9_-]*")


def hex_to_bytes(hex_str: Union[HexStr, str]) -> bytes:
    """
    Convert hex string to bytes.

    Args:
        hex_str: Hex string with or without 0x prefix

    Returns:
        Decoded bytes

    Raises:
        ValidationError: If hex string is invalid
    """
    try:
        if isinstance(hex_str, str) and hex_str.startswith("0x"):
            hex_str = hex_str[2:]
        return bytes.fromhex(hex_str)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"Invalid hex string: {hex_str}") from e


def bytes_to_hex(data: bytes, prefix: bool = False) -> HexStr:
    """
    Convert bytes to lowercase hex string.

    Args:
        data: Bytes to encode
        prefix: Add 0x prefix

    Returns:
        Hex string
    """
    hex_str = data.hex()
    if prefix:
        hex_str = f"0x{hex_str}"
    return HexStr(hex_str)


def text_to_bytes(text: str) -> bytes:
    """
    Encode text with the fixed stamp text encoding (UTF-8).

    Every payload and envelope goes through this function so that signers
    and independent verifiers agree on the bytes for non-ASCII input.

    Raises:
        ValidationError: If text is not a string
    """
    if not isinstance(text, str):
        raise ValidationError(f"Expected text, got {type(text).__name__}")
    return text.encode(TEXT_ENCODING)


def encode_base64url(data: bytes) -> Base64UrlStr:
    """
    Encode bytes as URL-safe base64 without padding.

    Args:
        data: Bytes to encode

    Returns:
        Base64url string containing no ``+``, ``/`` or ``=``
    """
    encoded = base64.urlsafe_b64encode(bytes(data)).decode("ascii")
    return Base64UrlStr(encoded.rstrip("="))


def encode_base64url_text(text: str) -> Base64UrlStr:
    """Encode text as URL-safe base64 after converting it to UTF-8 bytes."""
    return encode_base64url(text_to_bytes(text))


def decode_base64url(string: str) -> bytes:
    """
    Decode URL-safe base64, with or without padding.

    Args:
        string: Base64url string

    Returns:
        Decoded bytes

    Raises:
        SerializationError: If the string is not canonical base64url
    """
    if not isinstance(string, str):
        raise SerializationError(f"Expected base64url text, got {type(string).__name__}")

    stripped = string.rstrip("=")
    if not BASE64URL_PATTERN.fullmatch(stripped):
        raise SerializationError("Invalid base64url string: unexpected characters")

    padded = stripped + "=" * (-len(stripped) % 4)
    try:
        data = base64.urlsafe_b64decode(padded.encode("ascii"))
    except (binascii.Error, ValueError) as e:
        raise SerializationError(f"Invalid base64url string: {e}") from e

    # Reject encodings with non-zero trailing bits so decoding stays one-to-one
    if encode_base64url(data) != stripped:
        raise SerializationError("Invalid base64url string: non-canonical encoding")

    return data


def decode_base64url_text(string: str) -> str:
    """Decode URL-safe base64 into UTF-8 text."""
    data = decode_base64url(string)
    try:
        return data.decode(TEXT_ENCODING)
    except UnicodeDecodeError as e:
        raise SerializationError(f"Decoded base64url is not valid text: {e}") from e


def canonical_json(obj: Any) -> str:
    """Return canonical JSON text (sorted keys, no extra whitespace)."""
    try:
        return json.dumps(obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Object is not JSON serializable: {e}") from e
