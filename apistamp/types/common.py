"""Common type definitions for API stamping."""

from typing import Callable, NewType

__all__ = [
    "HexStr",
    "PrivateKeyHex",
    "PublicKeyHex",
    "PayloadHash",
    "Base64UrlStr",
    "PrivateKeyBytes",
    "PublicKeyBytes",
    "DerSignature",
    "RandomSource",
]

# Basic types
HexStr = NewType("HexStr", str)
"""Hexadecimal string representation."""

Base64UrlStr = NewType("Base64UrlStr", str)
"""URL-safe base64 text without padding."""

# Key material
PrivateKeyHex = NewType("PrivateKeyHex", str)
"""64-character hex private scalar."""

PublicKeyHex = NewType("PublicKeyHex", str)
"""66-character hex compressed public point."""

PrivateKeyBytes = NewType("PrivateKeyBytes", bytes)
"""32-byte private key."""

PublicKeyBytes = NewType("PublicKeyBytes", bytes)
"""33-byte compressed public key."""

# Signing artifacts
PayloadHash = NewType("PayloadHash", str)
"""64-character SHA-256 hex digest."""

DerSignature = NewType("DerSignature", bytes)
"""DER-encoded (r, s) signature."""

RandomSource = Callable[[int], bytes]
"""Callable returning the requested number of secure random bytes."""
