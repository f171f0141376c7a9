"""API stamp exceptions hierarchy."""

from typing import Any, Optional

__all__ = [
    "StampError",
    "ValidationError",
    "InvalidKeyMaterial",
    "CryptoError",
    "KeyMismatch",
    "SigningFailure",
    "RandomnessUnavailable",
    "SerializationError",
    "SchemeMismatch",
]


class StampError(Exception):
    """Base exception for all API stamp errors."""

    def __init__(
        self,
        message: str,
        code: Optional[int] = None,
        data: Optional[Any] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.data = data

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class ValidationError(StampError):
    """Raised when input validation fails."""
    pass


class InvalidKeyMaterial(ValidationError):
    """Raised when a key is missing, malformed or outside the curve."""
    pass


class CryptoError(StampError):
    """Raised when a cryptographic operation fails."""
    pass


class KeyMismatch(CryptoError):
    """Raised when the supplied public key does not belong to the private key."""

    def __init__(
        self,
        expected: str,
        received: str,
        message: Optional[str] = None
    ) -> None:
        if message is None:
            message = (
                "Public key does not match private key. "
                f"Expected: {expected}, Got: {received}"
            )
        super().__init__(message, data={"expected": expected, "received": received})
        self.expected = expected
        self.received = received


class SigningFailure(CryptoError):
    """Raised when the curve backend rejects a signing operation."""
    pass


class RandomnessUnavailable(CryptoError):
    """Raised when the secure random source cannot supply entropy."""
    pass


class SerializationError(StampError):
    """Raised when a stamp cannot be encoded or decoded."""
    pass


class SchemeMismatch(SerializationError):
    """Raised when a decoded stamp names an unexpected signature scheme."""

    def __init__(
        self,
        expected: str,
        received: Any,
        message: Optional[str] = None
    ) -> None:
        if message is None:
            message = f"Unsupported signature scheme: expected {expected}, got {received}"
        super().__init__(message, data={"expected": expected, "received": received})
        self.expected = expected
        self.received = received
