"""Stamp-related type definitions."""

from dataclasses import dataclass
from typing import Any, Dict

from ..constants import SIGNATURE_SCHEME
from ..types.common import HexStr, PayloadHash, PrivateKeyHex, PublicKeyHex

__all__ = [
    "KeyPair",
    "SignatureEnvelope",
    "SignatureDetails",
    "SignatureResult",
]


@dataclass(frozen=True)
class KeyPair:
    """Hex-encoded P-256 key pair."""

    public_key: PublicKeyHex
    private_key: PrivateKeyHex

    def to_dict(self) -> Dict[str, str]:
        return {"publicKey": self.public_key, "privateKey": self.private_key}

    def __repr__(self) -> str:
        # Never print the full private scalar
        masked = f"{self.private_key[:4]}...{self.private_key[-4:]}"
        return f"KeyPair(public_key={self.public_key!r}, private_key={masked!r})"


@dataclass(frozen=True)
class SignatureEnvelope:
    """The signed object carried inside a transport stamp."""

    public_key: PublicKeyHex
    signature: HexStr
    scheme: str = SIGNATURE_SCHEME

    def to_dict(self) -> Dict[str, str]:
        return {
            "publicKey": self.public_key,
            "scheme": self.scheme,
            "signature": self.signature,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SignatureEnvelope":
        return cls(
            public_key=PublicKeyHex(data["publicKey"]),
            signature=HexStr(data["signature"]),
            scheme=data["scheme"],
        )


@dataclass(frozen=True)
class SignatureDetails:
    """Untransformed values used to build a stamp."""

    public_key: PublicKeyHex
    scheme: str
    signature: HexStr
    payload_hash: PayloadHash

    @property
    def envelope(self) -> SignatureEnvelope:
        return SignatureEnvelope(
            public_key=self.public_key,
            signature=self.signature,
            scheme=self.scheme,
        )

    def to_dict(self) -> Dict[str, str]:
        return {
            "publicKey": self.public_key,
            "scheme": self.scheme,
            "signature": self.signature,
            "payloadHash": self.payload_hash,
        }


@dataclass(frozen=True)
class SignatureResult:
    """
    Result of signing a payload.

    ``signature`` is the transport-encoded envelope that is sent to the
    backend as an opaque credential; ``details`` exposes the intermediate
    values, including the payload digest.
    """

    signature: str
    details: SignatureDetails

    def to_dict(self) -> Dict[str, Any]:
        return {"signature": self.signature, "details": self.details.to_dict()}
