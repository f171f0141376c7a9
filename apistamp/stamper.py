"""API key stamping: sign request payloads for backend verification."""

import json
import logging
import re
from typing import Optional

from .config import StamperConfig
from .constants import CHALLENGE_BYTES
from .crypto.digest import digest, digest_bytes
from .crypto.keys import PrivateKey, PublicKey, generate_key_pair, random_bytes, secure_random
from .crypto.signature import sign_digest, verify_digest
from .exceptions import InvalidKeyMaterial, KeyMismatch, SchemeMismatch, SerializationError, ValidationError
from .types.common import Base64UrlStr, RandomSource
from .types.stamp import KeyPair, SignatureDetails, SignatureEnvelope, SignatureResult
from .utils.encoding import (
    bytes_to_hex,
    canonical_json,
    decode_base64url_text,
    encode_base64url,
    encode_base64url_text,
    hex_to_bytes,
)

__all__ = [
    "Stamper",
    "sign",
    "verify",
    "decode_stamp",
    "encode_stamp",
    "generate_challenge",
]

logger = logging.getLogger(__name__)

_ENVELOPE_FIELDS = ("publicKey", "scheme", "signature")
DER_HEX_PATTERN = re.compile(r"(?:[0-9a-f]{2})+")


class Stamper:
    """
    Signs payloads with a P-256 API key pair.

    A stamper only holds immutable configuration and a random source, so a
    single instance can be shared across threads.
    """

    def __init__(
        self,
        config: Optional[StamperConfig] = None,
        rng: Optional[RandomSource] = None,
    ) -> None:
        """
        Initialize stamper.

        Args:
            config: Scheme and nonce settings (default: StamperConfig())
            rng: Secure random source used for key and challenge generation
        """
        self._config = config or StamperConfig()
        self._rng = rng or secure_random
        self._logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @property
    def config(self) -> StamperConfig:
        return self._config

    @property
    def scheme(self) -> str:
        return self._config.scheme

    def generate_key_pair(self) -> KeyPair:
        """Generate a new API key pair from this stamper's random source."""
        return generate_key_pair(self._rng)

    def generate_challenge(self, size: int = CHALLENGE_BYTES) -> Base64UrlStr:
        """
        Generate a random base64url challenge.

        Args:
            size: Number of random bytes

        Raises:
            RandomnessUnavailable: If the random source fails
        """
        if size <= 0:
            raise ValidationError(f"Challenge size must be positive, got {size}")
        return encode_base64url(random_bytes(self._rng, size))

    def sign(self, payload: str, private_key: str, public_key: str) -> SignatureResult:
        """
        Sign a payload with an API key pair.

        Args:
            payload: Text to sign, typically a serialized request body
            private_key: 64-char hex private key
            public_key: 66-char hex compressed public key

        Returns:
            SignatureResult with the base64url stamp and its details

        Raises:
            InvalidKeyMaterial: If either key is missing or malformed
            KeyMismatch: If the public key does not belong to the private key
            SigningFailure: If the curve backend rejects the key
        """
        if not private_key or not public_key:
            raise InvalidKeyMaterial("API key pair not found")

        key = PrivateKey(private_key)
        supplied = PublicKey(public_key)
        derived = key.public_key()

        if derived.point != supplied.point:
            self._logger.warning(
                f"Public key mismatch: derived {derived.hex()}, received {public_key}"
            )
            raise KeyMismatch(expected=derived.hex(), received=public_key)

        payload_hash = digest(payload)
        der = sign_digest(key, payload_hash, deterministic=self._config.deterministic)

        details = SignatureDetails(
            public_key=derived.hex(),
            scheme=self.scheme,
            signature=bytes_to_hex(der),
            payload_hash=payload_hash,
        )
        signature = encode_stamp(details.envelope)

        self._logger.debug(f"Signed payload {payload_hash} with {details.public_key}")
        return SignatureResult(signature=signature, details=details)

    def decode(self, signature: str) -> SignatureEnvelope:
        """
        Decode a transport stamp back into its envelope.

        Raises:
            SerializationError: If the stamp is not base64url canonical JSON
                with the expected fields
            SchemeMismatch: If the envelope names a different scheme
        """
        text = decode_base64url_text(signature)
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise SerializationError(f"Stamp is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise SerializationError("Stamp must be a JSON object")
        for field in _ENVELOPE_FIELDS:
            if not isinstance(data.get(field), str):
                raise SerializationError(f"Stamp field {field!r} is missing or not a string")

        if data["scheme"] != self.scheme:
            raise SchemeMismatch(expected=self.scheme, received=data["scheme"])

        return SignatureEnvelope.from_dict(data)

    def verify(self, payload: str, signature: str) -> bool:
        """
        Verify a transport stamp against a payload.

        Args:
            payload: Text that was signed
            signature: Base64url stamp returned by ``sign``

        Returns:
            True if the stamp's signature is valid for the payload

        Raises:
            SerializationError: If the stamp is malformed
            SchemeMismatch: If the stamp names a different scheme
            InvalidKeyMaterial: If the stamp's public key is not a valid point
        """
        envelope = self.decode(signature)
        public_key = PublicKey(envelope.public_key)
        # Only the exact form written by sign is accepted
        if not DER_HEX_PATTERN.fullmatch(envelope.signature):
            raise SerializationError(f"Stamp signature is not lowercase hex: {envelope.signature!r}")
        der = hex_to_bytes(envelope.signature)

        valid = verify_digest(public_key, digest_bytes(payload), der)
        if not valid:
            self._logger.debug(f"Stamp signature rejected for {envelope.public_key}")
        return valid

    def __repr__(self) -> str:
        return f"Stamper(scheme={self.scheme!r}, deterministic={self._config.deterministic})"


def encode_stamp(envelope: SignatureEnvelope) -> Base64UrlStr:
    """Serialize an envelope to canonical JSON and encode it as base64url."""
    return encode_base64url_text(canonical_json(envelope.to_dict()))


_default_stamper = Stamper()


def sign(payload: str, private_key: str, public_key: str) -> SignatureResult:
    """
    Sign a payload with the default stamper.

    Example:
        >>> pair = apistamp.generate_key_pair()
        >>> result = apistamp.sign('{"amount":1}', pair.private_key, pair.public_key)
        >>> result.details.scheme
        'SIGNATURE_SCHEME_TK_API_P256'
    """
    return _default_stamper.sign(payload, private_key, public_key)


def verify(payload: str, signature: str) -> bool:
    """Verify a stamp with the default stamper."""
    return _default_stamper.verify(payload, signature)


def decode_stamp(signature: str) -> SignatureEnvelope:
    """Decode a stamp with the default stamper."""
    return _default_stamper.decode(signature)


def generate_challenge(size: int = CHALLENGE_BYTES, rng: Optional[RandomSource] = None) -> Base64UrlStr:
    """Generate a random base64url challenge."""
    return Stamper(rng=rng).generate_challenge(size)
