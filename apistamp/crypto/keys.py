"""Key management for P-256 API keys."""

import logging
import secrets
from typing import Optional, Tuple, Union

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.utils import Prehashed, decode_dss_signature
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from ..constants import DIGEST_BYTES, PRIVATE_KEY_BYTES
from ..exceptions import InvalidKeyMaterial, RandomnessUnavailable, SigningFailure, ValidationError
from ..types.common import (
    PrivateKeyBytes,
    PrivateKeyHex,
    PublicKeyBytes,
    PublicKeyHex,
    RandomSource,
)
from ..types.stamp import KeyPair
from ..utils.validation import validate_private_key, validate_public_key

__all__ = ["PrivateKey", "PublicKey", "generate_key_pair", "secure_random", "random_bytes"]

logger = logging.getLogger(__name__)

CURVE = ec.SECP256R1()


def secure_random(size: int) -> bytes:
    """Default random source, backed by the operating system CSPRNG."""
    return secrets.token_bytes(size)


def random_bytes(rng: RandomSource, size: int) -> bytes:
    """Draw exactly ``size`` bytes from a random source."""
    try:
        data = rng(size)
    except Exception as e:
        raise RandomnessUnavailable(f"Secure random source failed: {e}") from e
    if not isinstance(data, (bytes, bytearray)) or len(data) != size:
        raise RandomnessUnavailable(f"Secure random source did not return {size} bytes")
    return bytes(data)


class PrivateKey:
    """
    P-256 private key wrapper.

    Handles public key derivation, hex export and raw ECDSA signing of
    32-byte digests.
    """

    def __init__(self, key: Union[bytes, str, "PrivateKey"]) -> None:
        """
        Initialize private key.

        Args:
            key: Private key as 32 bytes, hex string, or another PrivateKey

        Raises:
            InvalidKeyMaterial: If key format is invalid
        """
        if isinstance(key, PrivateKey):
            self._secret = key._secret
            self._key = key._key
            return

        self._secret = PrivateKeyBytes(validate_private_key(key))

        try:
            self._key = ec.derive_private_key(int.from_bytes(self._secret, "big"), CURVE)
        except ValueError as e:
            raise InvalidKeyMaterial(f"Invalid private key: {e}") from e

    @classmethod
    def create(cls, rng: Optional[RandomSource] = None) -> "PrivateKey":
        """
        Create new random private key.

        Args:
            rng: Secure random source; defaults to the OS CSPRNG

        Returns:
            New PrivateKey instance

        Raises:
            RandomnessUnavailable: If the random source fails
        """
        rng = rng or secure_random
        while True:
            key_bytes = random_bytes(rng, PRIVATE_KEY_BYTES)
            try:
                return cls(key_bytes)
            except ValidationError:
                # Zero or above the curve order, draw again
                continue

    @property
    def secret(self) -> PrivateKeyBytes:
        """Get private key as bytes."""
        return self._secret

    def hex(self) -> PrivateKeyHex:
        """Get private key as 64-char hex string."""
        return PrivateKeyHex(self._secret.hex())

    def public_key(self) -> "PublicKey":
        """Get the corresponding compressed public key."""
        return PublicKey(self._key.public_key())

    def sign(self, message_hash: bytes, deterministic: bool = True) -> Tuple[int, int]:
        """
        Sign a 32-byte message hash.

        Args:
            message_hash: SHA-256 digest to sign
            deterministic: Use RFC 6979 nonces instead of random ones

        Returns:
            Tuple of (r, s) as produced by the backend; s is not normalized

        Raises:
            SigningFailure: If signing fails
        """
        if len(message_hash) != DIGEST_BYTES:
            raise SigningFailure(f"Message hash must be {DIGEST_BYTES} bytes, got {len(message_hash)}")

        try:
            algorithm = ec.ECDSA(
                Prehashed(hashes.SHA256()),
                deterministic_signing=deterministic,
            )
            der = self._key.sign(message_hash, algorithm)
        except (UnsupportedAlgorithm, ValueError) as e:
            raise SigningFailure(f"Signing failed: {e}") from e

        return decode_dss_signature(der)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PrivateKey):
            return False
        return self._secret == other._secret

    def __hash__(self) -> int:
        return hash(self._secret)

    def __repr__(self) -> str:
        # Show first and last 4 chars of hex for security
        hex_str = self.hex()
        masked = f"{hex_str[:4]}...{hex_str[-4:]}"
        return f"PrivateKey({masked})"


class PublicKey:
    """
    P-256 public key wrapper.

    Keys are always exported in compressed form.
    """

    def __init__(self, key: Union[bytes, str, "PublicKey", ec.EllipticCurvePublicKey]) -> None:
        """
        Initialize public key.

        Args:
            key: Compressed public key as 33 bytes or 66-char hex string,
                another PublicKey, or a backend public key object

        Raises:
            InvalidKeyMaterial: If key format is invalid or the point is not
                on the curve
        """
        if isinstance(key, PublicKey):
            self._key = key._key
            self._point = key._point
            return

        if isinstance(key, ec.EllipticCurvePublicKey):
            self._key = key
        else:
            key_bytes = validate_public_key(key)
            try:
                self._key = ec.EllipticCurvePublicKey.from_encoded_point(CURVE, key_bytes)
            except ValueError as e:
                raise InvalidKeyMaterial(f"Public key is not a valid P-256 point: {e}") from e

        self._point = PublicKeyBytes(
            self._key.public_bytes(Encoding.X962, PublicFormat.CompressedPoint)
        )

    @property
    def point(self) -> PublicKeyBytes:
        """Get compressed public key as bytes."""
        return self._point

    def hex(self) -> PublicKeyHex:
        """Get compressed public key as 66-char hex string."""
        return PublicKeyHex(self._point.hex())

    def uncompressed_hex(self) -> str:
        """Get the 65-byte uncompressed point as hex."""
        return self._key.public_bytes(Encoding.X962, PublicFormat.UncompressedPoint).hex()

    def verify(self, signature: bytes, message_hash: bytes) -> bool:
        """
        Verify a DER signature over a 32-byte message hash.

        Args:
            signature: DER-encoded signature
            message_hash: SHA-256 digest that was signed

        Returns:
            True if signature is valid
        """
        if len(message_hash) != DIGEST_BYTES:
            raise ValidationError(f"Message hash must be {DIGEST_BYTES} bytes, got {len(message_hash)}")
        try:
            self._key.verify(signature, message_hash, ec.ECDSA(Prehashed(hashes.SHA256())))
            return True
        except InvalidSignature:
            return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PublicKey):
            return False
        return self._point == other._point

    def __hash__(self) -> int:
        return hash(self._point)

    def __repr__(self) -> str:
        return f"PublicKey({self.hex()})"


def generate_key_pair(rng: Optional[RandomSource] = None) -> KeyPair:
    """
    Generate a new P-256 API key pair.

    Args:
        rng: Secure random source; defaults to the OS CSPRNG

    Returns:
        KeyPair with a 66-char compressed public key and 64-char private key

    Raises:
        RandomnessUnavailable: If the random source fails
    """
    private_key = PrivateKey.create(rng)
    public_key = private_key.public_key()
    logger.info(f"Generated API key pair: {public_key.hex()}")
    return KeyPair(public_key=public_key.hex(), private_key=private_key.hex())
