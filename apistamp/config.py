"""Configuration for API stamping."""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .constants import ENV_PREFIX, SIGNATURE_SCHEME
from .exceptions import InvalidKeyMaterial, ValidationError
from .types.stamp import KeyPair
from .types.common import PrivateKeyHex, PublicKeyHex

__all__ = ["StamperConfig"]

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValidationError(f"Invalid boolean for {name}: {value!r}")


@dataclass(frozen=True)
class StamperConfig:
    """
    Stamper behaviour.

    Attributes:
        scheme: Scheme identifier written into (and required from) envelopes
        deterministic: Use RFC 6979 nonces so signing is bit-reproducible
    """

    scheme: str = SIGNATURE_SCHEME
    deterministic: bool = True

    def __post_init__(self) -> None:
        if not self.scheme:
            raise ValidationError("Signature scheme cannot be empty")

    @classmethod
    def from_env(
        cls,
        prefix: str = ENV_PREFIX,
        environ: Optional[Mapping[str, str]] = None
    ) -> "StamperConfig":
        """
        Build configuration from environment variables.

        Reads ``<prefix>SCHEME`` and ``<prefix>DETERMINISTIC``; unset
        variables keep their defaults.

        Args:
            prefix: Variable name prefix
            environ: Mapping to read from (default: os.environ)
        """
        environ = os.environ if environ is None else environ

        kwargs = {}
        scheme = environ.get(f"{prefix}SCHEME")
        if scheme:
            kwargs["scheme"] = scheme
        deterministic = environ.get(f"{prefix}DETERMINISTIC")
        if deterministic:
            kwargs["deterministic"] = _parse_bool(f"{prefix}DETERMINISTIC", deterministic)

        config = cls(**kwargs)
        logger.debug(f"Loaded stamper config from environment: {config}")
        return config

    @staticmethod
    def load_key_pair(
        prefix: str = ENV_PREFIX,
        environ: Optional[Mapping[str, str]] = None
    ) -> KeyPair:
        """
        Read the API key pair from ``<prefix>PUBLIC_KEY`` and ``<prefix>PRIVATE_KEY``.

        The values are returned as-is; pairing is checked when signing.

        Raises:
            InvalidKeyMaterial: If either variable is missing or empty
        """
        environ = os.environ if environ is None else environ

        public_key = environ.get(f"{prefix}PUBLIC_KEY", "").strip()
        private_key = environ.get(f"{prefix}PRIVATE_KEY", "").strip()
        if not public_key or not private_key:
            raise InvalidKeyMaterial("API key pair not found")

        return KeyPair(
            public_key=PublicKeyHex(public_key),
            private_key=PrivateKeyHex(private_key),
        )
