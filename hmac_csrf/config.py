"""Configuration shared by token issuance and verification."""

from __future__ import annotations

import hashlib
import os
import string
from dataclasses import dataclass

DEFAULT_SEPARATOR = "."
DEFAULT_DIGEST = "sha512_224"
MIN_DIGEST_BYTES = 28

_RESERVED_SEPARATORS = frozenset(string.hexdigits + "+-")


@dataclass(frozen=True)
class TokenConfig:
    """Wire separator and HMAC digest used by issuer and verifier alike."""

    separator: str = DEFAULT_SEPARATOR
    digestmod: str = DEFAULT_DIGEST

    def __post_init__(self) -> None:
        if len(self.separator) != 1:
            raise ValueError(f"Token separator must be a single character, got {self.separator!r}.")
        if self.separator in _RESERVED_SEPARATORS:
            raise ValueError(f"Token separator {self.separator!r} collides with the digest or timestamp alphabet.")
        try:
            digest_size = hashlib.new(self.digestmod).digest_size
        except ValueError as exc:
            raise ValueError(f"Unsupported digest algorithm '{self.digestmod}'.") from exc
        if digest_size < MIN_DIGEST_BYTES:
            raise ValueError(
                f"Digest '{self.digestmod}' is {digest_size * 8} bits; at least {MIN_DIGEST_BYTES * 8} required."
            )

    @classmethod
    def from_env(cls) -> "TokenConfig":
        """Build a config from ``HMAC_CSRF_SEPARATOR`` and ``HMAC_CSRF_DIGEST``."""
        return cls(
            separator=os.getenv("HMAC_CSRF_SEPARATOR", DEFAULT_SEPARATOR),
            digestmod=os.getenv("HMAC_CSRF_DIGEST", DEFAULT_DIGEST),
        )
