"""Wire format: ``<digest-hex><separator><expiration-epoch-seconds>``."""

from __future__ import annotations

import re

from ..config import DEFAULT_SEPARATOR
from .types import DecodedToken

_TIMESTAMP_RE = re.compile(r"[+-]?[0-9]+")

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class MalformedTokenError(ValueError):
    """Raised when a token string does not have the two-part wire shape."""


def encode(digest_hex: str, expires_at: int | str, separator: str = DEFAULT_SEPARATOR) -> str:
    return f"{digest_hex}{separator}{expires_at}"


def decode(token: object, separator: str = DEFAULT_SEPARATOR) -> DecodedToken:
    """Split ``token`` into its digest and expiration parts.

    Exactly one separator is allowed. The timestamp must be a base-10 integer
    that fits in 64 bits; the digest part is returned untouched.
    """
    if not isinstance(token, str):
        raise MalformedTokenError(f"Expected token text, got {type(token).__name__}.")
    parts = token.split(separator)
    if len(parts) != 2:
        raise MalformedTokenError(f"Expected 2 token parts, got {len(parts)}.")
    digest, expires_at_raw = parts

    if not _TIMESTAMP_RE.fullmatch(expires_at_raw):
        raise MalformedTokenError("Token expiration is not a base-10 integer.")
    expires_at = int(expires_at_raw)
    if not INT64_MIN <= expires_at <= INT64_MAX:
        raise MalformedTokenError("Token expiration is out of range.")

    return DecodedToken(digest=digest, expires_at_raw=expires_at_raw, expires_at=expires_at)
