"""hmac-csrf package.

Stateless HMAC-based anti-forgery tokens. A token binds a session id and an
expiration second; only holders of the shared secret can mint a valid one.
"""

from __future__ import annotations

from .config import DEFAULT_SEPARATOR, TokenConfig
from .token import MalformedTokenError, TokenCodec
from .utils.time import Instant

_default_codec = TokenCodec()


def generate_token(session_id: str, expire_at: Instant, secret: str | bytes) -> str:
    """Issue a token with the default configuration.

    ``session_id`` should be unique per user and operation, for example a hash
    of user id and operation name. Keep ``expire_at`` close, an hour or two.
    """
    return _default_codec.issue(session_id, expire_at, secret)


def validate_token(token: str, session_id: str, now: Instant, secret: str | bytes) -> bool:
    """Check a token issued with the default configuration."""
    return _default_codec.verify(token, session_id, now, secret)


__all__ = [
    "DEFAULT_SEPARATOR",
    "TokenConfig",
    "TokenCodec",
    "MalformedTokenError",
    "generate_token",
    "validate_token",
]
