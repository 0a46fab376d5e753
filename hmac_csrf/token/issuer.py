"""HMAC-backed anti-forgery token issuer."""

from __future__ import annotations

from ..config import TokenConfig
from ..utils.hashing import hmac_hex, token_content
from ..utils.time import Instant, unix_seconds
from . import wire


class TokenIssuer:
    """Issue tokens binding a session id to an expiration second."""

    def __init__(self, config: TokenConfig | None = None) -> None:
        self.config = config or TokenConfig()

    def issue(self, session_id: str, expire_at: Instant, secret: str | bytes) -> str:
        """Return a token for ``session_id`` that expires at ``expire_at``.

        ``expire_at`` is not checked against the current time, so an
        already-expired token can be issued. Expirations outside the signed
        64-bit range raise ``ValueError`` since no verifier would accept them.
        """
        expires_at = unix_seconds(expire_at)
        if not wire.INT64_MIN <= expires_at <= wire.INT64_MAX:
            raise ValueError(f"Expiration {expires_at} is outside the 64-bit timestamp range.")
        ts = str(expires_at)
        digest = hmac_hex(token_content(session_id, ts), secret, self.config.digestmod)
        return wire.encode(digest, ts, self.config.separator)
