"""Issue and verify tokens on one shared configuration."""

from __future__ import annotations

from datetime import datetime, timedelta

from ..config import TokenConfig
from ..utils.time import Instant, utc_now
from .issuer import TokenIssuer
from .verifier import TokenVerifier


class TokenCodec:
    """Stateless token issuer and verifier.

    Instances hold only an immutable :class:`TokenConfig` and can be shared
    freely between threads.
    """

    def __init__(self, config: TokenConfig | None = None) -> None:
        self.config = config or TokenConfig()
        self._issuer = TokenIssuer(self.config)
        self._verifier = TokenVerifier(self.config)

    def issue(self, session_id: str, expire_at: Instant, secret: str | bytes) -> str:
        return self._issuer.issue(session_id, expire_at, secret)

    def verify(self, token: str, session_id: str, now: Instant, secret: str | bytes) -> bool:
        return self._verifier.verify(token, session_id, now, secret)

    def issue_for(
        self,
        session_id: str,
        ttl_seconds: int,
        secret: str | bytes,
        *,
        now: datetime | None = None,
    ) -> str:
        """Issue a token expiring ``ttl_seconds`` after ``now`` (default: UTC now)."""
        start = now or utc_now()
        return self.issue(session_id, start + timedelta(seconds=ttl_seconds), secret)

    def verify_now(self, token: str, session_id: str, secret: str | bytes) -> bool:
        return self.verify(token, session_id, utc_now(), secret)
