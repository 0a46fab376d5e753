"""Anti-forgery token verification."""

from __future__ import annotations

import hmac
import logging

from ..config import TokenConfig
from ..utils.hashing import hmac_hex, token_content
from ..utils.time import Instant, epoch_seconds
from . import wire
from .types import RejectionReason

logger = logging.getLogger(__name__)


class TokenVerifier:
    """Verify tokens against a trusted session id, the current time and the secret.

    Every rejection collapses to ``False``; the reason is only logged at DEBUG.
    """

    def __init__(self, config: TokenConfig | None = None) -> None:
        self.config = config or TokenConfig()

    def verify(self, token: str, session_id: str, now: Instant, secret: str | bytes) -> bool:
        now_ts = epoch_seconds(now)
        try:
            decoded = wire.decode(token, self.config.separator)
        except wire.MalformedTokenError:
            return self._reject(RejectionReason.MALFORMED)

        # expiring exactly at now is still valid
        if decoded.expires_at < now_ts:
            return self._reject(RejectionReason.EXPIRED)

        expected = hmac_hex(token_content(session_id, decoded.expires_at_raw), secret, self.config.digestmod)
        if not hmac.compare_digest(decoded.digest.encode("utf-8", "surrogatepass"), expected.encode("utf-8")):
            return self._reject(RejectionReason.SIGNATURE_MISMATCH)
        return True

    @staticmethod
    def _reject(reason: RejectionReason) -> bool:
        logger.debug("Token rejected: %s", reason.value)
        return False
