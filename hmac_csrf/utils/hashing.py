"""Keyed hashing helpers for token content."""

from __future__ import annotations

import hmac

from ..config import DEFAULT_DIGEST

CONTENT_SEPARATOR = "|"


def token_content(session_id: str, expires_at_raw: str) -> str:
    """Return the canonical string a token digest is computed over."""
    return f"{session_id}{CONTENT_SEPARATOR}{expires_at_raw}"


def hmac_hex(content: str, secret: str | bytes, digestmod: str = DEFAULT_DIGEST) -> str:
    """Return lowercase hex HMAC of ``content`` keyed with ``secret``.

    Both values are taken as UTF-8 bytes (lone surrogates pass through); a
    ``bytes`` secret is used as-is. Any key length is accepted, HMAC
    normalizes it internally.
    """
    key = secret.encode("utf-8", "surrogatepass") if isinstance(secret, str) else secret
    return hmac.new(key, content.encode("utf-8", "surrogatepass"), digestmod).hexdigest()
