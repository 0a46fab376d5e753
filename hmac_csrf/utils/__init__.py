"""Utility helpers for hashing and time operations."""

from .hashing import hmac_hex, token_content
from .time import Instant, epoch_seconds, unix_seconds, utc_now

__all__ = ["hmac_hex", "token_content", "Instant", "epoch_seconds", "unix_seconds", "utc_now"]
