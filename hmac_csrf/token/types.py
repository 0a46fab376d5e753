"""Token datatypes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class DecodedToken:
    digest: str
    expires_at_raw: str
    expires_at: int


class RejectionReason(str, Enum):
    MALFORMED = "malformed"
    EXPIRED = "expired"
    SIGNATURE_MISMATCH = "signature_mismatch"
