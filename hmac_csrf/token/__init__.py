"""Anti-forgery token issuance and verification."""

from .codec import TokenCodec
from .issuer import TokenIssuer
from .types import DecodedToken, RejectionReason
from .verifier import TokenVerifier
from .wire import MalformedTokenError

__all__ = [
    "TokenCodec",
    "TokenIssuer",
    "TokenVerifier",
    "DecodedToken",
    "RejectionReason",
    "MalformedTokenError",
]
