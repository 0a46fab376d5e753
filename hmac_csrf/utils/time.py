"""UTC time helpers."""

from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Union

Instant = Union[datetime, int, float]


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(timezone.utc)


def epoch_seconds(instant: Instant) -> int | float:
    """Return seconds since the Unix epoch for a datetime or numeric instant.

    Ints are returned unchanged; NaN and infinities raise ``ValueError``.
    """
    if isinstance(instant, datetime):
        return instant.timestamp()
    # bool is an int subclass but never a meaningful instant
    if isinstance(instant, int) and not isinstance(instant, bool):
        return instant
    if isinstance(instant, float):
        if not math.isfinite(instant):
            raise ValueError(f"Instant must be finite, got {instant!r}.")
        return instant
    raise TypeError(f"Expected datetime or epoch seconds, got {type(instant).__name__}.")


def unix_seconds(instant: Instant) -> int:
    """Return whole Unix seconds for ``instant``, flooring any fraction."""
    return math.floor(epoch_seconds(instant))
