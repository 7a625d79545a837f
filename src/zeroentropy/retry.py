"""Retry decisions and exponential backoff for API requests."""

from __future__ import annotations

BASE_DELAY_SECONDS = 0.5
MAX_DELAY_SECONDS = 8.0

RETRYABLE_STATUSES = frozenset({408, 409, 429})


def should_retry(status_code: int) -> bool:
    return status_code in RETRYABLE_STATUSES or 500 <= status_code <= 599


def retry_delay(attempt: int) -> float:
    """Seconds to wait before retry number ``attempt`` (the first retry is 1)."""
    if attempt < 1:
        raise ValueError("attempt must be >= 1")
    # Clamp the exponent so large attempt numbers stay cheap.
    exponent = min(attempt - 1, 16)
    return min(MAX_DELAY_SECONDS, BASE_DELAY_SECONDS * (2 ** exponent))


__all__ = [
    "BASE_DELAY_SECONDS",
    "MAX_DELAY_SECONDS",
    "RETRYABLE_STATUSES",
    "retry_delay",
    "should_retry",
]
