"""Expiry checks for persisted records stamped in epoch milliseconds."""

from datetime import UTC, datetime


def is_record_expired(
    timestamp_ms: int | float | None, max_age_minutes: float, now: datetime | None = None
) -> bool:
    """True when the record is older than ``max_age_minutes``.

    A missing or unparseable stamp counts as expired. Exactly the max age is
    still fresh.
    """
    age = record_age_minutes(timestamp_ms, now)
    return age > max_age_minutes


def record_age_minutes(
    timestamp_ms: int | float | None, now: datetime | None = None
) -> float:
    if now is None:
        now = datetime.now(UTC)
    written = _from_millis(timestamp_ms)
    if written is None:
        return float("inf")
    return (now - written).total_seconds() / 60


def _from_millis(timestamp_ms: int | float | None) -> datetime | None:
    if timestamp_ms is None or isinstance(timestamp_ms, bool):
        return None
    try:
        return datetime.fromtimestamp(float(timestamp_ms) / 1000, tz=UTC)
    except (ValueError, TypeError, OverflowError, OSError):
        return None
