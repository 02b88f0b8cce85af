"""Timestamp helpers.

The engines never read the clock on their own: every operation takes ``now``
and only falls back to utc_now() when the caller omits it. All arithmetic is
done on timezone-aware UTC datetimes; naive values are taken to be UTC.
"""

from datetime import datetime, timezone
from typing import Optional

SECONDS_PER_HOUR = 3600.0
SECONDS_PER_DAY = 86400.0


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def ensure_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Normalise ``value`` to an aware UTC datetime (None passes through)."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def resolve_now(now: Optional[datetime]) -> datetime:
    return ensure_utc(now) if now is not None else utc_now()


def hours_between(later: datetime, earlier: datetime) -> float:
    return (ensure_utc(later) - ensure_utc(earlier)).total_seconds() / SECONDS_PER_HOUR


def days_between(later: datetime, earlier: datetime) -> float:
    return (ensure_utc(later) - ensure_utc(earlier)).total_seconds() / SECONDS_PER_DAY
