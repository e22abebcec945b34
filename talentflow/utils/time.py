from datetime import datetime, timezone

MS_PER_DAY = 24 * 60 * 60 * 1000


def utc_now() -> datetime:
    """Return a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def now_ms() -> int:
    """Return the current UTC time as integer epoch milliseconds."""
    return int(utc_now().timestamp() * 1000)
