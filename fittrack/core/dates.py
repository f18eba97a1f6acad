"""Wall-clock helpers. Log dates are zero-padded ISO strings, so they sort lexicographically."""

from datetime import date, datetime, timedelta, timezone


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def today_iso() -> str:
    """Current UTC date as "YYYY-MM-DD"."""
    return utcnow().date().isoformat()


def days_ago_iso(days: int, today: date | None = None) -> str:
    base = today or utcnow().date()
    return (base - timedelta(days=days)).isoformat()
