"""Timestamps are stored as naive UTC and serialized with a ``Z`` suffix."""

from datetime import datetime, timezone


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def isoformat_utc(value: datetime) -> str:
    """ISO-8601 string for a UTC timestamp, e.g. ``2026-01-05T08:00:00Z``"""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)
    return value.isoformat().replace("+00:00", "Z")
