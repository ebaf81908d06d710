"""UTC time helpers."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Callable

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Return ``value`` as an aware datetime, reading naive values as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def to_epoch_seconds(value: datetime) -> float:
    """Return seconds since the Unix epoch for ``value``."""
    return as_utc(value).timestamp()


def add_minutes(value: datetime, minutes: float) -> datetime:
    return as_utc(value) + timedelta(minutes=minutes)
