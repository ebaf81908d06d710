"""Utility helpers for time operations."""

from .time import Clock, add_minutes, as_utc, to_epoch_seconds, utc_now

__all__ = ["Clock", "utc_now", "as_utc", "to_epoch_seconds", "add_minutes"]
