"""Token wrapper with a reference time frozen at construction."""

from __future__ import annotations

from datetime import datetime
from typing import Dict, Mapping, Optional

from .config import TokenConfig
from .token.engine import TokenEngine
from .utils.time import as_utc, utc_now


class SnapshotToken:
    """Inspect one token against the instant this object was created.

    Every inspection uses the same reference time, so a token that is live
    when the snapshot is taken stays live for the lifetime of the object. Use
    :func:`basic_token.live.parse` to judge a token against the current clock.
    """

    def __init__(
        self,
        config: TokenConfig,
        token: Optional[str] = None,
        *,
        reference_time: Optional[datetime] = None,
    ) -> None:
        self._engine = TokenEngine(config)
        self._token = token
        self._reference_time = as_utc(reference_time) if reference_time is not None else utc_now()

    @property
    def value(self) -> Optional[str]:
        return self._token

    @value.setter
    def value(self, token: Optional[str]) -> None:
        self._token = token

    @property
    def reference_time(self) -> datetime:
        return self._reference_time

    def issue(self, claims: Mapping[str, str], ttl_minutes: float) -> str:
        """Sign a new token expiring ``ttl_minutes`` after the reference time.

        A zero ttl is accepted. The wrapped token is left unchanged.
        """
        return self._engine.issue(claims, ttl_minutes, self._reference_time)

    def is_valid(self) -> bool:
        return self._engine.is_structurally_valid(self._token)

    def has_expired(self) -> bool:
        """Raises :class:`NotValidError` when :meth:`is_valid` is false."""
        return self._engine.has_expired(self._token, self._reference_time)

    def expired_by_seconds(self) -> float:
        """Raises :class:`NotExpiredError` when :meth:`has_expired` is false."""
        return self._engine.expired_by_seconds(self._token, self._reference_time)

    def claims(self) -> Dict[str, str]:
        """Raises :class:`ExpiredError` when :meth:`has_expired` is true."""
        return self._engine.claims(self._token, self._reference_time)
