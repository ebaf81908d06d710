"""Stateless issue/parse that read the clock on every call."""

from __future__ import annotations

import math
from typing import Mapping, Optional

from .config import TokenConfig
from .errors import InvalidDurationError
from .token.engine import TokenEngine
from .token.types import ParsingInfo
from .utils.time import Clock, utc_now


def issue(
    claims: Mapping[str, str],
    ttl_minutes: float,
    *,
    config: Optional[TokenConfig] = None,
    clock: Clock = utc_now,
) -> str:
    """Sign a token that expires ``ttl_minutes`` from now; ttl must be positive."""
    if not math.isfinite(ttl_minutes) or ttl_minutes <= 0:
        raise InvalidDurationError("Expiration time must be positive")
    engine = TokenEngine(config or TokenConfig.from_env())
    return engine.issue(claims, ttl_minutes, clock())


def parse(
    token: Optional[str],
    *,
    config: Optional[TokenConfig] = None,
    clock: Clock = utc_now,
) -> ParsingInfo:
    """Validate ``token`` against the current time. Never raises for bad tokens."""
    engine = TokenEngine(config or TokenConfig.from_env())
    return ParsingInfo.from_inspection(engine.inspect(token, clock()))
