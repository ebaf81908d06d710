"""Claim-set assembly and the reserved ``exp`` claim."""

from __future__ import annotations

import math
from typing import Dict, Mapping

from ..errors import DecodeError, InvalidClaimsError

EXPIRATION_CLAIM = "exp"


def build_claim_set(claims: Mapping[str, str], expires_at: float) -> Dict[str, str]:
    """Copy ``claims`` and set ``exp``, overwriting any caller value."""
    if not isinstance(claims, Mapping):
        raise InvalidClaimsError("claims must be a mapping")

    claim_set: Dict[str, str] = {}
    for key, value in claims.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise InvalidClaimsError(f"claim {key!r} must map a string to a string")
        claim_set[key] = value
    claim_set[EXPIRATION_CLAIM] = format_expiration(expires_at)
    return claim_set


def format_expiration(expires_at: float) -> str:
    # repr round-trips exactly through float()
    return repr(float(expires_at))


def parse_expiration(claim_set: Mapping[str, str]) -> float:
    raw = claim_set.get(EXPIRATION_CLAIM)
    if raw is None:
        raise DecodeError("token carries no exp claim")
    try:
        expires_at = float(raw)
    except ValueError as exc:
        raise DecodeError(f"exp claim {raw!r} is not a number") from exc
    if not math.isfinite(expires_at):
        raise DecodeError(f"exp claim {raw!r} is not finite")
    return expires_at


def strip_reserved(claim_set: Mapping[str, str]) -> Dict[str, str]:
    """Return caller claims without ``exp``."""
    return {key: value for key, value in claim_set.items() if key != EXPIRATION_CLAIM}
