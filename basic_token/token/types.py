"""Token datatypes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional


@dataclass(frozen=True)
class Header:
    """Fixed token header. Never read back during verification."""

    alg: str = "HMAC"
    typ: str = "JWT"

    def to_dict(self) -> Dict[str, str]:
        return {"alg": self.alg, "typ": self.typ}


class TokenStatus(str, Enum):
    """Outcome of inspecting a token against a reference time."""

    INVALID = "INVALID"
    EXPIRED = "EXPIRED"
    ACTIVE = "ACTIVE"


@dataclass(frozen=True)
class TokenInspection:
    """Everything known about one token at one reference instant."""

    status: TokenStatus
    reason: str
    expires_at: Optional[float] = None
    expired_by_seconds: float = 0.0
    claims: Optional[Dict[str, str]] = None

    @property
    def is_valid(self) -> bool:
        return self.status is not TokenStatus.INVALID

    @property
    def has_expired(self) -> bool:
        return self.status is TokenStatus.EXPIRED


@dataclass(frozen=True)
class ParsingInfo:
    """Result of :func:`basic_token.live.parse`.

    ``expired_by_seconds`` is only meaningful when ``has_expired`` is true and
    ``claims`` is only populated for a valid, unexpired token.
    """

    is_valid: bool
    has_expired: bool
    reason: str
    expired_by_seconds: float = 0.0
    claims: Optional[Dict[str, str]] = None

    @classmethod
    def from_inspection(cls, inspection: TokenInspection) -> "ParsingInfo":
        return cls(
            is_valid=inspection.is_valid,
            has_expired=inspection.has_expired,
            reason=inspection.reason,
            expired_by_seconds=inspection.expired_by_seconds,
            claims=dict(inspection.claims) if inspection.claims is not None else None,
        )
