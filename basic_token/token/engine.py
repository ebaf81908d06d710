"""Token issuance, verification and expiry checks."""

from __future__ import annotations

import logging
import math
from datetime import datetime
from typing import Dict, Mapping, Optional, Tuple

from ..config import TokenConfig
from ..errors import DecodeError, ExpiredError, InvalidDurationError, NotExpiredError, NotValidError
from ..utils.time import add_minutes, to_epoch_seconds
from .claims import build_claim_set, parse_expiration, strip_reserved
from .codec import decode_claims, encode_claims, from_url_safe_base64, to_url_safe_base64
from .signer import HmacSigner
from .types import Header, TokenInspection, TokenStatus

logger = logging.getLogger(__name__)

_HEADER = Header()


def _signing_input(header_b64: str, payload_b64: str) -> bytes:
    return f"{header_b64}.{payload_b64}".encode("utf-8", "surrogatepass")


class TokenEngine:
    """Build tokens and answer questions about them at a given reference time.

    The header is never decoded on verification: only the bytes of the first
    two segments are re-signed and compared, so a token is judged by exactly
    one key and one algorithm.
    """

    def __init__(self, config: TokenConfig) -> None:
        self._signer = HmacSigner(config.secret_bytes)

    def issue(self, claims: Mapping[str, str], ttl_minutes: float, reference_time: datetime) -> str:
        if not math.isfinite(ttl_minutes) or ttl_minutes < 0:
            raise InvalidDurationError("Expiration time must be a finite, non-negative number of minutes")

        header_b64 = to_url_safe_base64(encode_claims(_HEADER.to_dict()))
        try:
            expires_at = to_epoch_seconds(add_minutes(reference_time, ttl_minutes))
        except (OverflowError, ValueError) as exc:
            raise InvalidDurationError(f"Expiration time of {ttl_minutes} minutes is out of range") from exc
        claim_set = build_claim_set(claims, expires_at)
        payload_b64 = to_url_safe_base64(encode_claims(claim_set))
        signature = self._signer.sign(_signing_input(header_b64, payload_b64))
        logger.debug("issued token claims=%s exp=%s", sorted(claim_set), expires_at)
        return f"{header_b64}.{payload_b64}.{signature}"

    def is_structurally_valid(self, token: Optional[str]) -> bool:
        return self._check_structure(token) is None

    def has_expired(self, token: Optional[str], reference_time: datetime) -> bool:
        inspection = self._require_valid(token, reference_time)
        return inspection.has_expired

    def expired_by_seconds(self, token: Optional[str], reference_time: datetime) -> float:
        inspection = self._require_valid(token, reference_time)
        if not inspection.has_expired:
            raise NotExpiredError("Token has not expired")
        return inspection.expired_by_seconds

    def claims(self, token: Optional[str], reference_time: datetime) -> Dict[str, str]:
        inspection = self._require_valid(token, reference_time)
        if inspection.has_expired:
            raise ExpiredError("Token has expired")
        assert inspection.claims is not None
        return dict(inspection.claims)

    def inspect(self, token: Optional[str], reference_time: datetime) -> TokenInspection:
        """Validate, decode and judge ``token`` against one reference instant."""
        reason = self._check_structure(token)
        if reason is not None:
            logger.debug("token rejected: %s", reason)
            return TokenInspection(status=TokenStatus.INVALID, reason=reason)

        assert token is not None
        try:
            claim_set, expires_at = self._decode_payload(token)
        except DecodeError as exc:
            logger.debug("token rejected: bad_payload (%s)", exc)
            return TokenInspection(status=TokenStatus.INVALID, reason="bad_payload")

        reference_seconds = to_epoch_seconds(reference_time)
        if expires_at < reference_seconds:
            return TokenInspection(
                status=TokenStatus.EXPIRED,
                reason="expired",
                expires_at=expires_at,
                expired_by_seconds=reference_seconds - expires_at,
            )
        return TokenInspection(
            status=TokenStatus.ACTIVE,
            reason="ok",
            expires_at=expires_at,
            claims=strip_reserved(claim_set),
        )

    def _require_valid(self, token: Optional[str], reference_time: datetime) -> TokenInspection:
        inspection = self.inspect(token, reference_time)
        if not inspection.is_valid:
            raise NotValidError(f"Token is not valid: {inspection.reason}")
        return inspection

    def _check_structure(self, token: Optional[str]) -> Optional[str]:
        """Return a rejection reason, or ``None`` when the signature matches."""
        if not isinstance(token, str) or not token:
            return "missing"
        parts = token.split(".")
        if len(parts) != 3:
            return "malformed"
        if not self._signer.verify(_signing_input(parts[0], parts[1]), parts[2]):
            return "bad_signature"
        return None

    @staticmethod
    def _decode_payload(token: str) -> Tuple[Dict[str, str], float]:
        payload_b64 = token.split(".")[1]
        claim_set = decode_claims(from_url_safe_base64(payload_b64))
        return claim_set, parse_expiration(claim_set)
