"""Signed token encoding, signing and verification."""

from .engine import TokenEngine
from .signer import HmacSigner
from .types import Header, ParsingInfo, TokenInspection, TokenStatus

__all__ = ["TokenEngine", "HmacSigner", "Header", "ParsingInfo", "TokenInspection", "TokenStatus"]
