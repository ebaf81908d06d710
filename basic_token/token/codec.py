"""Canonical claim serialization and URL-safe base64 framing."""

from __future__ import annotations

import base64
import binascii
import json
import re
from typing import Any, Dict, List, Mapping, Tuple

from ..errors import DecodeError

_URL_SAFE_RE = re.compile(r"[A-Za-z0-9_-]*")


def encode_claims(claims: Mapping[str, str]) -> bytes:
    """Return stable compact JSON with sorted keys."""
    return json.dumps(dict(claims), sort_keys=True, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def _reject_duplicates(pairs: List[Tuple[str, Any]]) -> Dict[str, Any]:
    result: Dict[str, Any] = {}
    for key, value in pairs:
        if key in result:
            raise DecodeError(f"duplicate claim '{key}'")
        result[key] = value
    return result


def decode_claims(data: bytes) -> Dict[str, str]:
    """Inverse of :func:`encode_claims`; only flat string objects are accepted."""
    try:
        decoded = json.loads(data.decode("utf-8"), object_pairs_hook=_reject_duplicates)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise DecodeError("claims are not valid UTF-8 JSON") from exc

    if not isinstance(decoded, dict):
        raise DecodeError("claims must be a JSON object")
    for key, value in decoded.items():
        if not isinstance(value, str):
            raise DecodeError(f"claim '{key}' is not a string")
    return decoded


def to_url_safe_base64(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def from_url_safe_base64(text: str) -> bytes:
    if not _URL_SAFE_RE.fullmatch(text):
        raise DecodeError("segment contains characters outside the URL-safe alphabet")
    padded = text + "=" * (-len(text) % 4)
    try:
        return base64.urlsafe_b64decode(padded.encode("ascii"))
    except binascii.Error as exc:
        raise DecodeError("segment is not valid base64") from exc
