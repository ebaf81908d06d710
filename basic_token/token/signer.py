"""HMAC-SHA256 signatures in URL-safe base64."""

from __future__ import annotations

import hmac
from hashlib import sha256
from typing import Union

from ..errors import ConfigurationError
from .codec import to_url_safe_base64


class HmacSigner:
    """Sign and verify byte strings with one fixed secret."""

    def __init__(self, secret_key: Union[str, bytes]) -> None:
        if not secret_key:
            raise ConfigurationError("secret_key must not be empty")
        self._secret = secret_key if isinstance(secret_key, bytes) else secret_key.encode("utf-8")

    def sign(self, message: bytes) -> str:
        return to_url_safe_base64(hmac.new(self._secret, message, sha256).digest())

    def verify(self, message: bytes, signature: str) -> bool:
        expected = self.sign(message)
        return hmac.compare_digest(expected.encode("ascii"), signature.encode("utf-8", "surrogatepass"))
