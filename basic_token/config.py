"""Signing configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Union

from .errors import ConfigurationError

DEFAULT_SECRET_ENV = "BASIC_TOKEN_SECRET"


@dataclass(frozen=True)
class TokenConfig:
    """Holds the single HMAC secret shared by every token this library signs."""

    secret_key: Union[str, bytes] = field(repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.secret_key, (str, bytes)):
            raise ConfigurationError("secret_key must be str or bytes")
        if not self.secret_key:
            raise ConfigurationError("secret_key must not be empty")

    @property
    def secret_bytes(self) -> bytes:
        if isinstance(self.secret_key, bytes):
            return self.secret_key
        return self.secret_key.encode("utf-8")

    @classmethod
    def from_env(cls, env_var: str = DEFAULT_SECRET_ENV) -> "TokenConfig":
        """Build a config from ``env_var``; there is no fallback secret."""
        secret = os.getenv(env_var)
        if not secret:
            raise ConfigurationError(f"Environment variable {env_var} is not set.")
        return cls(secret_key=secret)
