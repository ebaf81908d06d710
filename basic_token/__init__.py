"""basic-token package.

Compact HMAC-signed tokens carrying flat string claims and an expiry.
"""

from .config import TokenConfig
from .errors import (
    ConfigurationError,
    DecodeError,
    ExpiredError,
    InvalidClaimsError,
    InvalidDurationError,
    NotExpiredError,
    NotValidError,
    TokenError,
)
from .live import issue, parse
from .snapshot import SnapshotToken
from .token import ParsingInfo, TokenEngine

__all__ = [
    "TokenConfig",
    "TokenEngine",
    "SnapshotToken",
    "ParsingInfo",
    "issue",
    "parse",
    "TokenError",
    "ConfigurationError",
    "DecodeError",
    "ExpiredError",
    "InvalidClaimsError",
    "InvalidDurationError",
    "NotExpiredError",
    "NotValidError",
]
