"""Error types raised by token issuance and inspection."""

from __future__ import annotations


class TokenError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(TokenError, ValueError):
    """The signing configuration is missing or unusable."""


class InvalidDurationError(TokenError, ValueError):
    """The requested time-to-live is outside the accepted range."""


class InvalidClaimsError(TokenError, ValueError):
    """Claims are not a flat mapping of strings to strings."""


class DecodeError(TokenError, ValueError):
    """A token segment could not be decoded."""


class NotValidError(TokenError):
    """The token is malformed, tampered with, or signed with another key."""


class NotExpiredError(TokenError):
    """Expiry overage was requested for a token that is still live."""


class ExpiredError(TokenError):
    """Claims were requested from a token that has expired."""
