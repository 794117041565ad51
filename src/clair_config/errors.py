"""Configuration error types."""

from __future__ import annotations


class ConfigError(ValueError):
    """Raised when a configuration document cannot be loaded."""


class AuthDecodeError(ConfigError):
    """A base64-encoded secret in the auth section could not be decoded."""

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"{field}: invalid base64: {reason}")
