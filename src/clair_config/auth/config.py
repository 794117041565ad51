"""Authentication configuration dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..errors import ConfigError


@dataclass(frozen=True, slots=True)
class PSKConfig:
    """
    Pre-shared key authentication configuration.

    ``issuer`` lists the values accepted for the "iss" claim of incoming tokens.
    """
    key: bytes = field(default=b"", repr=False)
    issuer: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class KeyserverConfig:
    """
    Keyserver protocol authentication configuration.

    ``intraservice`` is only needed when the service does not run in the
    combined ("combo") mode.
    """
    api: str = ""  # e.g., "https://keyserver.example.com/"
    intraservice: bytes = field(default=b"", repr=False)


@dataclass(frozen=True, slots=True)
class AuthConfig:
    """
    Authentication methods configured for the service.

    A method that is ``None`` was not mentioned in the document at all. A
    method that is present with empty fields was mentioned but is
    misconfigured; callers rely on telling the two apart.
    """
    psk: PSKConfig | None = None
    keyserver: KeyserverConfig | None = None

    def any(self) -> bool:
        """Report whether any sort of authentication is configured."""
        return self.psk is not None or self.keyserver is not None

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> AuthConfig:
        """Create config from the ``auth`` section of a document."""
        from .codec import decode_keyserver, decode_psk

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError("auth must be a mapping")
        psk_data = data.get("psk")
        keyserver_data = data.get("keyserver")

        return cls(
            psk=decode_psk(psk_data) if psk_data is not None else None,
            keyserver=(
                decode_keyserver(keyserver_data)
                if keyserver_data is not None
                else None
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the wire form. Absent methods are omitted."""
        from .codec import encode_keyserver, encode_psk

        out: dict[str, Any] = {}
        if self.psk is not None:
            out["psk"] = encode_psk(self.psk)
        if self.keyserver is not None:
            out["keyserver"] = encode_keyserver(self.keyserver)
        return out
