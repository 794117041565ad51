"""Wire encoding for the auth section.

Secrets are held as raw bytes in memory but YAML and JSON can only carry
strings, so ``key`` and ``intraservice`` travel as standard base64 (with
padding). The wire shapes below are private to this module.

A value whose structure does not match the wire shape (not a mapping, or a
field of the wrong type) decodes to an empty section and logs a warning
instead of failing the load. Bad base64 is always an error: an unreadable
secret must never turn into an empty one.
"""

from __future__ import annotations

import base64
import logging
from dataclasses import dataclass, field
from typing import Any

from ..errors import AuthDecodeError
from .config import KeyserverConfig, PSKConfig

logger = logging.getLogger(__name__)


class _ShapeError(Exception):
    """Wire value does not have the expected structure."""


@dataclass
class _PSKWire:
    key: str = ""
    iss: list[str] = field(default_factory=list)

    @classmethod
    def parse(cls, data: Any) -> _PSKWire:
        data = _mapping(data)
        return cls(
            key=_string(data, "key"),
            iss=_string_list(data, "iss"),
        )


@dataclass
class _KeyserverWire:
    api: str = ""
    intraservice: str = ""

    @classmethod
    def parse(cls, data: Any) -> _KeyserverWire:
        data = _mapping(data)
        return cls(
            api=_string(data, "api"),
            intraservice=_string(data, "intraservice"),
        )


def decode_psk(data: Any) -> PSKConfig:
    """Decode the ``psk`` section into a PSKConfig."""
    try:
        wire = _PSKWire.parse(data)
    except _ShapeError as e:
        logger.warning(f"Ignoring malformed psk section: {e}")
        return PSKConfig()

    key = _b64decode(wire.key, "psk.key")
    logger.debug(f"Decoded psk section ({len(wire.iss)} issuers)")
    return PSKConfig(key=key, issuer=tuple(wire.iss))


def encode_psk(config: PSKConfig) -> dict[str, Any]:
    """Encode a PSKConfig into its wire form."""
    return {
        "key": _b64encode(config.key),
        "iss": list(config.issuer),
    }


def decode_keyserver(data: Any) -> KeyserverConfig:
    """Decode the ``keyserver`` section into a KeyserverConfig."""
    try:
        wire = _KeyserverWire.parse(data)
    except _ShapeError as e:
        logger.warning(f"Ignoring malformed keyserver section: {e}")
        return KeyserverConfig()

    intraservice = _b64decode(wire.intraservice, "keyserver.intraservice")
    logger.debug(f"Decoded keyserver section (api={wire.api!r})")
    return KeyserverConfig(api=wire.api, intraservice=intraservice)


def encode_keyserver(config: KeyserverConfig) -> dict[str, Any]:
    """Encode a KeyserverConfig into its wire form."""
    return {
        "api": config.api,
        "intraservice": _b64encode(config.intraservice),
    }


def _b64decode(value: str, label: str) -> bytes:
    # Line breaks are ignored, so folded YAML scalars decode cleanly.
    value = value.replace("\r", "").replace("\n", "")
    try:
        return base64.b64decode(value, validate=True)
    except ValueError as exc:
        raise AuthDecodeError(label, str(exc)) from exc


def _b64encode(value: bytes) -> str:
    return base64.b64encode(value).decode("ascii")


def _mapping(data: Any) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise _ShapeError(f"expected a mapping, got {type(data).__name__}")
    return data


def _string(source: dict[str, Any], key: str) -> str:
    value = source.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise _ShapeError(f"{key} must be a string")
    return value


def _string_list(source: dict[str, Any], key: str) -> list[str]:
    value = source.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise _ShapeError(f"{key} must be a list")
    for index, item in enumerate(value):
        if not isinstance(item, str):
            raise _ShapeError(f"{key}[{index}] must be a string")
    return list(value)
