"""Authentication section of the configuration document.

Supports pre-shared key and keyserver protocol authentication.
"""

from .config import AuthConfig, KeyserverConfig, PSKConfig
from .codec import (
    decode_keyserver,
    decode_psk,
    encode_keyserver,
    encode_psk,
)

__all__ = [
    # Config
    "AuthConfig",
    "KeyserverConfig",
    "PSKConfig",
    # Wire hooks
    "decode_keyserver",
    "decode_psk",
    "encode_keyserver",
    "encode_psk",
]
