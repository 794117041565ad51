"""Configuration schema for the service's authentication section."""

from .auth import AuthConfig, KeyserverConfig, PSKConfig
from .config import Config
from .errors import AuthDecodeError, ConfigError
from .loader import ConfigLoader, load_config

__all__ = [
    "AuthConfig",
    "KeyserverConfig",
    "PSKConfig",
    "Config",
    "ConfigLoader",
    "load_config",
    "AuthDecodeError",
    "ConfigError",
]
