"""Root configuration document."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .auth import AuthConfig


@dataclass(frozen=True, slots=True)
class Config:
    """Configuration document. Only the ``auth`` section is modelled here."""
    auth: AuthConfig = field(default_factory=AuthConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        """Create config from dictionary."""
        return cls(auth=AuthConfig.from_dict(data.get("auth")))

    def to_dict(self) -> dict[str, Any]:
        return {"auth": self.auth.to_dict()}

    @classmethod
    def from_yaml(cls, path: str | Path) -> Config:
        """Load config from a YAML file."""
        from .loader import ConfigLoader

        return ConfigLoader().load_file(path)

    def to_yaml(self) -> str:
        from .loader import ConfigLoader

        return ConfigLoader().dump(self)
