"""Config loader - loads configuration documents from YAML/JSON files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from .config import Config
from .errors import ConfigError


logger = logging.getLogger(__name__)

_YAML_SUFFIXES = (".yaml", ".yml")


class ConfigLoader:
    """
    Loads configuration documents from YAML or JSON.

    File format:
    ```yaml
    auth:
      psk:
        key: c2VjcmV0          # base64
        iss: ["clair"]
      keyserver:
        api: https://keyserver.example.com/
        intraservice: dG9rZW4=  # base64
    ```

    Sections other than ``auth`` are left to their own owners and ignored.
    """

    def load_file(self, path: str | Path) -> Config:
        """Load config from a YAML or JSON file."""
        path = Path(path)

        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            config = self.load_string(f.read(), fmt=_format_for(path))

        logger.info(f"Loaded config from {path}")
        return config

    def load_string(self, text: str, fmt: str = "yaml") -> Config:
        """Load config from YAML or JSON text."""
        if fmt == "yaml":
            try:
                data = yaml.safe_load(text)
            except yaml.YAMLError as exc:
                raise ConfigError(f"Invalid YAML: {exc}") from exc
        elif fmt == "json":
            try:
                data = json.loads(text)
            except json.JSONDecodeError as exc:
                raise ConfigError(f"Invalid JSON: {exc}") from exc
        else:
            raise ConfigError(f"Unsupported config format: {fmt}")

        return self.load_dict({} if data is None else data)

    def load_dict(self, data: dict[str, Any]) -> Config:
        """Load config from a dictionary."""
        if not isinstance(data, dict):
            raise ConfigError("Config root must be a mapping.")

        config = Config.from_dict(data)
        logger.debug(
            "Auth methods configured: psk=%s keyserver=%s",
            config.auth.psk is not None,
            config.auth.keyserver is not None,
        )
        return config

    def dump(self, config: Config, fmt: str = "yaml") -> str:
        """Serialize config to YAML or JSON text."""
        data = config.to_dict()
        if fmt == "yaml":
            return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
        if fmt == "json":
            return json.dumps(data, indent=2)
        raise ConfigError(f"Unsupported config format: {fmt}")

    def dump_file(self, config: Config, path: str | Path) -> None:
        """Write config to a YAML or JSON file, chosen by suffix."""
        path = Path(path)
        with open(path, "w", encoding="utf-8") as f:
            f.write(self.dump(config, fmt=_format_for(path)))
        logger.info(f"Wrote config to {path}")


def _format_for(path: Path) -> str:
    return "yaml" if path.suffix in _YAML_SUFFIXES else "json"


def load_config(source: str | Path | dict) -> Config:
    """
    Convenience function to load a config.

    Args:
        source: File path or dictionary

    Returns:
        Config with the decoded auth section
    """
    loader = ConfigLoader()

    if isinstance(source, dict):
        return loader.load_dict(source)
    return loader.load_file(source)
