"""Reads and writes the notifications YAML file (channels and subscribers)."""

import os
from pathlib import Path
from typing import Any, Optional

import yaml

from .config_schema import FullConfig

DEFAULT_CONFIG_PATH = "notifications_config.yaml"
CONFIG_ENV_VAR = "NOTIFICATIONS_CONFIG"


class ConfigService:
    """Channels and subscribers as configured on disk.

    The path is taken from the argument, then the NOTIFICATIONS_CONFIG
    environment variable, then notifications_config.yaml.
    """

    def __init__(self, path: Optional[str] = None):
        self._path = Path(path or os.getenv(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH)

    def load_config(self) -> FullConfig:
        """
        Parse the file into a FullConfig. An empty file yields the defaults
        (no subscribers, no webhook).
        """
        if not self._path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self._path}")
        with self._path.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
        return FullConfig.model_validate(raw)

    def save_config(self, config: Any) -> None:
        """
        Write a FullConfig (or an equivalent dict) back as YAML, enums and
        URLs as plain strings.
        """
        if hasattr(config, "model_dump"):
            config = config.model_dump(mode="json")
        with self._path.open("w", encoding="utf-8") as f:
            yaml.dump(config, f, default_flow_style=False)

    def get_config_path(self) -> str:
        """Absolute path of the configuration file, for error messages."""
        return str(self._path.absolute())
