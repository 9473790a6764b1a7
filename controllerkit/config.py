"""
Config system - Layered controller configuration.

Controllers are configured once at start-up. Their static settings (view
and url roots, display name, mount path) can live in configuration; their
collaborators (router, model, middleware) are code and are passed to
``AbstractController.from_config`` alongside.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import dotenv_values

from .faults import ConfigInvalidFault

logger = logging.getLogger("controllerkit.config")


@dataclass(frozen=True)
class ControllerConfig:
    """
    Static construction settings of one controller.

    Attributes:
        view_root: Template path the controller renders into
        url_root: Route prefix
        human_name: Display label for navigation menus
        mount_path: Prefix the url root is nested under
    """

    view_root: Optional[str] = None
    url_root: str = "/"
    human_name: Optional[str] = None
    mount_path: str = ""

    @classmethod
    def from_mapping(cls, data: Dict[str, Any], *, name: str = "") -> "ControllerConfig":
        known = {f.name for f in fields(cls)}
        prefix = f"controllers.{name}." if name else ""

        values: Dict[str, Any] = {}
        for key, value in data.items():
            if key not in known:
                raise ConfigInvalidFault(f"{prefix}{key}", "unknown controller setting")
            if value is not None and not isinstance(value, str):
                value = str(value)
            values[key] = value

        url_root = values.get("url_root")
        if url_root is not None and not url_root.startswith("/"):
            raise ConfigInvalidFault(f"{prefix}url_root", "must start with '/'")

        return cls(**values)


class ConfigLoader:
    """
    Loads and merges configuration from multiple sources with precedence:
    overrides > environment variables > .env file > JSON config files

    Environment keys use the prefix and double underscores for nesting:
    ``CK_CONTROLLERS__ARTICLES__URL_ROOT=/articles/``.
    """

    def __init__(self, env_prefix: str = "CK_"):
        self.env_prefix = env_prefix
        self.config_data: Dict[str, Any] = {}

    @classmethod
    def load(
        cls,
        paths: Optional[list[str]] = None,
        env_prefix: str = "CK_",
        env_file: Optional[str] = None,
        overrides: Optional[Dict[str, Any]] = None,
    ) -> "ConfigLoader":
        """
        Load configuration from multiple sources with proper merge strategy.

        Args:
            paths: JSON config files, later files override earlier ones
            env_prefix: Prefix for environment variables
            env_file: Path to .env file
            overrides: Manual overrides (highest precedence)

        Returns:
            Configured ConfigLoader instance
        """
        loader = cls(env_prefix=env_prefix)

        for path in paths or []:
            loader._load_json_file(Path(path))

        if env_file:
            loader._load_env_file(env_file)

        loader._load_from_env()

        if overrides:
            loader._merge_dict(loader.config_data, overrides)

        return loader

    def _load_json_file(self, path: Path):
        if not path.exists():
            logger.debug("Config file %s not found, skipped", path)
            return

        with open(path) as f:
            data = json.load(f)
        self._merge_dict(self.config_data, data)

    def _load_env_file(self, path: str):
        if not Path(path).exists():
            logger.debug(".env file %s not found, skipped", path)
            return

        for key, value in dotenv_values(path).items():
            if key.startswith(self.env_prefix) and value is not None:
                self._set_nested(key, value)

    def _load_from_env(self):
        for key, value in os.environ.items():
            if key.startswith(self.env_prefix):
                self._set_nested(key, value)

    def _set_nested(self, key: str, value: str):
        """Convert CK_CONTROLLERS__ARTICLES__URL_ROOT to nested dict."""
        key = key[len(self.env_prefix):]
        parts = key.lower().split("__")

        current = self.config_data
        for part in parts[:-1]:
            if not isinstance(current.get(part), dict):
                current[part] = {}
            current = current[part]

        current[parts[-1]] = self._parse_value(value)

    def _parse_value(self, value: str) -> Any:
        """Parse JSON-looking values, keep everything else as a string."""
        if value.startswith(("{", "[")):
            try:
                return json.loads(value)
            except json.JSONDecodeError:
                pass
        return value

    def _merge_dict(self, target: dict, source: dict):
        """Deep merge source into target."""
        for key, value in source.items():
            if key in target and isinstance(target[key], dict) and isinstance(value, dict):
                self._merge_dict(target[key], value)
            else:
                target[key] = value

    def get(self, path: str, default: Any = None) -> Any:
        """Get config value by dot-separated path."""
        current: Any = self.config_data
        for part in path.split("."):
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default
        return current

    def controller_config(self, name: str) -> ControllerConfig:
        """Validated settings of the ``controllers.<name>`` section."""
        data = self.get(f"controllers.{name}", {})
        if not isinstance(data, dict):
            raise ConfigInvalidFault(f"controllers.{name}", "must be a mapping")
        return ControllerConfig.from_mapping(data, name=name)
