"""
Layered settings for logging and entry import.

Values are merged in this order (later wins):
    1. Built-in defaults
    2. Consumer-supplied ``defaults``
    3. Config file (YAML or JSON)
    4. Environment variables (DAYBOOK_SECTION__KEY)

Usage:
    config = Config(config_file="daybook.yaml")
    config.get("csv_import.delimiter")
"""

import copy
import json
import os
from typing import Any

import yaml

from .exceptions import ConfigurationError
from .types import ConfigDict

_DEFAULT_ENV_PREFIX = "DAYBOOK_"

_DEFAULTS: ConfigDict = {
    "logging": {
        "level": "WARNING",
        "file": "",
    },
    "csv_import": {
        "delimiter": ",",
        "encoding": "utf-8",
        "skip_blank_lines": False,
    },
}


def _merge(target: dict, source: dict) -> None:
    """Recursively merge source into target."""
    for key, value in source.items():
        if isinstance(target.get(key), dict) and isinstance(value, dict):
            _merge(target[key], value)
        else:
            target[key] = value


def _walk_to_parent(data: dict, parts: list[str]) -> dict:
    """Return the dict that should hold ``parts[-1]``, replacing non-dict nodes on the way."""
    current = data
    for part in parts[:-1]:
        if not isinstance(current.get(part), dict):
            current[part] = {}
        current = current[part]
    return current


class Config:
    """
    Settings read by ``setup_logging_from_config`` and ``CsvImportConfig.from_config``.

    Env vars use double-underscore to denote nesting:
    DAYBOOK_CSV_IMPORT__ENCODING=latin-1 -> config["csv_import"]["encoding"] = "latin-1"
    """

    def __init__(
        self,
        config_file: str | None = None,
        env_prefix: str = _DEFAULT_ENV_PREFIX,
        defaults: ConfigDict | None = None,
    ):
        """
        Args:
            config_file: Path to a YAML or JSON file. Missing files are ignored.
            env_prefix: Prefix for environment variable overrides. Empty disables them.
            defaults: Values merged over the built-in defaults, below the file.
        """
        self.config_file = config_file
        self.env_prefix = env_prefix or ""
        self.config_data: ConfigDict = copy.deepcopy(_DEFAULTS)

        if defaults:
            _merge(self.config_data, defaults)
        if config_file and os.path.exists(config_file):
            _merge(self.config_data, self._load_file(config_file))
        self._load_from_env()

    @staticmethod
    def _load_file(path: str) -> ConfigDict:
        ext = os.path.splitext(path)[1].lower()
        try:
            with open(path) as f:
                if ext in (".yaml", ".yml"):
                    data = yaml.safe_load(f) or {}
                elif ext == ".json":
                    data = json.load(f)
                else:
                    raise ConfigurationError(f"Unsupported config file type: {path}")
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Could not parse config file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {path} must contain a mapping at the top level")
        return data

    def _load_from_env(self) -> None:
        if not self.env_prefix:
            return
        for env_key, env_value in os.environ.items():
            if not env_key.startswith(self.env_prefix):
                continue
            parts = env_key[len(self.env_prefix) :].lower().split("__")
            _walk_to_parent(self.config_data, parts)[parts[-1]] = env_value

    def get(self, key_path: str, default: Any = None) -> Any:
        """Get a value by dot-notation path, e.g. ``"csv_import.encoding"``."""
        current = self.config_data
        for part in key_path.split("."):
            if not isinstance(current, dict) or part not in current:
                return default
            current = current[part]
        return current

    def set(self, key_path: str, value: Any) -> None:
        """Set a value by dot-notation path, creating (or replacing) intermediate dicts."""
        parts = key_path.split(".")
        _walk_to_parent(self.config_data, parts)[parts[-1]] = value
