"""Configuration dataclasses for entry import.

Pure data containers with sensible defaults. Build them from a Config with
``from_config`` or pass values to the constructor directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from daybook.core.config import Config
from daybook.core.exceptions import ConfigurationError

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


def _as_bool(key: str, value: Any) -> bool:
    """Coerce YAML booleans and env-var strings."""
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ConfigurationError(f"{key} must be a boolean, got {value!r}")


@dataclass
class CsvImportConfig:
    """Settings for reading delimited entry files.

    Attributes:
        delimiter: Single character separating date and title.
        encoding: Text encoding of the input file.
        skip_blank_lines: Ignore empty lines. Off by default, so an empty line
            is a MalformedLineError like any other line without two fields.
    """

    delimiter: str = ","
    encoding: str = "utf-8"
    skip_blank_lines: bool = False

    def __post_init__(self):
        if len(self.delimiter) != 1:
            raise ConfigurationError(f"delimiter must be a single character, got {self.delimiter!r}")

    @classmethod
    def from_config(cls, config: Config) -> CsvImportConfig:
        """Read the ``csv_import`` section of a Config."""
        return cls(
            delimiter=str(config.get("csv_import.delimiter", ",")),
            encoding=str(config.get("csv_import.encoding", "utf-8")),
            skip_blank_lines=_as_bool(
                "csv_import.skip_blank_lines", config.get("csv_import.skip_blank_lines", False)
            ),
        )
