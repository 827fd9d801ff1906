"""Tests for daybook.entries.config."""

import os

import pytest
import yaml

from daybook.core.config import Config
from daybook.core.exceptions import ConfigurationError
from daybook.entries.config import CsvImportConfig


class TestCsvImportConfig:
    def test_defaults(self):
        config = CsvImportConfig()
        assert config.delimiter == ","
        assert config.encoding == "utf-8"
        assert config.skip_blank_lines is False

    def test_rejects_multi_character_delimiter(self):
        with pytest.raises(ConfigurationError, match="single character"):
            CsvImportConfig(delimiter=";;")

    def test_rejects_empty_delimiter(self):
        with pytest.raises(ConfigurationError):
            CsvImportConfig(delimiter="")

    def test_from_config_file(self, tmp_config_file):
        config = CsvImportConfig.from_config(Config(config_file=tmp_config_file))
        assert config.delimiter == ";"
        assert config.encoding == "latin-1"
        assert config.skip_blank_lines is False

    @pytest.mark.parametrize("value,expected", [("false", False), ("0", False), ("no", False), ("TRUE", True)])
    def test_env_strings_coerced(self, monkeypatch, value, expected):
        monkeypatch.setenv("DAYBOOK_CSV_IMPORT__SKIP_BLANK_LINES", value)
        config = CsvImportConfig.from_config(Config())
        assert config.skip_blank_lines is expected

    def test_invalid_bool_raises(self, monkeypatch):
        monkeypatch.setenv("DAYBOOK_CSV_IMPORT__SKIP_BLANK_LINES", "maybe")
        with pytest.raises(ConfigurationError, match="boolean"):
            CsvImportConfig.from_config(Config())

    def test_skip_blank_lines_opt_in_from_file(self, tmp_dir):
        path = os.path.join(tmp_dir, "daybook.yaml")
        with open(path, "w") as f:
            yaml.dump({"csv_import": {"skip_blank_lines": True}}, f)
        config = CsvImportConfig.from_config(Config(config_file=path))
        assert config.skip_blank_lines is True
