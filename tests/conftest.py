"""Shared test fixtures for daybook."""

import os
import tempfile
from datetime import date

import pytest

from daybook.entries.models import RawEntry


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture
def tmp_config_file(tmp_dir):
    """Create a temporary YAML config file."""
    import yaml

    config_data = {
        "logging": {"level": "DEBUG"},
        "csv_import": {"delimiter": ";", "encoding": "latin-1"},
    }
    config_path = os.path.join(tmp_dir, "config.yaml")
    with open(config_path, "w") as f:
        yaml.dump(config_data, f)
    return config_path


@pytest.fixture
def raw_entries():
    """Three raw entries, two sharing a date."""
    return [
        RawEntry(date(2023, 12, 19), "Dentist"),
        RawEntry(date(2023, 12, 20), "Shopping"),
        RawEntry(date(2023, 12, 19), "Movies"),
    ]


@pytest.fixture
def entries_file(tmp_dir):
    """Write an entry file and return its path."""
    path = os.path.join(tmp_dir, "entries.csv")
    with open(path, "w", encoding="utf-8") as f:
        f.write("2023-12-19,Dentist\n2023-12-20,Shopping\n2023-12-19,Movies\n")
    return path
