"""Shared type aliases used across daybook."""

from pathlib import Path
from typing import Any

# Config value types
ConfigDict = dict[str, Any]

# Path types
PathLike = str | Path
