"""
Daybook exception hierarchy.

All daybook exceptions inherit from DaybookError, making it easy for consumers
to catch library-level errors while still distinguishing specific failure modes.
"""


class DaybookError(Exception):
    """Base exception class for all daybook errors."""


class ConfigurationError(DaybookError):
    """Raised for configuration errors (missing keys, invalid values)."""


class DataProcessingError(DaybookError):
    """Raised for data processing errors."""


class FileIOError(DaybookError):
    """Raised for file I/O errors."""
