"""In-memory entry store.

Provides the immutable Entry/EntryStore value types, a begin/accept/finish
build contract for feeding raw entries from any producer, and a CSV import
pipeline built on top of it.
"""

from .builder import EntryAccumulator, EntryStoreBuilder, StoreBuilder, build
from .config import CsvImportConfig
from .csv_import import CsvImportPipeline, import_csv, parse_line, parse_lines, read_lines
from .errors import EntryImportError, MalformedDateError, MalformedLineError
from .models import Entry, RawEntry
from .store import EntryStore

__all__ = [
    "CsvImportConfig",
    "CsvImportPipeline",
    "Entry",
    "EntryAccumulator",
    "EntryImportError",
    "EntryStore",
    "EntryStoreBuilder",
    "MalformedDateError",
    "MalformedLineError",
    "RawEntry",
    "StoreBuilder",
    "build",
    "import_csv",
    "parse_line",
    "parse_lines",
    "read_lines",
]
