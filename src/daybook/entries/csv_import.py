"""
Import entries from a delimited text file.

One record per line, ``YYYY-MM-DD,<title>``, no header, no quoting::

    2023-12-19,Dentist
    2023-12-20,Shopping

Lines are read lazily and fed straight into the build contract, so the file
never has to fit in memory. The import is all-or-nothing: the first
malformed line raises and no store is returned.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from contextlib import closing
from datetime import date

from loguru import logger

from daybook.core.exceptions import FileIOError
from daybook.core.types import PathLike

from .builder import EntryStoreBuilder, StoreBuilder, build
from .config import CsvImportConfig
from .errors import MalformedDateError, MalformedLineError
from .models import RawEntry
from .store import EntryStore

_ISO_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def read_lines(path: PathLike, encoding: str = "utf-8") -> Iterator[str]:
    """Yield lines from ``path`` one at a time. Single pass, not restartable."""
    try:
        f = open(path, encoding=encoding)
    except OSError as e:
        raise FileIOError(f"Cannot open entry file {path}: {e}") from e

    with f:
        try:
            yield from f
        except UnicodeDecodeError as e:
            raise FileIOError(f"Entry file {path} is not valid {encoding}: {e}") from e


def parse_date(text: str, *, line: str = "", line_number: int | None = None) -> date:
    """Parse a strict ``YYYY-MM-DD`` date."""
    if not _ISO_DATE_RE.fullmatch(text):
        raise MalformedDateError(f"not a YYYY-MM-DD date: {text!r}", line=line, line_number=line_number)
    try:
        return date.fromisoformat(text)
    except ValueError as e:
        raise MalformedDateError(f"invalid calendar date {text!r}: {e}", line=line, line_number=line_number) from e


def parse_line(line: str, line_number: int | None = None, delimiter: str = ",") -> RawEntry:
    """Parse one line into a RawEntry.

    Surrounding whitespace (including the line terminator) is stripped and
    trailing empty fields are dropped before counting, so ``2023-12-19,Movies,``
    is accepted.

    Raises:
        MalformedLineError: The line is not exactly a date and a title.
        MalformedDateError: The date field is not a valid calendar date.
    """
    text = line.strip()
    fields = text.split(delimiter)
    while fields and fields[-1] == "":
        fields.pop()

    if len(fields) != 2:
        raise MalformedLineError(
            f"expected 2 fields separated by {delimiter!r}, got {len(fields)}",
            line=text,
            line_number=line_number,
        )

    date_text, title = fields
    return RawEntry(date=parse_date(date_text, line=text, line_number=line_number), title=title)


def parse_lines(lines: Iterable[str], config: CsvImportConfig | None = None) -> Iterator[RawEntry]:
    """Lazily parse ``lines`` into RawEntry values, numbering lines from 1."""
    config = config or CsvImportConfig()
    for line_number, line in enumerate(lines, start=1):
        if config.skip_blank_lines and not line.strip():
            continue
        yield parse_line(line, line_number=line_number, delimiter=config.delimiter)


class CsvImportPipeline:
    """Reads a delimited entry file and drives a StoreBuilder with its lines.

    Example::

        pipeline = CsvImportPipeline()
        store = pipeline.run("entries.csv")
    """

    def __init__(self, config: CsvImportConfig | None = None, builder: StoreBuilder | None = None):
        self.config = config or CsvImportConfig()
        self.builder = builder or EntryStoreBuilder()

    def run_lines(self, lines: Iterable[str], into: EntryStore | None = None) -> EntryStore:
        """Import from an already-open line source."""
        start = into.next_id if into is not None else 1
        store = build(parse_lines(lines, self.config), store=into, builder=self.builder)
        logger.info(f"Imported {store.next_id - start} entries")
        return store

    def run(self, path: PathLike, into: EntryStore | None = None) -> EntryStore:
        """Import every line of ``path``.

        Args:
            path: File to read.
            into: Store to append into. Defaults to a fresh store, so ids start at 1.

        Raises:
            FileIOError: The file cannot be opened or decoded.
            MalformedLineError, MalformedDateError: A line failed to parse.
        """
        logger.debug(f"Importing entries from {path}")
        try:
            with closing(read_lines(path, self.config.encoding)) as lines:
                store = self.run_lines(lines, into=into)
        except (MalformedLineError, MalformedDateError) as e:
            logger.error(f"Import of {path} aborted: {e}")
            raise
        return store


def import_csv(
    path: PathLike,
    into: EntryStore | None = None,
    config: CsvImportConfig | None = None,
) -> EntryStore:
    """Import ``path`` into a new store (or append into ``into``)."""
    return CsvImportPipeline(config=config).run(path, into=into)
