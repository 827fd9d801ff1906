"""
EntryStore: an immutable, in-memory collection of dated entries.

Every mutator returns a new store and leaves the receiver untouched, so any
two stores derived from a common ancestor are independent values::

    store = EntryStore()
    store = store.add(RawEntry(date(2023, 12, 19), "Dentist"))
    later = store.update(1, lambda e: e.with_changes(title="Dentist, 9am"))

    store.get(1).title   # "Dentist"
    later.get(1).title   # "Dentist, 9am"
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType

from loguru import logger

from .models import Entry, RawEntry


@dataclass(frozen=True)
class EntryStore:
    """Identifier counter plus a mapping from identifier to Entry.

    ``next_id`` only ever grows; deleting an entry does not free its
    identifier. Build stores with ``EntryStore()``, ``from_sequence`` or
    the builder in ``daybook.entries.builder`` rather than passing
    ``_entries`` directly.
    """

    next_id: int = 1
    _entries: dict[int, Entry] = field(default_factory=dict, repr=False)

    def __post_init__(self):
        if self.next_id < 1:
            raise ValueError(f"next_id must be >= 1, got {self.next_id}")

    def __hash__(self) -> int:
        return hash((self.next_id, frozenset(self._entries.items())))

    @classmethod
    def from_sequence(cls, raw_entries: Iterable[RawEntry | tuple[date, str]]) -> EntryStore:
        """Build a store by adding each raw entry in iteration order.

        The first item gets id 1, the second id 2, and so on.
        """
        from .builder import build

        return build(raw_entries)

    # -- reads --------------------------------------------------------------

    @property
    def entries(self) -> Mapping[int, Entry]:
        """Read-only view of the id -> Entry mapping."""
        return MappingProxyType(self._entries)

    def get(self, entry_id: int, default: Entry | None = None) -> Entry | None:
        return self._entries.get(entry_id, default)

    def entries_on(self, day: date) -> list[Entry]:
        """Return every entry dated exactly ``day``, by ascending id.

        Returns an empty list when nothing matches.
        """
        return [entry for entry in self if entry.date == day]

    def dates(self) -> list[date]:
        """Distinct dates that have at least one entry, oldest first."""
        return sorted({entry.date for entry in self._entries.values()})

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        for entry_id in sorted(self._entries):
            yield self._entries[entry_id]

    def __contains__(self, entry_id: object) -> bool:
        return entry_id in self._entries

    # -- mutators (each returns a new store) --------------------------------

    def add(self, raw: RawEntry | tuple[date, str]) -> EntryStore:
        """Assign the next identifier to ``raw`` and insert it.

        Inputs are trusted; malformed text must be rejected before it gets here.
        """
        entry_date, title = raw
        entry = Entry(id=self.next_id, date=entry_date, title=title)
        logger.debug(f"Adding entry {entry.id} dated {entry_date.isoformat()}")
        return EntryStore(next_id=entry.id + 1, _entries={**self._entries, entry.id: entry})

    def update(self, entry_id: int, updater: Callable[[Entry], Entry]) -> EntryStore:
        """Replace the entry at ``entry_id`` with ``updater(entry)``.

        Absent ids leave the store unchanged. The store never re-keys: if the
        updater returns an entry carrying a different id, that id is
        overwritten with ``entry_id``.
        """
        current = self._entries.get(entry_id)
        if current is None:
            logger.debug(f"Update skipped, no entry {entry_id}")
            return self

        updated = updater(current)
        if updated.id != entry_id:
            logger.warning(f"Updater changed id {entry_id} -> {updated.id}; keeping {entry_id}")
            updated = updated.with_changes(id=entry_id)

        return EntryStore(next_id=self.next_id, _entries={**self._entries, entry_id: updated})

    def delete(self, entry_id: int) -> EntryStore:
        """Remove the entry at ``entry_id``. Absent ids are a no-op."""
        if entry_id not in self._entries:
            return self

        remaining = {k: v for k, v in self._entries.items() if k != entry_id}
        logger.debug(f"Deleted entry {entry_id}")
        return EntryStore(next_id=self.next_id, _entries=remaining)
