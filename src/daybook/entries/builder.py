"""
Build contract for feeding raw entries into a store.

A producer (an in-memory list, a decoded file stream, a generator) never
touches EntryStore internals. It hands items to a ``StoreBuilder`` in three
steps::

    acc = builder.begin(existing_store)
    for raw in producer:
        acc = builder.accept(acc, raw)
    store = builder.finish(acc)

``build()`` runs exactly that loop. Stores are immutable, so abandoning the
loop part-way (or letting the producer raise) leaves the store passed to
``begin`` as it was.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from typing import Protocol, TypeVar, runtime_checkable

from loguru import logger

from .models import RawEntry
from .store import EntryStore

A = TypeVar("A")


@runtime_checkable
class StoreBuilder(Protocol[A]):
    """Protocol for turning a stream of raw entries into an EntryStore.

    ``A`` is the builder's private accumulator type.
    """

    def begin(self, store: EntryStore | None = None) -> A:
        """Start an accumulator seeded from ``store`` (or an empty store)."""
        ...

    def accept(self, acc: A, raw: RawEntry | tuple[date, str]) -> A:
        """Add one raw entry and return the updated accumulator."""
        ...

    def finish(self, acc: A) -> EntryStore:
        """Extract the finished store."""
        ...


@dataclass(frozen=True)
class EntryAccumulator:
    """Intermediate value used by EntryStoreBuilder.

    Attributes:
        store: Store built so far.
        accepted: Number of raw entries accepted since ``begin``.
    """

    store: EntryStore
    accepted: int = 0


class EntryStoreBuilder:
    """Default StoreBuilder: one ``EntryStore.add`` per accepted item."""

    def begin(self, store: EntryStore | None = None) -> EntryAccumulator:
        return EntryAccumulator(store=store if store is not None else EntryStore())

    def accept(self, acc: EntryAccumulator, raw: RawEntry | tuple[date, str]) -> EntryAccumulator:
        return EntryAccumulator(store=acc.store.add(raw), accepted=acc.accepted + 1)

    def finish(self, acc: EntryAccumulator) -> EntryStore:
        logger.debug(f"Built store with {acc.accepted} new entries (next_id={acc.store.next_id})")
        return acc.store


def build(
    source: Iterable[RawEntry | tuple[date, str]],
    store: EntryStore | None = None,
    builder: StoreBuilder | None = None,
) -> EntryStore:
    """Drive ``builder`` over ``source`` and return the resulting store.

    Args:
        source: Any iterable of raw entries. Consumed once, in order.
        store: Existing store to append into. Defaults to an empty store.
        builder: StoreBuilder to use. Defaults to EntryStoreBuilder.

    Returns:
        A new store; ``store`` itself is never modified.
    """
    builder = builder or EntryStoreBuilder()
    acc = builder.begin(store)
    for raw in source:
        acc = builder.accept(acc, raw)
    return builder.finish(acc)
