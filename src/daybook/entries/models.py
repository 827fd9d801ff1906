"""
Core value types for the entry store.

``RawEntry`` is what producers hand in; ``Entry`` is what the store hands
back once an identifier has been assigned.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import NamedTuple


class RawEntry(NamedTuple):
    """An unvalidated date/title pair, before identifier assignment."""

    date: date
    title: str


@dataclass(frozen=True)
class Entry:
    """A stored entry.

    Attributes:
        id: Identifier assigned by the owning store. Never chosen by callers.
        date: Calendar date of the entry.
        title: Free text, no uniqueness constraint.
    """

    id: int
    date: date
    title: str

    def with_changes(self, **changes) -> Entry:
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    def __repr__(self) -> str:
        preview = self.title[:40] + "..." if len(self.title) > 40 else self.title
        return f"Entry(id={self.id}, date={self.date.isoformat()}, title='{preview}')"
