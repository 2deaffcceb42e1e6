"""
Card and commander catalogs.

Read-only, ordered collections looked up by stable string id. The engine
uses the card catalog to turn a defeated unit's card_id back into the Card
that goes to the discard pile.
"""

from __future__ import annotations
from typing import Generic, Iterator, Sequence, TypeVar

from .state import Commander
from .units import Card

T = TypeVar("T", Card, Commander)


class _Catalog(Generic[T]):
    kind = "entry"

    def __init__(self, entries: Sequence[T] = ()):
        self._entries: dict[str, T] = {}
        for entry in entries:
            if entry.id in self._entries:
                raise ValueError(f"Duplicate {self.kind} id: {entry.id}")
            self._entries[entry.id] = entry

    def get(self, entry_id: str) -> T | None:
        return self._entries.get(entry_id)

    def ids(self) -> list[str]:
        return list(self._entries)

    def __contains__(self, entry_id: object) -> bool:
        return entry_id in self._entries

    def __iter__(self) -> Iterator[T]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)


class CardCatalog(_Catalog[Card]):
    kind = "card"

    def merged(self, other: CardCatalog) -> CardCatalog:
        """Catalog holding this catalog's cards followed by other's."""
        return CardCatalog([*self, *other])


class CommanderCatalog(_Catalog[Commander]):
    kind = "commander"
