"""In-memory implementation of the PlayCatalog."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Self

from theater.domain import Play
from theater.stores.interfaces import PlayCatalog


class InMemoryPlayCatalog(PlayCatalog):
    """Catalog backed by a mapping supplied by the caller."""

    def __init__(self, plays: Mapping[str, Play]) -> None:
        self._plays = MappingProxyType(dict(plays))

    @classmethod
    def from_mapping(cls, plays: Mapping[str, Mapping[str, str]]) -> Self:
        """Build a catalog from raw ``{"name": ..., "category": ...}`` entries."""
        return cls(
            {
                play_id: Play(name=entry["name"], category=entry["category"])
                for play_id, entry in plays.items()
            }
        )

    def get_play(self, play_id: str) -> Play | None:
        return self._plays.get(play_id)
