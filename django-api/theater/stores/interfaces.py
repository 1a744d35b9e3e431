"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from theater.domain import Play


class PlayCatalog(ABC):
    """Read-only lookup of plays by identifier."""

    @abstractmethod
    def get_play(self, play_id: str) -> Play | None:
        """Return a play by ID, or None if not found."""
        ...
