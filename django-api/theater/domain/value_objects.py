"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Self

PERCENT_FACTOR = 100


class PlayType(Enum):
    """Pricing categories with known formulas."""

    TRAGEDY = "tragedy"
    COMEDY = "comedy"

    @classmethod
    def lookup(cls, value: str) -> Self | None:
        """Return the matching category, or None if the value is unknown."""
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass(frozen=True)
class Money:
    """Amount in integer cents."""

    cents: int

    def __post_init__(self) -> None:
        if self.cents < 0:
            raise ValueError("Money amount cannot be negative")

    @property
    def dollars(self) -> Decimal:
        return Decimal(self.cents) / PERCENT_FACTOR

    def __str__(self) -> str:
        return f"${self.dollars:,.2f}"
