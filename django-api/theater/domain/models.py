"""Domain models for invoices, plays and statements.

These are pure domain objects with no API input rules.
Request parsing lives in theater/handlers/serializers.py.
"""

from dataclasses import dataclass

from theater.domain.value_objects import PlayType


@dataclass(frozen=True)
class Play:
    """A play and its raw pricing category."""

    name: str
    category: str

    @property
    def play_type(self) -> PlayType | None:
        return PlayType.lookup(self.category)


@dataclass(frozen=True)
class Performance:
    """One performance of a play on an invoice."""

    play_id: str
    audience: int

    def __post_init__(self) -> None:
        if isinstance(self.audience, bool) or not isinstance(self.audience, int):
            raise ValueError("Audience must be an integer")
        if self.audience < 0:
            raise ValueError("Audience cannot be negative")


@dataclass(frozen=True)
class Invoice:
    """A customer and the performances billed to them, in order."""

    customer: str
    performances: tuple[Performance, ...] = ()


@dataclass(frozen=True)
class StatementLine:
    play_name: str
    amount: int
    audience: int
    volume_credits: int


@dataclass(frozen=True)
class StatementData:
    """Aggregated statement, ready for rendering."""

    customer: str
    lines: tuple[StatementLine, ...]
    total_amount: int
    total_volume_credits: int
