from theater.domain.errors import DomainError, UnknownPlayError, UnrecognizedCategoryError
from theater.domain.models import Invoice, Performance, Play, StatementData, StatementLine
from theater.domain.pricing import DEFAULT_PRICING, PricingTable, amount_for, volume_credits_for
from theater.domain.value_objects import Money, PlayType

__all__ = [
    "Play",
    "Performance",
    "Invoice",
    "StatementLine",
    "StatementData",
    "PlayType",
    "Money",
    "PricingTable",
    "DEFAULT_PRICING",
    "amount_for",
    "volume_credits_for",
    "DomainError",
    "UnknownPlayError",
    "UnrecognizedCategoryError",
]
