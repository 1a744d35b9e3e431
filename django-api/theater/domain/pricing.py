"""Pricing engine: amount and volume credits for a single performance.

Both functions are pure. The amount raises on an unknown category, while
volume credits only distinguish comedy from everything else.
"""

from dataclasses import dataclass, fields

from theater.domain.errors import UnrecognizedCategoryError
from theater.domain.models import Performance, Play
from theater.domain.value_objects import PlayType


@dataclass(frozen=True)
class PricingTable:
    """Business pricing constants. Amounts are in cents."""

    tragedy_base_amount: int = 40000
    tragedy_audience_threshold: int = 30
    history_over_base_capacity_per_person: int = 1000
    base_volume_credit_threshold: int = 30
    comedy_base_amount: int = 30000
    comedy_audience_threshold: int = 20
    comedy_over_base_capacity_amount: int = 10000
    comedy_over_base_capacity_per_person: int = 500
    comedy_amount_per_audience: int = 300
    comedy_extra_volume_factor: int = 5

    def __post_init__(self) -> None:
        for field in fields(self):
            if getattr(self, field.name) < 0:
                raise ValueError(f"Pricing constant {field.name} cannot be negative")
        if self.comedy_extra_volume_factor == 0:
            raise ValueError("Comedy extra volume factor must be positive")
        if self.tragedy_audience_threshold < self.base_volume_credit_threshold:
            raise ValueError(
                "Tragedy audience threshold cannot be below the volume credit threshold"
            )


DEFAULT_PRICING = PricingTable()


def amount_for(
    performance: Performance, play: Play, pricing: PricingTable = DEFAULT_PRICING
) -> int:
    """Return the amount in cents for one performance.

    Raises:
        UnrecognizedCategoryError: If the play category has no pricing rule.
    """
    audience = performance.audience

    match play.play_type:
        case PlayType.TRAGEDY:
            result = pricing.tragedy_base_amount
            if audience > pricing.tragedy_audience_threshold:
                result += pricing.history_over_base_capacity_per_person * (
                    audience - pricing.base_volume_credit_threshold
                )
        case PlayType.COMEDY:
            result = pricing.comedy_base_amount
            if audience > pricing.comedy_audience_threshold:
                result += pricing.comedy_over_base_capacity_amount + (
                    pricing.comedy_over_base_capacity_per_person
                    * (audience - pricing.comedy_audience_threshold)
                )
            result += pricing.comedy_amount_per_audience * audience
        case None:
            raise UnrecognizedCategoryError(play.category)

    return result


def volume_credits_for(
    performance: Performance, play: Play, pricing: PricingTable = DEFAULT_PRICING
) -> int:
    """Return the volume credits earned by one performance."""
    audience = performance.audience
    result = max(audience - pricing.base_volume_credit_threshold, 0)

    # extra credit for every five comedy attendees
    if play.play_type is PlayType.COMEDY:
        result += audience // pricing.comedy_extra_volume_factor

    return result
