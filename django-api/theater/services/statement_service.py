"""Statement service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Resolve plays and price each performance
- Fail fast on the first domain error, with no partial statement
- Return domain models or raise domain errors
"""

import logging

from theater.domain import (
    DEFAULT_PRICING,
    DomainError,
    Invoice,
    PricingTable,
    StatementData,
    StatementLine,
    UnknownPlayError,
    amount_for,
    volume_credits_for,
)
from theater.services.renderer import render
from theater.stores.interfaces import PlayCatalog

logger = logging.getLogger("theater.statements")


def build_statement(
    invoice: Invoice, catalog: PlayCatalog, pricing: PricingTable = DEFAULT_PRICING
) -> StatementData:
    """Price every performance on the invoice and total the results.

    Lines follow the invoice's performance order.

    Raises:
        UnknownPlayError: If a performance references a play not in the catalog.
        UnrecognizedCategoryError: If a play has no pricing rule.
    """
    lines: list[StatementLine] = []
    total_amount = 0
    total_volume_credits = 0

    for performance in invoice.performances:
        play = catalog.get_play(performance.play_id)
        if play is None:
            raise UnknownPlayError(performance.play_id)

        amount = amount_for(performance, play, pricing)
        credits = volume_credits_for(performance, play, pricing)
        lines.append(
            StatementLine(
                play_name=play.name,
                amount=amount,
                audience=performance.audience,
                volume_credits=credits,
            )
        )
        total_amount += amount
        total_volume_credits += credits

    return StatementData(
        customer=invoice.customer,
        lines=tuple(lines),
        total_amount=total_amount,
        total_volume_credits=total_volume_credits,
    )


class StatementService:
    """Service for building and rendering invoice statements."""

    def __init__(self, catalog: PlayCatalog, pricing: PricingTable = DEFAULT_PRICING) -> None:
        self._catalog = catalog
        self._pricing = pricing

    def build_statement(self, invoice: Invoice) -> StatementData:
        """Return the aggregated statement for an invoice.

        Raises:
            UnknownPlayError: If a performance references an unknown play.
            UnrecognizedCategoryError: If a play category cannot be priced.
        """
        try:
            data = build_statement(invoice, self._catalog, self._pricing)
        except DomainError as exc:
            logger.warning("Statement for %s rejected: %s", invoice.customer, exc)
            raise
        logger.info(
            "Built statement for %s: %d performances, %d cents, %d credits",
            data.customer,
            len(data.lines),
            data.total_amount,
            data.total_volume_credits,
        )
        return data

    def statement(self, invoice: Invoice) -> str:
        """Return the rendered text statement for an invoice."""
        return render(self.build_statement(invoice))
