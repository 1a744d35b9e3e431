"""Unit tests for statement aggregation.

These test totals, line ordering and domain error propagation.
Run with: pytest tests/test_services.py -v
"""

import logging

import pytest

from theater.domain import (
    Invoice,
    Performance,
    Play,
    PricingTable,
    StatementLine,
    UnknownPlayError,
    UnrecognizedCategoryError,
    amount_for,
)
from theater.services import StatementService, build_statement
from theater.stores import InMemoryPlayCatalog


class TestBuildStatement:
    """Tests for build_statement."""

    def test_lines_follow_invoice_order(self, invoice, catalog):
        data = build_statement(invoice, catalog)

        assert data.customer == "BigCo"
        assert data.lines == (
            StatementLine(play_name="Hamlet", amount=65000, audience=55, volume_credits=25),
            StatementLine(play_name="As You Like It", amount=58000, audience=35, volume_credits=12),
            StatementLine(play_name="Othello", amount=50000, audience=40, volume_credits=10),
        )

    def test_totals_are_sums_of_lines(self, invoice, catalog):
        data = build_statement(invoice, catalog)

        assert data.total_amount == 173000
        assert data.total_volume_credits == 47
        assert data.total_amount == sum(line.amount for line in data.lines)

    def test_reordering_changes_lines_not_totals(self, invoice, catalog):
        reversed_invoice = Invoice(
            customer=invoice.customer,
            performances=tuple(reversed(invoice.performances)),
        )

        original = build_statement(invoice, catalog)
        reordered = build_statement(reversed_invoice, catalog)

        assert [line.play_name for line in reordered.lines] == [
            "Othello",
            "As You Like It",
            "Hamlet",
        ]
        assert reordered.total_amount == original.total_amount
        assert reordered.total_volume_credits == original.total_volume_credits

    def test_empty_invoice(self, catalog):
        data = build_statement(Invoice(customer="Nobody"), catalog)

        assert data.lines == ()
        assert data.total_amount == 0
        assert data.total_volume_credits == 0

    def test_repeated_calls_are_identical(self, invoice, catalog):
        """No hidden state between calls."""
        assert build_statement(invoice, catalog) == build_statement(invoice, catalog)

    def test_custom_pricing_table(self, catalog):
        pricing = PricingTable(tragedy_base_amount=100)
        invoice = Invoice(customer="BigCo", performances=(Performance("hamlet", 10),))

        data = build_statement(invoice, catalog, pricing)

        assert data.total_amount == 100

    def test_unknown_play_raises(self, catalog):
        invoice = Invoice(
            customer="BigCo",
            performances=(
                Performance(play_id="hamlet", audience=55),
                Performance(play_id="macbeth", audience=10),
            ),
        )

        with pytest.raises(UnknownPlayError) as exc_info:
            build_statement(invoice, catalog)
        assert exc_info.value.play_id == "macbeth"

    def test_unknown_category_aborts_statement(self, plays):
        plays["henry-v"] = Play(name="Henry V", category="history")
        invoice = Invoice(
            customer="BigCo",
            performances=(
                Performance(play_id="hamlet", audience=55),
                Performance(play_id="henry-v", audience=10),
            ),
        )

        with pytest.raises(UnrecognizedCategoryError):
            build_statement(invoice, InMemoryPlayCatalog(plays))


class TestStatementService:
    """Tests for StatementService."""

    def test_statement_renders_text(self, invoice, catalog):
        service = StatementService(catalog)

        assert service.statement(invoice) == (
            "Statement for BigCo\n"
            "  Hamlet: $650.00 (55 seats)\n"
            "  As You Like It: $580.00 (35 seats)\n"
            "  Othello: $500.00 (40 seats)\n"
            "Amount owed is $1,730.00\n"
            "You earned 47 credits\n"
        )

    def test_statement_is_idempotent(self, invoice, catalog):
        service = StatementService(catalog)

        assert service.statement(invoice) == service.statement(invoice)

    def test_line_amounts_match_pricing_engine(self, invoice, catalog, plays):
        data = StatementService(catalog).build_statement(invoice)

        expected = [
            amount_for(performance, plays[performance.play_id])
            for performance in invoice.performances
        ]
        assert [line.amount for line in data.lines] == expected

    def test_rejected_statement_is_logged(self, catalog, caplog):
        invoice = Invoice(customer="BigCo", performances=(Performance("macbeth", 10),))

        with caplog.at_level(logging.WARNING, logger="theater.statements"):
            with pytest.raises(UnknownPlayError):
                StatementService(catalog).statement(invoice)

        assert "unknown play id: macbeth" in caplog.text
