"""Serializers for transforming API payloads to domain models and back."""

from rest_framework import serializers

from theater.domain import Invoice, Performance
from theater.services import render, usd
from theater.stores import InMemoryPlayCatalog


class PlaySerializer(serializers.Serializer):
    """Play entry of the request catalog.

    The category is free text so that unknown categories reach the pricing
    engine and surface as domain errors.
    """

    name = serializers.CharField()
    category = serializers.CharField()


class PerformanceSerializer(serializers.Serializer):
    play_id = serializers.CharField()
    audience = serializers.IntegerField(min_value=0)


class InvoiceSerializer(serializers.Serializer):
    customer = serializers.CharField()
    performances = PerformanceSerializer(many=True)


class StatementRequestSerializer(serializers.Serializer):
    """Request body for POST /api/statements."""

    invoice = InvoiceSerializer()
    plays = serializers.DictField(child=PlaySerializer())

    def to_invoice(self) -> Invoice:
        invoice = self.validated_data["invoice"]
        return Invoice(
            customer=invoice["customer"],
            performances=tuple(
                Performance(play_id=entry["play_id"], audience=entry["audience"])
                for entry in invoice["performances"]
            ),
        )

    def to_catalog(self) -> InMemoryPlayCatalog:
        return InMemoryPlayCatalog.from_mapping(self.validated_data["plays"])


class StatementLineSerializer(serializers.Serializer):
    play_name = serializers.CharField()
    amount = serializers.IntegerField()
    amount_display = serializers.SerializerMethodField()
    audience = serializers.IntegerField()
    volume_credits = serializers.IntegerField()

    def get_amount_display(self, line) -> str:
        return usd(line.amount)


class StatementSerializer(serializers.Serializer):
    """Serializer for StatementData domain model."""

    customer = serializers.CharField()
    lines = StatementLineSerializer(many=True)
    total_amount = serializers.IntegerField()
    total_amount_display = serializers.SerializerMethodField()
    total_volume_credits = serializers.IntegerField()
    text = serializers.SerializerMethodField()

    def get_total_amount_display(self, data) -> str:
        return usd(data.total_amount)

    def get_text(self, data) -> str:
        return render(data)
