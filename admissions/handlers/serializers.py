"""Serializers between caller-supplied mappings and domain models.

Request serializers check the shape of incoming data only. Whether a ticket
type, entrant type or extra actually exists is decided by the services.
"""

from rest_framework import serializers

from admissions.conf import DEFAULT_CURRENCY_SYMBOL
from admissions.domain import Receipt, ReceiptLine, TicketRequest


class TicketRequestSerializer(serializers.Serializer):
    """Parses `{"ticketType", "entrantType", "extras"}` into a TicketRequest."""

    ticketType = serializers.CharField(allow_blank=True, trim_whitespace=False)
    entrantType = serializers.CharField(allow_blank=True, trim_whitespace=False)
    extras = serializers.ListField(
        child=serializers.CharField(allow_blank=True, trim_whitespace=False),
        allow_empty=True,
        required=False,
        default=list,
    )

    def create(self, validated_data: dict) -> TicketRequest:
        return TicketRequest(
            ticket_category=validated_data["ticketType"],
            entrant_category=validated_data["entrantType"],
            add_ons=tuple(validated_data["extras"]),
        )


class ReceiptLineSerializer(serializers.Serializer):
    """Serializer for ReceiptLine domain model."""

    ticketType = serializers.CharField(source="request.ticket_category")
    entrantType = serializers.CharField(source="request.entrant_category")
    extras = serializers.ListField(source="request.add_ons", child=serializers.CharField())
    priceInCents = serializers.IntegerField(source="price.cents")
    description = serializers.SerializerMethodField()

    def get_description(self, line: ReceiptLine) -> str:
        return line.describe(self.context.get("currency_symbol", DEFAULT_CURRENCY_SYMBOL))


class ReceiptSerializer(serializers.Serializer):
    """Serializer for Receipt domain model."""

    header = serializers.CharField()
    lines = serializers.SerializerMethodField()
    totalInCents = serializers.IntegerField(source="total.cents")
    text = serializers.CharField(source="render")

    def get_lines(self, receipt: Receipt) -> list[dict]:
        context = {**self.context, "currency_symbol": receipt.currency_symbol}
        return ReceiptLineSerializer(receipt.lines, many=True, context=context).data
