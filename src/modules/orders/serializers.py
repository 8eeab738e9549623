"""Order DRF serializers for API input/output.

The serializer operates at the Interface layer (API Views).
Business logic lives in the Service Layer, which receives
Pydantic DTOs from ``dtos.py``.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.orders.models import BeerOrder, BeerOrderLine

# ---------------------------------------------------------------------------
# Input Serializers
# ---------------------------------------------------------------------------


class CreateBeerOrderLineSerializer(serializers.Serializer):
    """Validates a single line in an order creation request."""

    beer_id = serializers.IntegerField(min_value=1)
    order_quantity = serializers.IntegerField(min_value=1)


class CreateBeerOrderSerializer(serializers.Serializer):
    """Validates the order creation request payload."""

    customer_id = serializers.IntegerField(min_value=1)
    beer_order_lines = CreateBeerOrderLineSerializer(many=True, allow_empty=False)
    order_status_callback_url = serializers.URLField(
        max_length=500, required=False, allow_null=True
    )


# ---------------------------------------------------------------------------
# Output Serializers (Read)
# ---------------------------------------------------------------------------


class BeerOrderLineSerializer(serializers.ModelSerializer):
    """Read serializer for order lines with the beer's details inlined."""

    beer_name = serializers.CharField(source="beer.beer_name", read_only=True)
    beer_style = serializers.CharField(source="beer.beer_style", read_only=True)
    upc = serializers.CharField(source="beer.upc", read_only=True)

    class Meta:
        model = BeerOrderLine
        fields = [
            "id",
            "version",
            "beer_id",
            "beer_name",
            "beer_style",
            "upc",
            "order_quantity",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class BeerOrderSerializer(serializers.ModelSerializer):
    """Read serializer for orders with nested lines."""

    beer_order_lines = BeerOrderLineSerializer(many=True, read_only=True)

    class Meta:
        model = BeerOrder
        fields = [
            "id",
            "version",
            "customer_id",
            "order_status",
            "order_status_callback_url",
            "beer_order_lines",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class InvalidOrderStateSerializer(serializers.Serializer):
    """Body of a 422 response for a refused status change."""

    detail = serializers.CharField()
    current_status = serializers.CharField()
    target_status = serializers.CharField()
