"""Beer DRF serializers for API input/output.

Business logic lives in the Service Layer, which receives
Pydantic DTOs from ``dtos.py``.
"""

from __future__ import annotations

from decimal import Decimal

from rest_framework import serializers

from modules.beers.models import Beer


class BeerInputSerializer(serializers.Serializer):
    """Validates create / replace payloads field by field."""

    beer_name = serializers.CharField(max_length=255)
    beer_style = serializers.CharField(max_length=100)
    upc = serializers.CharField(max_length=64)
    price = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=Decimal("0.01")
    )
    quantity_on_hand = serializers.IntegerField(min_value=0)
    version = serializers.IntegerField(min_value=0, required=False)


class BeerSerializer(serializers.ModelSerializer):
    """Read serializer for the Beer resource."""

    class Meta:
        model = Beer
        fields = [
            "id",
            "version",
            "beer_name",
            "beer_style",
            "upc",
            "price",
            "quantity_on_hand",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
