"""Customer DRF serializers for API input/output."""

from __future__ import annotations

from rest_framework import serializers

from modules.customers.models import Customer


class CustomerInputSerializer(serializers.Serializer):
    """Validates create / replace payloads."""

    customer_name = serializers.CharField(max_length=255)
    email = serializers.EmailField(
        max_length=254, required=False, allow_null=True, allow_blank=True
    )
    phone = serializers.CharField(
        max_length=30, required=False, allow_blank=True, default=""
    )
    version = serializers.IntegerField(min_value=0, required=False)


class CustomerSerializer(serializers.ModelSerializer):
    """Read serializer for the Customer resource."""

    class Meta:
        model = Customer
        fields = [
            "id",
            "version",
            "customer_name",
            "email",
            "phone",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
