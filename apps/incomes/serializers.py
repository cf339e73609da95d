from decimal import Decimal

from rest_framework import serializers
from apps.common.filters import AmountFilterSerializer
from .models import Income, IncomeGroup


# =============================================================================
# Input Serializers
# =============================================================================

class IncomeFilterSerializer(AmountFilterSerializer):
    """
    Validate query parameters for income filtering.

    Query Parameters:
        description (str): Substring of the description
        minAmount (decimal): Lower amount bound
        maxAmount (decimal): Upper amount bound
        incomeGroupId (UUID): Filter by income group
    """

    incomeGroupId = serializers.UUIDField(required=False)


class IncomeInputSerializer(serializers.Serializer):
    """
    Validate the body of POST and PUT requests.

    PUT replaces the whole record, so every field is required on both.
    """

    id = serializers.UUIDField(required=False)
    description = serializers.CharField(min_length=8, max_length=255)
    amount = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=Decimal('0.01')
    )
    income_group = serializers.UUIDField()


class IncomeGroupFilterSerializer(serializers.Serializer):
    """Query Parameters: name (str) substring of the group name."""

    name = serializers.CharField(required=False, allow_blank=True, max_length=255)


class IncomeGroupInputSerializer(serializers.Serializer):
    id = serializers.UUIDField(required=False)
    name = serializers.CharField(min_length=2, max_length=255)
    description = serializers.CharField(min_length=8, max_length=255)


# =============================================================================
# Output Serializers
# =============================================================================

class IncomeGroupMinimalSerializer(serializers.ModelSerializer):
    """Minimal group info for nested serialization."""

    class Meta:
        model = IncomeGroup
        fields = ['id', 'name', 'description']
        read_only_fields = fields


class IncomeGroupSerializer(serializers.ModelSerializer):

    class Meta:
        model = IncomeGroup
        fields = [
            'id',
            'name',
            'description',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class IncomeSerializer(serializers.ModelSerializer):
    """Main serializer for incomes."""

    income_group = IncomeGroupMinimalSerializer(read_only=True)

    class Meta:
        model = Income
        fields = [
            'id',
            'description',
            'amount',
            'income_group',
            'user',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class LatestIncomesSerializer(serializers.Serializer):
    """Serializer for the dashboard summary."""

    highest_income = serializers.DecimalField(max_digits=12, decimal_places=2, allow_null=True)
    incomes = IncomeSerializer(many=True)


class CountSerializer(serializers.Serializer):
    count = serializers.IntegerField()
