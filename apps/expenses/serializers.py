from decimal import Decimal

from rest_framework import serializers
from apps.common.filters import AmountFilterSerializer
from .models import Expense, ExpenseGroup


# =============================================================================
# Input Serializers
# =============================================================================

class ExpenseFilterSerializer(AmountFilterSerializer):
    """
    Validate query parameters for expense filtering.

    Query Parameters:
        description (str): Substring of the description
        minAmount (decimal): Lower amount bound
        maxAmount (decimal): Upper amount bound
        expenseGroupId (UUID): Filter by expense group
    """

    expenseGroupId = serializers.UUIDField(required=False)


class ExpenseInputSerializer(serializers.Serializer):
    """
    Validate the body of POST and PUT requests.

    PUT replaces the whole record; omitting expense_group clears it.
    """

    id = serializers.UUIDField(required=False)
    description = serializers.CharField(min_length=8, max_length=255)
    amount = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=Decimal('0.01')
    )
    expense_group = serializers.UUIDField(required=False, allow_null=True)


class ExpenseGroupFilterSerializer(serializers.Serializer):
    """Query Parameters: name (str) substring of the group name."""

    name = serializers.CharField(required=False, allow_blank=True, max_length=255)


class ExpenseGroupInputSerializer(serializers.Serializer):
    id = serializers.UUIDField(required=False)
    name = serializers.CharField(min_length=2, max_length=255)
    description = serializers.CharField(min_length=8, max_length=255)


# =============================================================================
# Output Serializers
# =============================================================================

class ExpenseGroupMinimalSerializer(serializers.ModelSerializer):
    """Minimal group info for nested serialization."""

    class Meta:
        model = ExpenseGroup
        fields = ['id', 'name', 'description']
        read_only_fields = fields


class ExpenseGroupSerializer(serializers.ModelSerializer):

    class Meta:
        model = ExpenseGroup
        fields = [
            'id',
            'name',
            'description',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class ExpenseSerializer(serializers.ModelSerializer):
    """Main serializer for expenses."""

    expense_group = ExpenseGroupMinimalSerializer(read_only=True)

    class Meta:
        model = Expense
        fields = [
            'id',
            'description',
            'amount',
            'expense_group',
            'user',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class LatestExpensesSerializer(serializers.Serializer):
    """Serializer for the dashboard summary."""

    highest_expense = serializers.DecimalField(max_digits=12, decimal_places=2, allow_null=True)
    expenses = ExpenseSerializer(many=True)


class CountSerializer(serializers.Serializer):
    count = serializers.IntegerField()
