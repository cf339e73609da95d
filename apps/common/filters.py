"""
Query-parameter filtering shared by the income and expense endpoints.

Query Parameters:
    description (str): Case-insensitive substring of the description
    minAmount (decimal): Lower amount bound (inclusive)
    maxAmount (decimal): Upper amount bound (inclusive)
"""
from rest_framework import serializers


class AmountFilterSerializer(serializers.Serializer):
    """Validate description/amount query parameters."""

    description = serializers.CharField(required=False, allow_blank=True, max_length=255)
    minAmount = serializers.DecimalField(max_digits=12, decimal_places=2, required=False)
    maxAmount = serializers.DecimalField(max_digits=12, decimal_places=2, required=False)

    def validate(self, attrs):
        """Validate amount range."""
        min_amount = attrs.get('minAmount')
        max_amount = attrs.get('maxAmount')

        if min_amount is not None and max_amount is not None:
            if min_amount > max_amount:
                raise serializers.ValidationError({
                    'maxAmount': 'Maximum amount must not be below minimum amount'
                })

        return attrs


def apply_amount_filters(queryset, *, description=None, min_amount=None, max_amount=None):
    """Narrow a queryset of records that have ``description`` and ``amount`` fields."""
    if description:
        queryset = queryset.filter(description__icontains=description)
    if min_amount is not None:
        queryset = queryset.filter(amount__gte=min_amount)
    if max_amount is not None:
        queryset = queryset.filter(amount__lte=max_amount)
    return queryset
