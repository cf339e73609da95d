from django.db import models
from django.core.validators import MinLengthValidator, MinValueValidator
from decimal import Decimal
import uuid


class IncomeGroup(models.Model):
    """Category that incomes are filed under (salary, dividends, ...)."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255, validators=[MinLengthValidator(2)])
    description = models.CharField(max_length=255, validators=[MinLengthValidator(8)])
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'income_groups'
        ordering = ['-created_at']

    def __str__(self):
        return self.name


class Income(models.Model):
    """A single income entry owned by a user."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    description = models.CharField(max_length=255, validators=[MinLengthValidator(8)])
    amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )

    income_group = models.ForeignKey(
        IncomeGroup,
        on_delete=models.CASCADE,
        related_name='incomes'
    )
    user = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='incomes'
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'incomes'
        indexes = [
            models.Index(fields=['user', 'created_at']),
            models.Index(fields=['income_group']),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.description} ({self.amount})"
