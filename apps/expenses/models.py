from django.db import models
from django.core.validators import MinLengthValidator, MinValueValidator
from decimal import Decimal
import uuid


class ExpenseGroup(models.Model):
    """Spending category (rent, groceries, ...)."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255, validators=[MinLengthValidator(2)])
    description = models.CharField(max_length=255, validators=[MinLengthValidator(8)])
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'expense_groups'
        ordering = ['-created_at']

    def __str__(self):
        return self.name


class Expense(models.Model):
    """A single expense owned by a user; the group is optional."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    description = models.CharField(max_length=255, validators=[MinLengthValidator(8)])
    amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )

    expense_group = models.ForeignKey(
        ExpenseGroup,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='expenses'
    )
    user = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='expenses'
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'expenses'
        indexes = [
            models.Index(fields=['user', 'created_at']),
            models.Index(fields=['expense_group']),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.description} ({self.amount})"
