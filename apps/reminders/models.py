from django.db import models
import uuid


class ReminderType(models.TextChoices):
    INCOME = 'income', 'Income'
    EXPENSE = 'expense', 'Expense'


class ReminderDay(models.TextChoices):
    # Order matches date.weekday()
    MONDAY = 'monday', 'Monday'
    TUESDAY = 'tuesday', 'Tuesday'
    WEDNESDAY = 'wednesday', 'Wednesday'
    THURSDAY = 'thursday', 'Thursday'
    FRIDAY = 'friday', 'Friday'
    SATURDAY = 'saturday', 'Saturday'
    SUNDAY = 'sunday', 'Sunday'


class Reminder(models.Model):
    """Weekly email nudging a user to record their incomes or expenses."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    type = models.CharField(max_length=10, choices=ReminderType.choices)
    reminder_day = models.CharField(max_length=10, choices=ReminderDay.choices)
    active = models.BooleanField(default=True)

    user = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='reminders'
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'reminders'
        indexes = [
            models.Index(fields=['user', 'created_at']),
            models.Index(fields=['reminder_day', 'active']),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.get_type_display()} reminder on {self.get_reminder_day_display()}"
