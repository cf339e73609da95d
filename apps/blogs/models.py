from django.db import models
from django.core.validators import MinLengthValidator
import uuid


class Blog(models.Model):
    """Blog post written by a user, readable by anyone."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    description = models.CharField(max_length=255, validators=[MinLengthValidator(8)])
    text = models.TextField(validators=[MinLengthValidator(8)])
    author = models.CharField(
        max_length=100,
        validators=[MinLengthValidator(2)],
        help_text="Display name shown on the post"
    )

    user = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='blogs'
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'blogs'
        indexes = [
            models.Index(fields=['created_at']),
            models.Index(fields=['user']),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.description} by {self.author}"
