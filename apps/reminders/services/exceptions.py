"""Domain exceptions for reminders app."""
from rest_framework.exceptions import APIException


class ReminderNotFoundError(APIException):
    """Reminder not found (or owned by someone else)."""
    status_code = 404
    default_detail = 'Reminder not found.'
    default_code = 'reminder_not_found'
