from .exceptions import ReminderNotFoundError

from .reminder_management import (
    list_reminders,
    get_reminder,
    create_reminder,
    update_reminder,
    delete_reminder,
)

from .reminder_delivery import (
    get_due_reminders,
    send_due_reminders,
)


__all__ = [
    'ReminderNotFoundError',

    'list_reminders',
    'get_reminder',
    'create_reminder',
    'update_reminder',
    'delete_reminder',

    'get_due_reminders',
    'send_due_reminders',
]
