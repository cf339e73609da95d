"""
Reminder delivery.

Meant to run once a day (cron, scheduler) through the ``send_reminders``
management command. A failed email is logged and skipped so one bad
address doesn't block everyone else's reminders.
"""

import logging
from datetime import date

from apps.common.email import send_email
from apps.common.exceptions import EmailDeliveryError
from apps.reminders.models import Reminder, ReminderDay

logger = logging.getLogger(__name__)

WEEKDAYS = list(ReminderDay.values)

REMINDER_SUBJECTS = {
    'income': 'Reminder: record your incomes',
    'expense': 'Reminder: record your expenses',
}


def _reminder_body(reminder: Reminder) -> str:
    kind = 'incomes' if reminder.type == 'income' else 'expenses'
    return (
        f"<p>Hi {reminder.user.username},</p>"
        f"<p>It's {reminder.get_reminder_day_display()}, time to record this week's {kind} "
        f"in Expense Tracker.</p>"
    )


def get_due_reminders(*, on_date: date):
    """Active reminders scheduled for the weekday of ``on_date``."""
    weekday = WEEKDAYS[on_date.weekday()]
    return (
        Reminder.objects
        .filter(active=True, reminder_day=weekday, user__is_active=True)
        .select_related('user')
        .order_by('created_at')
    )


def send_due_reminders(*, on_date: date) -> int:
    """
    Email every reminder due on ``on_date``.

    Returns:
        Number of reminder emails the backend accepted
    """
    sent = 0
    for reminder in get_due_reminders(on_date=on_date):
        try:
            delivered = send_email(
                to_email=reminder.user.email,
                subject=REMINDER_SUBJECTS[reminder.type],
                body=_reminder_body(reminder),
            )
        except EmailDeliveryError:
            logger.warning("Skipping reminder %s for user %s", reminder.id, reminder.user_id)
            continue

        if delivered:
            sent += 1

    logger.info("Sent %d reminder(s) for %s", sent, on_date.isoformat())
    return sent
