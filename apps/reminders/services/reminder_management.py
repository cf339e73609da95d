"""CRUD for the caller's reminders."""

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction, DatabaseError
from django.db.models import QuerySet

from apps.accounts.models import User
from apps.reminders.models import Reminder

from .exceptions import ReminderNotFoundError

logger = logging.getLogger(__name__)


def list_reminders(
    *,
    user: User,
    type: Optional[str] = None,
    active: Optional[bool] = None
) -> QuerySet:
    """
    Build the user's reminder query, newest first.

    Args:
        user: Owner of the reminders
        type: 'income' or 'expense'
        active: Only active (True) or paused (False) reminders
    """
    queryset = Reminder.objects.filter(user=user)
    if type:
        queryset = queryset.filter(type=type)
    if active is not None:
        queryset = queryset.filter(active=active)
    return queryset.order_by('-created_at')


def get_reminder(*, user: User, reminder_id: UUID) -> Reminder:
    try:
        return Reminder.objects.get(id=reminder_id, user=user)
    except Reminder.DoesNotExist:
        raise ReminderNotFoundError()


@transaction.atomic
def create_reminder(
    *,
    user: User,
    type: str,
    reminder_day: str,
    active: bool = True
) -> Reminder:
    try:
        reminder = Reminder.objects.create(
            user=user,
            type=type,
            reminder_day=reminder_day,
            active=active,
        )
    except DatabaseError as e:
        logger.error("create_reminder: an error occurred for user %s: %s", user.id, e)
        raise

    logger.info("Created %s reminder %s for user %s", type, reminder.id, user.id)
    return reminder


@transaction.atomic
def update_reminder(
    *,
    user: User,
    reminder_id: UUID,
    type: str,
    reminder_day: str,
    active: bool
) -> Reminder:
    """
    Raises:
        ReminderNotFoundError: If the reminder doesn't exist for this user
    """
    try:
        reminder = (
            Reminder.objects
            .select_for_update()
            .get(id=reminder_id, user=user)
        )
    except Reminder.DoesNotExist:
        raise ReminderNotFoundError()

    reminder.type = type
    reminder.reminder_day = reminder_day
    reminder.active = active

    try:
        reminder.save()
    except DatabaseError as e:
        logger.error("update_reminder: an error occurred for reminder %s: %s", reminder_id, e)
        raise

    return reminder


@transaction.atomic
def delete_reminder(*, user: User, reminder_id: UUID) -> None:
    deleted, _ = Reminder.objects.filter(id=reminder_id, user=user).delete()
    if not deleted:
        raise ReminderNotFoundError()
    logger.info("Deleted reminder %s for user %s", reminder_id, user.id)
