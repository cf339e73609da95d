"""Account management service."""

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import QuerySet
from django.contrib.auth import get_user_model

from .exceptions import PasswordConfirmationError, UserNotFoundError

User = get_user_model()

logger = logging.getLogger(__name__)


@transaction.atomic
def delete_user_account(*, user_id: UUID, password: str) -> None:
    """
    Delete the account after confirming the password.

    The delete cascades to every income, expense, blog post and reminder
    the user owns.

    Raises:
        UserNotFoundError: If the user does not exist
        PasswordConfirmationError: If password is incorrect
    """
    try:
        user = (
            User.objects
            .select_for_update()
            .get(id=user_id)
        )
    except User.DoesNotExist:
        raise UserNotFoundError()

    if not user.check_password(password):
        raise PasswordConfirmationError("Invalid password")

    user.delete()
    logger.info("Deleted account %s", user_id)


def update_user_profile(*, user: User, username: str) -> User:
    """Change the public username."""
    user.username = username
    user.save(update_fields=['username'])
    return user


def list_users(*, username: Optional[str] = None, email: Optional[str] = None) -> QuerySet:
    """Users visible to administrators, newest first."""
    queryset = User.objects.all()
    if username:
        queryset = queryset.filter(username__icontains=username)
    if email:
        queryset = queryset.filter(email__icontains=email)
    return queryset.order_by('-created_at')


@transaction.atomic
def delete_user(*, user_id: UUID, deleted_by: User) -> None:
    """
    Remove a user (administrator action).

    Raises:
        UserNotFoundError: If the user does not exist
    """
    deleted, _ = User.objects.filter(id=user_id).delete()
    if not deleted:
        raise UserNotFoundError()
    logger.info("User %s deleted by administrator %s", user_id, deleted_by.id)


def count_users() -> int:
    return User.objects.count()
