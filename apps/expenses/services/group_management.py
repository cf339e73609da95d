"""
Expense group management service.

Groups are shared categories; deleting one deletes every expense filed
under it.
"""

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import QuerySet

from apps.expenses.models import ExpenseGroup

from .exceptions import ExpenseGroupNotFoundError

logger = logging.getLogger(__name__)


def list_expense_groups(*, name: Optional[str] = None) -> QuerySet:
    queryset = ExpenseGroup.objects.all()
    if name:
        queryset = queryset.filter(name__icontains=name)
    return queryset.order_by('-created_at')


def get_expense_group(*, group_id: UUID) -> ExpenseGroup:
    try:
        return ExpenseGroup.objects.get(id=group_id)
    except ExpenseGroup.DoesNotExist:
        raise ExpenseGroupNotFoundError()


def create_expense_group(*, name: str, description: str) -> ExpenseGroup:
    group = ExpenseGroup.objects.create(name=name, description=description)
    logger.info("Created expense group %s", group.id)
    return group


@transaction.atomic
def update_expense_group(*, group_id: UUID, name: str, description: str) -> ExpenseGroup:
    """
    Replace name and description.

    Raises:
        ExpenseGroupNotFoundError: If group doesn't exist
    """
    try:
        group = (
            ExpenseGroup.objects
            .select_for_update()
            .get(id=group_id)
        )
    except ExpenseGroup.DoesNotExist:
        raise ExpenseGroupNotFoundError()

    group.name = name
    group.description = description
    group.save(update_fields=['name', 'description', 'updated_at'])
    return group


@transaction.atomic
def delete_expense_group(*, group_id: UUID) -> None:
    """
    Delete a group together with its expenses.

    Raises:
        ExpenseGroupNotFoundError: If group doesn't exist
    """
    try:
        group = ExpenseGroup.objects.get(id=group_id)
    except ExpenseGroup.DoesNotExist:
        raise ExpenseGroupNotFoundError()

    expense_count = group.expenses.count()
    group.delete()
    logger.info("Deleted expense group %s and %d expenses", group_id, expense_count)
