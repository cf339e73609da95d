"""
Expense management service.

Mirrors the income service with one difference: an expense does not need
a group. Queries are scoped to the requesting user.
"""

import logging
from datetime import timedelta
from decimal import Decimal
from typing import Optional
from uuid import UUID

from django.db import transaction, DatabaseError
from django.db.models import Max, QuerySet
from django.utils import timezone

from apps.accounts.models import User
from apps.common.filters import apply_amount_filters
from apps.expenses.models import Expense, ExpenseGroup

from .exceptions import (
    ExpenseNotFoundError,
    ExpenseGroupNotFoundError,
    NoExpensesError,
)

logger = logging.getLogger(__name__)

LATEST_EXPENSES_LIMIT = 5
HIGHEST_EXPENSE_WINDOW = timedelta(days=7)


def list_expenses(
    *,
    user: User,
    description: Optional[str] = None,
    min_amount: Optional[Decimal] = None,
    max_amount: Optional[Decimal] = None,
    expense_group_id: Optional[UUID] = None
) -> QuerySet:
    """
    Build the user's expense query, newest first.

    Args:
        user: Owner of the expenses
        description: Case-insensitive substring filter
        min_amount: Inclusive lower bound
        max_amount: Inclusive upper bound
        expense_group_id: Only expenses in this group

    Returns:
        QuerySet of Expense
    """
    queryset = Expense.objects.filter(user=user).select_related('expense_group')
    queryset = apply_amount_filters(
        queryset,
        description=description,
        min_amount=min_amount,
        max_amount=max_amount,
    )
    if expense_group_id:
        queryset = queryset.filter(expense_group_id=expense_group_id)
    return queryset.order_by('-created_at')


def get_expense(*, user: User, expense_id: UUID) -> Expense:
    """
    Raises:
        ExpenseNotFoundError: If the expense doesn't exist for this user
    """
    try:
        return (
            Expense.objects
            .select_related('expense_group')
            .get(id=expense_id, user=user)
        )
    except Expense.DoesNotExist:
        raise ExpenseNotFoundError()


def _get_expense_group(expense_group_id: Optional[UUID]) -> Optional[ExpenseGroup]:
    """Resolve an optional group id; None means an ungrouped expense."""
    if expense_group_id is None:
        return None
    try:
        return ExpenseGroup.objects.get(id=expense_group_id)
    except ExpenseGroup.DoesNotExist:
        raise ExpenseGroupNotFoundError()


@transaction.atomic
def create_expense(
    *,
    user: User,
    description: str,
    amount: Decimal,
    expense_group_id: Optional[UUID] = None
) -> Expense:
    """
    Create an expense for the user, optionally filed under a group.

    Raises:
        ExpenseGroupNotFoundError: If a group id is given and doesn't exist
    """
    expense_group = _get_expense_group(expense_group_id)

    try:
        expense = Expense.objects.create(
            user=user,
            description=description,
            amount=amount,
            expense_group=expense_group,
        )
    except DatabaseError as e:
        logger.error("create_expense: an error occurred for user %s: %s", user.id, e)
        raise

    logger.info("Created expense %s for user %s", expense.id, user.id)
    return expense


@transaction.atomic
def update_expense(
    *,
    user: User,
    expense_id: UUID,
    description: str,
    amount: Decimal,
    expense_group_id: Optional[UUID] = None
) -> Expense:
    """
    Replace every editable field of an expense. Passing no group id
    moves the expense out of its group.

    Raises:
        ExpenseNotFoundError: If the expense doesn't exist for this user
        ExpenseGroupNotFoundError: If the new group doesn't exist
    """
    try:
        expense = (
            Expense.objects
            .select_for_update()
            .get(id=expense_id, user=user)
        )
    except Expense.DoesNotExist:
        raise ExpenseNotFoundError()

    expense.expense_group = _get_expense_group(expense_group_id)
    expense.description = description
    expense.amount = amount

    try:
        expense.save()
    except DatabaseError as e:
        logger.error("update_expense: an error occurred for expense %s: %s", expense_id, e)
        raise

    return expense


@transaction.atomic
def delete_expense(*, user: User, expense_id: UUID) -> None:
    """
    Raises:
        ExpenseNotFoundError: If the expense doesn't exist for this user
    """
    deleted, _ = Expense.objects.filter(id=expense_id, user=user).delete()
    if not deleted:
        raise ExpenseNotFoundError()
    logger.info("Deleted expense %s for user %s", expense_id, user.id)


@transaction.atomic
def delete_all_expenses(*, user: User) -> int:
    """
    Delete every expense the user owns.

    Returns:
        Number of deleted expenses

    Raises:
        NoExpensesError: If the user has no expenses
    """
    deleted, _ = Expense.objects.filter(user=user).delete()
    if not deleted:
        raise NoExpensesError()
    logger.info("Deleted %d expenses for user %s", deleted, user.id)
    return deleted


def count_expenses(*, user: User) -> int:
    return Expense.objects.filter(user=user).count()


def get_latest_expenses(*, user: User) -> dict:
    """
    Dashboard summary of recent expenses.

    Returns:
        dict with:
            - highest_expense (Decimal | None): Largest amount created in
              the last 7 days
            - expenses (list[Expense]): The 5 most recent expenses
    """
    since = timezone.now() - HIGHEST_EXPENSE_WINDOW
    highest_expense = (
        Expense.objects
        .filter(user=user, created_at__gte=since)
        .aggregate(highest=Max('amount'))['highest']
    )

    expenses = list(
        Expense.objects
        .filter(user=user)
        .select_related('expense_group')
        .order_by('-created_at')[:LATEST_EXPENSES_LIMIT]
    )

    return {
        'highest_expense': highest_expense,
        'expenses': expenses,
    }
