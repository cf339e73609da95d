"""
Income management service.

Every query is scoped to the requesting user; another user's income is
reported as not found.
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
from apps.incomes.models import Income, IncomeGroup

from .exceptions import (
    IncomeNotFoundError,
    IncomeGroupNotFoundError,
    NoIncomesError,
)

logger = logging.getLogger(__name__)

LATEST_INCOMES_LIMIT = 5
HIGHEST_INCOME_WINDOW = timedelta(days=7)


def list_incomes(
    *,
    user: User,
    description: Optional[str] = None,
    min_amount: Optional[Decimal] = None,
    max_amount: Optional[Decimal] = None,
    income_group_id: Optional[UUID] = None
) -> QuerySet:
    """
    Build the user's income query, newest first.

    Args:
        user: Owner of the incomes
        description: Case-insensitive substring filter
        min_amount: Inclusive lower bound
        max_amount: Inclusive upper bound
        income_group_id: Only incomes in this group

    Returns:
        QuerySet of Income
    """
    queryset = Income.objects.filter(user=user).select_related('income_group')
    queryset = apply_amount_filters(
        queryset,
        description=description,
        min_amount=min_amount,
        max_amount=max_amount,
    )
    if income_group_id:
        queryset = queryset.filter(income_group_id=income_group_id)
    return queryset.order_by('-created_at')


def get_income(*, user: User, income_id: UUID) -> Income:
    """
    Raises:
        IncomeNotFoundError: If the income doesn't exist for this user
    """
    try:
        return (
            Income.objects
            .select_related('income_group')
            .get(id=income_id, user=user)
        )
    except Income.DoesNotExist:
        raise IncomeNotFoundError()


def _get_income_group(income_group_id: UUID) -> IncomeGroup:
    try:
        return IncomeGroup.objects.get(id=income_group_id)
    except IncomeGroup.DoesNotExist:
        raise IncomeGroupNotFoundError()


@transaction.atomic
def create_income(
    *,
    user: User,
    description: str,
    amount: Decimal,
    income_group_id: UUID
) -> Income:
    """
    Create an income for the user.

    Raises:
        IncomeGroupNotFoundError: If the group doesn't exist
    """
    income_group = _get_income_group(income_group_id)

    try:
        income = Income.objects.create(
            user=user,
            description=description,
            amount=amount,
            income_group=income_group,
        )
    except DatabaseError as e:
        logger.error("create_income: an error occurred for user %s: %s", user.id, e)
        raise

    logger.info("Created income %s for user %s", income.id, user.id)
    return income


@transaction.atomic
def update_income(
    *,
    user: User,
    income_id: UUID,
    description: str,
    amount: Decimal,
    income_group_id: UUID
) -> Income:
    """
    Replace every editable field of an income.

    Raises:
        IncomeNotFoundError: If the income doesn't exist for this user
        IncomeGroupNotFoundError: If the new group doesn't exist
    """
    try:
        income = (
            Income.objects
            .select_for_update()
            .get(id=income_id, user=user)
        )
    except Income.DoesNotExist:
        raise IncomeNotFoundError()

    income.income_group = _get_income_group(income_group_id)
    income.description = description
    income.amount = amount

    try:
        income.save()
    except DatabaseError as e:
        logger.error("update_income: an error occurred for income %s: %s", income_id, e)
        raise

    return income


@transaction.atomic
def delete_income(*, user: User, income_id: UUID) -> None:
    """
    Raises:
        IncomeNotFoundError: If the income doesn't exist for this user
    """
    deleted, _ = Income.objects.filter(id=income_id, user=user).delete()
    if not deleted:
        raise IncomeNotFoundError()
    logger.info("Deleted income %s for user %s", income_id, user.id)


@transaction.atomic
def delete_all_incomes(*, user: User) -> int:
    """
    Delete every income the user owns.

    Returns:
        Number of deleted incomes

    Raises:
        NoIncomesError: If the user has no incomes
    """
    deleted, _ = Income.objects.filter(user=user).delete()
    if not deleted:
        raise NoIncomesError()
    logger.info("Deleted %d incomes for user %s", deleted, user.id)
    return deleted


def count_incomes(*, user: User) -> int:
    return Income.objects.filter(user=user).count()


def get_latest_incomes(*, user: User) -> dict:
    """
    Dashboard summary of recent incomes.

    Returns:
        dict with:
            - highest_income (Decimal | None): Largest amount created in
              the last 7 days
            - incomes (list[Income]): The 5 most recent incomes
    """
    since = timezone.now() - HIGHEST_INCOME_WINDOW
    highest_income = (
        Income.objects
        .filter(user=user, created_at__gte=since)
        .aggregate(highest=Max('amount'))['highest']
    )

    incomes = list(
        Income.objects
        .filter(user=user)
        .select_related('income_group')
        .order_by('-created_at')[:LATEST_INCOMES_LIMIT]
    )

    return {
        'highest_income': highest_income,
        'incomes': incomes,
    }
