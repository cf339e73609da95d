"""
Income group management service.

Groups are shared categories; deleting one deletes every income filed
under it.
"""

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import QuerySet

from apps.incomes.models import IncomeGroup

from .exceptions import IncomeGroupNotFoundError

logger = logging.getLogger(__name__)


def list_income_groups(*, name: Optional[str] = None) -> QuerySet:
    queryset = IncomeGroup.objects.all()
    if name:
        queryset = queryset.filter(name__icontains=name)
    return queryset.order_by('-created_at')


def get_income_group(*, group_id: UUID) -> IncomeGroup:
    try:
        return IncomeGroup.objects.get(id=group_id)
    except IncomeGroup.DoesNotExist:
        raise IncomeGroupNotFoundError()


def create_income_group(*, name: str, description: str) -> IncomeGroup:
    group = IncomeGroup.objects.create(name=name, description=description)
    logger.info("Created income group %s", group.id)
    return group


@transaction.atomic
def update_income_group(*, group_id: UUID, name: str, description: str) -> IncomeGroup:
    """
    Replace name and description.

    Raises:
        IncomeGroupNotFoundError: If group doesn't exist
    """
    try:
        group = (
            IncomeGroup.objects
            .select_for_update()
            .get(id=group_id)
        )
    except IncomeGroup.DoesNotExist:
        raise IncomeGroupNotFoundError()

    group.name = name
    group.description = description
    group.save(update_fields=['name', 'description', 'updated_at'])
    return group


@transaction.atomic
def delete_income_group(*, group_id: UUID) -> None:
    """
    Delete a group together with its incomes.

    Raises:
        IncomeGroupNotFoundError: If group doesn't exist
    """
    try:
        group = IncomeGroup.objects.get(id=group_id)
    except IncomeGroup.DoesNotExist:
        raise IncomeGroupNotFoundError()

    income_count = group.incomes.count()
    group.delete()
    logger.info("Deleted income group %s and %d incomes", group_id, income_count)
