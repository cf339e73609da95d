"""
Incomes app services layer.

Views stay thin: validation happens in serializers, queries and mutations
happen here.
"""

from .exceptions import (
    IncomeNotFoundError,
    IncomeGroupNotFoundError,
    NoIncomesError,
)

from .income_management import (
    list_incomes,
    get_income,
    create_income,
    update_income,
    delete_income,
    delete_all_incomes,
    count_incomes,
    get_latest_incomes,
)

from .group_management import (
    list_income_groups,
    get_income_group,
    create_income_group,
    update_income_group,
    delete_income_group,
)


__all__ = [
    # Exceptions
    'IncomeNotFoundError',
    'IncomeGroupNotFoundError',
    'NoIncomesError',

    # Incomes
    'list_incomes',
    'get_income',
    'create_income',
    'update_income',
    'delete_income',
    'delete_all_incomes',
    'count_incomes',
    'get_latest_incomes',

    # Income groups
    'list_income_groups',
    'get_income_group',
    'create_income_group',
    'update_income_group',
    'delete_income_group',
]
