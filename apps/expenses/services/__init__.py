"""
Expenses app services layer.

Views stay thin: validation happens in serializers, queries and mutations
happen here.
"""

from .exceptions import (
    ExpenseNotFoundError,
    ExpenseGroupNotFoundError,
    NoExpensesError,
)

from .expense_management import (
    list_expenses,
    get_expense,
    create_expense,
    update_expense,
    delete_expense,
    delete_all_expenses,
    count_expenses,
    get_latest_expenses,
)

from .group_management import (
    list_expense_groups,
    get_expense_group,
    create_expense_group,
    update_expense_group,
    delete_expense_group,
)


__all__ = [
    # Exceptions
    'ExpenseNotFoundError',
    'ExpenseGroupNotFoundError',
    'NoExpensesError',

    # Expenses
    'list_expenses',
    'get_expense',
    'create_expense',
    'update_expense',
    'delete_expense',
    'delete_all_expenses',
    'count_expenses',
    'get_latest_expenses',

    # Expense groups
    'list_expense_groups',
    'get_expense_group',
    'create_expense_group',
    'update_expense_group',
    'delete_expense_group',
]
