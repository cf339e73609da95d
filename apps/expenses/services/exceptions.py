"""
Domain exceptions for expenses app.

Not-found errors subclass APIException so they surface as 404 responses
straight from the service layer.
"""
from rest_framework.exceptions import APIException


class ExpenseNotFoundError(APIException):
    """Expense not found (or owned by someone else)."""
    status_code = 404
    default_detail = 'Expense not found.'
    default_code = 'expense_not_found'


class ExpenseGroupNotFoundError(APIException):
    """Expense group referenced by id does not exist."""
    status_code = 404
    default_detail = 'Expense group not found.'
    default_code = 'expense_group_not_found'


class NoExpensesError(APIException):
    """User has no expenses to delete."""
    status_code = 404
    default_detail = 'No expenses found.'
    default_code = 'no_expenses'
