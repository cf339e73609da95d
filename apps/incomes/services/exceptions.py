"""
Domain exceptions for incomes app.

Not-found errors subclass APIException so they surface as 404 responses
straight from the service layer.
"""
from rest_framework.exceptions import APIException


class IncomeNotFoundError(APIException):
    """Income not found (or owned by someone else)."""
    status_code = 404
    default_detail = 'Income not found.'
    default_code = 'income_not_found'


class IncomeGroupNotFoundError(APIException):
    """Income group referenced by id does not exist."""
    status_code = 404
    default_detail = 'Income group not found.'
    default_code = 'income_group_not_found'


class NoIncomesError(APIException):
    """User has no incomes to delete."""
    status_code = 404
    default_detail = 'No incomes found.'
    default_code = 'no_incomes'
