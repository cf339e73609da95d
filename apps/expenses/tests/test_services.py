"""Service layer tests for expenses app."""

import pytest
from decimal import Decimal
from uuid import uuid4

from apps.expenses.models import Expense
from apps.expenses.services import (
    list_expenses,
    create_expense,
    update_expense,
    delete_expense,
    delete_all_expenses,
    get_latest_expenses,
    ExpenseNotFoundError,
    ExpenseGroupNotFoundError,
    NoExpensesError,
)


@pytest.mark.django_db
class TestExpenseManagement:

    def test_create_expense(self, expense_owner, rent_group):
        expense = create_expense(
            user=expense_owner,
            description='Winter heating bill',
            amount=Decimal('800.00'),
            expense_group_id=rent_group.id,
        )

        assert expense.user == expense_owner
        assert expense.expense_group == rent_group

    def test_create_expense_without_group(self, expense_owner):
        expense = create_expense(
            user=expense_owner,
            description='Parking ticket fine',
            amount=Decimal('45.00'),
        )

        assert expense.expense_group is None

    def test_create_expense_unknown_group(self, expense_owner):
        with pytest.raises(ExpenseGroupNotFoundError):
            create_expense(
                user=expense_owner,
                description='Winter heating bill',
                amount=Decimal('800.00'),
                expense_group_id=uuid4(),
            )

    def test_update_expense_wrong_owner(self, expense, expense_stranger, rent_group):
        with pytest.raises(ExpenseNotFoundError):
            update_expense(
                user=expense_stranger,
                expense_id=expense.id,
                description='Not mine at all',
                amount=Decimal('1.00'),
                expense_group_id=rent_group.id,
            )

    def test_delete_expense_missing(self, expense_owner):
        with pytest.raises(ExpenseNotFoundError):
            delete_expense(user=expense_owner, expense_id=uuid4())

    def test_delete_all_expenses_returns_count(self, expense_owner, many_expenses):
        assert delete_all_expenses(user=expense_owner) == 12
        assert not Expense.objects.exists()

        with pytest.raises(NoExpensesError):
            delete_all_expenses(user=expense_owner)

    def test_list_expenses_combines_filters(self, expense_owner, many_expenses, rent_group):
        queryset = list_expenses(
            user=expense_owner,
            min_amount=Decimal('200'),
            max_amount=Decimal('800'),
            expense_group_id=rent_group.id,
        )

        # Odd purchases live in the rent group: 300, 500, 700
        assert sorted(queryset.values_list('amount', flat=True)) == [
            Decimal('300.00'), Decimal('500.00'), Decimal('700.00'),
        ]

    def test_get_latest_expenses_limits_to_five(self, expense_owner, many_expenses):
        summary = get_latest_expenses(user=expense_owner)

        assert summary['highest_expense'] == Decimal('1200.00')
        assert [i.description for i in summary['expenses']] == [
            'Purchase number 12',
            'Purchase number 11',
            'Purchase number 10',
            'Purchase number 9',
            'Purchase number 8',
        ]
