"""Service layer tests for incomes app."""

import pytest
from decimal import Decimal
from uuid import uuid4

from apps.incomes.models import Income
from apps.incomes.services import (
    list_incomes,
    create_income,
    update_income,
    delete_income,
    delete_all_incomes,
    get_latest_incomes,
    IncomeNotFoundError,
    IncomeGroupNotFoundError,
    NoIncomesError,
)


@pytest.mark.django_db
class TestIncomeManagement:

    def test_create_income(self, income_owner, salary_group):
        income = create_income(
            user=income_owner,
            description='Quarterly bonus',
            amount=Decimal('800.00'),
            income_group_id=salary_group.id,
        )

        assert income.user == income_owner
        assert income.income_group == salary_group

    def test_create_income_unknown_group(self, income_owner):
        with pytest.raises(IncomeGroupNotFoundError):
            create_income(
                user=income_owner,
                description='Quarterly bonus',
                amount=Decimal('800.00'),
                income_group_id=uuid4(),
            )

    def test_update_income_wrong_owner(self, income, income_stranger, salary_group):
        with pytest.raises(IncomeNotFoundError):
            update_income(
                user=income_stranger,
                income_id=income.id,
                description='Not mine at all',
                amount=Decimal('1.00'),
                income_group_id=salary_group.id,
            )

    def test_delete_income_missing(self, income_owner):
        with pytest.raises(IncomeNotFoundError):
            delete_income(user=income_owner, income_id=uuid4())

    def test_delete_all_incomes_returns_count(self, income_owner, many_incomes):
        assert delete_all_incomes(user=income_owner) == 12
        assert not Income.objects.exists()

        with pytest.raises(NoIncomesError):
            delete_all_incomes(user=income_owner)

    def test_list_incomes_combines_filters(self, income_owner, many_incomes, salary_group):
        queryset = list_incomes(
            user=income_owner,
            min_amount=Decimal('200'),
            max_amount=Decimal('800'),
            income_group_id=salary_group.id,
        )

        # Odd payments live in the salary group: 300, 500, 700
        assert sorted(queryset.values_list('amount', flat=True)) == [
            Decimal('300.00'), Decimal('500.00'), Decimal('700.00'),
        ]

    def test_get_latest_incomes_limits_to_five(self, income_owner, many_incomes):
        summary = get_latest_incomes(user=income_owner)

        assert summary['highest_income'] == Decimal('1200.00')
        assert [i.description for i in summary['incomes']] == [
            'Payment number 12',
            'Payment number 11',
            'Payment number 10',
            'Payment number 9',
            'Payment number 8',
        ]
