import pytest
from decimal import Decimal

from apps.accounts.models import User
from apps.common.filters import AmountFilterSerializer, apply_amount_filters
from apps.incomes.models import Income, IncomeGroup


class TestAmountFilterSerializer:

    def test_valid_range(self):
        serializer = AmountFilterSerializer(data={'minAmount': '10', 'maxAmount': '20.5'})

        assert serializer.is_valid()
        assert serializer.validated_data['minAmount'] == Decimal('10')
        assert serializer.validated_data['maxAmount'] == Decimal('20.5')

    def test_equal_bounds_allowed(self):
        serializer = AmountFilterSerializer(data={'minAmount': '10', 'maxAmount': '10'})

        assert serializer.is_valid()

    def test_inverted_range(self):
        serializer = AmountFilterSerializer(data={'minAmount': '30', 'maxAmount': '20'})

        assert not serializer.is_valid()
        assert 'maxAmount' in serializer.errors

    @pytest.mark.parametrize('value', ['abc', '12.3.4'])
    def test_non_numeric_amount(self, value):
        serializer = AmountFilterSerializer(data={'minAmount': value})

        assert not serializer.is_valid()
        assert 'minAmount' in serializer.errors


@pytest.fixture
def filtered_incomes(db):
    owner = User.objects.create_user(
        email='filters@example.com',
        password='TestPass123!',
        username='filters',
    )
    group = IncomeGroup.objects.create(name='Salary', description='Monthly salary')
    for description, amount in [
        ('Monthly salary', '2500.00'),
        ('Salary bonus', '300.00'),
        ('Garage sale', '45.50'),
    ]:
        Income.objects.create(
            user=owner, income_group=group, description=description, amount=Decimal(amount)
        )
    return Income.objects.filter(user=owner)


@pytest.mark.django_db
class TestApplyAmountFilters:

    def test_no_filters_keeps_queryset(self, filtered_incomes):
        assert apply_amount_filters(filtered_incomes).count() == 3

    def test_description_is_case_insensitive(self, filtered_incomes):
        result = apply_amount_filters(filtered_incomes, description='SALARY')

        assert {i.description for i in result} == {'Monthly salary', 'Salary bonus'}

    def test_amount_bounds_are_inclusive(self, filtered_incomes):
        result = apply_amount_filters(
            filtered_incomes, min_amount=Decimal('45.50'), max_amount=Decimal('300.00')
        )

        assert {i.description for i in result} == {'Salary bonus', 'Garage sale'}

    def test_positional_bounds_rejected(self, filtered_incomes):
        with pytest.raises(TypeError):
            apply_amount_filters(filtered_incomes, 'salary')
