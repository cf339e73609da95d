import pytest
from datetime import timedelta
from decimal import Decimal
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.incomes.models import Income, IncomeGroup


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def income_owner(db):
    """Create and return a user who records incomes."""
    return User.objects.create_user(
        email='earner@example.com',
        password='TestPass123!',
        username='earner',
    )


@pytest.fixture
def income_stranger(db):
    """Create and return a user who owns none of the fixtures' incomes."""
    return User.objects.create_user(
        email='stranger@example.com',
        password='TestPass123!',
        username='stranger',
    )


@pytest.fixture
def owner_client(api_client, income_owner):
    """Return API client authenticated as the income owner."""
    refresh = RefreshToken.for_user(income_owner)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def stranger_client(income_stranger):
    """Return API client authenticated as another user."""
    client = APIClient()
    refresh = RefreshToken.for_user(income_stranger)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def salary_group(db):
    return IncomeGroup.objects.create(name='Salary', description='Monthly salary payments')


@pytest.fixture
def dividends_group(db):
    return IncomeGroup.objects.create(name='Dividends', description='Stock dividend payouts')


@pytest.fixture
def income(income_owner, salary_group):
    """A single income owned by income_owner."""
    return Income.objects.create(
        user=income_owner,
        income_group=salary_group,
        description='January salary',
        amount=Decimal('2500.00'),
    )


@pytest.fixture
def many_incomes(income_owner, salary_group, dividends_group):
    """Twelve incomes with amounts 100, 200, ... 1200, one minute apart."""
    base = timezone.now() - timedelta(hours=1)
    incomes = []
    for i in range(1, 13):
        income = Income.objects.create(
            user=income_owner,
            income_group=salary_group if i % 2 else dividends_group,
            description=f'Payment number {i}',
            amount=Decimal(i * 100),
        )
        Income.objects.filter(id=income.id).update(created_at=base + timedelta(minutes=i))
        incomes.append(income)
    return incomes
