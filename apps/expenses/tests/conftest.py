import pytest
from datetime import timedelta
from decimal import Decimal
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.expenses.models import Expense, ExpenseGroup


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def expense_owner(db):
    """Create and return a user who records expenses."""
    return User.objects.create_user(
        email='spender@example.com',
        password='TestPass123!',
        username='spender',
    )


@pytest.fixture
def expense_stranger(db):
    """Create and return a user who owns none of the fixtures' expenses."""
    return User.objects.create_user(
        email='stranger@example.com',
        password='TestPass123!',
        username='stranger',
    )


@pytest.fixture
def owner_client(api_client, expense_owner):
    """Return API client authenticated as the expense owner."""
    refresh = RefreshToken.for_user(expense_owner)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def stranger_client(expense_stranger):
    """Return API client authenticated as another user."""
    client = APIClient()
    refresh = RefreshToken.for_user(expense_stranger)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def rent_group(db):
    return ExpenseGroup.objects.create(name='Rent', description='Monthly apartment rent')


@pytest.fixture
def groceries_group(db):
    return ExpenseGroup.objects.create(name='Groceries', description='Weekly grocery shopping')


@pytest.fixture
def expense(expense_owner, rent_group):
    """A single expense owned by expense_owner."""
    return Expense.objects.create(
        user=expense_owner,
        expense_group=rent_group,
        description='January rent payment',
        amount=Decimal('2500.00'),
    )


@pytest.fixture
def many_expenses(expense_owner, rent_group, groceries_group):
    """Twelve expenses with amounts 100, 200, ... 1200, one minute apart."""
    base = timezone.now() - timedelta(hours=1)
    expenses = []
    for i in range(1, 13):
        expense = Expense.objects.create(
            user=expense_owner,
            expense_group=rent_group if i % 2 else groceries_group,
            description=f'Purchase number {i}',
            amount=Decimal(i * 100),
        )
        Expense.objects.filter(id=expense.id).update(created_at=base + timedelta(minutes=i))
        expenses.append(expense)
    return expenses
