import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.reminders.models import Reminder, ReminderType, ReminderDay


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def reminder_owner(db):
    return User.objects.create_user(
        email='planner@example.com',
        password='TestPass123!',
        username='planner',
    )


@pytest.fixture
def other_owner(db):
    return User.objects.create_user(
        email='other@example.com',
        password='TestPass123!',
        username='other',
    )


@pytest.fixture
def owner_client(api_client, reminder_owner):
    """Return API client authenticated as the reminder owner."""
    refresh = RefreshToken.for_user(reminder_owner)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def monday_reminder(reminder_owner):
    return Reminder.objects.create(
        user=reminder_owner,
        type=ReminderType.EXPENSE,
        reminder_day=ReminderDay.MONDAY,
    )


@pytest.fixture
def paused_reminder(reminder_owner):
    return Reminder.objects.create(
        user=reminder_owner,
        type=ReminderType.INCOME,
        reminder_day=ReminderDay.MONDAY,
        active=False,
    )


@pytest.fixture
def friday_reminder(other_owner):
    return Reminder.objects.create(
        user=other_owner,
        type=ReminderType.INCOME,
        reminder_day=ReminderDay.FRIDAY,
    )
