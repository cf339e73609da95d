import pytest
from rest_framework.test import APIClient, APIRequestFactory
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def request_factory():
    return APIRequestFactory()


@pytest.fixture
def user(db):
    return User.objects.create_user(
        email='common@example.com',
        password='TestPass123!',
        username='common',
    )


@pytest.fixture
def authenticated_client(api_client, user):
    """Return an authenticated API client using JWT."""
    refresh = RefreshToken.for_user(user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def seven_users(db):
    """Seven users, enough to spread over several small pages."""
    return [
        User.objects.create_user(
            email=f'paged{i}@example.com',
            password='TestPass123!',
            username=f'paged{i}',
        )
        for i in range(7)
    ]
