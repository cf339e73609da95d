import pytest
from django.core import mail
from django.urls import reverse
from rest_framework import status
from apps.accounts.models import User
from apps.incomes.models import Income, IncomeGroup
from apps.reminders.models import Reminder


# =============================================================================
# Registration Tests
# =============================================================================

@pytest.mark.django_db
class TestRegistration:
    """Tests for POST /api/auth/register/"""

    def test_register_success(self, api_client):
        """Successfully register a new user."""
        url = reverse('auth:register')
        data = {
            'username': 'newuser',
            'email': 'newuser@example.com',
            'password': 'SecurePass123!',
            'password_confirm': 'SecurePass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_201_CREATED
        assert 'tokens' in response.data
        assert 'access' in response.data['tokens']
        assert 'refresh' in response.data['tokens']
        assert response.data['user']['username'] == 'newuser'
        assert response.data['user']['account_type'] == 'user'
        assert User.objects.filter(email='newuser@example.com').exists()

    def test_register_sends_welcome_email(self, api_client, django_capture_on_commit_callbacks):
        """A welcome email goes out once the registration commits."""
        url = reverse('auth:register')
        data = {
            'username': 'mailme',
            'email': 'mailme@example.com',
            'password': 'SecurePass123!',
            'password_confirm': 'SecurePass123!',
        }
        with django_capture_on_commit_callbacks(execute=True):
            response = api_client.post(url, data)

        assert response.status_code == status.HTTP_201_CREATED
        assert len(mail.outbox) == 1
        assert mail.outbox[0].to == ['mailme@example.com']
        assert mail.outbox[0].subject == 'Welcome to Expense Tracker'

    def test_register_duplicate_email(self, api_client, user):
        """Cannot register with existing email."""
        url = reverse('auth:register')
        data = {
            'username': 'another',
            'email': user.email.upper(),
            'password': 'SecurePass123!',
            'password_confirm': 'SecurePass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'error' in response.data

    def test_register_password_mismatch(self, api_client):
        """Registration fails when passwords don't match."""
        url = reverse('auth:register')
        data = {
            'username': 'mismatch',
            'email': 'mismatch@example.com',
            'password': 'SecurePass123!',
            'password_confirm': 'DifferentPass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'password_confirm' in response.data

    def test_register_weak_password(self, api_client):
        """Registration fails with weak password."""
        url = reverse('auth:register')
        data = {
            'username': 'weakling',
            'email': 'weak@example.com',
            'password': '123',
            'password_confirm': '123',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_register_short_username(self, api_client):
        url = reverse('auth:register')
        data = {
            'username': 'ab',
            'email': 'short@example.com',
            'password': 'SecurePass123!',
            'password_confirm': 'SecurePass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'username' in response.data


# =============================================================================
# Login Tests
# =============================================================================

@pytest.mark.django_db
class TestLogin:
    """Tests for POST /api/auth/login/"""

    def test_login_success(self, api_client, user):
        url = reverse('auth:login')
        response = api_client.post(url, {
            'email': 'testuser@example.com',
            'password': 'TestPass123!',
        })

        assert response.status_code == status.HTTP_200_OK
        assert 'access' in response.data['tokens']
        user.refresh_from_db()
        assert user.last_login is not None

    def test_login_email_is_case_insensitive(self, api_client, user):
        url = reverse('auth:login')
        response = api_client.post(url, {
            'email': 'TestUser@Example.com',
            'password': 'TestPass123!',
        })

        assert response.status_code == status.HTTP_200_OK

    def test_login_wrong_password(self, api_client, user):
        url = reverse('auth:login')
        response = api_client.post(url, {
            'email': 'testuser@example.com',
            'password': 'WrongPass123!',
        })

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['error'] == 'Invalid credentials'

    def test_login_unknown_email(self, api_client):
        url = reverse('auth:login')
        response = api_client.post(url, {
            'email': 'nobody@example.com',
            'password': 'TestPass123!',
        })

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_login_inactive_account(self, api_client, user_inactive):
        url = reverse('auth:login')
        response = api_client.post(url, {
            'email': 'inactive@example.com',
            'password': 'TestPass123!',
        })

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_refresh_token(self, api_client, user):
        """Refresh token from login can be exchanged for a new access token."""
        login = api_client.post(reverse('auth:login'), {
            'email': 'testuser@example.com',
            'password': 'TestPass123!',
        })
        response = api_client.post(
            reverse('token_refresh'),
            {'refresh': login.data['tokens']['refresh']},
        )

        assert response.status_code == status.HTTP_200_OK
        assert 'access' in response.data


# =============================================================================
# Profile Tests
# =============================================================================

@pytest.mark.django_db
class TestProfile:
    """Tests for /api/auth/user/ endpoints."""

    def test_get_current_user(self, authenticated_client, user):
        response = authenticated_client.get(reverse('auth:current-user'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['email'] == user.email
        assert 'password' not in response.data

    def test_get_current_user_unauthenticated(self, api_client):
        response = api_client.get(reverse('auth:current-user'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_update_profile(self, authenticated_client, user):
        response = authenticated_client.put(
            reverse('auth:update-profile'),
            {'username': 'renamed'},
            format='json',
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['username'] == 'renamed'
        user.refresh_from_db()
        assert user.username == 'renamed'

    def test_delete_account_cascades(self, authenticated_client, user):
        """Deleting the account removes everything the user owns."""
        group = IncomeGroup.objects.create(name='Salary', description='Monthly salary')
        Income.objects.create(user=user, income_group=group, description='March salary', amount='1500.00')
        Reminder.objects.create(user=user, type='income', reminder_day='monday')

        response = authenticated_client.delete(
            reverse('auth:delete-account'),
            {'password': 'TestPass123!', 'confirm': True},
            format='json',
        )

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not User.objects.filter(id=user.id).exists()
        assert not Income.objects.exists()
        assert not Reminder.objects.exists()
        # Groups are shared and survive their members
        assert IncomeGroup.objects.filter(id=group.id).exists()

    def test_delete_account_wrong_password(self, authenticated_client, user):
        response = authenticated_client.delete(
            reverse('auth:delete-account'),
            {'password': 'WrongPass123!', 'confirm': True},
            format='json',
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert User.objects.filter(id=user.id).exists()

    def test_delete_account_requires_confirmation(self, authenticated_client, user):
        response = authenticated_client.delete(
            reverse('auth:delete-account'),
            {'password': 'TestPass123!', 'confirm': False},
            format='json',
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert User.objects.filter(id=user.id).exists()


@pytest.mark.parametrize('name, path', [
    ('auth:register', '/api/auth/register/'),
    ('auth:login', '/api/auth/login/'),
    ('auth:current-user', '/api/auth/user/'),
    ('auth:update-profile', '/api/auth/user/update/'),
    ('auth:delete-account', '/api/auth/user/delete/'),
    ('user-admin:user-list', '/api/users/'),
])
def test_account_routes_are_namespaced_by_mount_point(name, path):
    assert reverse(name) == path


# =============================================================================
# Administrator User Management Tests
# =============================================================================

@pytest.mark.django_db
class TestUserAdministration:
    """Tests for /api/users/"""

    def test_list_users_as_administrator(self, admin_client, user, other_user):
        response = admin_client.get(reverse('user-admin:user-list'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['total_records'] == 3
        emails = {u['email'] for u in response.data['results']}
        assert {'testuser@example.com', 'otheruser@example.com'} <= emails

    def test_list_users_filter_by_email(self, admin_client, user, other_user):
        response = admin_client.get(reverse('user-admin:user-list'), {'email': 'other'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['total_records'] == 1
        assert response.data['results'][0]['email'] == 'otheruser@example.com'

    def test_list_users_forbidden_for_regular_user(self, authenticated_client):
        response = authenticated_client.get(reverse('user-admin:user-list'))

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_retrieve_user(self, admin_client, user):
        response = admin_client.get(reverse('user-admin:user-detail', args=[user.id]))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['id'] == str(user.id)

    def test_delete_user(self, admin_client, user):
        url = reverse('user-admin:user-detail', args=[user.id])

        response = admin_client.delete(url)
        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not User.objects.filter(id=user.id).exists()

        response = admin_client.delete(url)
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_count_users(self, admin_client, user, other_user):
        response = admin_client.get(reverse('user-admin:user-count'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 3
