import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.blogs.models import Blog


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def blog_author(db):
    return User.objects.create_user(
        email='writer@example.com',
        password='TestPass123!',
        username='writer',
    )


@pytest.fixture
def blog_reader(db):
    return User.objects.create_user(
        email='reader@example.com',
        password='TestPass123!',
        username='reader',
    )


@pytest.fixture
def author_client(blog_author):
    """Return API client authenticated as the blog author."""
    client = APIClient()
    refresh = RefreshToken.for_user(blog_author)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def reader_client(blog_reader):
    """Return API client authenticated as a user who wrote nothing."""
    client = APIClient()
    refresh = RefreshToken.for_user(blog_reader)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def blog(blog_author):
    return Blog.objects.create(
        user=blog_author,
        description='Budgeting for beginners',
        text='Start by writing down every expense for a month.',
        author='Jane Writer',
    )


@pytest.fixture
def blog_data():
    return {
        'description': 'Saving on groceries',
        'text': 'Plan meals for the whole week before shopping.',
        'author': 'Jane Writer',
    }
