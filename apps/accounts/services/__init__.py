"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    UserRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
    PasswordConfirmationError,
    UserNotFoundError,
)
from .user_registration import register_user
from .user_authentication import authenticate_user
from .account_management import (
    delete_user_account,
    update_user_profile,
    list_users,
    delete_user,
    count_users,
)

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'UserRegistrationError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    'PasswordConfirmationError',
    'UserNotFoundError',
    # Services
    'register_user',
    'authenticate_user',
    'delete_user_account',
    'update_user_profile',
    'list_users',
    'delete_user',
    'count_users',
]
