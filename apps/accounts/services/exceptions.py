"""Domain-specific exceptions for accounts services."""
from rest_framework.exceptions import APIException


class AccountsServiceError(Exception):
    """Base exception for accounts services."""
    pass


class UserRegistrationError(AccountsServiceError):
    """Raised when user registration fails."""
    pass


class InvalidCredentialsError(AccountsServiceError):
    """Raised when authentication credentials are invalid."""
    pass


class InactiveAccountError(AccountsServiceError):
    """Raised when account is deactivated."""
    pass


class PasswordConfirmationError(AccountsServiceError):
    """Raised when password confirmation fails."""
    pass


class UserNotFoundError(APIException):
    """User not found."""
    status_code = 404
    default_detail = 'User not found.'
    default_code = 'user_not_found'
