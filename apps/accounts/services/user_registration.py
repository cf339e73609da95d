"""User registration service."""

import logging

from django.db import transaction, IntegrityError
from django.contrib.auth import get_user_model

from apps.common.email import send_email
from apps.common.exceptions import EmailDeliveryError
from .exceptions import UserRegistrationError

User = get_user_model()

logger = logging.getLogger(__name__)

WELCOME_SUBJECT = 'Welcome to Expense Tracker'


@transaction.atomic
def register_user(
    *,
    email: str,
    password: str,
    username: str
) -> User:
    """
    Register a new user and queue a welcome email.

    The email is sent after the transaction commits, so a rolled back
    registration never mails anyone.

    Args:
        email: User's email address
        password: User's password (will be hashed)
        username: Public username

    Returns:
        Created User instance

    Raises:
        UserRegistrationError: If registration fails
    """
    if User.objects.filter(email__iexact=email).exists():
        raise UserRegistrationError("A user with this email already exists")

    try:
        user = User.objects.create_user(
            email=email,
            password=password,
            username=username
        )
    except IntegrityError as e:
        logger.error("register_user: could not create %s: %s", email, e)
        raise UserRegistrationError(f"Registration failed: {str(e)}")

    transaction.on_commit(lambda: send_welcome_email(user))

    logger.info("Registered user %s", user.id)
    return user


def send_welcome_email(user: User) -> None:
    """Send the welcome email; a delivery failure never fails registration."""
    body = (
        f"<p>Hi {user.username},</p>"
        "<p>your Expense Tracker account is ready. "
        "Start by adding your first income or expense.</p>"
    )
    try:
        send_email(to_email=user.email, subject=WELCOME_SUBJECT, body=body)
    except EmailDeliveryError as e:
        logger.warning("Welcome email for user %s not sent: %s", user.id, e)
