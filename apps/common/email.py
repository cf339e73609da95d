"""Outgoing email through Django's configured mail backend."""
import logging

from django.conf import settings
from django.core.mail import send_mail
from django.utils.html import strip_tags

from .exceptions import EmailDeliveryError

logger = logging.getLogger(__name__)


def send_email(*, to_email: str, subject: str, body: str) -> bool:
    """
    Send an HTML email with a plain-text alternative.

    Args:
        to_email: Recipient address
        subject: Subject line
        body: HTML body

    Returns:
        True if the backend accepted the message

    Raises:
        EmailDeliveryError: If the backend fails
    """
    try:
        sent = send_mail(
            subject=subject,
            message=strip_tags(body),
            from_email=settings.DEFAULT_FROM_EMAIL,
            recipient_list=[to_email],
            html_message=body,
        )
    except Exception as e:
        logger.error("send_email: failed to send %r to %s: %s", subject, to_email, e)
        raise EmailDeliveryError(f"Could not send email to {to_email}") from e

    return sent == 1
