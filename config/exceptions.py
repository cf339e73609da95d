"""
Project-wide DRF exception handler.

DRF already renders APIException subclasses (validation errors, 404s raised by
the services). Anything else escaping a view is logged here and returned as a
JSON 500 instead of Django's HTML error page.
"""
import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def api_exception_handler(exc, context):
    response = exception_handler(exc, context)
    if response is not None:
        return response

    view = context.get('view')
    logger.error(
        "%s: unhandled error: %s",
        view.__class__.__name__ if view else 'unknown view',
        exc,
        exc_info=exc,
    )
    return Response({
        'error': 'Internal server error',
        'status': 500
    }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
