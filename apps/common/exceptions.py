"""
Exceptions shared by every entity app.

HTTP-facing errors subclass APIException so DRF renders them directly;
delivery errors are plain exceptions handled by the caller.
"""
from rest_framework.exceptions import APIException


class IdMismatchError(APIException):
    """Body id differs from the id in the URL."""
    status_code = 400
    default_detail = 'The id in the request body does not match the URL.'
    default_code = 'id_mismatch'


class EmailDeliveryError(Exception):
    """Raised when the mail backend fails to send a message."""
    pass
