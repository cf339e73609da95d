"""Permission classes for account administration."""
from rest_framework.permissions import BasePermission


class IsAdministrator(BasePermission):
    """
    Permission: user must have the administrator account type.

    Usage:
        class UserViewSet(viewsets.ReadOnlyModelViewSet):
            permission_classes = [IsAuthenticated, IsAdministrator]
    """

    message = 'Only administrators can manage users.'

    def has_permission(self, request, view):
        return bool(request.user and request.user.is_authenticated and request.user.is_administrator)
