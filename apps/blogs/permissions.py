from rest_framework import permissions


class IsBlogOwnerOrReadOnly(permissions.BasePermission):
    """
    Permission: Only the user who wrote a blog can edit/delete it.
    Anyone can read blogs.
    """

    def has_object_permission(self, request, view, obj):
        if request.method in permissions.SAFE_METHODS:
            return True

        return obj.user_id == request.user.id
