"""
Permission classes for role based access control.
"""
from rest_framework.permissions import BasePermission

from .models import ROLE_ADMIN


class IsAdminRole(BasePermission):
    """Allow access only to principals carrying the admin role."""
    message = 'You are not authorized to perform this action'

    def has_permission(self, request, view) -> bool:  # type: ignore[override]
        user = getattr(request, "user", None)
        return bool(user and user.is_authenticated and getattr(user, "role", None) == ROLE_ADMIN)


def is_admin(user) -> bool:
    return getattr(user, "role", None) == ROLE_ADMIN
