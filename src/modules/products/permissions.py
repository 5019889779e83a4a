"""Role-based permission for destructive product operations."""

from __future__ import annotations

from django.conf import settings
from rest_framework.permissions import BasePermission


class HasPrivilegedRole(BasePermission):
    """Allow users that belong to one of ``settings.PRIVILEGED_ROLES``.

    Roles are Django auth groups (e.g. ``ADMIN``, ``MANAGER``).  Combine
    with ``IsAuthenticated`` so anonymous callers get 401 rather than 403.
    """

    message = "You do not have a role allowed to perform this action."

    def has_permission(self, request, view) -> bool:
        user = request.user
        if not (user and user.is_authenticated):
            return False
        return user.groups.filter(name__in=settings.PRIVILEGED_ROLES).exists()
