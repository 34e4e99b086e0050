from rest_framework import permissions


class IsStaff(permissions.BasePermission):
    """
    Admin listings: only tokens carrying a staff claim (or Django staff users).
    """
    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and (user.is_staff or getattr(user, "is_superuser", False)))
