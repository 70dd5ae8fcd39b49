"""
DRF permission classes shared by all apps.

Roles:
- user: owns warranties/events, reads catalog data
- admin: full access, including other users' warranties and the admin dashboard
"""
from rest_framework import permissions


class IsAdmin(permissions.BasePermission):
    """
    Allow access only to users with the admin role (or superusers).
    """

    message = 'Admin privileges required.'

    def has_permission(self, request, view):
        if not request.user or not request.user.is_authenticated:
            return False
        return request.user.is_admin


class IsAdminOrReadOnly(permissions.BasePermission):
    """
    Authenticated users may read; only admins may write.

    Used for catalog resources (products, categories).
    """

    message = 'Only admins can modify this resource.'

    def has_permission(self, request, view):
        if not request.user or not request.user.is_authenticated:
            return False
        if request.method in permissions.SAFE_METHODS:
            return True
        return request.user.is_admin
