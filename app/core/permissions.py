# core/permissions.py
from rest_framework import permissions
from django.utils.translation import gettext_lazy as _

from .authorization import Permission, requires


class RequiresPermission(permissions.BasePermission):
    """
    Base DRF permission delegating to the ``requires`` capability

    Anonymous requests are rejected before the capability is consulted so DRF
    answers them with 401 instead of 403.
    """
    required = Permission.AUTHENTICATED
    message = _("Forbidden access")

    def has_permission(self, request, view):
        if not (request.user and request.user.is_authenticated):
            return False
        return bool(requires(
            request.auth,
            self.required,
            view.storage,
            subject=self.get_subject(request, view),
        ))

    def get_subject(self, request, view):
        return None


class HasValidToken(RequiresPermission):
    required = Permission.AUTHENTICATED


class IsRequestSubject(RequiresPermission):
    """
    Token email must match the email the view acts on.
    Views expose it through ``get_permission_subject(request)``.
    """
    required = Permission.SUBJECT

    def get_subject(self, request, view):
        return view.get_permission_subject(request)


class IsAdminRole(RequiresPermission):
    required = Permission.ADMIN
