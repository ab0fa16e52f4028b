"""
Shared Authentication Permissions

Role gate for the API. Roles come from the closed ``CustomUser.Role`` enum;
a gate naming anything else fails at import time rather than silently
denying every request.
"""

from rest_framework.permissions import BasePermission

from apps.accounts.models import CustomUser
from apps.shared.exceptions import role_required


class HasRole(BasePermission):
    """
    Allow authenticated users whose role is in ``allowed_roles``.

    Authentication always runs first: DRF turns a failed permission check for
    an anonymous request into 401, so this class only ever produces 403.
    """

    allowed_roles: tuple = ()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls.allowed_roles = tuple(CustomUser.Role(role) for role in cls.allowed_roles)

    @property
    def message(self):
        return role_required([role.value for role in self.allowed_roles]).message

    def has_permission(self, request, view):
        user = request.user
        if not (user and user.is_authenticated):
            return False
        return user.role in self.allowed_roles


class IsStudent(HasRole):
    """Students only"""

    allowed_roles = (CustomUser.Role.STUDENT,)


class IsAdmin(HasRole):
    """Admins only"""

    allowed_roles = (CustomUser.Role.ADMIN,)


def require_roles(*roles) -> type[HasRole]:
    """Build a role gate for an ad-hoc set of roles, e.g. ``require_roles('student', 'admin')``"""
    name = 'HasRole' + ''.join(str(role).title() for role in roles)
    return type(name, (HasRole,), {'allowed_roles': roles})
