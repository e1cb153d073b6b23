"""
Role guards.

``role_required`` wraps Django views: anonymous callers are sent to the
login page and authenticated callers lacking the role get a 403.  ``IsAdminRole``
applies the ADMIN rule to the JSON endpoints.
"""
from functools import wraps

from django.contrib.auth.views import redirect_to_login
from django.core.exceptions import PermissionDenied
from rest_framework.permissions import BasePermission

USER = "USER"
ADMIN = "ADMIN"


def user_has_role(user, role: str) -> bool:
    if not (user and user.is_authenticated):
        return False
    has_role = getattr(user, "has_role", None)
    return bool(has_role and has_role(role))


def role_required(*roles: str):
    """Only let through authenticated users holding one of ``roles``."""
    def decorator(view):
        @wraps(view)
        def wrapper(request, *args, **kwargs):
            user = getattr(request, "user", None)
            if not (user and user.is_authenticated):
                return redirect_to_login(request.get_full_path())
            if not any(user_has_role(user, role) for role in roles):
                raise PermissionDenied(f"one of {', '.join(roles)} required")
            return view(request, *args, **kwargs)
        return wrapper
    return decorator


class IsAdminRole(BasePermission):
    """Allow access only to users holding the ADMIN role."""
    def has_permission(self, request, view) -> bool:  # type: ignore[override]
        return user_has_role(getattr(request, "user", None), ADMIN)
