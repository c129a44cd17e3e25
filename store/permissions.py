from rest_framework.exceptions import NotAuthenticated, PermissionDenied
from rest_framework.permissions import BasePermission, SAFE_METHODS

from config.core.app_settings import get_bookstore_settings
from config.core.authentication import extract_token


class ReadOnlyOrAllowedToken(BasePermission):
    """
    Read: everyone
    Write: only callers presenting an allow-listed token
    - no token at all -> 401
    - a token that is not allowed -> 403
    """
    def has_permission(self, request, view):
        if request.method in SAFE_METHODS:
            return True
        if request.auth:
            return True
        if extract_token(request, get_bookstore_settings()):
            raise PermissionDenied('Forbidden')
        raise NotAuthenticated('Authentication required')
