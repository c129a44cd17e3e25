from rest_framework.authentication import BaseAuthentication

from .app_settings import get_bookstore_settings


class ApiClient:
    """The caller behind an accepted shared-secret token."""

    is_authenticated = True

    def __init__(self, token):
        self.token = token

    def __str__(self):
        return f'api-client:{self.token[:4]}...'


def _header(request, name):
    """Reads a request header by its HTTP name (e.g. 'X-API-KEY')."""
    return request.headers.get(name, '') or ''


def extract_token(request, config):
    """
    Returns the token sent with the request, or '' when there is none.
    The configured auth header is read first ('Bearer <token>' or a bare
    token), then the API-key header.
    """
    raw = _header(request, config.auth_header_name) or _header(request, config.api_key_header_name)
    raw = raw.strip()
    if raw.lower().startswith('bearer '):
        return raw[7:].strip()
    return raw


class AllowListTokenAuthentication(BaseAuthentication):
    """
    Accepts requests whose token is in BOOKSTORE['ALLOWED_TOKENS'].
    Unknown or missing tokens leave the request anonymous; the permission
    class decides between 401 and 403.
    """
    keyword = 'Bearer'

    def authenticate(self, request):
        config = get_bookstore_settings()
        token = extract_token(request, config)
        if not token or token not in config.allowed_tokens:
            return None
        return (ApiClient(token), token)

    def authenticate_header(self, request):
        return self.keyword
