import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent.parent


def env_bool(name, default=False):
    return os.environ.get(name, str(default)).strip().lower() in ('1', 'true', 'yes', 'on')


def env_list(name, default=''):
    return [item.strip() for item in os.environ.get(name, default).split(',') if item.strip()]


SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'change-me')
DEBUG = env_bool('DJANGO_DEBUG')
ALLOWED_HOSTS = env_list('DJANGO_ALLOWED_HOSTS', '*')

INSTALLED_APPS = [
    'rest_framework',
    'store.apps.StoreConfig',
    'reviews.apps.ReviewsConfig',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.gzip.GZipMiddleware',
    'django.middleware.common.CommonMiddleware',
    'config.core.middleware.RequestTimingMiddleware',
]

ROOT_URLCONF = 'config.urls'
WSGI_APPLICATION = 'config.wsgi.application'
APPEND_SLASH = False

# The catalog lives in JSON documents, not in a database.
DATABASES = {}

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_TZ = True

DATA_DIR = Path(os.environ.get('BOOKSTORE_DATA_DIR', BASE_DIR / 'data'))

BOOKSTORE = {
    'BOOKS_PATH': os.environ.get('BOOKSTORE_BOOKS_PATH', str(DATA_DIR / 'books.json')),
    'REVIEWS_PATH': os.environ.get('BOOKSTORE_REVIEWS_PATH', str(DATA_DIR / 'reviews.json')),
    'DEFAULT_LIMIT': 10,
    'MAX_LIMIT': 100,
    'TOP_RATED_COUNT': 10,
    'ALLOWED_TOKENS': env_list('ALLOWED_TOKENS'),
    'AUTH_HEADER_NAME': os.environ.get('AUTH_HEADER_NAME', 'Authorization'),
    'API_KEY_HEADER_NAME': 'X-API-KEY',
}

REST_FRAMEWORK = {
    'DEFAULT_RENDERER_CLASSES': ['rest_framework.renderers.JSONRenderer'],
    'DEFAULT_PARSER_CLASSES': ['rest_framework.parsers.JSONParser'],
    'DEFAULT_AUTHENTICATION_CLASSES': ['config.core.authentication.AllowListTokenAuthentication'],
    'DEFAULT_PERMISSION_CLASSES': ['store.permissions.ReadOnlyOrAllowedToken'],
    'DEFAULT_THROTTLE_CLASSES': ['config.core.throttling.ClientRateThrottle'],
    'DEFAULT_THROTTLE_RATES': {'api': os.environ.get('API_RATE_LIMIT', '100/15m')},
    'EXCEPTION_HANDLER': 'config.core.exceptions.bookstore_exception_handler',
    'UNAUTHENTICATED_USER': None,
}

LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
LOG_FILE = Path(os.environ.get('LOG_FILE', BASE_DIR / 'logging' / 'log.txt'))
LOG_FILE.parent.mkdir(parents=True, exist_ok=True)

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'standard': {'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s'},
    },
    'handlers': {
        'console': {'class': 'logging.StreamHandler', 'formatter': 'standard'},
        'file': {'class': 'logging.FileHandler', 'filename': str(LOG_FILE), 'formatter': 'standard'},
    },
    'root': {'handlers': ['console', 'file'], 'level': LOG_LEVEL},
    'loggers': {
        'django': {'handlers': ['console', 'file'], 'level': 'WARNING', 'propagate': False},
    },
}
