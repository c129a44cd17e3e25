from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from django.conf import settings
from django.core.signals import setting_changed
from django.dispatch import receiver


DEFAULTS = {
    'BOOKS_PATH': 'data/books.json',
    'REVIEWS_PATH': 'data/reviews.json',
    'DEFAULT_LIMIT': 10,
    'MAX_LIMIT': 100,
    'TOP_RATED_COUNT': 10,
    'ALLOWED_TOKENS': (),
    'AUTH_HEADER_NAME': 'Authorization',
    'API_KEY_HEADER_NAME': 'X-API-KEY',
}


@dataclass(frozen=True)
class BookstoreSettings:
    """
    Everything the catalog needs to know about its environment.
    Built once from the Django `BOOKSTORE` setting and handed to the document
    store, the repositories and the authentication layer.
    """
    books_path: Path
    reviews_path: Path
    default_limit: int = 10
    max_limit: int = 100
    top_rated_count: int = 10
    allowed_tokens: tuple = ()
    auth_header_name: str = 'Authorization'
    api_key_header_name: str = 'X-API-KEY'

    @classmethod
    def from_dict(cls, options: dict) -> 'BookstoreSettings':
        unknown = set(options) - set(DEFAULTS)
        if unknown:
            raise ValueError(f'Unknown BOOKSTORE options: {sorted(unknown)}')
        merged = {**DEFAULTS, **options}
        if merged['DEFAULT_LIMIT'] < 1 or merged['MAX_LIMIT'] < 1:
            raise ValueError('BOOKSTORE pagination limits must be positive')
        return cls(
            books_path=Path(merged['BOOKS_PATH']),
            reviews_path=Path(merged['REVIEWS_PATH']),
            default_limit=int(merged['DEFAULT_LIMIT']),
            max_limit=int(merged['MAX_LIMIT']),
            top_rated_count=int(merged['TOP_RATED_COUNT']),
            allowed_tokens=tuple(token for token in merged['ALLOWED_TOKENS'] if token),
            auth_header_name=merged['AUTH_HEADER_NAME'],
            api_key_header_name=merged['API_KEY_HEADER_NAME'],
        )

    @classmethod
    def from_django(cls) -> 'BookstoreSettings':
        return cls.from_dict(getattr(settings, 'BOOKSTORE', {}))

    @property
    def collection_paths(self):
        return {'books': self.books_path, 'reviews': self.reviews_path}


@lru_cache(maxsize=None)
def get_bookstore_settings() -> BookstoreSettings:
    return BookstoreSettings.from_django()


@receiver(setting_changed)
def reload_bookstore_settings(*, setting, **kwargs):
    if setting == 'BOOKSTORE':
        get_bookstore_settings.cache_clear()
