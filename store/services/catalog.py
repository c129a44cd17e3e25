from functools import lru_cache

from django.core.signals import setting_changed
from django.dispatch import receiver

from config.core.app_settings import BookstoreSettings, get_bookstore_settings
from config.core.document_store import JsonDocumentStore
from reviews.services.review_repository import ReviewRepository
from .book_repository import BookRepository
from .rating_aggregator import RatingAggregator


class Catalog:
    """Wires the document store, the aggregator and both repositories."""

    def __init__(self, config: BookstoreSettings):
        self.config = config
        self.store = JsonDocumentStore(config.collection_paths)
        self.aggregator = RatingAggregator(self.store)
        self.books = BookRepository(self.store, config)
        self.reviews = ReviewRepository(self.store, self.books, self.aggregator, config)


@lru_cache(maxsize=None)
def get_catalog() -> Catalog:
    return Catalog(get_bookstore_settings())


@receiver(setting_changed)
def reload_catalog(*, setting, **kwargs):
    if setting == 'BOOKSTORE':
        get_catalog.cache_clear()
