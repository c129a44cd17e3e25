"""
pytest configuration for the bookstore tests.

Every test gets its own copy of a small catalog written to a temporary
directory. `catalog` builds the services directly; `api_client` points the
Django settings at the same files so requests go through the full stack.
"""
import copy
import json

import pytest
from rest_framework.test import APIClient

from config.core.app_settings import BookstoreSettings
from store.services.catalog import Catalog, get_catalog

BOOKS = [
    {
        'id': 'book-1',
        'title': 'Alpha Tales',
        'author': 'John Smith',
        'description': 'Classic adventure stories for every age.',
        'price': 10,
        'image': '',
        'isbn': '9780306406157',
        'genre': ['Fiction', 'Adventure'],
        'tags': ['classic'],
        'datePublished': '2001-01-01',
        'pages': 220,
        'language': 'English',
        'publisher': 'Acme Books',
        'rating': 4.0,
        'reviewCount': 2,
        'inStock': True,
        'featured': True,
    },
    {
        'id': 'book-2',
        'title': 'Beta Science',
        'author': 'Ann Jones',
        'description': 'A gentle introduction to modern physics.',
        'price': 25.5,
        'image': '',
        'isbn': '9783161484100',
        'genre': ['Science'],
        'tags': ['physics'],
        'datePublished': '2010-06-15',
        'pages': 310,
        'language': 'English',
        'publisher': 'Acme Books',
        'rating': 5.0,
        'reviewCount': 1,
        'inStock': False,
        'featured': False,
    },
    {
        'id': 'book-3',
        'title': 'Gamma Voyages',
        'author': 'Mary Smith',
        'description': 'Colony ships and the people who crew them.',
        'price': 15,
        'image': '',
        'isbn': '9780596520687',
        'genre': ['Science Fiction'],
        'tags': ['space', 'future'],
        'datePublished': '2020-03-10',
        'pages': 405,
        'language': 'English',
        'publisher': 'Orbit House',
        'rating': 0,
        'reviewCount': 0,
        'inStock': True,
        'featured': False,
    },
    {
        'id': 'book-4',
        'title': 'Delta Chronicles',
        'author': 'Omar Khan',
        'description': 'A military history of river delta campaigns.',
        'price': 40,
        'image': '',
        'isbn': '9781402894626',
        'genre': ['History'],
        'tags': ['war'],
        'datePublished': '1995-07-20',
        'pages': 512,
        'language': 'English',
        'publisher': 'Old Press',
        'rating': 0,
        'reviewCount': 0,
        'inStock': True,
        'featured': True,
    },
]

REVIEWS = [
    {
        'id': 'review-1',
        'bookId': 'book-1',
        'author': 'Reader One',
        'rating': 5,
        'title': 'Loved it',
        'comment': 'Wonderful stories from start to finish.',
        'timestamp': '2024-01-01T10:00:00.000Z',
        'verified': True,
    },
    {
        'id': 'review-2',
        'bookId': 'book-1',
        'author': 'Reader Two',
        'rating': 3,
        'title': 'Decent',
        'comment': 'Some stories were better than others.',
        'timestamp': '2024-02-01T10:00:00.000Z',
        'verified': False,
    },
    {
        'id': 'review-3',
        'bookId': 'book-2',
        'author': 'Reader Three',
        'rating': 5,
        'title': 'Clear and fun',
        'comment': 'Finally physics explained without the jargon.',
        'timestamp': '2024-03-01T10:00:00.000Z',
        'verified': True,
    },
]

NEW_BOOK = {
    'title': 'Epsilon Gardens',
    'author': 'Clara Moss',
    'description': 'Planting guides for small urban balconies.',
    'price': 12.75,
    'isbn': '978-0-14-044913-6',
    'genre': ['Home', 'Gardening'],
    'tags': ['plants', 'city'],
    'datePublished': '2022-05-01',
    'pages': 180,
    'language': 'English',
    'publisher': 'Green Leaf',
    'inStock': True,
    'featured': False,
}


def write_collection(path, name, items):
    path.write_text(json.dumps({name: items}, indent=2), encoding='utf-8')


def read_collection(path, name):
    return json.loads(path.read_text(encoding='utf-8'))[name]


@pytest.fixture
def data_dir(tmp_path):
    write_collection(tmp_path / 'books.json', 'books', copy.deepcopy(BOOKS))
    write_collection(tmp_path / 'reviews.json', 'reviews', copy.deepcopy(REVIEWS))
    return tmp_path


@pytest.fixture
def bookstore_settings(data_dir):
    return BookstoreSettings.from_dict({
        'BOOKS_PATH': str(data_dir / 'books.json'),
        'REVIEWS_PATH': str(data_dir / 'reviews.json'),
        'ALLOWED_TOKENS': ['token1'],
    })


@pytest.fixture
def catalog(bookstore_settings):
    return Catalog(bookstore_settings)


@pytest.fixture
def api_catalog(settings, data_dir):
    settings.BOOKSTORE = {
        **settings.BOOKSTORE,
        'BOOKS_PATH': str(data_dir / 'books.json'),
        'REVIEWS_PATH': str(data_dir / 'reviews.json'),
    }
    return get_catalog()


@pytest.fixture
def api_client(api_catalog):
    return APIClient()


@pytest.fixture
def auth_client(api_catalog):
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION='Bearer token1')
    return client
