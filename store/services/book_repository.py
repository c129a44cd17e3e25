import logging

from rest_framework.exceptions import NotFound
from stdnum import isbn as stdnum_isbn

from config.core.exceptions import Conflict, InvalidArgument
from config.core.ordering import sort_records
from config.core.pagination import paginate_page
from store.filters import BookFilter, matches_search
from store.models import Book, generate_id

logger = logging.getLogger(__name__)

SORT_FIELDS = {
    'price': 'price',
    'rating': 'rating',
    'datePublished': 'date_published',
    'title': 'title',
}


def same_isbn(a, b):
    """Compares ISBNs ignoring hyphens and spaces."""
    return bool(a) and bool(b) and stdnum_isbn.compact(a) == stdnum_isbn.compact(b)


class BookRepository:
    """
    CRUD over the `books` collection. Every call reloads the whole
    collection; every write saves it back in full.
    """

    def __init__(self, store, config):
        self.store = store
        self.config = config

    def _load(self):
        return [Book.from_dict(item) for item in self.store.load('books')]

    def _save(self, books):
        self.store.save('books', [book.to_dict() for book in books])

    def _find(self, books, book_id):
        for index, book in enumerate(books):
            if book.id == book_id:
                return index, book
        raise NotFound('Book not found')

    def _page(self, books, page, limit):
        return paginate_page(books, page, limit, self.config.default_limit, self.config.max_limit)

    def list(self, filters=None, sort_by=None, order='asc', page=1, limit=None):
        """
        Filter, then sort, then paginate.

        `filters` holds BookFilter query parameters (raw strings or already
        typed values). `sort_by` is one of price, rating, datePublished or
        title.
        """
        books = BookFilter(filters).filter_records(self._load())
        if sort_by:
            if sort_by not in SORT_FIELDS:
                raise InvalidArgument(f'Invalid sortBy field: {sort_by}')
            books = sort_records(books, SORT_FIELDS[sort_by], order or 'asc')
        return self._page(books, page, limit)

    def get_by_id(self, book_id):
        return self._find(self._load(), book_id)[1]

    def exists(self, book_id):
        return any(book.id == book_id for book in self._load())

    def get_featured(self):
        return [book for book in self._load() if book.featured]

    def get_top_rated(self):
        """Highest rating * reviewCount first; ties keep collection order."""
        ranked = sorted(self._load(), key=lambda book: book.popularity, reverse=True)
        return ranked[:self.config.top_rated_count]

    def search(self, q, page=1, limit=None):
        term = (q or '').strip().lower()
        if not term:
            raise InvalidArgument('Search query (q) is required')
        return self._page([book for book in self._load() if matches_search(book, term)], page, limit)

    def create(self, data: dict) -> Book:
        books = self._load()
        if any(same_isbn(book.isbn, data.get('isbn')) for book in books):
            raise Conflict('Book with this ISBN already exists')

        book = Book(id=generate_id('book'), title='', author='', description='', price=0, isbn='')
        book.apply_update(data)
        book.rating, book.review_count = 0, 0
        books.append(book)
        self._save(books)
        logger.info('Created book %s (%s)', book.id, book.isbn)
        return book

    def update(self, book_id, changes: dict) -> Book:
        books = self._load()
        _, book = self._find(books, book_id)

        new_isbn = changes.get('isbn')
        if new_isbn and not same_isbn(new_isbn, book.isbn):
            if any(same_isbn(other.isbn, new_isbn) for other in books):
                raise Conflict('Book with this ISBN already exists')

        book.apply_update(changes)
        self._save(books)
        logger.info('Updated book %s (%s)', book_id, ', '.join(sorted(changes)) or 'no fields')
        return book

    def delete(self, book_id) -> None:
        books = self._load()
        index, _ = self._find(books, book_id)
        books.pop(index)
        self._save(books)
        logger.info('Deleted book %s', book_id)
