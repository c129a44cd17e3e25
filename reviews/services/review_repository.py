import logging

from rest_framework.exceptions import NotFound

from config.core.dates import timestamp_sort_key, utc_now_iso
from config.core.pagination import paginate_page
from reviews.filters import ReviewFilter
from reviews.models import Review
from store.models import generate_id

logger = logging.getLogger(__name__)


def newest_first(reviews):
    return sorted(reviews, key=lambda review: timestamp_sort_key(review.timestamp), reverse=True)


class ReviewRepository:
    """
    CRUD over the `reviews` collection.

    Reviews reference books by id only. The reference is checked when a
    review is created; afterwards nothing keeps the two collections in step
    except the rating aggregator, which is called after every write.
    """

    def __init__(self, store, books, aggregator, config):
        self.store = store
        self.books = books
        self.aggregator = aggregator
        self.config = config

    def _load(self):
        return [Review.from_dict(item) for item in self.store.load('reviews')]

    def _save(self, reviews):
        self.store.save('reviews', [review.to_dict() for review in reviews])

    def _find(self, reviews, review_id):
        for index, review in enumerate(reviews):
            if review.id == review_id:
                return index, review
        raise NotFound('Review not found')

    def list(self, filters=None, page=1, limit=None):
        reviews = newest_first(ReviewFilter(filters).filter_records(self._load()))
        return paginate_page(reviews, page, limit, self.config.default_limit, self.config.max_limit)

    def get_by_id(self, review_id):
        return self._find(self._load(), review_id)[1]

    def list_by_book(self, book_id):
        reviews = self._load()
        self.books.get_by_id(book_id)
        return newest_first(review for review in reviews if review.book_id == book_id)

    def create(self, data: dict) -> Review:
        reviews = self._load()
        book_id = data.get('book_id')
        if not self.books.exists(book_id):
            raise NotFound('Book not found')

        review = Review(
            id=generate_id('review'),
            book_id=book_id,
            author='',
            rating=0,
            title='',
            comment='',
            timestamp=utc_now_iso(),
        )
        review.apply_update(data)
        review.verified = bool(data.get('verified', False))
        reviews.append(review)
        self._save(reviews)
        logger.info('Created review %s for book %s', review.id, book_id)

        self.aggregator.update_book_rating(book_id, review.rating, is_new_review=True)
        return review

    def update(self, review_id, changes: dict) -> Review:
        reviews = self._load()
        _, review = self._find(reviews, review_id)
        previous_rating = review.rating

        review.apply_update(changes)
        self._save(reviews)
        logger.info('Updated review %s', review_id)

        if 'rating' in changes and changes['rating'] != previous_rating:
            self.aggregator.update_book_rating(review.book_id, 0, is_new_review=False)
        return review

    def delete(self, review_id) -> None:
        reviews = self._load()
        index, review = self._find(reviews, review_id)
        reviews.pop(index)
        self._save(reviews)
        logger.info('Deleted review %s', review_id)

        self.aggregator.update_book_rating(review.book_id, 0, is_new_review=False)
