import logging

logger = logging.getLogger(__name__)


def average_rating(ratings):
    """Mean of `ratings` and their count; (0, 0) for no ratings."""
    ratings = list(ratings)
    if not ratings:
        return 0, 0
    return sum(ratings) / len(ratings), len(ratings)


class RatingAggregator:
    """
    Keeps a book's denormalized `rating` and `reviewCount` in line with its
    reviews.

    Two policies:
    - incremental (a review was just added): running mean over the stored
      aggregate plus the new rating, without reading the reviews
    - full recompute (a review was changed or removed): mean and count over
      every stored review of the book

    A book id that does not resolve is skipped silently (logged only), which
    leaves reviews of deleted books without aggregates.
    """

    def __init__(self, store):
        self.store = store

    def update_book_rating(self, book_id, new_rating, is_new_review):
        books = self.store.load('books')
        book = next((b for b in books if b.get('id') == book_id), None)
        if book is None:
            logger.warning('Skipped rating update: book %s does not exist', book_id)
            return

        if is_new_review:
            count = book.get('reviewCount') or 0
            total = (book.get('rating') or 0) * count + new_rating
            book['reviewCount'] = count + 1
            book['rating'] = total / book['reviewCount']
        else:
            ratings = [r.get('rating', 0) for r in self.store.load('reviews') if r.get('bookId') == book_id]
            book['rating'], book['reviewCount'] = average_rating(ratings)

        self.store.save('books', books)
        logger.info(
            'Book %s rating is now %.2f over %d review(s)', book_id, book['rating'], book['reviewCount']
        )
