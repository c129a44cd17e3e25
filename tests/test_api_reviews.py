import pytest

NEW_REVIEW = {
    'bookId': 'book-3',
    'author': 'Reader Four',
    'rating': 5,
    'title': 'Great trip',
    'comment': 'The crew chapters are the best part.',
}


def ids(body):
    return [review['id'] for review in body['data']]


def test_list_reviews(api_client):
    body = api_client.get('/api/reviews').json()
    assert ids(body) == ['review-3', 'review-2', 'review-1']
    assert body['pagination'] == {'page': 1, 'limit': 10, 'total': 3, 'totalPages': 1}
    assert body['data'][0]['bookId'] == 'book-2'


@pytest.mark.parametrize('query, expected', [
    ({'bookId': 'book-1'}, ['review-2', 'review-1']),
    ({'minRating': 4}, ['review-3', 'review-1']),
    ({'maxRating': 4}, ['review-2']),
    ({'verified': 'true', 'bookId': 'book-1'}, ['review-1']),
])
def test_list_reviews_filtered(api_client, query, expected):
    assert ids(api_client.get('/api/reviews', query).json()) == expected


def test_list_reviews_bad_rating_filter(api_client):
    response = api_client.get('/api/reviews', {'minRating': 9})
    assert response.status_code == 400
    assert response.json()['errors'][0]['field'] == 'minRating'


def test_retrieve_review(api_client):
    body = api_client.get('/api/reviews/review-1').json()
    assert body['data']['verified'] is True
    assert api_client.get('/api/reviews/review-404').json() == {'success': False, 'error': 'Review not found'}


def test_reviews_by_book(api_client):
    assert ids(api_client.get('/api/reviews/book/book-1').json()) == ['review-2', 'review-1']
    assert api_client.get('/api/reviews/book/book-4').json() == {'success': True, 'data': []}

    response = api_client.get('/api/reviews/book/book-404')
    assert response.status_code == 404
    assert response.json()['error'] == 'Book not found'


def test_create_review_updates_book(auth_client):
    response = auth_client.post('/api/reviews', NEW_REVIEW)
    body = response.json()

    assert response.status_code == 201
    assert body['message'] == 'Review created successfully'
    assert body['data']['id'].startswith('review-')
    assert body['data']['verified'] is False
    assert body['data']['timestamp'].endswith('Z')

    book = auth_client.get('/api/books/book-3').json()['data']
    assert (book['rating'], book['reviewCount']) == (5, 1)


def test_create_review_for_missing_book(auth_client):
    response = auth_client.post('/api/reviews', {**NEW_REVIEW, 'bookId': 'book-404'})
    assert response.status_code == 404
    assert response.json() == {'success': False, 'error': 'Book not found'}
    assert auth_client.get('/api/reviews').json()['pagination']['total'] == 3


@pytest.mark.parametrize('changes, field, message', [
    ({'rating': 6}, 'rating', 'Rating must be an integer between 1 and 5'),
    ({'rating': 0}, 'rating', 'Rating must be an integer between 1 and 5'),
    ({'bookId': ''}, 'bookId', 'Book ID is required'),
    ({'comment': 'Too short'}, 'comment', 'Ensure this field has at least 10 characters.'),
])
def test_create_review_validation(auth_client, changes, field, message):
    response = auth_client.post('/api/reviews', {**NEW_REVIEW, **changes})
    assert response.status_code == 400
    assert response.json()['errors'] == [{'field': field, 'message': message}]


def test_create_review_missing_fields(auth_client):
    response = auth_client.post('/api/reviews', {'rating': 3})
    fields = {e['field'] for e in response.json()['errors']}
    assert fields == {'bookId', 'author', 'title', 'comment'}


def test_update_review_recomputes_book(auth_client):
    response = auth_client.put('/api/reviews/review-2', {'rating': 5, 'bookId': 'book-2'})
    body = response.json()

    assert response.status_code == 200
    assert body['message'] == 'Review updated successfully'
    assert body['data']['bookId'] == 'book-1'

    book = auth_client.get('/api/books/book-1').json()['data']
    assert (book['rating'], book['reviewCount']) == (5, 2)


def test_update_missing_review(auth_client):
    assert auth_client.put('/api/reviews/review-404', {'rating': 2}).status_code == 404


def test_delete_review_recomputes_book(auth_client):
    response = auth_client.delete('/api/reviews/review-1')
    assert response.json() == {'success': True, 'message': 'Review deleted successfully'}

    book = auth_client.get('/api/books/book-1').json()['data']
    assert (book['rating'], book['reviewCount']) == (3, 1)


def test_create_review_keeps_plain_characters(auth_client):
    data = {**NEW_REVIEW, 'title': 'Fun & games', 'comment': 'Rating 5 > 3 & so on, great.'}
    body = auth_client.post('/api/reviews', data).json()

    assert body['data']['title'] == 'Fun & games'
    assert body['data']['comment'] == 'Rating 5 > 3 & so on, great.'
