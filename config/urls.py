from django.http import JsonResponse
from django.urls import include, path
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny

from config.core.dates import utc_now_iso
from config.core.responses import envelope

ENDPOINTS = [
    'GET /api/books',
    'GET /api/books/:id',
    'GET /api/books/top-rated',
    'GET /api/books/featured',
    'GET /api/books/search',
    'GET /api/books/:id/reviews',
    'POST /api/books',
    'PUT /api/books/:id',
    'DELETE /api/books/:id',
    'GET /api/reviews',
    'GET /api/reviews/:id',
    'GET /api/reviews/book/:bookId',
    'POST /api/reviews',
    'PUT /api/reviews/:id',
    'DELETE /api/reviews/:id',
    'GET /api/health',
]


@api_view(['GET'])
@permission_classes([AllowAny])
def welcome(request):
    response = envelope(message='Welcome to the Bookstore API')
    response.data.update({
        'version': '1.0.0',
        'endpoints': ENDPOINTS,
        'notes': [
            'Protected endpoints require a token listed in ALLOWED_TOKENS.',
            'Use publishedAfter / publishedBefore to filter books by publication date.',
            'Examples: Authorization: Bearer token1  OR  X-API-KEY: token1',
        ],
    })
    return response


@api_view(['GET'])
@permission_classes([AllowAny])
def health(request):
    response = envelope(message='Bookstore API is running')
    response.data['timestamp'] = utc_now_iso()
    return response


def route_not_found(request, exception=None):
    return JsonResponse(
        {'success': False, 'error': f'Route not found: {request.get_full_path()}'}, status=404
    )


urlpatterns = [
    path('', welcome, name='welcome'),
    path('api/health', health, name='health'),
    path('api/', include('store.urls')),
    path('api/', include('reviews.urls')),
]

handler404 = route_not_found
