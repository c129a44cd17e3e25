from rest_framework import status, viewsets
from rest_framework.decorators import action

from config.core.responses import envelope, paginated_envelope
from reviews.serializers import ReviewSerializer
from .permissions import ReadOnlyOrAllowedToken
from .serializers import BookSerializer, BookListQuerySerializer, BookSearchQuerySerializer
from .services.catalog import get_catalog


class BookViewSet(viewsets.ViewSet):
    permission_classes = [ReadOnlyOrAllowedToken]

    @property
    def books(self):
        return get_catalog().books

    def list(self, request):
        """
        Books matching the query filters, optionally sorted, one page at a time.
        Filters: genre, author, minPrice, maxPrice, inStock, featured, search,
        publishedAfter, publishedBefore.
        """
        query = BookListQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        params = query.validated_data
        page = self.books.list(
            filters=request.query_params,
            sort_by=params.get('sortBy'),
            order=params.get('order', 'asc'),
            page=params.get('page', 1),
            limit=params.get('limit'),
        )
        return paginated_envelope(BookSerializer(page.items, many=True).data, page.pagination)

    def retrieve(self, request, pk=None):
        return envelope(BookSerializer(self.books.get_by_id(pk)).data)

    def create(self, request):
        serializer = BookSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        book = self.books.create(serializer.validated_data)
        return envelope(BookSerializer(book).data, 'Book created successfully', status.HTTP_201_CREATED)

    def update(self, request, pk=None):
        """Partial update: fields left out of the body are kept as they are."""
        serializer = BookSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        book = self.books.update(pk, serializer.validated_data)
        return envelope(BookSerializer(book).data, 'Book updated successfully')

    def destroy(self, request, pk=None):
        self.books.delete(pk)
        return envelope(message='Book deleted successfully')

    @action(detail=False, methods=['get'], url_path='top-rated', url_name='top-rated')
    def top_rated(self, request):
        return envelope(BookSerializer(self.books.get_top_rated(), many=True).data)

    @action(detail=False, methods=['get'])
    def search(self, request):
        query = BookSearchQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        params = query.validated_data
        page = self.books.search(params['q'], page=params.get('page', 1), limit=params.get('limit'))
        return paginated_envelope(BookSerializer(page.items, many=True).data, page.pagination)

    @action(detail=False, methods=['get'])
    def featured(self, request):
        return envelope(BookSerializer(self.books.get_featured(), many=True).data)

    @action(detail=True, methods=['get'])
    def reviews(self, request, pk=None):
        reviews = get_catalog().reviews.list_by_book(pk)
        return envelope(ReviewSerializer(reviews, many=True).data)
