from rest_framework import status, viewsets
from rest_framework.decorators import action

from config.core.pagination import PaginationQuerySerializer
from config.core.responses import envelope, paginated_envelope
from store.permissions import ReadOnlyOrAllowedToken
from store.services.catalog import get_catalog
from .serializers import ReviewSerializer, ReviewUpdateSerializer


class ReviewViewSet(viewsets.ViewSet):
    permission_classes = [ReadOnlyOrAllowedToken]

    @property
    def reviews(self):
        return get_catalog().reviews

    def list(self, request):
        """
        Reviews newest first, filtered by bookId, minRating, maxRating and
        verified.
        """
        query = PaginationQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        page = self.reviews.list(
            filters=request.query_params,
            page=query.validated_data.get('page', 1),
            limit=query.validated_data.get('limit'),
        )
        return paginated_envelope(ReviewSerializer(page.items, many=True).data, page.pagination)

    def retrieve(self, request, pk=None):
        return envelope(ReviewSerializer(self.reviews.get_by_id(pk)).data)

    @action(detail=False, methods=['get'], url_path=r'book/(?P<book_id>[^/.]+)', url_name='by-book')
    def by_book(self, request, book_id=None):
        """
        All reviews of one book, newest first.
        404 when the book itself does not exist.
        """
        return envelope(ReviewSerializer(self.reviews.list_by_book(book_id), many=True).data)

    def create(self, request):
        serializer = ReviewSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        review = self.reviews.create(serializer.validated_data)
        return envelope(ReviewSerializer(review).data, 'Review created successfully', status.HTTP_201_CREATED)

    def update(self, request, pk=None):
        serializer = ReviewUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        review = self.reviews.update(pk, serializer.validated_data)
        return envelope(ReviewSerializer(review).data, 'Review updated successfully')

    def destroy(self, request, pk=None):
        self.reviews.delete(pk)
        return envelope(message='Review deleted successfully')
