from rest_framework import serializers

from store.serializers import clean_rich_text, strip_tags

RATING_MESSAGE = 'Rating must be an integer between 1 and 5'


class ReviewSerializer(serializers.Serializer):
    id = serializers.CharField(read_only=True)
    bookId = serializers.CharField(
        source='book_id', max_length=100,
        error_messages={'required': 'Book ID is required', 'blank': 'Book ID is required'},
    )
    author = serializers.CharField(min_length=2, max_length=100)
    rating = serializers.IntegerField(
        min_value=1, max_value=5,
        error_messages={'invalid': RATING_MESSAGE, 'min_value': RATING_MESSAGE, 'max_value': RATING_MESSAGE},
    )
    title = serializers.CharField(min_length=2, max_length=200)
    comment = serializers.CharField(min_length=10, max_length=2000)
    timestamp = serializers.CharField(read_only=True)
    verified = serializers.BooleanField(required=False, default=False)

    def validate(self, attrs):
        # Strict sanitization for CharFields (No HTML tags at all)
        for field in ['title', 'author']:
            if field in attrs:
                attrs[field] = strip_tags(attrs[field])
        # Default sanitization for TextFields (allowing rich formatting)
        if 'comment' in attrs:
            attrs['comment'] = clean_rich_text(attrs['comment'])
        return attrs


class ReviewUpdateSerializer(ReviewSerializer):
    """The book a review belongs to cannot be changed."""
    bookId = serializers.CharField(source='book_id', read_only=True)
