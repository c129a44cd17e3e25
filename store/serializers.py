import html

from rest_framework import serializers
from stdnum import isbn as stdnum_isbn
import bleach

from config.core.dates import parse_iso8601
from config.core.pagination import PaginationQuerySerializer


def strip_tags(value):
    """Strict sanitization for short text (no HTML tags at all)."""
    return html.unescape(bleach.clean(value, tags=[], attributes={}, strip=True))


def clean_rich_text(value):
    """
    Long text keeps bleach's default set of inline tags; any other tag
    is stripped. Entities are unescaped again so plain characters such as
    '&' or '>' are stored as sent.
    """
    return html.unescape(bleach.clean(value, strip=True))


class ISBNField(serializers.CharField):
    """
    A custom serializer field for validating and normalizing ISBN-10 or ISBN-13 input.

    This field:
    - Accepts hyphenated or spaced ISBN strings from user input.
    - Strips all hyphens and spaces using stdnum.isbn.compact.
    - Validates the cleaned ISBN using stdnum.isbn.is_valid.
    - Returns the cleaned ISBN so uniqueness checks compare like with like.

    Raises:
        serializers.ValidationError: If the cleaned ISBN is not valid.
    """
    def to_internal_value(self, data):
        data = super().to_internal_value(data)
        try:
            cleaned = stdnum_isbn.compact(data)
        except Exception:
            raise serializers.ValidationError('Could not parse ISBN')

        if not stdnum_isbn.is_valid(cleaned):
            raise serializers.ValidationError('Invalid ISBN format')

        return cleaned


class ISODateField(serializers.CharField):
    """ISO-8601 date (or datetime) kept as the string the client sent."""
    default_error_messages = {'invalid_date': 'Date published must be a valid date'}

    def to_internal_value(self, data):
        value = super().to_internal_value(data)
        if parse_iso8601(value) is None:
            self.fail('invalid_date')
        return value


def tag_list(label):
    return serializers.ListField(
        child=serializers.CharField(max_length=100, error_messages={'blank': f'{label} items cannot be empty'}),
        allow_empty=False,
        error_messages={'empty': f'{label} must be an array with at least one item'},
    )


class BookSerializer(serializers.Serializer):
    id = serializers.CharField(read_only=True)
    title = serializers.CharField(min_length=2, max_length=200)
    author = serializers.CharField(min_length=2, max_length=100)
    description = serializers.CharField(min_length=10, max_length=2000)
    price = serializers.FloatField(
        min_value=0, error_messages={'min_value': 'Price must be a positive number'}
    )
    image = serializers.CharField(required=False, allow_blank=True, max_length=500)
    isbn = ISBNField(max_length=17)
    genre = tag_list('Genre')
    tags = tag_list('Tags')
    datePublished = ISODateField(source='date_published')
    pages = serializers.IntegerField(
        min_value=1, error_messages={'min_value': 'Pages must be a positive integer'}
    )
    language = serializers.CharField(max_length=100)
    publisher = serializers.CharField(max_length=200)
    rating = serializers.FloatField(read_only=True)
    reviewCount = serializers.IntegerField(source='review_count', read_only=True)
    inStock = serializers.BooleanField(source='in_stock')
    featured = serializers.BooleanField()

    def validate(self, attrs):
        # Strict sanitization for CharFields (No HTML tags at all)
        for field in ['title', 'author', 'publisher', 'language', 'image']:
            if field in attrs:
                attrs[field] = strip_tags(attrs[field])
        for field in ['genre', 'tags']:
            if field in attrs:
                attrs[field] = [strip_tags(item) for item in attrs[field]]
        # Default sanitization for TextFields (allowing rich formatting)
        if 'description' in attrs:
            attrs['description'] = clean_rich_text(attrs['description'])
        return attrs


class BookListQuerySerializer(PaginationQuerySerializer):
    sortBy = serializers.ChoiceField(
        choices=['price', 'rating', 'datePublished', 'title'], required=False,
        error_messages={'invalid_choice': 'Invalid sortBy field'},
    )
    order = serializers.ChoiceField(
        choices=['asc', 'desc'], required=False,
        error_messages={'invalid_choice': 'Order must be asc or desc'},
    )


class BookSearchQuerySerializer(PaginationQuerySerializer):
    q = serializers.CharField(
        error_messages={
            'required': 'Search query (q) is required',
            'blank': 'Search query (q) is required',
        },
    )
