from config.core.base_filters import FilterSet, CharFilter, BooleanFilter, DateFilter

SEARCH_FIELDS = ('title', 'author', 'description')


def matches_search(book, term):
    """
    Case-insensitive substring match on title, author, description or any
    tag. The term is expected to be lower case already.
    """
    if any(term in (getattr(book, name) or '').lower() for name in SEARCH_FIELDS):
        return True
    return any(term in tag.lower() for tag in book.tags)


class BookFilter(FilterSet):
    """
    Filter class for book listings:
    - genre / author substring matches
    - price range (minPrice / maxPrice)
    - stock and featured flags
    - free-text search
    - publication date range, both ends inclusive
    """
    range_fields = ['price']
    range_field_kwargs = {'min_value': 0}

    genre = CharFilter(field_name='genre', lookup_expr='icontains')
    author = CharFilter(field_name='author', lookup_expr='icontains')
    in_stock = BooleanFilter(field_name='in_stock', param='inStock')
    featured = BooleanFilter(field_name='featured')
    search = CharFilter(method='filter_search')
    published_after = DateFilter(field_name='date_published', lookup_expr='gte', param='publishedAfter')
    published_before = DateFilter(field_name='date_published', lookup_expr='lte', param='publishedBefore')

    def filter_search(self, records, value):
        term = value.strip().lower()
        if not term:
            return records
        return [book for book in records if matches_search(book, term)]
