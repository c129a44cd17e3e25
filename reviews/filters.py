from config.core.base_filters import FilterSet, CharFilter, BooleanFilter, IntegerFilter


class ReviewFilter(FilterSet):
    """
    Allows filtering review entries by:
    - book (exact id)
    - min/max rating
    - verified flag
    """
    range_fields = ['rating']
    range_filter_class = IntegerFilter
    range_field_kwargs = {'min_value': 1, 'max_value': 5}

    book_id = CharFilter(field_name='book_id', param='bookId')
    verified = BooleanFilter(field_name='verified')
