import math
from collections import namedtuple

from rest_framework import serializers

Page = namedtuple('Page', ['items', 'pagination'])


def clamp_limit(limit, default_limit, max_limit):
    """Falls back to `default_limit` for missing values and caps at `max_limit`."""
    if not limit or limit < 1:
        limit = default_limit
    return min(int(limit), max_limit)


def paginate(items, page, limit):
    """1-based slice of `items`. Pages past the end are simply empty."""
    start = (page - 1) * limit
    return list(items[start:start + limit])


def get_pagination_metadata(total, page, limit):
    return {
        'page': page,
        'limit': limit,
        'total': total,
        'totalPages': math.ceil(total / limit) if limit else 0,
    }


def paginate_page(items, page, limit, default_limit, max_limit) -> Page:
    page = page if page and page >= 1 else 1
    limit = clamp_limit(limit, default_limit, max_limit)
    items = list(items)
    return Page(paginate(items, page, limit), get_pagination_metadata(len(items), page, limit))


class PaginationQuerySerializer(serializers.Serializer):
    """
    `page` and `limit` query parameters. Limits above the configured maximum
    are accepted here and clamped when the page is cut.
    """
    page = serializers.IntegerField(
        required=False, min_value=1,
        error_messages={'min_value': 'Page must be a positive integer', 'invalid': 'Page must be a positive integer'},
    )
    limit = serializers.IntegerField(
        required=False, min_value=1,
        error_messages={'min_value': 'Limit must be a positive integer', 'invalid': 'Limit must be a positive integer'},
    )
