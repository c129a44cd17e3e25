from functools import cmp_to_key, lru_cache
from numbers import Number

from pyuca import Collator


@lru_cache(maxsize=None)
def get_collator() -> Collator:
    """Unicode Collation Algorithm with the default table, loaded once."""
    return Collator()


def _is_number(value):
    return isinstance(value, Number) and not isinstance(value, bool)


def compare_values(a, b) -> int:
    """
    Three-way comparison used for list ordering.
    Strings compare by Unicode collation, so accents and case only decide
    between otherwise equal letters ('Émile' < 'Zola', 'apple' < 'Banana').
    Numbers compare numerically. Any other pair of types counts as equal so
    the original order is kept.
    """
    if isinstance(a, str) and isinstance(b, str):
        collator = get_collator()
        key_a, key_b = collator.sort_key(a), collator.sort_key(b)
        return (key_a > key_b) - (key_a < key_b) or (a > b) - (a < b)
    if _is_number(a) and _is_number(b):
        return (a > b) - (a < b)
    return 0


def sort_records(records, field_name, order='asc'):
    """
    Returns a new list sorted on `field_name` (an attribute of each record).
    The sort is stable in both directions.
    """
    def compare(left, right):
        return compare_values(getattr(left, field_name, None), getattr(right, field_name, None))

    return sorted(records, key=cmp_to_key(compare), reverse=(order == 'desc'))
