from collections import namedtuple

from config.core.ordering import compare_values, sort_records
from config.core.pagination import clamp_limit, get_pagination_metadata, paginate, paginate_page

Record = namedtuple('Record', ['name', 'value'])


def test_paginate_slices_one_based_pages():
    items = list(range(25))
    assert paginate(items, 1, 10) == list(range(10))
    assert paginate(items, 3, 10) == [20, 21, 22, 23, 24]
    assert paginate(items, 4, 10) == []


def test_pagination_metadata():
    assert get_pagination_metadata(25, 2, 10) == {'page': 2, 'limit': 10, 'total': 25, 'totalPages': 3}
    assert get_pagination_metadata(0, 1, 10)['totalPages'] == 0


def test_clamp_limit():
    assert clamp_limit(None, 10, 100) == 10
    assert clamp_limit(0, 10, 100) == 10
    assert clamp_limit(20, 10, 100) == 20
    assert clamp_limit(500, 10, 100) == 100


def test_paginate_page_defaults():
    page = paginate_page(range(15), None, None, 10, 100)
    assert page.items == list(range(10))
    assert page.pagination == {'page': 1, 'limit': 10, 'total': 15, 'totalPages': 2}


def test_paginate_page_past_the_end():
    page = paginate_page(range(5), 3, 2, 10, 100)
    assert page.items == [4]
    page = paginate_page(range(5), 9, 2, 10, 100)
    assert page.items == []
    assert page.pagination['totalPages'] == 3


def test_compare_values():
    assert compare_values('apple', 'Banana') < 0
    assert compare_values('b', 'a') > 0
    assert compare_values(2, 10) < 0
    assert compare_values(1.5, 1.5) == 0
    assert compare_values('1', 2) == 0
    assert compare_values(None, 'a') == 0


def test_sort_records_ascending_and_descending():
    records = [Record('c', 3), Record('a', 1), Record('b', 2)]
    assert [r.value for r in sort_records(records, 'value')] == [1, 2, 3]
    assert [r.value for r in sort_records(records, 'value', 'desc')] == [3, 2, 1]
    assert [r.name for r in sort_records(records, 'name')] == ['a', 'b', 'c']


def test_sort_records_is_stable_for_ties():
    records = [Record('first', 1), Record('second', 1), Record('third', 0)]
    assert [r.name for r in sort_records(records, 'value')] == ['third', 'first', 'second']
    assert [r.name for r in sort_records(records, 'value', 'desc')] == ['first', 'second', 'third']


def test_sort_does_not_touch_input():
    records = [Record('b', 2), Record('a', 1)]
    sort_records(records, 'value')
    assert records[0].name == 'b'


def test_consecutive_pages_concatenate():
    items = list(range(37))
    first = paginate_page(items, 1, 10, 10, 100).items
    second = paginate_page(items, 2, 10, 10, 100).items
    assert first + second == paginate_page(items, 1, 20, 10, 100).items


def test_accented_strings_collate_with_their_base_letter():
    assert compare_values('Émile', 'Zola') < 0
    assert compare_values('élan', 'Eagle') > 0
    assert compare_values('Zoë', 'Zola') < 0


def test_sort_records_with_accented_titles():
    records = [Record('Zola', 1), Record('Émile', 2), Record('Ångström', 3), Record('banana', 4)]
    assert [r.name for r in sort_records(records, 'name')] == ['Ångström', 'banana', 'Émile', 'Zola']
