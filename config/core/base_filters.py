"""
Declarative filtering for in-memory record lists.

Mirrors the django-filter FilterSet API (declared filters, `base_filters`,
`is_valid()`, `errors`) but works on plain Python objects loaded from the
document store instead of querysets. Query parameters are validated with DRF
serializer fields before any record is touched.
"""
import copy

from rest_framework import serializers

from .dates import parse_iso8601


LOOKUPS = {
    'exact': lambda value, target: value == target,
    'gte': lambda value, target: value >= target,
    'lte': lambda value, target: value <= target,
}


class ISODateTimeField(serializers.CharField):
    """
    Accepts any ISO-8601 date or datetime string and returns the parsed,
    timezone aware UTC datetime.
    """
    default_error_messages = {'invalid_date': 'Enter a valid ISO-8601 date.'}

    def to_internal_value(self, data):
        value = super().to_internal_value(data)
        parsed = parse_iso8601(value)
        if parsed is None:
            self.fail('invalid_date')
        return parsed


class Filter:
    """
    A single query parameter and the predicate it applies.
    `param` defaults to the attribute name the filter is declared under.
    `method` names a FilterSet method taking (records, value).
    """
    field_class = serializers.CharField
    field_kwargs = {}

    def __init__(self, field_name=None, lookup_expr='exact', method=None, param=None, **field_kwargs):
        self.field_name = field_name
        self.lookup_expr = lookup_expr
        self.method = method
        self.param = param
        self.field_kwargs = {**self.field_kwargs, **field_kwargs}

    def get_field(self):
        return self.field_class(required=False, **self.field_kwargs)

    def get_value(self, record):
        return getattr(record, self.field_name)

    def matches(self, record, value):
        candidate = self.get_value(record)
        if candidate is None:
            return False
        try:
            return LOOKUPS[self.lookup_expr](candidate, value)
        except TypeError:
            return False

    def filter(self, records, value):
        return [record for record in records if self.matches(record, value)]


class CharFilter(Filter):
    """
    String filter. With lookup 'icontains' the value matches as a
    case-insensitive substring; list attributes match when any item does.
    """
    field_kwargs = {'allow_blank': True}

    def matches(self, record, value):
        if self.lookup_expr != 'icontains':
            return super().matches(record, value)
        candidate = self.get_value(record)
        needle = value.lower()
        if isinstance(candidate, (list, tuple)):
            return any(needle in str(item).lower() for item in candidate)
        return candidate is not None and needle in str(candidate).lower()


class NumberFilter(Filter):
    field_class = serializers.FloatField


class IntegerFilter(Filter):
    field_class = serializers.IntegerField


class BooleanFilter(Filter):
    field_class = serializers.BooleanField


class DateFilter(Filter):
    """Compares ISO date strings on the records as points in time."""
    field_class = ISODateTimeField

    def get_value(self, record):
        return parse_iso8601(super().get_value(record))


class FilterSet:
    """
    Collects declared filters into `base_filters` (keyed by query parameter).

    Subclasses may declare `range_fields`: for each attribute name a pair of
    min/max filters is generated, e.g. 'price' -> 'minPrice' and 'maxPrice'.
    The filter class used for those is `range_filter_class`.
    """
    base_filters = {}
    range_fields = []
    range_filter_class = NumberFilter
    range_field_kwargs = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        filters = {}
        for base in reversed(cls.__mro__[1:]):
            filters.update(getattr(base, 'base_filters', {}))
        for name, value in list(vars(cls).items()):
            if isinstance(value, Filter):
                value.param = value.param or name
                filters[value.param] = value
        for field in getattr(cls, 'range_fields', []):
            label = field[:1].upper() + field[1:]
            for prefix, lookup in (('min', 'gte'), ('max', 'lte')):
                range_filter = cls.range_filter_class(
                    field_name=field, lookup_expr=lookup, param=f'{prefix}{label}', **cls.range_field_kwargs
                )
                filters.setdefault(range_filter.param, range_filter)
        cls.base_filters = filters

    def __init__(self, data=None):
        self.data = data if data is not None else {}
        self.filters = copy.deepcopy(self.base_filters)
        self._errors = None
        self._cleaned_data = None

    def _is_present(self, raw):
        return raw is not None and raw != ''

    def _raw_value(self, param):
        data = self.data
        if hasattr(data, 'getlist'):
            values = data.getlist(param)
            return values[-1] if values else None
        return data.get(param)

    def full_clean(self):
        errors, cleaned = {}, {}
        for param, filter_ in self.filters.items():
            raw = self._raw_value(param)
            if not self._is_present(raw):
                continue
            try:
                cleaned[param] = filter_.get_field().run_validation(raw)
            except serializers.ValidationError as e:
                errors[param] = e.detail
        self._errors, self._cleaned_data = errors, cleaned

    @property
    def errors(self):
        if self._errors is None:
            self.full_clean()
        return self._errors

    @property
    def cleaned_data(self):
        if self._cleaned_data is None:
            self.full_clean()
        return self._cleaned_data

    def is_valid(self, raise_exception=False):
        if self.errors and raise_exception:
            raise serializers.ValidationError(self.errors)
        return not self.errors

    def filter_records(self, records):
        """Applies every supplied filter in declaration order (logical AND)."""
        self.is_valid(raise_exception=True)
        records = list(records)
        for param, filter_ in self.filters.items():
            if param not in self.cleaned_data:
                continue
            value = self.cleaned_data[param]
            if filter_.method:
                records = getattr(self, filter_.method)(records, value)
            else:
                records = filter_.filter(records, value)
        return records
