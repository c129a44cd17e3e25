from datetime import datetime, time, timezone as dt_timezone

from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime

EPOCH_START = datetime.min.replace(tzinfo=dt_timezone.utc)


def parse_iso8601(value):
    """
    Parses an ISO-8601 date or datetime string into an aware UTC datetime.
    Date-only values are read as midnight UTC. Returns None when the value
    cannot be parsed.
    """
    if not isinstance(value, str) or not value.strip():
        return None
    value = value.strip()
    try:
        parsed = parse_datetime(value)
        if parsed is None:
            day = parse_date(value)
            if day is None:
                return None
            parsed = datetime.combine(day, time.min)
    except ValueError:
        return None
    if timezone.is_naive(parsed):
        parsed = parsed.replace(tzinfo=dt_timezone.utc)
    return parsed.astimezone(dt_timezone.utc)


def timestamp_sort_key(value):
    """Sort key for ISO strings; unparseable values sort as the oldest."""
    return parse_iso8601(value) or EPOCH_START


def utc_now_iso():
    """Current time as e.g. '2024-05-01T10:20:30.123Z'."""
    now = timezone.now().astimezone(dt_timezone.utc)
    return now.isoformat(timespec='milliseconds').replace('+00:00', 'Z')
