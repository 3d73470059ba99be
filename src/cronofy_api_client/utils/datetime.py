from datetime import date, datetime, timezone
from typing import Union

ISO8601_UTC_FORMAT = "%Y-%m-%dT%H:%M:%SZ"
DATE_FORMAT = "%Y-%m-%d"


def ensure_utc(date_time: datetime) -> datetime:
    """
    Returns the datetime converted to UTC.

    Naive datetimes are taken to already be in UTC.

    Args:
        date_time: The datetime to convert.

    Returns:
        A timezone-aware datetime in UTC.
    """
    if date_time.tzinfo is None:
        return date_time.replace(tzinfo=timezone.utc)
    return date_time.astimezone(timezone.utc)


def convert_datetime_to_iso(date_time: datetime) -> str:
    """
    Converts a datetime to the API's ISO-8601 UTC form, e.g. ``2014-08-05T15:30:00Z``.
    Sub-second precision is dropped.
    """
    return ensure_utc(date_time).strftime(ISO8601_UTC_FORMAT)


def convert_date_to_iso(value: date) -> str:
    """Converts a date to ``YYYY-MM-DD``."""
    return value.strftime(DATE_FORMAT)


def parse_api_time(value: str) -> Union[date, datetime]:
    """
    Parses a time string from an API response.

    The API sends ``YYYY-MM-DD`` for all-day values and ISO-8601 timestamps
    (usually with a trailing ``Z``) otherwise.

    Args:
        value: The string to parse.

    Returns:
        A date for date-only strings, otherwise a timezone-aware datetime.

    Raises:
        ValueError: If the string is neither form.
    """
    if len(value) == 10:
        return datetime.strptime(value, DATE_FORMAT).date()
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    return ensure_utc(parsed)
