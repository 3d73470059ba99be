import logging
from datetime import date, datetime
from typing import Optional, List, Dict, Any, Mapping, Tuple

from .types import (
    Account, Calendar, Channel, Event, EventTime, FreeBusy, FreeBusyStatus,
    Location, Profile, ZonedTime
)
from .constants import KNOWN_QUERY_PARAMS, QUERY_PARAM_ALIASES
from ...constants import DEFAULT_TZID
from ...utils.datetime import convert_datetime_to_iso, convert_date_to_iso, parse_api_time

logger = logging.getLogger(__name__)


def parse_event_time_from_api(time_data: Any) -> Optional[EventTime]:
    """
    Parse a start or end value from an API response.

    Args:
        time_data: Either a bare time string or a ``{"time": ..., "tzid": ...}`` object

    Returns:
        EventTime, or None if the value is absent or unparseable
    """
    if not time_data:
        return None

    tzid = None
    if isinstance(time_data, Mapping):
        tzid = time_data.get("tzid")
        time_data = time_data.get("time")
        if not time_data:
            return None

    try:
        return EventTime(value=parse_api_time(str(time_data)), tzid=tzid)
    except (ValueError, TypeError) as e:
        logger.warning("Failed to parse time value %r: %s", time_data, e)
        return None


def from_api_calendar(calendar_data: Mapping[str, Any]) -> Calendar:
    return Calendar(
        provider_name=calendar_data.get("provider_name"),
        profile_name=calendar_data.get("profile_name"),
        calendar_id=calendar_data.get("calendar_id"),
        calendar_name=calendar_data.get("calendar_name"),
        calendar_readonly=bool(calendar_data.get("calendar_readonly", False)),
        calendar_deleted=bool(calendar_data.get("calendar_deleted", False)),
        profile_id=calendar_data.get("profile_id"),
        calendar_primary=calendar_data.get("calendar_primary"),
    )


def from_api_event(event_data: Mapping[str, Any]) -> Event:
    """
    Create an Event from an API response item.

    Args:
        event_data: Dictionary containing event data from the events endpoint

    Returns:
        Event populated with the data from the dictionary
    """
    location_data = event_data.get("location")
    location = None
    if isinstance(location_data, Mapping):
        location = Location(description=location_data.get("description"))

    return Event(
        calendar_id=event_data.get("calendar_id"),
        event_uid=event_data.get("event_uid"),
        summary=event_data.get("summary"),
        description=event_data.get("description"),
        start=parse_event_time_from_api(event_data.get("start")),
        end=parse_event_time_from_api(event_data.get("end")),
        deleted=bool(event_data.get("deleted", False)),
        location=location,
        event_id=event_data.get("event_id"),
    )


def from_api_channel(channel_data: Mapping[str, Any]) -> Channel:
    return Channel(
        channel_id=channel_data.get("channel_id"),
        callback_url=channel_data.get("callback_url"),
        filters=dict(channel_data.get("filters") or {}),
    )


def from_api_account(account_data: Mapping[str, Any]) -> Account:
    return Account(
        account_id=account_data.get("account_id"),
        email=account_data.get("email"),
        name=account_data.get("name"),
        default_tzid=account_data.get("default_tzid"),
    )


def from_api_profile(profile_data: Mapping[str, Any]) -> Profile:
    return Profile(
        provider_name=profile_data.get("provider_name"),
        profile_id=profile_data.get("profile_id"),
        profile_name=profile_data.get("profile_name"),
        profile_connected=bool(profile_data.get("profile_connected", False)),
        profile_relink_url=profile_data.get("profile_relink_url"),
    )


def from_api_free_busy(free_busy_data: Mapping[str, Any]) -> FreeBusy:
    return FreeBusy(
        calendar_id=free_busy_data.get("calendar_id"),
        start=parse_event_time_from_api(free_busy_data.get("start")),
        end=parse_event_time_from_api(free_busy_data.get("end")),
        free_busy_status=FreeBusyStatus(free_busy_data.get("free_busy_status")),
    )


def encode_value(value: Any) -> Any:
    """
    Encode a single body value for JSON serialization.

    Times become ISO-8601 UTC strings and zoned times become ``{time, tzid}``
    objects. Containers are encoded recursively; anything else is returned
    unchanged.
    """
    if isinstance(value, ZonedTime):
        return {"time": convert_datetime_to_iso(value.time), "tzid": value.tzid}
    if isinstance(value, datetime):
        return convert_datetime_to_iso(value)
    if isinstance(value, date):
        return convert_date_to_iso(value)
    if isinstance(value, Mapping):
        return encode_body(value)
    if isinstance(value, (list, tuple)):
        return [encode_value(item) for item in value]
    return value


def encode_body(body: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Encode a request body mapping so it can be passed to ``json.dumps``.

    Args:
        body: The body fields, possibly containing datetimes or ZonedTimes

    Returns:
        A new dictionary with every value encoded
    """
    return {key: encode_value(value) for key, value in body.items()}


def encode_query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return convert_datetime_to_iso(value)
    if isinstance(value, date):
        return convert_date_to_iso(value)
    return str(value)


def encode_query_params(params: Optional[Mapping[str, Any]] = None) -> List[Tuple[str, str]]:
    """
    Encode query parameters for a list endpoint.

    Parameters set to None are dropped, ``tzid`` is always sent (defaulting to
    Etc/UTC) and list values are repeated under ``name[]``. Parameters the
    client does not know about are passed through so newer API options can be
    used without a client release.

    Args:
        params: Caller supplied parameters

    Returns:
        Ordered list of (name, value) pairs
    """
    merged: Dict[str, Any] = {}
    for key, value in (params or {}).items():
        merged[QUERY_PARAM_ALIASES.get(key, key)] = value
    if merged.get("tzid") is None:
        merged["tzid"] = DEFAULT_TZID

    ordered = [key for key in KNOWN_QUERY_PARAMS if key in merged]
    ordered += [key for key in merged if key not in KNOWN_QUERY_PARAMS]

    encoded: List[Tuple[str, str]] = []
    for key in ordered:
        value = merged[key]
        if value is None:
            continue
        if isinstance(value, (list, tuple, set, frozenset)):
            encoded.extend((f"{key}[]", encode_query_value(item)) for item in value)
        else:
            encoded.append((key, encode_query_value(value)))
    return encoded
