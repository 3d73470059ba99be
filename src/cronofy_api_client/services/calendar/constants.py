"""Constants for the calendar endpoints."""

CALENDARS_PATH = "/calendars"
CALENDAR_EVENTS_PATH = "/calendars/{calendar_id}/events"
EVENTS_PATH = "/events"
FREE_BUSY_PATH = "/free_busy"
CHANNELS_PATH = "/channels"
CHANNEL_PATH = "/channels/{channel_id}"
ACCOUNT_PATH = "/account"
PROFILES_PATH = "/profiles"

# Query parameters with a known meaning, in the order they are sent.
# Anything else the caller passes is appended verbatim after these.
KNOWN_QUERY_PARAMS = (
    "from",
    "to",
    "tzid",
    "include_deleted",
    "include_moved",
    "include_managed",
    "only_managed",
    "last_modified",
    "calendar_ids",
)

# Python keyword-safe aliases accepted for query parameters
QUERY_PARAM_ALIASES = {
    "from_": "from",
}
