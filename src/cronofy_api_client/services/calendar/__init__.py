"""Calendar, event, free/busy, channel, account and profile endpoints."""

from .api_service import CalendarApiService
from .types import (
    Account, Calendar, Channel, Event, EventTime, FreeBusy, FreeBusyStatus,
    Location, Profile, ZonedTime
)

__all__ = [
    # Service layer
    "CalendarApiService",

    # Data types
    "Account",
    "Calendar",
    "Channel",
    "Event",
    "EventTime",
    "FreeBusy",
    "FreeBusyStatus",
    "Location",
    "Profile",
    "ZonedTime",
]
