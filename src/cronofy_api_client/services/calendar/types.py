from datetime import date, datetime
from enum import Enum
from types import MappingProxyType
from typing import Optional, Mapping, Any, Union
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ZonedTime:
    """
    An instant paired with the IANA timezone the event should be shown in.
    Args:
        time: The instant; naive values are taken to be UTC.
        tzid: IANA timezone identifier, e.g. "Europe/London".
    """
    time: datetime
    tzid: str


@dataclass(frozen=True)
class EventTime:
    """
    A start or end time as returned by the API.
    Args:
        value: A date for all-day events, otherwise a timezone-aware datetime.
        tzid: The timezone the time was expressed in, when the API supplied one.
    """
    value: Union[date, datetime]
    tzid: Optional[str] = None

    def is_all_day(self) -> bool:
        return not isinstance(self.value, datetime)


@dataclass(frozen=True)
class Location:
    description: Optional[str] = None


@dataclass(frozen=True)
class Calendar:
    """
    A calendar within one of the user's connected profiles.
    Args:
        provider_name: The calendar provider, e.g. "google" or "apple".
        profile_name: The name of the profile the calendar belongs to.
        calendar_id: Unique identifier of the calendar.
        calendar_name: Display name of the calendar.
        calendar_readonly: Whether events can be written to the calendar.
        calendar_deleted: Whether the calendar has been deleted at the provider.
        profile_id: Identifier of the owning profile, when supplied.
        calendar_primary: Whether this is the profile's primary calendar, when supplied.
    """
    provider_name: Optional[str] = None
    profile_name: Optional[str] = None
    calendar_id: Optional[str] = None
    calendar_name: Optional[str] = None
    calendar_readonly: bool = False
    calendar_deleted: bool = False
    profile_id: Optional[str] = None
    calendar_primary: Optional[bool] = None

    def is_writable(self) -> bool:
        return not (self.calendar_readonly or self.calendar_deleted)


@dataclass(frozen=True)
class Event:
    """
    An event read from one of the user's calendars.
    Args:
        calendar_id: The calendar the event belongs to.
        event_uid: The API's unique identifier for the event.
        summary: Title of the event.
        description: Free text description.
        start: Start of the event.
        end: End of the event.
        deleted: Whether the event has been deleted.
        location: Where the event takes place, if known.
        event_id: The caller-assigned id for events created through the API.
    """
    calendar_id: Optional[str] = None
    event_uid: Optional[str] = None
    summary: Optional[str] = None
    description: Optional[str] = None
    start: Optional[EventTime] = None
    end: Optional[EventTime] = None
    deleted: bool = False
    location: Optional[Location] = None
    event_id: Optional[str] = None

    def is_all_day(self) -> bool:
        return self.start is not None and self.start.is_all_day()

    def is_managed(self) -> bool:
        """Events created through the API carry the caller's event_id."""
        return self.event_id is not None


@dataclass(frozen=True)
class Channel:
    """
    A push notification channel.
    Args:
        channel_id: Unique identifier of the channel.
        callback_url: URL notified when calendar data changes.
        filters: Read-only filters restricting which changes are notified.
    """
    channel_id: Optional[str] = None
    callback_url: Optional[str] = None
    filters: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        object.__setattr__(self, "filters", MappingProxyType(dict(self.filters or {})))


@dataclass(frozen=True)
class Account:
    account_id: Optional[str] = None
    email: Optional[str] = None
    name: Optional[str] = None
    default_tzid: Optional[str] = None


@dataclass(frozen=True)
class Profile:
    """
    A connected calendar account at a provider.
    Args:
        provider_name: The calendar provider.
        profile_id: Unique identifier of the profile.
        profile_name: Name of the profile, usually an email address.
        profile_connected: Whether the connection to the provider is healthy.
        profile_relink_url: URL the user can visit to reconnect, when disconnected.
    """
    provider_name: Optional[str] = None
    profile_id: Optional[str] = None
    profile_name: Optional[str] = None
    profile_connected: bool = False
    profile_relink_url: Optional[str] = None


class FreeBusyStatus(str, Enum):
    BUSY = "busy"
    TENTATIVE = "tentative"
    FREE = "free"
    UNKNOWN = "unknown"

    @classmethod
    def _missing_(cls, value):
        return cls.UNKNOWN


@dataclass(frozen=True)
class FreeBusy:
    """
    A period in which a calendar is busy, tentative or free.
    Args:
        calendar_id: The calendar the period belongs to.
        start: Start of the period.
        end: End of the period.
        free_busy_status: The availability during the period.
    """
    calendar_id: Optional[str] = None
    start: Optional[EventTime] = None
    end: Optional[EventTime] = None
    free_busy_status: FreeBusyStatus = FreeBusyStatus.UNKNOWN

    def is_busy(self) -> bool:
        return self.free_busy_status is FreeBusyStatus.BUSY
