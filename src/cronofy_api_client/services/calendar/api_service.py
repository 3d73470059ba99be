from typing import Optional, List, Any, Dict, Mapping, TYPE_CHECKING
from urllib.parse import quote
import logging

from ...pagination import PagedResultIterator
from ...utils.log_sanitizer import sanitize_for_logging
from .types import Account, Calendar, Channel, Event, FreeBusy, Profile
from . import utils
from .constants import (
    ACCOUNT_PATH, CALENDARS_PATH, CALENDAR_EVENTS_PATH, CHANNELS_PATH, CHANNEL_PATH,
    EVENTS_PATH, FREE_BUSY_PATH, PROFILES_PATH
)

if TYPE_CHECKING:
    from ...transport import ApiTransport

logger = logging.getLogger(__name__)


def _merge_params(params: Optional[Mapping[str, Any]], kwargs: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(params or {})
    merged.update(kwargs)
    return merged


class CalendarApiService:
    """
    Service layer for the calendar endpoints.
    One method per endpoint: builds the request, sends it through the
    transport and maps the response into entities.
    """

    def __init__(self, transport: "ApiTransport"):
        """
        Initialize Calendar service.

        Args:
            transport: The transport used to send requests
        """
        self._transport = transport

    def list_calendars(self) -> List[Calendar]:
        """
        Lists the calendars across all of the user's connected profiles.

        Returns:
            A list of Calendar objects, in the order the API returned them.
        """
        logger.info("Listing calendars")
        response = self._transport.get(CALENDARS_PATH) or {}
        calendars = [utils.from_api_calendar(item) for item in response.get("calendars") or []]
        logger.info("Found %d calendars", len(calendars))
        return calendars

    def create_or_update_event(self, calendar_id: str, event: Mapping[str, Any]) -> None:
        """
        Creates an event, or updates it if one with the same event_id exists.

        Args:
            calendar_id: The calendar to write the event to.
            event: Event fields such as event_id, summary, description, start,
                end and location. start and end may be datetimes, dates or
                ZonedTime values.
        """
        logger.info("Upserting event %s in calendar %s", event.get("event_id"), calendar_id)
        path = CALENDAR_EVENTS_PATH.format(calendar_id=quote(calendar_id, safe=""))
        self._transport.post(path, body=event)

    def read_events(self, params: Optional[Mapping[str, Any]] = None, **kwargs) -> PagedResultIterator[Event]:
        """
        Reads events across the user's calendars.

        Args:
            params: Query parameters, e.g. from, to, tzid, include_deleted,
                include_moved, include_managed, only_managed, last_modified,
                calendar_ids. Unrecognised parameters are sent as given.
            **kwargs: Further parameters; ``from_`` may be used for ``from``.

        Returns:
            An iterator over every matching event, across all result pages.
            The first page has already been requested when this returns.
        """
        merged = _merge_params(params, kwargs)
        logger.info("Reading events with params %s", sorted(merged))
        return PagedResultIterator(
            self._transport,
            "events",
            utils.from_api_event,
            EVENTS_PATH,
            params=utils.encode_query_params(merged),
        )

    def delete_event(self, calendar_id: str, event_id: str) -> None:
        """
        Deletes an event previously created through the API.

        Args:
            calendar_id: The calendar containing the event.
            event_id: The caller-assigned id of the event.
        """
        logger.info("Deleting event %s from calendar %s", event_id, calendar_id)
        path = CALENDAR_EVENTS_PATH.format(calendar_id=quote(calendar_id, safe=""))
        self._transport.delete(path, body={"event_id": event_id})

    def delete_all_events(self) -> None:
        """Deletes every event created through the API, across all calendars."""
        logger.info("Deleting all managed events")
        self._transport.delete(EVENTS_PATH, body={"all_events": True})

    def free_busy(self, params: Optional[Mapping[str, Any]] = None, **kwargs) -> PagedResultIterator[FreeBusy]:
        """
        Reads free/busy periods across the user's calendars.

        Args:
            params: Query parameters, e.g. from, to, tzid, include_managed,
                calendar_ids. Unrecognised parameters are sent as given.
            **kwargs: Further parameters; ``from_`` may be used for ``from``.

        Returns:
            An iterator over every period, across all result pages.
        """
        merged = _merge_params(params, kwargs)
        logger.info("Reading free/busy with params %s", sorted(merged))
        return PagedResultIterator(
            self._transport,
            "free_busy",
            utils.from_api_free_busy,
            FREE_BUSY_PATH,
            params=utils.encode_query_params(merged),
        )

    def create_channel(self, callback_url: str, filters: Optional[Mapping[str, Any]] = None) -> Channel:
        """
        Creates a push notification channel.

        Args:
            callback_url: URL to notify when calendar data changes.
            filters: Optional filters, e.g. {"only_managed": True}.

        Returns:
            The created Channel.
        """
        logger.info("Creating channel for %s", sanitize_for_logging(callback_url=callback_url)["callback_url"])
        body: Dict[str, Any] = {"callback_url": callback_url}
        if filters:
            body["filters"] = filters
        response = self._transport.post(CHANNELS_PATH, body=body) or {}
        return utils.from_api_channel(response.get("channel") or {})

    def list_channels(self) -> List[Channel]:
        logger.info("Listing channels")
        response = self._transport.get(CHANNELS_PATH) or {}
        return [utils.from_api_channel(item) for item in response.get("channels") or []]

    def close_channel(self, channel_id: str) -> None:
        logger.info("Closing channel %s", channel_id)
        self._transport.delete(CHANNEL_PATH.format(channel_id=quote(channel_id, safe="")))

    def account(self) -> Account:
        """Returns the account the access token belongs to."""
        logger.info("Fetching account")
        response = self._transport.get(ACCOUNT_PATH) or {}
        return utils.from_api_account(response.get("account") or {})

    def list_profiles(self) -> List[Profile]:
        """
        Lists the calendar profiles connected to the account.

        Returns:
            A list of Profile objects.
        """
        logger.info("Listing profiles")
        response = self._transport.get(PROFILES_PATH) or {}
        profiles = [utils.from_api_profile(item) for item in response.get("profiles") or []]
        logger.info("Found %d profiles", len(profiles))
        return profiles
