"""
User-centric Cronofy API client.

Each user gets their own client instance holding that user's credentials;
every API operation is a method on the client.
"""

import logging
from typing import Optional, Any, Dict, List, Mapping, Union, Sequence

import requests

from .auth import oauth
from .auth.credentials import CronofyCredentials
from .constants import API_URL, DEFAULT_TIMEOUT
from .pagination import PagedResultIterator
from .services.calendar import CalendarApiService
from .services.calendar.types import Account, Calendar, Channel, Event, FreeBusy, Profile
from .transport import ApiTransport

logger = logging.getLogger(__name__)


class CronofyClient:
    """
    Client for the Cronofy calendar API.

    Usage Examples:
        client = CronofyClient(access_token="token_123")
        calendars = client.list_calendars()

        for event in client.read_events({"from": start, "to": end}):
            print(event.summary)

        client.create_or_update_event(calendar_id, {
            "event_id": "board-meeting",
            "summary": "Board meeting",
            "start": ZonedTime(start, "Europe/London"),
            "end": ZonedTime(end, "Europe/London"),
        })
    """

    def __init__(
            self,
            client_id: Optional[str] = None,
            client_secret: Optional[str] = None,
            access_token: Optional[str] = None,
            refresh_token: Optional[str] = None,
            *,
            session: Optional[requests.Session] = None,
            api_url: str = API_URL,
            timeout: Optional[float] = DEFAULT_TIMEOUT
    ):
        """
        Initialize the client.

        Args:
            client_id: OAuth client id, needed only for the OAuth operations.
            client_secret: OAuth client secret, needed only for the OAuth operations.
            access_token: Bearer token used for API requests.
            refresh_token: Token used by refresh_access_token.
            session: HTTP session requests are sent through (primarily for testing).
            api_url: Base URL of the API.
            timeout: Per-request timeout forwarded to the session.
        """
        self._session = session if session is not None else requests.Session()
        self._api_url = api_url
        self._timeout = timeout
        self._set_credentials(CronofyCredentials(
            client_id=client_id,
            client_secret=client_secret,
            access_token=access_token,
            refresh_token=refresh_token,
        ))

    @classmethod
    def from_credentials(cls, credentials: CronofyCredentials, **kwargs) -> "CronofyClient":
        """
        Create a client from a CronofyCredentials instance.

        Args:
            credentials: The user's credentials
            **kwargs: Passed on to the constructor (session, api_url, timeout)
        """
        client = cls(**kwargs)
        client._set_credentials(credentials)
        return client

    @classmethod
    def from_env(cls, **kwargs) -> "CronofyClient":
        """Create a client from the CRONOFY_* environment variables."""
        return cls.from_credentials(CronofyCredentials.from_env(), **kwargs)

    def _set_credentials(self, credentials: CronofyCredentials) -> None:
        self._credentials = credentials
        self._transport = ApiTransport(
            credentials.access_token,
            session=self._session,
            api_url=self._api_url,
            timeout=self._timeout,
        )
        self.calendar = CalendarApiService(self._transport)

    @property
    def credentials(self) -> CronofyCredentials:
        return self._credentials

    # Calendars

    def list_calendars(self) -> List[Calendar]:
        """List the calendars across all of the user's connected profiles."""
        return self.calendar.list_calendars()

    # Events

    def create_or_update_event(self, calendar_id: str, event: Mapping[str, Any]) -> None:
        """Create an event in the calendar, or update it if its event_id already exists."""
        return self.calendar.create_or_update_event(calendar_id, event)

    def read_events(self, params: Optional[Mapping[str, Any]] = None, **kwargs) -> PagedResultIterator[Event]:
        """Read events across all pages; the first page is requested immediately."""
        return self.calendar.read_events(params, **kwargs)

    def delete_event(self, calendar_id: str, event_id: str) -> None:
        return self.calendar.delete_event(calendar_id, event_id)

    def delete_all_events(self) -> None:
        return self.calendar.delete_all_events()

    def free_busy(self, params: Optional[Mapping[str, Any]] = None, **kwargs) -> PagedResultIterator[FreeBusy]:
        """Read free/busy periods across all pages; the first page is requested immediately."""
        return self.calendar.free_busy(params, **kwargs)

    # Channels

    def create_channel(self, callback_url: str, filters: Optional[Mapping[str, Any]] = None) -> Channel:
        return self.calendar.create_channel(callback_url, filters=filters)

    def list_channels(self) -> List[Channel]:
        return self.calendar.list_channels()

    def close_channel(self, channel_id: str) -> None:
        return self.calendar.close_channel(channel_id)

    # Account and profiles

    def account(self) -> Account:
        return self.calendar.account()

    def list_profiles(self) -> List[Profile]:
        return self.calendar.list_profiles()

    # OAuth

    def user_auth_link(self, redirect_uri: str, scope: Optional[Union[str, Sequence[str]]] = None,
                       state: Optional[str] = None) -> str:
        """Build the URL a user visits to authorize this application."""
        return oauth.user_auth_link(self._credentials, redirect_uri, scope=scope, state=state)

    def get_token_from_code(self, code: str, redirect_uri: str) -> CronofyCredentials:
        """
        Exchange an authorization code for tokens.
        The client uses the new access token for subsequent requests.
        """
        credentials = oauth.get_token_from_code(self._credentials, code, redirect_uri)
        self._set_credentials(credentials)
        return credentials

    def refresh_access_token(self) -> CronofyCredentials:
        """
        Refresh the access token.
        The client uses the new access token for subsequent requests.
        """
        credentials = oauth.refresh_access_token(self._credentials, session=self._session)
        self._set_credentials(credentials)
        logger.info("Access token refreshed")
        return credentials

    def token_info(self) -> Dict[str, Any]:
        """Current token data, suitable for storing and restoring with CronofyCredentials.from_info."""
        return self._credentials.to_info()
