"""
Cronofy API Client.

A client for the Cronofy calendar API: calendars, events, free/busy,
notification channels, profiles and accounts.
"""

from .client import CronofyClient
from .auth.credentials import CronofyCredentials
from .constants import __version__
from .pagination import PagedResultIterator, Pages
from .services.calendar.types import (
    Account, Calendar, Channel, Event, EventTime, FreeBusy, FreeBusyStatus,
    Location, Profile, ZonedTime
)
from .exceptions import (
    CronofyError, CredentialsMissingError, ResponseDecodeError, APIError,
    BadRequestError, AuthenticationFailureError, AuthorizationFailureError,
    NotFoundError, InvalidRequestError, TooManyRequestsError, ServerError
)

__all__ = [
    "__version__",

    # Client
    "CronofyClient",
    "CronofyCredentials",
    "PagedResultIterator",

    # Data types
    "Account",
    "Calendar",
    "Channel",
    "Event",
    "EventTime",
    "FreeBusy",
    "FreeBusyStatus",
    "Location",
    "Pages",
    "Profile",
    "ZonedTime",

    # Errors
    "CronofyError",
    "CredentialsMissingError",
    "ResponseDecodeError",
    "APIError",
    "BadRequestError",
    "AuthenticationFailureError",
    "AuthorizationFailureError",
    "NotFoundError",
    "InvalidRequestError",
    "TooManyRequestsError",
    "ServerError",
]
