from .credentials import CronofyCredentials
from .oauth import DEFAULT_SCOPES, user_auth_link, get_token_from_code, refresh_access_token

__all__ = [
    "CronofyCredentials",
    "DEFAULT_SCOPES",
    "user_auth_link",
    "get_token_from_code",
    "refresh_access_token",
]
