import os
from dataclasses import dataclass, replace
from typing import Optional, Dict, Any

from google.oauth2.credentials import Credentials

from ..constants import TOKEN_URL

# Environment variables read by CronofyCredentials.from_env
CLIENT_ID_ENV = "CRONOFY_CLIENT_ID"
CLIENT_SECRET_ENV = "CRONOFY_CLIENT_SECRET"
ACCESS_TOKEN_ENV = "CRONOFY_ACCESS_TOKEN"
REFRESH_TOKEN_ENV = "CRONOFY_REFRESH_TOKEN"


@dataclass(frozen=True)
class CronofyCredentials:
    """
    OAuth client and token data for one Cronofy user.
    Args:
        client_id: OAuth client id of the application.
        client_secret: OAuth client secret of the application.
        access_token: Bearer token sent with API requests.
        refresh_token: Token used to obtain a new access token.
        expires_in: Lifetime in seconds of the access token, when known.
        scope: Space separated scopes granted to the access token, when known.
    """
    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
    expires_in: Optional[int] = None
    scope: Optional[str] = None

    def __repr__(self):
        # tokens are never included
        return f"CronofyCredentials(client_id={self.client_id!r}, has_access_token={bool(self.access_token)})"

    @classmethod
    def from_env(cls) -> "CronofyCredentials":
        """
        Create credentials from CRONOFY_CLIENT_ID, CRONOFY_CLIENT_SECRET,
        CRONOFY_ACCESS_TOKEN and CRONOFY_REFRESH_TOKEN. Unset variables are left unset.
        """
        return cls(
            client_id=os.getenv(CLIENT_ID_ENV),
            client_secret=os.getenv(CLIENT_SECRET_ENV),
            access_token=os.getenv(ACCESS_TOKEN_ENV),
            refresh_token=os.getenv(REFRESH_TOKEN_ENV),
        )

    @classmethod
    def from_info(cls, token_data: Dict[str, Any]) -> "CronofyCredentials":
        """
        Create credentials from previously stored token data.

        Args:
            token_data: Dictionary as produced by to_info

        Returns:
            CronofyCredentials instance
        """
        return cls(
            client_id=token_data.get("client_id"),
            client_secret=token_data.get("client_secret"),
            access_token=token_data.get("access_token"),
            refresh_token=token_data.get("refresh_token"),
            expires_in=token_data.get("expires_in"),
            scope=token_data.get("scope"),
        )

    def to_info(self) -> Dict[str, Any]:
        """Token data suitable for storing and passing back to from_info."""
        return {
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "access_token": self.access_token,
            "refresh_token": self.refresh_token,
            "expires_in": self.expires_in,
            "scope": self.scope,
        }

    def with_tokens(self, access_token: str, refresh_token: Optional[str] = None,
                    expires_in: Optional[int] = None, scope: Optional[str] = None) -> "CronofyCredentials":
        """Return a copy carrying new tokens; the refresh token is kept when none is issued."""
        return replace(
            self,
            access_token=access_token,
            refresh_token=refresh_token or self.refresh_token,
            expires_in=expires_in,
            scope=scope or self.scope,
        )

    def to_google_credentials(self) -> Credentials:
        """
        Adapt to google-auth Credentials, which implement the refresh grant
        against Cronofy's token endpoint.
        """
        return Credentials(
            token=self.access_token,
            refresh_token=self.refresh_token,
            token_uri=TOKEN_URL,
            client_id=self.client_id,
            client_secret=self.client_secret,
        )
