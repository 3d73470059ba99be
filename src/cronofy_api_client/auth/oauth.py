"""
OAuth2 helpers for Cronofy.

The authorization code and refresh grants are carried out by
google-auth-oauthlib and google-auth; these helpers only point them at
Cronofy's endpoints and convert the results into CronofyCredentials.
"""

import logging
from typing import Optional, Sequence, Union, Dict, Any

import requests
from google.auth.exceptions import RefreshError, TransportError
from google.auth.transport.requests import Request
from google_auth_oauthlib.flow import Flow
from oauthlib.oauth2.rfc6749.errors import OAuth2Error

from ..constants import AUTHORIZE_URL, TOKEN_URL
from ..exceptions import AuthenticationFailureError, CredentialsMissingError
from ..utils.log_sanitizer import sanitize_for_logging
from .credentials import CronofyCredentials

logger = logging.getLogger(__name__)

DEFAULT_SCOPES = [
    "read_account",
    "list_calendars",
    "read_events",
    "create_event",
    "delete_event",
    "read_free_busy",
]


def _client_config(credentials: CronofyCredentials) -> Dict[str, Any]:
    if not credentials.client_id or not credentials.client_secret:
        raise CredentialsMissingError("client_id and client_secret are required for OAuth requests")
    return {
        "web": {
            "client_id": credentials.client_id,
            "client_secret": credentials.client_secret,
            "auth_uri": AUTHORIZE_URL,
            "token_uri": TOKEN_URL,
        }
    }


def _build_flow(credentials: CronofyCredentials, redirect_uri: str,
                scopes: Optional[Sequence[str]] = None) -> Flow:
    return Flow.from_client_config(
        _client_config(credentials),
        scopes=list(scopes) if scopes else None,
        redirect_uri=redirect_uri,
        autogenerate_code_verifier=False,
    )


def user_auth_link(
        credentials: CronofyCredentials,
        redirect_uri: str,
        scope: Optional[Union[str, Sequence[str]]] = None,
        state: Optional[str] = None
) -> str:
    """
    Build the URL to send a user to for granting access to their calendars.

    Args:
        credentials: Credentials carrying the client id and secret
        redirect_uri: Where the user is sent back to with the authorization code
        scope: Space separated string or list of scopes. Defaults to DEFAULT_SCOPES
        state: Opaque value echoed back on the redirect

    Returns:
        The authorization URL
    """
    if isinstance(scope, str):
        scope = scope.split()
    flow = _build_flow(credentials, redirect_uri, scope or DEFAULT_SCOPES)

    kwargs = {}
    if state is not None:
        kwargs["state"] = state
    url, _ = flow.authorization_url(**kwargs)
    return url


def get_token_from_code(credentials: CronofyCredentials, code: str, redirect_uri: str) -> CronofyCredentials:
    """
    Exchange an authorization code for access and refresh tokens.

    Args:
        credentials: Credentials carrying the client id and secret
        code: The code Cronofy appended to the redirect
        redirect_uri: The redirect URI used when building the authorization link

    Returns:
        New credentials carrying the issued tokens

    Raises:
        AuthenticationFailureError: If Cronofy rejects the code
    """
    logger.info("Exchanging authorization code for %s",
                sanitize_for_logging(redirect_uri=redirect_uri)["redirect_uri"])
    flow = _build_flow(credentials, redirect_uri)
    try:
        token = flow.fetch_token(code=code)
    except OAuth2Error as e:
        raise AuthenticationFailureError(f"Authorization code exchange failed: {e.description or e.error}") from e

    scope = token.get("scope")
    if isinstance(scope, (list, tuple)):
        scope = " ".join(scope)
    return credentials.with_tokens(
        access_token=token["access_token"],
        refresh_token=token.get("refresh_token"),
        expires_in=token.get("expires_in"),
        scope=scope,
    )


def refresh_access_token(credentials: CronofyCredentials,
                         session: Optional[requests.Session] = None) -> CronofyCredentials:
    """
    Obtain a new access token using the refresh token.

    Args:
        credentials: Credentials carrying the client id, secret and refresh token
        session: Optional session the refresh request is sent through

    Returns:
        New credentials carrying the refreshed access token

    Raises:
        CredentialsMissingError: If there is no refresh token
        AuthenticationFailureError: If Cronofy rejects the refresh token
    """
    if not credentials.refresh_token:
        raise CredentialsMissingError("A refresh token is required to refresh the access token")
    _client_config(credentials)

    google_credentials = credentials.to_google_credentials()
    logger.info("Refreshing access token %s",
                sanitize_for_logging(access_token=credentials.access_token)["access_token"])
    try:
        google_credentials.refresh(Request(session=session))
    except (RefreshError, TransportError) as e:
        raise AuthenticationFailureError(f"Failed to refresh access token: {e}") from e

    return credentials.with_tokens(
        access_token=google_credentials.token,
        refresh_token=google_credentials.refresh_token,
    )
