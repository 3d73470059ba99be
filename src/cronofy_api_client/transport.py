"""
Request building and response mapping for the Cronofy API.

The transport owns nothing but the static credentials and the injected HTTP
session: every call builds its own headers, sends one request and either
returns the decoded JSON body or raises the error matching the status code.
"""

import json
import logging
from typing import Optional, Any, Dict, List, Mapping, Tuple, Type

import requests

from .constants import API_URL, USER_AGENT, JSON_CONTENT_TYPE, DEFAULT_TIMEOUT
from .exceptions import (
    APIError, AuthenticationFailureError, AuthorizationFailureError, BadRequestError,
    CredentialsMissingError, InvalidRequestError, NotFoundError, ResponseDecodeError,
    ServerError, TooManyRequestsError
)
from .services.calendar.utils import encode_body
from .utils.log_sanitizer import sanitize_for_logging

logger = logging.getLogger(__name__)

ERROR_CLASSES: Dict[int, Type[APIError]] = {
    400: BadRequestError,
    401: AuthenticationFailureError,
    403: AuthorizationFailureError,
    404: NotFoundError,
    422: InvalidRequestError,
    429: TooManyRequestsError,
}


def error_class_for_status(status_code: int) -> Optional[Type[APIError]]:
    """
    Map an HTTP status code to the error it should raise.

    Args:
        status_code: The response status

    Returns:
        None for 2xx statuses, otherwise the APIError subclass to raise
    """
    if 200 <= status_code < 300:
        return None
    if status_code in ERROR_CLASSES:
        return ERROR_CLASSES[status_code]
    if status_code >= 500:
        return ServerError
    return APIError


class ApiTransport:
    """
    Sends authenticated requests to the API through an HTTP session.

    Args:
        access_token: Bearer token sent with every request.
        session: A ``requests.Session`` (or compatible object). A new session is
            created when omitted.
        api_url: Base URL that relative paths are resolved against.
        timeout: Timeout forwarded to the session for each request.
    """

    def __init__(
            self,
            access_token: Optional[str],
            session: Optional[requests.Session] = None,
            api_url: str = API_URL,
            timeout: Optional[float] = DEFAULT_TIMEOUT
    ):
        self._access_token = access_token
        self._session = session if session is not None else requests.Session()
        self._api_url = api_url.rstrip("/")
        self._timeout = timeout

    @property
    def session(self) -> requests.Session:
        return self._session

    def build_url(self, path: str) -> str:
        """Resolve a path against the base URL; absolute URLs are left as they are."""
        if path.startswith("http://") or path.startswith("https://"):
            return path
        return self._api_url + path

    def build_headers(self, with_body: bool = False) -> Dict[str, str]:
        if not self._access_token:
            raise CredentialsMissingError("An access token is required to call the Cronofy API")

        headers = {
            "Authorization": f"Bearer {self._access_token}",
            "User-Agent": USER_AGENT,
        }
        if with_body:
            headers["Content-Type"] = JSON_CONTENT_TYPE
        return headers

    def request(
            self,
            method: str,
            path: str,
            params: Optional[List[Tuple[str, str]]] = None,
            body: Optional[Mapping[str, Any]] = None
    ) -> Optional[Any]:
        """
        Send a request and map its response.

        Args:
            method: HTTP method.
            path: Path relative to the base URL, or an absolute URL.
            params: Already encoded query parameters.
            body: Body fields, encoded to JSON when given.

        Returns:
            The decoded JSON body, or None for an empty successful response.

        Raises:
            CredentialsMissingError: If no access token is configured.
            APIError: A subclass matching the status for non-2xx responses.
            ResponseDecodeError: If a successful response body is not JSON.
        """
        url = self.build_url(path)
        headers = self.build_headers(with_body=body is not None)
        data = None
        if body is not None:
            data = json.dumps(encode_body(body)).encode("utf-8")

        logger.debug("%s %s", method, sanitize_for_logging(url=url)["url"])
        response = self._session.request(
            method,
            url,
            params=params,
            data=data,
            headers=headers,
            timeout=self._timeout,
        )
        return self.handle_response(response)

    def get(self, path: str, params: Optional[List[Tuple[str, str]]] = None) -> Optional[Any]:
        return self.request("GET", path, params=params)

    def post(self, path: str, body: Optional[Mapping[str, Any]] = None) -> Optional[Any]:
        return self.request("POST", path, body=body)

    def delete(self, path: str, body: Optional[Mapping[str, Any]] = None) -> Optional[Any]:
        return self.request("DELETE", path, body=body)

    def handle_response(self, response: requests.Response) -> Optional[Any]:
        """
        Map a completed response to its decoded body or raise the matching error.
        """
        status_code = response.status_code
        error_class = error_class_for_status(status_code)
        if error_class is not None:
            body = response.text
            sanitized = sanitize_for_logging(url=response.url, body=body)
            logger.warning(
                "Cronofy API returned %s for %s: %s",
                status_code, sanitized["url"], sanitized["body"]
            )
            raise error_class(
                f"Cronofy API request failed with status {status_code}",
                status_code=status_code,
                body=body,
            )

        if not response.content or not response.content.strip():
            return None

        try:
            return json.loads(response.content.decode("utf-8"))
        except (ValueError, UnicodeDecodeError) as e:
            raise ResponseDecodeError(
                f"Could not decode response with status {status_code}: {e}"
            ) from e
