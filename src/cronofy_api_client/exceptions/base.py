from typing import Optional


class CronofyError(Exception):
    """Base exception for all Cronofy API client errors."""
    pass


class CredentialsMissingError(CronofyError):
    """Raised when a request is attempted without an access token."""
    pass


class ResponseDecodeError(CronofyError):
    """Raised when a successful response carries a body that is not valid JSON."""
    pass


class APIError(CronofyError):
    """
    Raised when the API answers with a non-2xx status.

    Args:
        message: Human readable description.
        status_code: The HTTP status of the response.
        body: The raw response body, kept for diagnostics.
    """

    def __init__(self, message: str, status_code: Optional[int] = None, body: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class BadRequestError(APIError):
    """Raised on 400 responses."""
    pass


class NotFoundError(APIError):
    """Raised when the requested resource or page does not exist (404)."""
    pass


class InvalidRequestError(APIError):
    """Raised when the API rejects the request payload as invalid (422)."""
    pass


class TooManyRequestsError(APIError):
    """Raised when the API rate limit has been hit (429)."""
    pass


class ServerError(APIError):
    """Raised on 5xx responses."""
    pass
