from .base import (
    CronofyError, CredentialsMissingError, ResponseDecodeError, APIError,
    BadRequestError, NotFoundError, InvalidRequestError, TooManyRequestsError, ServerError
)
from .auth import AuthenticationFailureError, AuthorizationFailureError

__all__ = [
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
