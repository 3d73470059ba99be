from .base import APIError


class AuthenticationFailureError(APIError):
    """Raised when credentials are invalid or expired (401)."""
    pass


class AuthorizationFailureError(APIError):
    """Raised when the credentials lack permission for the operation (403)."""
    pass
