"""Wire-level constants shared across the client."""

__version__ = "0.1.0"

API_URL = "https://api.cronofy.com/v1"
APP_URL = "https://app.cronofy.com"

AUTHORIZE_URL = APP_URL + "/oauth/authorize"
TOKEN_URL = APP_URL + "/oauth/token"

USER_AGENT = f"Cronofy Python {__version__}"
JSON_CONTENT_TYPE = "application/json; charset=utf-8"

DEFAULT_TZID = "Etc/UTC"
DEFAULT_TIMEOUT = 30  # seconds, forwarded to the HTTP session
