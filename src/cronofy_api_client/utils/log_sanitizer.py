"""
Log sanitization utilities to keep tokens and personal data out of logs.

Bearer tokens, client secrets and email addresses pass through here before
they reach a log line.
"""

import re
from typing import Optional
from urllib.parse import urlsplit

SENSITIVE_KEYS = ('access_token', 'refresh_token', 'client_secret', 'code', 'token')


def sanitize_token(token: Optional[str]) -> str:
    """
    Sanitize a bearer token or secret for logging.

    Args:
        token: Token to sanitize

    Returns:
        Sanitized token representation

    Example:
        "token_1234567890" -> "[token: ...7890]"
    """
    if not token:
        return "[no-token]"

    if len(token) <= 8:
        return "[token]"
    return f"[token: ...{token[-4:]}]"


def sanitize_email(email: Optional[str]) -> str:
    """
    Sanitize email address for logging by showing only domain and length.

    Example:
        "user@example.com" -> "***@example.com (16 chars)"
    """
    if not email or '@' not in email:
        return "[invalid-email]"

    _, domain = email.split('@', 1)
    return f"***@{domain} ({len(email)} chars)"


def sanitize_url(url: Optional[str]) -> str:
    """
    Sanitize a request URL for logging.

    The query string is dropped since next-page URLs can carry opaque
    cursors and callback URLs can carry secrets.
    """
    if not url:
        return "[no-url]"

    parts = urlsplit(url)
    if not parts.scheme:
        return parts.path or "[no-url]"
    sanitized = f"{parts.scheme}://{parts.netloc}{parts.path}"
    if parts.query:
        sanitized += "?[...]"
    return sanitized


def sanitize_text(text: Optional[str], max_length: int = 200) -> str:
    """
    Sanitize free text such as a response body.

    Email addresses are masked and the result is truncated.
    """
    if not text:
        return "[empty]"

    sanitized = re.sub(r'\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b', '[EMAIL]', text)
    if len(sanitized) > max_length:
        sanitized = sanitized[:max_length] + "..."
    return sanitized


def sanitize_for_logging(**kwargs) -> dict:
    """
    Sanitize multiple fields for logging in one call.

    Args:
        **kwargs: Fields to sanitize (url, email, access_token, ...)

    Returns:
        Dictionary with sanitized values
    """
    sanitized = {}

    for key, value in kwargs.items():
        if key in SENSITIVE_KEYS:
            sanitized[key] = sanitize_token(value)
        elif key in ('url', 'callback_url', 'next_page', 'redirect_uri'):
            sanitized[key] = sanitize_url(value)
        elif key == 'email':
            sanitized[key] = sanitize_email(value)
        elif key == 'body':
            sanitized[key] = sanitize_text(value)
        else:
            sanitized[key] = value

    return sanitized
