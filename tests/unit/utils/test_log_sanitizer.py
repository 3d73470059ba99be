"""
Unit tests for log sanitization utilities.

Tests that tokens, secrets and personal data are kept out of log lines.
"""

import pytest
from cronofy_api_client.utils.log_sanitizer import (
    sanitize_token,
    sanitize_email,
    sanitize_url,
    sanitize_text,
    sanitize_for_logging
)


@pytest.mark.unit
class TestTokenSanitization:
    """Test token sanitization."""

    def test_long_token(self):
        """Only the last four characters are kept."""
        assert sanitize_token("token_1234567890") == "[token: ...7890]"

    def test_short_token(self):
        """Short tokens are hidden completely."""
        assert sanitize_token("abc") == "[token]"
        assert sanitize_token("12345678") == "[token]"

    def test_missing_token(self):
        assert sanitize_token(None) == "[no-token]"
        assert sanitize_token("") == "[no-token]"


@pytest.mark.unit
class TestEmailSanitization:
    """Test email address sanitization."""

    def test_basic_email_sanitization(self):
        assert sanitize_email("user@example.com") == "***@example.com (16 chars)"

    def test_invalid_email_sanitization(self):
        assert sanitize_email("invalid-email") == "[invalid-email]"
        assert sanitize_email("") == "[invalid-email]"
        assert sanitize_email(None) == "[invalid-email]"


@pytest.mark.unit
class TestUrlSanitization:
    """Test URL sanitization."""

    def test_query_string_is_dropped(self):
        result = sanitize_url("https://api.cronofy.com/v1/events?tzid=Etc/UTC&from=2014-09-01")
        assert result == "https://api.cronofy.com/v1/events?[...]"

    def test_url_without_query(self):
        assert sanitize_url("https://next.page.com/08a07b034306679e") == "https://next.page.com/08a07b034306679e"

    def test_relative_path(self):
        assert sanitize_url("/calendars") == "/calendars"

    def test_missing_url(self):
        assert sanitize_url(None) == "[no-url]"


@pytest.mark.unit
class TestTextSanitization:
    """Test free text sanitization."""

    def test_emails_are_masked(self):
        result = sanitize_text('{"errors": {"email": "someone@example.com is taken"}}')
        assert "someone@example.com" not in result
        assert "[EMAIL]" in result

    def test_long_text_is_truncated(self):
        result = sanitize_text("x" * 500, max_length=50)
        assert result == "x" * 50 + "..."

    def test_empty_text(self):
        assert sanitize_text("") == "[empty]"


@pytest.mark.unit
class TestSanitizeForLogging:
    """Test the combined sanitization helper."""

    def test_mixed_fields(self):
        result = sanitize_for_logging(
            access_token="token_1234567890",
            client_secret="secret_abcdefgh",
            callback_url="https://example.com/hook?secret=1",
            email="user@example.com",
            tzid="Europe/London",
        )

        assert result == {
            "access_token": "[token: ...7890]",
            "client_secret": "[token: ...efgh]",
            "callback_url": "https://example.com/hook?[...]",
            "email": "***@example.com (16 chars)",
            "tzid": "Europe/London",
        }

    def test_reserved_word_keys(self):
        """Query parameter names such as 'from' pass through unchanged."""
        result = sanitize_for_logging(**{"from": "2014-09-01", "include_deleted": True})
        assert result == {"from": "2014-09-01", "include_deleted": True}
