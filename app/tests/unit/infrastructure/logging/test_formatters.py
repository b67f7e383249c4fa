"""Unit tests for infrastructure.logging.formatters module."""

import pytest

from infrastructure.logging.formatters import (
    SENSITIVE_PATTERNS,
    add_app_info,
    mask_sensitive_data,
    truncate_large_values,
)


@pytest.mark.unit
class TestAddAppInfo:
    """Test suite for add_app_info processor factory."""

    def test_adds_name_and_version(self):
        processor = add_app_info("intlize", "1.2.3")

        result = processor(None, "info", {"event": "test_event"})

        assert result == {"event": "test_event", "app_name": "intlize", "app_version": "1.2.3"}

    def test_unknown_version_default(self):
        result = add_app_info("intlize")(None, "info", {"event": "test"})
        assert result["app_version"] == "unknown"


@pytest.mark.unit
class TestMaskSensitiveData:
    """Test suite for mask_sensitive_data processor factory."""

    def test_cookie_headers_masked(self):
        """Raw cookie strings never reach the renderer."""
        processor = mask_sensitive_data()

        result = processor(None, "info", {"cookie": "locale=es", "set_cookie": "x", "locale": "es"})

        assert result["cookie"] == "***REDACTED***"
        assert result["set_cookie"] == "***REDACTED***"
        assert result["locale"] == "es"

    def test_case_insensitive(self):
        result = mask_sensitive_data()(None, "info", {"Authorization": "Bearer x"})
        assert result["Authorization"] == "***REDACTED***"

    def test_none_values_untouched(self):
        result = mask_sensitive_data()(None, "info", {"password": None})
        assert result["password"] is None

    def test_additional_patterns_and_custom_mask(self):
        processor = mask_sensitive_data(mask_value="[hidden]", additional_patterns=frozenset({"region"}))

        result = processor(None, "info", {"region": "AR"})

        assert result["region"] == "[hidden]"

    def test_patterns_include_cookie(self):
        assert "cookie" in SENSITIVE_PATTERNS


@pytest.mark.unit
class TestTruncateLargeValues:
    """Test suite for truncate_large_values processor factory."""

    def test_truncates_long_strings(self):
        result = truncate_large_values(max_length=5)(None, "info", {"body": "abcdefgh"})
        assert result["body"] == "abcde...[truncated, 8 chars total]"

    def test_leaves_short_and_non_string_values(self):
        event = {"body": "abc", "count": 123456789}
        assert truncate_large_values(max_length=5)(None, "info", dict(event)) == event
