"""Tests for API key handling."""

import pytest

from youtube_mcp.api.api_key import get_api_key_from_env, validate_api_key
from youtube_mcp.core.exceptions import ValidationError


class TestValidateApiKey:
    """Test validate_api_key."""

    def test_strips(self):
        """Test strips."""
        assert validate_api_key("  abc  ") == "abc"

    @pytest.mark.parametrize("value", [None, "", "   ", 42])
    def test_missing(self, value):
        """Test missing."""
        with pytest.raises(ValidationError) as exc_info:
            validate_api_key(value)
        assert exc_info.value.field == "api_key"
        assert str(exc_info.value) == "API key is required"


class TestGetApiKeyFromEnv:
    """Test reading the key from the environment."""

    def test_from_mapping(self):
        """Test from mapping."""
        assert get_api_key_from_env({"YOUTUBE_API_KEY": "xyz"}) == "xyz"

    def test_from_os_environ(self, monkeypatch):
        """Test from os environ."""
        monkeypatch.setenv("YOUTUBE_API_KEY", "from-env")
        assert get_api_key_from_env() == "from-env"

    def test_missing(self):
        """Test missing."""
        with pytest.raises(ValidationError):
            get_api_key_from_env({})
