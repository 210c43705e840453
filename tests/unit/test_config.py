"""Tests for the client configuration."""

import pytest
from pydantic import ValidationError

from reddit_listing.config import ClientConfig, build_user_agent
from reddit_listing.config.settings import APP_VERSION, DEFAULT_BASE_URL


class TestBuildUserAgent:
    """Test cases for build_user_agent."""

    def test_follows_reddit_convention(self):
        agent = build_user_agent("pc", "my-app", "1.2.3", "someone")
        assert agent == "pc:my-app:v1.2.3 (by /u/someone)"


class TestClientConfig:
    """Test cases for ClientConfig."""

    def test_defaults(self):
        """Test config built without arguments."""
        config = ClientConfig()

        assert config.base_url == DEFAULT_BASE_URL
        assert config.user_agent == f"pc:reddit-listing:v{APP_VERSION} (by /u/deleted)"
        assert config.timeout == 10.0

    def test_trailing_slash_is_stripped(self):
        config = ClientConfig(base_url="https://old.reddit.com/")
        assert config.base_url == "https://old.reddit.com"

    def test_rejects_base_url_without_scheme(self):
        with pytest.raises(ValidationError):
            ClientConfig(base_url="www.reddit.com")

    @pytest.mark.parametrize("timeout", [0, -1.5])
    def test_rejects_non_positive_timeout(self, timeout):
        with pytest.raises(ValidationError):
            ClientConfig(timeout=timeout)

    def test_rejects_empty_user_agent(self):
        with pytest.raises(ValidationError):
            ClientConfig(user_agent="")

    def test_is_frozen(self):
        """Test that a built config cannot be changed."""
        config = ClientConfig()

        with pytest.raises(ValidationError):
            config.base_url = "https://example.com"

    def test_with_user_agent(self):
        """Test building a config from user agent parts plus overrides."""
        config = ClientConfig.with_user_agent(
            "linux", "listing-bot", "0.9", "botowner", timeout=3.0
        )

        assert config.user_agent == "linux:listing-bot:v0.9 (by /u/botowner)"
        assert config.timeout == 3.0
        assert config.base_url == DEFAULT_BASE_URL
