"""
Configuration for the Reddit listing client.

Configuration is always passed explicitly to the client constructor; there is
no module-level settings instance and nothing is read from the environment.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

APP_VERSION = "0.1.0"

DEFAULT_BASE_URL = "https://www.reddit.com"
DEFAULT_TIMEOUT = 10.0

# Components of the default user agent.
# See https://github.com/reddit-archive/reddit/wiki/API#rules
DEFAULT_PLATFORM = "pc"
DEFAULT_APP_ID = "reddit-listing"
DEFAULT_APP_VERSION = APP_VERSION
DEFAULT_REDDIT_USERNAME = "deleted"


def build_user_agent(
    platform: str,
    app_id: str,
    app_version: str,
    reddit_username: str,
) -> str:
    """
    Format a user agent the way Reddit asks API consumers to.

    Args:
        platform: Target platform, e.g. "pc" or "android"
        app_id: Unique application identifier
        app_version: Application version, without the leading "v"
        reddit_username: Reddit account responsible for the application

    Returns:
        str: e.g. "pc:reddit-listing:v0.1.0 (by /u/deleted)"
    """
    return f"{platform}:{app_id}:v{app_version} (by /u/{reddit_username})"


def _default_user_agent() -> str:
    return build_user_agent(
        DEFAULT_PLATFORM,
        DEFAULT_APP_ID,
        DEFAULT_APP_VERSION,
        DEFAULT_REDDIT_USERNAME,
    )


class ClientConfig(BaseModel):
    """
    Settings for a single RedditClient.

    Instances are frozen once built.
    """

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Scheme and host of the Reddit JSON API"
    )
    user_agent: str = Field(
        default_factory=_default_user_agent,
        min_length=1,
        description="User-Agent header sent with every request"
    )
    timeout: float = Field(
        default=DEFAULT_TIMEOUT,
        gt=0,
        description="Timeout in seconds for a whole request"
    )

    model_config = ConfigDict(frozen=True)

    @field_validator("base_url")
    @classmethod
    def normalize_base_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return v.rstrip("/")

    @classmethod
    def with_user_agent(
        cls,
        platform: str,
        app_id: str,
        app_version: str,
        reddit_username: str,
        **overrides: Any,
    ) -> "ClientConfig":
        """
        Build a config whose user agent follows Reddit's naming rules.

        Any other field can be supplied through ``overrides``.
        """
        user_agent = build_user_agent(platform, app_id, app_version, reddit_username)
        return cls(user_agent=user_agent, **overrides)
