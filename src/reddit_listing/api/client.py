"""
Async HTTP client for Reddit's public listing API.

This module provides the client used to fetch the posts of a subreddit
anonymously. Each call performs exactly one request; there is no retry
logic, no rate limiting and no response caching.
"""

import json
from typing import Any, Optional, Tuple, Union

import httpx
from loguru import logger
from pydantic import ValidationError

from ..config.settings import ClientConfig
from ..models.listing import ListingThing, Subreddit
from .errors import ApiError, DeserializationError, SubredditNotFoundError, TransportError

DEFAULT_LIMIT = 25

# Reddit redirects unknown subreddits to its search page instead of a 404.
SEARCH_REDIRECT_PATH = "/subreddits/search"


class RedditClient:
    """
    Client for Reddit's subreddit listing endpoint.

    The underlying ``httpx.AsyncClient`` pools connections and is safe to share
    between concurrent calls. A client passed in through ``http_client`` stays
    owned by the caller and is never closed here.

    Usage:
        async with RedditClient() as client:
            subreddit = await client.get_subreddit("python", limit=10)
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the client.

        Args:
            config: Client configuration, defaults to ``ClientConfig()``
            http_client: Shared transport handle to reuse instead of creating one
        """
        self._config = config or ClientConfig()
        self._owns_http_client = http_client is None
        self._http = http_client or httpx.AsyncClient(
            headers={"User-Agent": self._config.user_agent},
            timeout=self._config.timeout,
            follow_redirects=True,
        )

        logger.debug(f"Initialized RedditClient with base_url: {self._config.base_url}")

    @classmethod
    def with_user_agent(
        cls,
        platform: str,
        app_id: str,
        app_version: str,
        reddit_username: str,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> "RedditClient":
        """
        Create a client whose user agent follows Reddit's API rules.

        See https://github.com/reddit-archive/reddit/wiki/API#rules
        """
        config = ClientConfig.with_user_agent(platform, app_id, app_version, reddit_username)
        return cls(config=config, http_client=http_client)

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @property
    def user_agent(self) -> str:
        return self._config.user_agent

    async def get_subreddit(self, name: str, limit: int = DEFAULT_LIMIT) -> Subreddit:
        """
        Fetch the current posts of a subreddit.

        Reddit caps ``limit`` server side (currently at 100); larger values are
        sent unchanged and simply yield the capped number of posts.

        Args:
            name: Subreddit name without the "r/" prefix
            limit: Maximum number of posts to return

        Returns:
            Subreddit: Posts in the order the API listed them, at most ``limit``

        Raises:
            ValueError: If ``name`` is empty or ``limit`` is below 1
            TransportError: If the request could not be completed
            SubredditNotFoundError: If the subreddit does not exist
            ApiError: If Reddit answered with another non-success status
            DeserializationError: If the body is not a subreddit listing
        """
        if not isinstance(name, str) or not name:
            raise ValueError("Subreddit name must be a non-empty string")
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
            raise ValueError(f"limit must be a positive integer, got {limit!r}")

        url = f"{self.base_url}/r/{name}/.json"
        logger.debug(f"Making GET request to {url} (limit={limit})")

        try:
            response = await self._http.get(
                url,
                params={"limit": limit},
                headers={"User-Agent": self.user_agent},
                timeout=self._config.timeout,
                follow_redirects=True,
            )
        except httpx.RequestError as e:
            logger.warning(f"Request to {url} failed: {e!r}")
            raise TransportError(f"Request to {url} failed: {e}") from e

        if response.url.path.startswith(SEARCH_REDIRECT_PATH):
            logger.warning(f"r/{name} redirected to subreddit search")
            raise SubredditNotFoundError(name)

        if not response.is_success:
            error = self._api_error(name, response)
            logger.warning(f"Reddit rejected request for r/{name}: {error}")
            raise error

        subreddit = self._parse_listing(name, response, limit)
        logger.debug(f"Fetched {len(subreddit.posts)} posts from r/{name}")
        return subreddit

    async def aclose(self) -> None:
        """Release the transport handle if this client created it."""
        if self._owns_http_client:
            await self._http.aclose()

    async def __aenter__(self) -> "RedditClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    @staticmethod
    def _api_error(name: str, response: httpx.Response) -> ApiError:
        """Build the error for a non-success response from its error envelope."""
        message = response.reason_phrase or "request failed"
        reason = None

        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict):
            if isinstance(body.get("message"), str):
                message = body["message"]
            if isinstance(body.get("reason"), str):
                reason = body["reason"]

        if response.status_code == 404:
            return SubredditNotFoundError(name, message=message, reason=reason)
        return ApiError(message, response.status_code, reason)

    @staticmethod
    def _parse_listing(name: str, response: httpx.Response, limit: int) -> Subreddit:
        try:
            envelope = ListingThing.model_validate_json(response.content)
        except ValidationError as e:
            first = e.errors()[0]
            field = None
            if first["type"] != "json_invalid":
                field = _error_path(first["loc"], json.loads(response.content))
            location = f" at {field}" if field else ""
            logger.warning(f"Failed to parse listing for r/{name}{location}: {first['msg']}")
            raise DeserializationError(
                f"Failed to parse listing for r/{name}{location}: {first['msg']}",
                field=field,
                body=response.text,
            ) from e

        return Subreddit.from_listing(name, envelope.data, limit)


def _error_path(loc: Tuple[Union[int, str], ...], payload: Any) -> Optional[str]:
    """
    Dotted path of a validation error location within ``payload``.

    Locations inside a union also carry the member tag (``edited.bool``). Those
    tags do not exist in the payload, so the walk stops at the first scalar.
    """
    parts = []
    node = payload
    for part in loc:
        if isinstance(node, dict):
            node = node.get(part)
        elif isinstance(node, list) and isinstance(part, int) and part < len(node):
            node = node[part]
        else:
            break
        parts.append(str(part))
    return ".".join(parts) or None
