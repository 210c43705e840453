"""
Reddit Listing - async client for public subreddit listings.

Fetches the posts of a subreddit from Reddit's anonymous JSON API and parses
them into typed, immutable models.
"""

from loguru import logger

from .api import (
    ApiError,
    DeserializationError,
    RedditClient,
    RedditListingError,
    SubredditNotFoundError,
    TransportError,
)
from .config import ClientConfig, build_user_agent
from .config.settings import APP_VERSION
from .models import Listing, ListingThing, Post, PostHint, PostThing, Subreddit
from .utils import setup_logging

__version__ = APP_VERSION

# Silent until the application opts in.
logger.disable(__name__)

__all__ = [
    "ApiError",
    "ClientConfig",
    "DeserializationError",
    "Listing",
    "ListingThing",
    "Post",
    "PostHint",
    "PostThing",
    "RedditClient",
    "RedditListingError",
    "Subreddit",
    "SubredditNotFoundError",
    "TransportError",
    "build_user_agent",
    "setup_logging",
]
