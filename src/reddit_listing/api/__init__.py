"""HTTP client and errors for the Reddit listing API."""

from .client import RedditClient
from .errors import (
    ApiError,
    DeserializationError,
    RedditListingError,
    SubredditNotFoundError,
    TransportError,
)

__all__ = [
    "ApiError",
    "DeserializationError",
    "RedditClient",
    "RedditListingError",
    "SubredditNotFoundError",
    "TransportError",
]
