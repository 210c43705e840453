"""
Exceptions raised by the Reddit listing client.

Every failure of a request surfaces as one of these, so callers can branch on
the failure category with a single ``except`` clause per kind.
"""

from typing import Optional

# Longest excerpt of a response body kept on an exception.
MAX_BODY_EXCERPT = 500


def _excerpt(body: Optional[str]) -> Optional[str]:
    if body is None or len(body) <= MAX_BODY_EXCERPT:
        return body
    return body[:MAX_BODY_EXCERPT] + "..."


class RedditListingError(Exception):
    """Base class for all client errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class TransportError(RedditListingError):
    """The request could not be completed (DNS, connect, timeout, protocol)."""


class DeserializationError(RedditListingError):
    """
    The response body did not match the expected listing shape.

    Attributes:
        field: Dotted path of the first offending field, if known
        body: Start of the response body that failed to parse
    """

    def __init__(self, message: str, field: Optional[str] = None, body: Optional[str] = None):
        self.field = field
        self.body = _excerpt(body)
        super().__init__(message)


class ApiError(RedditListingError):
    """
    Reddit answered with a non-success status.

    Attributes:
        status_code: HTTP status of the response
        reason: Machine readable reason from the error body, e.g. "private"
    """

    def __init__(self, message: str, status_code: int, reason: Optional[str] = None):
        self.status_code = status_code
        self.reason = reason
        super().__init__(message)

    def __str__(self) -> str:
        if self.reason:
            return f"HTTP {self.status_code}: {self.message} ({self.reason})"
        return f"HTTP {self.status_code}: {self.message}"

    @property
    def is_subreddit_not_found(self) -> bool:
        return isinstance(self, SubredditNotFoundError)


class SubredditNotFoundError(ApiError):
    """The subreddit does not exist or cannot be resolved."""

    def __init__(self, subreddit: str, message: Optional[str] = None, reason: Optional[str] = None):
        self.subreddit = subreddit
        super().__init__(
            message or f"failed to locate the subreddit r/{subreddit}",
            status_code=404,
            reason=reason,
        )
