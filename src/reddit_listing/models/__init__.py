"""
Models package for the Reddit listing client.

Exposes the pydantic models used to parse subreddit listing responses.
"""

from .listing import FrozenJson, Listing, ListingThing, Post, PostHint, PostThing, Subreddit

__all__ = [
    "FrozenJson",
    "Listing",
    "ListingThing",
    "Post",
    "PostHint",
    "PostThing",
    "Subreddit",
]
