"""
Pydantic models for Reddit listing responses.

A subreddit listing arrives as a "thing" envelope:

    {"kind": "Listing", "data": {"after": ..., "children": [
        {"kind": "t3", "data": {<post fields>}}, ...
    ]}}

Only the listing and link (t3) kinds are modelled. Known fields are typed and
anything Reddit adds later is ignored, so new keys do not break parsing while
a wrongly typed known key still does. Numbers and flags are strict: a JSON
string such as "5" or "true" is rejected rather than converted.

See https://github.com/reddit-archive/reddit/wiki/JSON
"""

from collections.abc import Mapping
from datetime import datetime, timezone
from enum import Enum
from typing import Annotated, Any, Dict, Iterator, Literal, Optional, Tuple, Union

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    PlainSerializer,
    StrictBool,
    StrictFloat,
    StrictInt,
)

from ..config.settings import DEFAULT_BASE_URL


class FrozenJson(Mapping):
    """
    Read-only, hashable view of a JSON object.

    Nested objects become FrozenJson and arrays become tuples.
    """

    def __init__(self, data: Optional[Mapping] = None):
        self._data = {key: _freeze(value) for key, value in (data or {}).items()}

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __hash__(self) -> int:
        return hash(frozenset(self._data.items()))

    def __repr__(self) -> str:
        return f"FrozenJson({self._data!r})"


def _freeze(value: Any) -> Any:
    if isinstance(value, FrozenJson):
        return value
    if isinstance(value, Mapping):
        return FrozenJson(value)
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: _thaw(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [_thaw(item) for item in value]
    return value


# Free-form JSON object (media metadata) stored immutably, dumped as a dict.
JsonObject = Annotated[
    Dict[str, Any],
    AfterValidator(_freeze),
    PlainSerializer(_thaw),
]


class PostHint(str, Enum):
    """Reddit's guess at what a post contains."""

    IMAGE = "image"
    LINK = "link"
    HOSTED_VIDEO = "hosted:video"
    RICH_VIDEO = "rich:video"
    SELF = "self"
    GALLERY = "gallery"


class Post(BaseModel):
    """
    A single submission (kind "t3") within a subreddit listing.

    Only the fields every listing carries are required. The rest default to
    the value Reddit itself reports when a field does not apply: None for
    nullable fields, False for flags, 0 for counters and "" for selftext.
    """

    # Required
    id: str = Field(..., description="Base36 identifier, e.g. '8xwlg'")
    title: str = Field(..., description="Title of the post; may contain newlines")
    author: str = Field(..., description="Account name of the poster, '[deleted]' if removed")
    score: StrictInt = Field(..., description="Net score (fuzzed upvotes minus downvotes)")
    created_utc: StrictFloat = Field(..., description="Creation time in UTC epoch seconds")
    permalink: str = Field(..., description="Relative URL of the post's comment page")
    url: str = Field(..., description="Link target; the permalink for self posts")

    # Identity and subreddit
    name: Optional[str] = Field(None, description="Fullname, e.g. 't3_8xwlg'")
    subreddit: Optional[str] = None
    subreddit_id: Optional[str] = None
    subreddit_name_prefixed: Optional[str] = None
    subreddit_subscribers: Optional[StrictInt] = None
    subreddit_type: Optional[str] = None
    author_fullname: Optional[str] = None

    # Content
    selftext: str = ""
    selftext_html: Optional[str] = None
    domain: Optional[str] = None
    post_hint: Optional[PostHint] = None
    thumbnail: Optional[str] = None
    thumbnail_height: Optional[StrictInt] = None
    thumbnail_width: Optional[StrictInt] = None
    media: Optional[JsonObject] = None
    media_embed: JsonObject = Field(default_factory=FrozenJson)
    crosspost_parent_list: Optional[Tuple["Post", ...]] = None
    suggested_sort: Optional[str] = None

    # Flags
    is_self: StrictBool = False
    is_video: StrictBool = False
    is_original_content: StrictBool = False
    over_18: StrictBool = False
    spoiler: StrictBool = False
    locked: StrictBool = False
    stickied: StrictBool = False
    pinned: StrictBool = False
    archived: StrictBool = False
    hidden: StrictBool = False
    saved: StrictBool = False
    clicked: StrictBool = False
    visited: StrictBool = False
    quarantine: StrictBool = False

    # Votes and activity
    num_comments: StrictInt = 0
    num_crossposts: StrictInt = 0
    ups: StrictInt = 0
    downs: StrictInt = 0
    upvote_ratio: Optional[StrictFloat] = None
    likes: Optional[StrictBool] = None
    gilded: StrictInt = 0
    # False when never edited, otherwise the edit time in epoch seconds
    edited: Union[StrictBool, StrictFloat] = False
    created: Optional[StrictFloat] = None
    distinguished: Optional[str] = None

    # Flair
    link_flair_text: Optional[str] = None
    link_flair_css_class: Optional[str] = None
    author_flair_text: Optional[str] = None
    author_flair_css_class: Optional[str] = None

    model_config = ConfigDict(frozen=True, extra="ignore")

    @property
    def created_at(self) -> datetime:
        """Creation time as an aware UTC datetime."""
        return datetime.fromtimestamp(self.created_utc, tz=timezone.utc)

    @property
    def fullname(self) -> str:
        return self.name or f"t3_{self.id}"

    @property
    def is_crosspost(self) -> bool:
        return bool(self.crosspost_parent_list)

    def absolute_permalink(self, base_url: str = DEFAULT_BASE_URL) -> str:
        """Join the relative permalink onto ``base_url``."""
        if self.permalink.startswith(("http://", "https://")):
            return self.permalink
        return f"{base_url.rstrip('/')}{self.permalink}"


class PostThing(BaseModel):
    """Envelope around a single post inside a listing."""

    kind: Literal["t3"]
    data: Post

    model_config = ConfigDict(frozen=True)


class Listing(BaseModel):
    """
    Page of things returned by a listing endpoint.

    ``before`` and ``after`` are the fullnames bounding this page, None when
    there is no previous or next page.
    """

    before: Optional[str] = None
    after: Optional[str] = None
    dist: Optional[StrictInt] = None
    modhash: Optional[str] = None
    children: Tuple[PostThing, ...]

    model_config = ConfigDict(frozen=True)


class ListingThing(BaseModel):
    """Top-level envelope of a subreddit listing response."""

    kind: Literal["Listing"]
    data: Listing

    model_config = ConfigDict(frozen=True)


class Subreddit(BaseModel):
    """Posts fetched from one subreddit, in the order the API returned them."""

    name: str
    posts: Tuple[Post, ...] = ()
    before: Optional[str] = None
    after: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_listing(cls, name: str, listing: Listing, limit: int) -> "Subreddit":
        """Build a result holding at most ``limit`` posts from ``listing``."""
        posts = tuple(child.data for child in listing.children[:limit])
        return cls(name=name, posts=posts, before=listing.before, after=listing.after)
