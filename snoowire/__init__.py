"""
snoowire: async Reddit API SDK with a typed Thing/Listing decoder.

Example:
    >>> from snoowire import Reddit, ListPostOptions
    >>> reddit = Reddit()
    >>> listing = await reddit.subreddits.top("python", ListPostOptions(time_filter="week"))
    >>> listing.posts[0].title
"""

__version__ = "0.1.0"

from snoowire.decoder import (
    decode_listing,
    decode_listing_iterative,
    decode_post_and_comments,
    decode_replies,
    decode_root,
    decode_roots,
    decode_thing,
)
from snoowire.models import (
    Account,
    Comment,
    Kind,
    Listing,
    ModAction,
    More,
    Multi,
    Post,
    PostAndComments,
    Replies,
    Subreddit,
    ThingBucket,
)
from snoowire.reddit import (
    AuthenticationError,
    ClientConfig,
    DecodeError,
    ForbiddenError,
    InvalidParameterError,
    MalformedResponseError,
    NotFoundError,
    RateLimitError,
    RedditAPIError,
    RequestTimeoutError,
    ServerError,
)
from snoowire.services import (
    DuplicateOptions,
    ListOptions,
    ListPostOptions,
    SearchOptions,
)
from snoowire.client import Reddit
from snoowire.utils.logger import setup_logging

__all__ = [
    "Reddit",
    "ClientConfig",
    "setup_logging",
    # Decoder
    "decode_listing",
    "decode_listing_iterative",
    "decode_post_and_comments",
    "decode_replies",
    "decode_root",
    "decode_roots",
    "decode_thing",
    # Models
    "Account",
    "Comment",
    "Kind",
    "Listing",
    "ModAction",
    "More",
    "Multi",
    "Post",
    "PostAndComments",
    "Replies",
    "Subreddit",
    "ThingBucket",
    # Options
    "DuplicateOptions",
    "ListOptions",
    "ListPostOptions",
    "SearchOptions",
    # Exceptions
    "AuthenticationError",
    "DecodeError",
    "ForbiddenError",
    "InvalidParameterError",
    "MalformedResponseError",
    "NotFoundError",
    "RateLimitError",
    "RedditAPIError",
    "RequestTimeoutError",
    "ServerError",
]
