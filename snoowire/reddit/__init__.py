"""
Reddit API transport layer using PRAW.

This package provides:
- Custom exception hierarchy for error handling
- ClientConfig: settings loaded from REDDIT_* environment variables
- RedditClientManager: PRAW client lifecycle and error translation
- TokenBucketRateLimiter: sliding-window request throttling

Example:
    >>> from snoowire.reddit import ClientConfig, RedditClientManager
    >>> manager = RedditClientManager(ClientConfig.from_env())
    >>> body = manager.request("GET", "/r/python/about")
"""

from snoowire.reddit.exceptions import (
    RedditAPIError,
    AuthenticationError,
    RateLimitError,
    NotFoundError,
    ForbiddenError,
    ServerError,
    InvalidParameterError,
    RequestTimeoutError,
    DecodeError,
    MalformedResponseError,
)
from snoowire.reddit.config import ClientConfig, DEFAULT_USER_AGENT
from snoowire.reddit.client import RedditClientManager
from snoowire.reddit.rate_limiter import TokenBucketRateLimiter

__all__ = [
    # Exceptions
    "RedditAPIError",
    "AuthenticationError",
    "RateLimitError",
    "NotFoundError",
    "ForbiddenError",
    "ServerError",
    "InvalidParameterError",
    "RequestTimeoutError",
    "DecodeError",
    "MalformedResponseError",
    # Configuration
    "ClientConfig",
    "DEFAULT_USER_AGENT",
    # Client management
    "RedditClientManager",
    # Rate limiting
    "TokenBucketRateLimiter",
]
