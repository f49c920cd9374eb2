"""
Shared request plumbing for the service objects.

Every service call follows the same steps: wait for the rate limiter, run
the blocking praw request in a worker thread, decode the body on the
event loop, and log the outcome with its duration.
"""

import asyncio
import re
import time
from typing import Any, Callable, Dict, Optional, TypeVar

from snoowire.decoder import decode_listing, decode_listing_iterative
from snoowire.models import Listing
from snoowire.reddit.client import RedditClientManager
from snoowire.reddit.exceptions import DecodeError, InvalidParameterError, RedditAPIError
from snoowire.reddit.rate_limiter import TokenBucketRateLimiter
from snoowire.services.options import ListOptions
from snoowire.utils.logger import get_logger, log_request

logger = get_logger(__name__)

T = TypeVar("T")

SUBREDDIT_PATTERN = re.compile(r"^[A-Za-z0-9_]+(\+[A-Za-z0-9_]+)*$")
USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")
ID_PATTERN = re.compile(r"^[0-9a-z]+$")


def check_name(value: str, field: str, pattern: "re.Pattern[str]" = SUBREDDIT_PATTERN) -> str:
    """
    Validate a path segment before it is put into a URL.

    Raises:
        InvalidParameterError: If ``value`` is empty or does not match
    """
    if not value:
        raise InvalidParameterError("must not be empty", field=field)
    if not pattern.match(value):
        raise InvalidParameterError(f"invalid value {value!r}", field=field)
    return value


def check_id(value: str, field: str, prefix: str) -> str:
    """
    Validate a base36 thing ID, accepting it with or without its kind prefix.

    Example:
        >>> check_id("t3_abc123", "post_id", "t3_")
        'abc123'
    """
    if value.startswith(prefix):
        value = value[len(prefix):]
    return check_name(value, field, ID_PATTERN)


class BaseService:
    """
    Base class for the per-resource services.

    Attributes:
        manager: Transport that performs the HTTP requests
        rate_limiter: Limiter shared by every service of one client
        iterative: Decode comment trees with the explicit-stack decoder
    """

    def __init__(
        self,
        manager: RedditClientManager,
        rate_limiter: TokenBucketRateLimiter,
        iterative: bool = False,
    ) -> None:
        self.manager = manager
        self.rate_limiter = rate_limiter
        self.iterative = iterative

    async def _fetch(
        self,
        path: str,
        decode: Callable[[Any], T],
        params: Optional[Dict[str, Any]] = None,
        method: str = "GET",
        resource_type: str = "resource",
    ) -> T:
        """
        Request ``path`` and decode the body.

        Args:
            path: API path
            decode: Decoder applied to the parsed JSON body
            params: Query string parameters
            method: HTTP method
            resource_type: What ``path`` names, used in NotFoundError

        Returns:
            The decoded value

        Raises:
            RedditAPIError: Any transport or decode error
            DecodeError: If the body nests deeper than the recursive
                decoder can go
        """
        await self.rate_limiter.acquire()

        logger.debug(
            "reddit_api_call",
            path=path,
            rate_limit_remaining=self.rate_limiter.get_remaining(),
        )

        start = time.perf_counter()
        try:
            body = await asyncio.to_thread(
                self.manager.request,
                method,
                path,
                params=params,
                resource_type=resource_type,
            )
            try:
                result = decode(body)
            except RecursionError as e:
                raise DecodeError(
                    "comment tree is too deep for the recursive decoder; "
                    "enable iterative_decode"
                ) from e
        except RedditAPIError as e:
            log_request(
                method=method,
                path=path,
                duration_ms=(time.perf_counter() - start) * 1000,
                error=str(e),
                **e.to_dict(),
            )
            raise

        log_request(
            method=method,
            path=path,
            duration_ms=(time.perf_counter() - start) * 1000,
        )
        return result

    def decode_listing(self, raw: Any) -> Listing:
        if self.iterative:
            return decode_listing_iterative(raw)
        return decode_listing(raw)

    async def _listing(
        self,
        path: str,
        opts: Optional[ListOptions] = None,
        resource_type: str = "resource",
        **params: Any,
    ) -> Listing:
        query = opts.to_params() if opts is not None else {}
        query.update({k: v for k, v in params.items() if v is not None})
        return await self._fetch(
            path,
            self.decode_listing,
            params=query or None,
            resource_type=resource_type,
        )
