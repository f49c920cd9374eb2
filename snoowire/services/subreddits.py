"""
Subreddit endpoints.

Listing sorts map onto ``/r/{name}/{sort}``. Several subreddits can be
combined with ``+`` (``"python+golang"``), as on reddit.com.
"""

from typing import Optional

from snoowire.decoder import decode_root
from snoowire.models import Kind, Listing, Subreddit
from snoowire.services.base import BaseService, check_name
from snoowire.services.options import ListOptions, ListPostOptions
from snoowire.utils.logger import get_logger

logger = get_logger(__name__)


class SubredditService(BaseService):
    """
    Service for subreddits and their post listings.

    Example:
        >>> listing = await reddit.subreddits.top("python", ListPostOptions(time_filter="week"))
        >>> [post.title for post in listing.posts]
    """

    async def get(self, name: str) -> Subreddit:
        """
        Get a subreddit's about page.

        Raises:
            NotFoundError: If the subreddit does not exist or is banned
            ForbiddenError: If the subreddit is private
        """
        name = check_name(name, "subreddit")
        return await self._fetch(
            f"/r/{name}/about",
            lambda body: decode_root(body, Kind.SUBREDDIT),
            resource_type="subreddit",
        )

    async def _posts(self, name: str, sort: str, opts: Optional[ListOptions]) -> Listing:
        name = check_name(name, "subreddit")

        if isinstance(opts, ListPostOptions) and opts.time_filter and sort not in ("top", "controversial"):
            logger.warning(
                "time_filter_ignored",
                sort=sort,
                time_filter=opts.time_filter,
            )
            opts = opts.model_copy(update={"time_filter": None})

        return await self._listing(f"/r/{name}/{sort}", opts, resource_type="subreddit")

    async def hot(self, name: str, opts: Optional[ListOptions] = None) -> Listing:
        return await self._posts(name, "hot", opts)

    async def new(self, name: str, opts: Optional[ListOptions] = None) -> Listing:
        return await self._posts(name, "new", opts)

    async def rising(self, name: str, opts: Optional[ListOptions] = None) -> Listing:
        return await self._posts(name, "rising", opts)

    async def top(self, name: str, opts: Optional[ListPostOptions] = None) -> Listing:
        """Top posts; Reddit uses the last day when no time filter is given."""
        return await self._posts(name, "top", opts)

    async def controversial(self, name: str, opts: Optional[ListPostOptions] = None) -> Listing:
        return await self._posts(name, "controversial", opts)

    async def popular(self, opts: Optional[ListOptions] = None) -> Listing:
        """Get the most popular subreddits as a Listing of Subreddit things."""
        return await self._listing("/subreddits/popular", opts)
