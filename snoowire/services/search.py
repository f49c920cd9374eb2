"""Search endpoints for posts and subreddits."""

from typing import Optional

from snoowire.models import Listing
from snoowire.reddit.exceptions import InvalidParameterError
from snoowire.services.base import BaseService, check_name
from snoowire.services.options import ListOptions, SearchOptions

# Reddit rejects longer queries
MAX_QUERY_LENGTH = 512


def check_query(query: str) -> str:
    query = query.strip()
    if not query:
        raise InvalidParameterError("must not be empty", field="query")
    if len(query) > MAX_QUERY_LENGTH:
        raise InvalidParameterError(
            f"must be at most {MAX_QUERY_LENGTH} characters", field="query"
        )
    return query


class SearchService(BaseService):
    """
    Service for Reddit search.

    Example:
        >>> listing = await reddit.search.posts("asyncio", subreddit="python")
    """

    async def posts(
        self,
        query: str,
        subreddit: Optional[str] = None,
        opts: Optional[SearchOptions] = None,
    ) -> Listing:
        """
        Search posts, site-wide or restricted to one subreddit.

        Args:
            query: Search query (1-512 characters)
            subreddit: Restrict the search to this subreddit
            opts: Sort, time range and pagination

        Returns:
            Listing whose ``posts`` holds the matches
        """
        query = check_query(query)

        if subreddit is None:
            return await self._listing("/search", opts, q=query, type="link")

        subreddit = check_name(subreddit, "subreddit")
        return await self._listing(
            f"/r/{subreddit}/search",
            opts,
            resource_type="subreddit",
            q=query,
            restrict_sr="true",
            type="link",
        )

    async def subreddits(self, query: str, opts: Optional[ListOptions] = None) -> Listing:
        """Search subreddits by name and description."""
        return await self._listing("/subreddits/search", opts, q=check_query(query))
