"""Post endpoints: a post with its comment tree, lookups by full ID, duplicates."""

import re
from typing import Literal, Optional, get_args

from snoowire.decoder import decode_listing_pair, decode_post_and_comments
from snoowire.models import Listing, PostAndComments
from snoowire.reddit.exceptions import InvalidParameterError
from snoowire.services.base import BaseService, check_id
from snoowire.services.options import FULLNAME_PATTERN, DuplicateOptions
from snoowire.utils.logger import get_logger

logger = get_logger(__name__)

CommentSort = Literal["confidence", "top", "new", "controversial", "old", "random", "qa", "live"]

# /api/info accepts at most 100 IDs per call
MAX_INFO_IDS = 100

_FULLNAME = re.compile(FULLNAME_PATTERN)


def check_comment_sort(sort: Optional[str]) -> Optional[str]:
    if sort is not None and sort not in get_args(CommentSort):
        raise InvalidParameterError(
            f"must be one of {', '.join(get_args(CommentSort))}", field="sort"
        )
    return sort


class PostService(BaseService):
    """
    Service for reading posts.

    Example:
        >>> page = await reddit.posts.get("abc123", sort="top")
        >>> page.post.title, len(page.comments)
    """

    async def get(
        self,
        post_id: str,
        sort: Optional[CommentSort] = None,
        limit: Optional[int] = None,
    ) -> PostAndComments:
        """
        Get a post and its comment tree.

        Args:
            post_id: Base36 post ID, with or without the ``t3_`` prefix
            sort: Comment sort order
            limit: Maximum number of comments to return

        Returns:
            PostAndComments; replies are nested inside each comment and the
            top-level More lists comments left out of the payload

        Raises:
            InvalidParameterError: If an argument is invalid
            NotFoundError: If the post does not exist
            MalformedResponseError: If the response is not a post page
        """
        post_id = check_id(post_id, "post_id", "t3_")
        check_comment_sort(sort)
        if limit is not None and limit < 1:
            raise InvalidParameterError("must be positive", field="limit")

        page = await self._fetch(
            f"/comments/{post_id}",
            lambda body: decode_post_and_comments(body, iterative=self.iterative),
            params={k: v for k, v in (("sort", sort), ("limit", limit)) if v is not None} or None,
            resource_type="post",
        )

        logger.info(
            "post_fetched",
            post_id=post_id,
            comments=len(page.comments),
            has_more=page.has_more(),
        )
        return page

    async def get_by_ids(self, *full_ids: str) -> Listing:
        """
        Get things by their full IDs (``/api/info``).

        Posts, comments and subreddits may be mixed; each lands in its own
        bucket of the returned Listing.

        Raises:
            InvalidParameterError: If no IDs, more than 100 IDs or a
                malformed ID is given
        """
        if not full_ids:
            raise InvalidParameterError("must not be empty", field="ids")
        if len(full_ids) > MAX_INFO_IDS:
            raise InvalidParameterError(
                f"at most {MAX_INFO_IDS} IDs per request", field="ids"
            )
        for full_id in full_ids:
            if not _FULLNAME.match(full_id):
                raise InvalidParameterError(f"invalid full ID {full_id!r}", field="ids")

        return await self._listing("/api/info", id=",".join(full_ids))

    async def duplicates(
        self,
        post_id: str,
        opts: Optional[DuplicateOptions] = None,
    ) -> Listing:
        """
        Get other submissions of the same URL as a post.

        The endpoint answers with two Listings, the post itself and its
        duplicates; the duplicates Listing is returned.
        """
        post_id = check_id(post_id, "post_id", "t3_")
        params = (opts.to_params() if opts is not None else {}) or None

        _, duplicates = await self._fetch(
            f"/duplicates/{post_id}",
            lambda body: decode_listing_pair(body, iterative=self.iterative),
            params=params,
            resource_type="post",
        )
        return duplicates
