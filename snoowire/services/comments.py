"""Comment thread endpoint."""

from typing import Optional

from snoowire.decoder import decode_post_and_comments
from snoowire.models import PostAndComments
from snoowire.reddit.exceptions import InvalidParameterError
from snoowire.services.base import BaseService, check_id

# Reddit accepts 0-8 parent comments of context
MAX_CONTEXT = 8


class CommentService(BaseService):
    """Service for reading comments."""

    async def get_thread(
        self,
        post_id: str,
        comment_id: str,
        context: Optional[int] = None,
    ) -> PostAndComments:
        """
        Get a single comment thread of a post.

        Args:
            post_id: Base36 post ID, with or without ``t3_``
            comment_id: Base36 comment ID, with or without ``t1_``
            context: Number of parent comments to include (0-8)

        Returns:
            PostAndComments whose comments hold the thread rooted at the
            comment (or at its oldest requested parent)
        """
        post_id = check_id(post_id, "post_id", "t3_")
        comment_id = check_id(comment_id, "comment_id", "t1_")
        if context is not None and not 0 <= context <= MAX_CONTEXT:
            raise InvalidParameterError(
                f"must be between 0 and {MAX_CONTEXT}", field="context"
            )

        return await self._fetch(
            f"/comments/{post_id}/_/{comment_id}",
            lambda body: decode_post_and_comments(body, iterative=self.iterative),
            params={"context": context} if context is not None else None,
            resource_type="comment",
        )
