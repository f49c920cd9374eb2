"""Moderation log endpoint."""

from typing import Optional

from snoowire.models import Listing
from snoowire.reddit.exceptions import InvalidParameterError
from snoowire.services.base import BaseService, check_name
from snoowire.services.options import ListOptions


class ModerationService(BaseService):
    """Service for moderator-only endpoints. Needs a moderator account."""

    async def actions(
        self,
        subreddit: str,
        action_type: Optional[str] = None,
        opts: Optional[ListOptions] = None,
    ) -> Listing:
        """
        Get the moderation log of a subreddit.

        Args:
            subreddit: Subreddit name, or ``"mod"`` for every moderated one
            action_type: Only return this action type (e.g. "removelink",
                "banuser"); all types when None
            opts: Pagination options

        Returns:
            Listing whose ``mod_actions`` holds the log entries

        Raises:
            ForbiddenError: If the account does not moderate the subreddit
        """
        subreddit = check_name(subreddit, "subreddit")
        if action_type is not None and not action_type.isidentifier():
            raise InvalidParameterError(
                f"invalid action type {action_type!r}", field="action_type"
            )

        return await self._listing(
            f"/r/{subreddit}/about/log",
            opts,
            resource_type="subreddit",
            type=action_type,
        )
