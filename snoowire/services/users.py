"""User endpoints: account about page and activity listings."""

from typing import Optional

from snoowire.decoder import decode_root
from snoowire.models import Account, Kind, Listing
from snoowire.services.base import USERNAME_PATTERN, BaseService, check_name
from snoowire.services.options import ListPostOptions


class UserService(BaseService):
    """Service for Reddit accounts."""

    async def get(self, username: str) -> Account:
        """
        Get a user's about page.

        Raises:
            NotFoundError: If the account does not exist or is suspended
        """
        username = check_name(username, "username", USERNAME_PATTERN)
        return await self._fetch(
            f"/user/{username}/about",
            lambda body: decode_root(body, Kind.ACCOUNT),
            resource_type="user",
        )

    async def _activity(self, username: str, where: str, opts: Optional[ListPostOptions]) -> Listing:
        username = check_name(username, "username", USERNAME_PATTERN)
        return await self._listing(f"/user/{username}/{where}", opts, resource_type="user")

    async def overview(self, username: str, opts: Optional[ListPostOptions] = None) -> Listing:
        """Posts and comments of a user, newest first; both buckets are filled."""
        return await self._activity(username, "overview", opts)

    async def posts(self, username: str, opts: Optional[ListPostOptions] = None) -> Listing:
        return await self._activity(username, "submitted", opts)

    async def comments(self, username: str, opts: Optional[ListPostOptions] = None) -> Listing:
        return await self._activity(username, "comments", opts)
