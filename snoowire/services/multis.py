"""Multireddit endpoints."""

import re
from typing import List

from snoowire.decoder import decode_root, decode_roots
from snoowire.models import Kind, Multi
from snoowire.reddit.exceptions import InvalidParameterError
from snoowire.services.base import BaseService

# user/{username}/m/{name}
MULTI_PATH_PATTERN = re.compile(r"^user/[A-Za-z0-9_-]+/m/[A-Za-z0-9_]+$")


class MultiService(BaseService):
    """Service for multireddits."""

    async def get(self, path: str) -> Multi:
        """
        Get a multireddit.

        Args:
            path: Multireddit path, e.g. ``"/user/spez/m/tech"``

        Raises:
            InvalidParameterError: If ``path`` is not a multireddit path
            NotFoundError: If the multireddit does not exist
        """
        path = path.strip("/")
        if not MULTI_PATH_PATTERN.match(path):
            raise InvalidParameterError(f"invalid multireddit path {path!r}", field="path")

        return await self._fetch(
            f"/api/multi/{path}",
            lambda body: decode_root(body, Kind.MULTI),
            resource_type="multireddit",
        )

    async def mine(self) -> List[Multi]:
        """Get the multireddits of the authenticated user. Needs a user account."""
        return await self._fetch(
            "/api/multi/mine",
            lambda body: decode_roots(body, Kind.MULTI),
        )
