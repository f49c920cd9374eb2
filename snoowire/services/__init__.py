"""
Async service objects for the Reddit API.

Each service groups the endpoints of one resource. All of them share one
transport and one rate limiter, which the ``snoowire.Reddit`` facade wires
together.
"""

from snoowire.services.options import (
    DuplicateOptions,
    ListOptions,
    ListPostOptions,
    SearchOptions,
)
from snoowire.services.base import BaseService
from snoowire.services.comments import CommentService
from snoowire.services.moderation import ModerationService
from snoowire.services.multis import MultiService
from snoowire.services.posts import PostService
from snoowire.services.search import SearchService
from snoowire.services.subreddits import SubredditService
from snoowire.services.users import UserService

__all__ = [
    # Options
    "DuplicateOptions",
    "ListOptions",
    "ListPostOptions",
    "SearchOptions",
    # Services
    "BaseService",
    "CommentService",
    "ModerationService",
    "MultiService",
    "PostService",
    "SearchService",
    "SubredditService",
    "UserService",
]
