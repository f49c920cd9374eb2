"""
Top-level Reddit client.

``Reddit`` wires one ClientConfig, one RedditClientManager and one rate
limiter into the per-resource services, so every service shares the same
credentials and request budget.
"""

from typing import Any, Dict, Optional

from snoowire.reddit.client import RedditClientManager
from snoowire.reddit.config import ClientConfig
from snoowire.reddit.rate_limiter import TokenBucketRateLimiter
from snoowire.services import (
    CommentService,
    ModerationService,
    MultiService,
    PostService,
    SearchService,
    SubredditService,
    UserService,
)
from snoowire.utils.logger import get_logger

logger = get_logger(__name__)


class Reddit:
    """
    Async Reddit API client.

    Attributes:
        config: Settings the client was built from
        manager: praw-backed transport
        rate_limiter: Limiter shared by all services
        posts, comments, subreddits, users, moderation, search, multis:
            The resource services

    Example:
        >>> reddit = Reddit()  # REDDIT_* environment variables
        >>> listing = await reddit.subreddits.hot("python")
        >>> for post in listing.posts:
        ...     print(post.score, post.title)
        >>> page = await reddit.posts.get(listing.posts[0].id)
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        manager: Optional[RedditClientManager] = None,
        rate_limiter: Optional[TokenBucketRateLimiter] = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            config: Client settings; loaded from the environment when omitted
            manager: Transport to use instead of one built from ``config``
            rate_limiter: Limiter to use instead of one built from ``config``

        Raises:
            AuthenticationError: If no config is given and the REDDIT_*
                credentials are not set
        """
        if config is None:
            config = manager.config if manager is not None else ClientConfig.from_env()

        self.config = config
        self.manager = manager or RedditClientManager(config)
        self.rate_limiter = rate_limiter or TokenBucketRateLimiter(
            max_calls=config.rate_limit_calls,
            period_seconds=config.rate_limit_period,
        )

        shared = (self.manager, self.rate_limiter, config.iterative_decode)
        self.posts = PostService(*shared)
        self.comments = CommentService(*shared)
        self.subreddits = SubredditService(*shared)
        self.users = UserService(*shared)
        self.moderation = ModerationService(*shared)
        self.search = SearchService(*shared)
        self.multis = MultiService(*shared)

        logger.debug(
            "reddit_client_created",
            read_only=not config.has_user_credentials,
            iterative_decode=config.iterative_decode,
        )

    def get_rate_limit_stats(self) -> Dict[str, Any]:
        return self.rate_limiter.get_stats()
