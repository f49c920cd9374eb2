"""
Reddit API client manager using PRAW.

RedditClientManager owns the ``praw.Reddit`` instance built from a
ClientConfig and is the single place where praw/prawcore exceptions are
translated into the SDK's exception hierarchy. Requests go through
``praw.Reddit.request``, which returns parsed JSON rather than praw
objects, so every body is handed to the snoowire decoders untouched.
"""

import time
from typing import Any, Dict, Optional

import praw
import prawcore
import requests
from praw.exceptions import PRAWException, RedditAPIException

from snoowire.reddit.config import ClientConfig
from snoowire.reddit.exceptions import (
    AuthenticationError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    RedditAPIError,
    RequestTimeoutError,
    ServerError,
)
from snoowire.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_RETRY_AFTER = 60


def _retry_after(exc: prawcore.TooManyRequests) -> int:
    value = getattr(exc, "retry_after", None)
    try:
        return max(0, int(float(value)))
    except (TypeError, ValueError):
        return DEFAULT_RETRY_AFTER


class RedditClientManager:
    """
    Manager for the Reddit API client (PRAW).

    The praw client is created lazily on first use, so constructing a
    manager never touches the network. Without username and password the
    client runs read-only (application-only OAuth).

    Attributes:
        config: Settings the client is built from

    Example:
        >>> manager = RedditClientManager(ClientConfig.from_env())
        >>> body = manager.request("GET", "/r/python/hot", params={"limit": 10})
        >>> body["kind"]
        'Listing'
    """

    def __init__(self, config: Optional[ClientConfig] = None) -> None:
        """
        Initialize RedditClientManager.

        Args:
            config: Client settings. Loaded from the environment when omitted.

        Raises:
            AuthenticationError: If no config is given and the REDDIT_*
                credentials are not set
        """
        self.config = config or ClientConfig.from_env()
        self._client: Optional[praw.Reddit] = None

    def _initialize_client(self) -> None:
        """
        Initialize the PRAW Reddit client from the configuration.

        Raises:
            RedditAPIError: If praw rejects the configuration
        """
        config = self.config

        logger.info(
            "reddit_client_initializing",
            user_agent=config.user_agent,
            client_id=f"{config.client_id[:8]}...",
            read_only=not config.has_user_credentials,
        )

        try:
            client = praw.Reddit(
                client_id=config.client_id,
                client_secret=config.client_secret.get_secret_value(),
                user_agent=config.user_agent,
                username=config.username,
                password=(
                    config.password.get_secret_value() if config.password else None
                ),
            )
        except PRAWException as e:
            logger.error("reddit_client_init_failed", error=str(e))
            raise RedditAPIError(f"Reddit client initialization failed: {e}") from e

        client.config.timeout = config.timeout
        if not config.has_user_credentials:
            client.read_only = True

        self._client = client

        logger.info("reddit_client_initialized", read_only=client.read_only)

    def get_client(self) -> praw.Reddit:
        """
        Get the Reddit API client instance, creating it on first call.

        Returns:
            praw.Reddit: Configured Reddit API client

        Raises:
            RedditAPIError: If the client cannot be created
        """
        if self._client is None:
            self._initialize_client()

        if self._client is None:
            raise RedditAPIError("Reddit client initialization failed")

        return self._client

    def reset_client(self) -> None:
        """
        Drop the Reddit client instance.

        The next request builds a fresh client. Useful after credential
        rotation or an authentication error.
        """
        logger.info("reddit_client_reset")
        self._client = None

    def is_initialized(self) -> bool:
        return self._client is not None

    @property
    def client(self) -> praw.Reddit:
        return self.get_client()

    def request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        data: Optional[Dict[str, Any]] = None,
        resource_type: str = "resource",
    ) -> Any:
        """
        Send a request to the Reddit API and return the parsed JSON body.

        This call blocks; services run it in a worker thread.

        Args:
            method: HTTP method ("GET", "POST", ...)
            path: API path, e.g. "/r/python/hot"
            params: Query string parameters
            data: Form body for POST requests
            resource_type: What ``path`` names, used in NotFoundError

        Returns:
            Parsed JSON: a dict for Listings and root objects, a list for
            post-and-comments pages

        Raises:
            AuthenticationError: 401, or the OAuth token could not be obtained
            ForbiddenError: 403
            NotFoundError: 404
            RateLimitError: 429
            ServerError: 5xx
            RequestTimeoutError: The request timed out
            RedditAPIError: Any other transport failure
        """
        reddit = self.get_client()
        start = time.perf_counter()

        try:
            return reddit.request(method=method, path=path, params=params, data=data)

        except prawcore.InvalidToken as e:
            raise AuthenticationError("Invalid Reddit OAuth token") from e

        except prawcore.OAuthException as e:
            raise AuthenticationError(f"Reddit OAuth failed: {e}") from e

        except prawcore.Forbidden as e:
            raise ForbiddenError(f"Access to {path} forbidden") from e

        except prawcore.NotFound as e:
            raise NotFoundError(resource_type, path) from e

        except prawcore.TooManyRequests as e:
            retry_after = _retry_after(e)
            logger.warning("reddit_rate_limited", path=path, retry_after=retry_after)
            raise RateLimitError(retry_after=retry_after) from e

        except prawcore.ServerError as e:
            raise ServerError(
                f"Reddit API unavailable: {path}",
                status_code=e.response.status_code,
            ) from e

        except prawcore.ResponseException as e:
            status = e.response.status_code
            if status == 401:
                raise AuthenticationError(f"Authentication failed: {status}") from e
            raise RedditAPIError(f"Reddit API returned {status} for {path}", status_code=status) from e

        except prawcore.RequestException as e:
            if isinstance(e.original_exception, requests.exceptions.Timeout):
                raise RequestTimeoutError(timeout_seconds=self.config.timeout) from e
            raise RedditAPIError(f"Reddit API request failed: {e}") from e

        except RedditAPIException as e:
            raise RedditAPIError(f"Reddit API error: {e}") from e

        except PRAWException as e:
            raise RedditAPIError(f"PRAW error: {e}") from e

        finally:
            logger.debug(
                "reddit_request",
                method=method,
                path=path,
                elapsed_ms=round((time.perf_counter() - start) * 1000, 2),
            )
