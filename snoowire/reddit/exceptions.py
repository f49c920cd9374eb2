"""
Exception hierarchy of the SDK.

Two families share one base class, so ``except RedditAPIError`` catches
everything the SDK raises on purpose:

- transport errors, mapped from the HTTP outcome of a request
- decode errors, raised when a response body has the wrong shape

Each error knows whether retrying the same call can help (``retryable``)
and renders its context as a flat dict for structured logs (``to_dict``).
"""

from typing import Any, Dict, Optional


class RedditAPIError(Exception):
    """
    Base class of every SDK error.

    Attributes:
        message: Human readable description
        status_code: HTTP status the error stands for, if any
        retryable: Whether the same request may succeed later
    """

    retryable = False

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Context for log lines.

        Example:
            >>> NotFoundError("post", "abc").to_dict()["resource_id"]
            'abc'
        """
        return {
            "error_type": type(self).__name__,
            "status_code": self.status_code,
            "retryable": self.retryable,
        }


class AuthenticationError(RedditAPIError):
    """
    The credentials were missing or Reddit rejected them (401).

    Example:
        >>> raise AuthenticationError("REDDIT_CLIENT_ID is required")
    """

    def __init__(self, message: str = "Reddit authentication failed") -> None:
        super().__init__(message, status_code=401)


class RateLimitError(RedditAPIError):
    """
    Reddit answered 429 even though the local limiter let the call through.

    Attributes:
        retry_after: Seconds Reddit asked the client to back off
    """

    retryable = True

    def __init__(
        self,
        retry_after: int,
        message: str = "Reddit API rate limit exceeded",
    ) -> None:
        self.retry_after = retry_after
        super().__init__(message, status_code=429)

    def __str__(self) -> str:
        return f"{self.message} (retry after {self.retry_after}s)"

    def to_dict(self) -> Dict[str, Any]:
        return {**super().to_dict(), "retry_after": self.retry_after}


class NotFoundError(RedditAPIError):
    """
    The post, comment, subreddit, user or multireddit does not exist (404).

    Banned subreddits and suspended accounts end up here too.

    Example:
        >>> str(NotFoundError("subreddit", "nosuchsub"))
        "Subreddit 'nosuchsub' not found"
    """

    def __init__(
        self,
        resource_type: str,
        resource_id: str,
        message: Optional[str] = None,
    ) -> None:
        self.resource_type = resource_type
        self.resource_id = resource_id
        super().__init__(
            message or f"{resource_type.capitalize()} '{resource_id}' not found",
            status_code=404,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            **super().to_dict(),
            "resource_type": self.resource_type,
            "resource_id": self.resource_id,
        }


class ForbiddenError(RedditAPIError):
    """
    The client may not see this resource (403).

    Private and quarantined subreddits, the moderation log without
    moderator rights, and user-only endpoints on a read-only client.
    """

    def __init__(self, message: str = "Access to Reddit resource forbidden") -> None:
        super().__init__(message, status_code=403)


class ServerError(RedditAPIError):
    """Reddit failed with a 5xx status. Usually transient."""

    retryable = True

    def __init__(self, message: str, status_code: int = 500) -> None:
        super().__init__(message, status_code=status_code)


class InvalidParameterError(RedditAPIError):
    """
    An argument was rejected before any request was sent.

    Attributes:
        field: Name of the offending argument, prefixed to the message

    Example:
        >>> str(InvalidParameterError("must not be empty", field="ids"))
        'ids: must not be empty'
    """

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        self.field = field
        super().__init__(f"{field}: {message}" if field else message, status_code=422)

    def to_dict(self) -> Dict[str, Any]:
        return {**super().to_dict(), "field": self.field}


class RequestTimeoutError(RedditAPIError):
    """The request did not complete within the configured timeout."""

    retryable = True

    def __init__(
        self,
        message: str = "Reddit API request timed out",
        timeout_seconds: int = 30,
    ) -> None:
        self.timeout_seconds = timeout_seconds
        super().__init__(f"{message} ({timeout_seconds}s)", status_code=408)

    def to_dict(self) -> Dict[str, Any]:
        return {**super().to_dict(), "timeout_seconds": self.timeout_seconds}


class DecodeError(RedditAPIError):
    """
    A response body could not be decoded.

    Raised for bodies that are not JSON and for root objects whose data
    does not fit the expected model.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)


class MalformedResponseError(DecodeError):
    """
    A response envelope has the wrong structure.

    Listing children are decoded forgivingly, but this error is never
    swallowed: a replies value that is neither "" nor a Listing, a post
    page that is not two Listings, or a first Listing without exactly one
    post fails the whole decode.

    Example:
        >>> raise MalformedResponseError("malformed response: expected exactly one post")
    """
