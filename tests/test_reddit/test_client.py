"""
Unit tests for the Reddit client manager.

Tests client initialization from ClientConfig and the translation of
praw/prawcore exceptions into SDK exceptions.
"""

import os
from unittest.mock import MagicMock, patch

import prawcore
import pytest
import requests
from praw.exceptions import PRAWException

from snoowire.reddit.client import DEFAULT_RETRY_AFTER, RedditClientManager
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


def http_response(status_code, headers=None):
    response = MagicMock()
    response.status_code = status_code
    response.headers = headers or {}
    response.text = ""
    return response


@pytest.fixture
def praw_reddit():
    with patch("snoowire.reddit.client.praw.Reddit") as mock_reddit:
        mock_client = MagicMock()
        mock_client.read_only = False
        mock_reddit.return_value = mock_client
        yield mock_reddit


class TestRedditClientManager:
    """Test client lifecycle."""

    def test_lazy_initialization(self, config, praw_reddit):
        manager = RedditClientManager(config)

        assert not manager.is_initialized()
        praw_reddit.assert_not_called()

        manager.get_client()

        assert manager.is_initialized()
        praw_reddit.assert_called_once()

    def test_praw_arguments(self, config, praw_reddit):
        RedditClientManager(config).get_client()

        call_kwargs = praw_reddit.call_args[1]
        assert call_kwargs["client_id"] == "test_id"
        assert call_kwargs["client_secret"] == "test_secret"
        assert call_kwargs["user_agent"] == config.user_agent
        assert call_kwargs["username"] is None
        assert call_kwargs["password"] is None

    def test_read_only_without_user(self, config, praw_reddit):
        client = RedditClientManager(config).get_client()

        assert client.read_only is True
        assert client.config.timeout == 30

    def test_user_credentials(self, praw_reddit):
        config = ClientConfig(
            client_id="id", client_secret="s", username="snoo", password="hunter2", timeout=5
        )

        client = RedditClientManager(config).get_client()

        call_kwargs = praw_reddit.call_args[1]
        assert call_kwargs["username"] == "snoo"
        assert call_kwargs["password"] == "hunter2"
        assert client.read_only is False
        assert client.config.timeout == 5

    def test_client_reused(self, config, praw_reddit):
        manager = RedditClientManager(config)

        assert manager.client is manager.get_client()
        praw_reddit.assert_called_once()

    def test_reset_client(self, config, praw_reddit):
        manager = RedditClientManager(config)
        manager.get_client()

        manager.reset_client()

        assert not manager.is_initialized()
        manager.get_client()
        assert praw_reddit.call_count == 2

    def test_not_a_singleton(self, config):
        assert RedditClientManager(config) is not RedditClientManager(config)

    @patch.dict(os.environ, {
        "REDDIT_CLIENT_ID": "env_id",
        "REDDIT_CLIENT_SECRET": "env_secret",
    }, clear=True)
    def test_config_from_env(self):
        assert RedditClientManager().config.client_id == "env_id"

    @patch.dict(os.environ, {}, clear=True)
    def test_missing_credentials(self):
        with pytest.raises(AuthenticationError) as exc_info:
            RedditClientManager()

        assert "REDDIT_CLIENT_ID" in str(exc_info.value)

    def test_praw_init_failure(self, config, praw_reddit):
        praw_reddit.side_effect = PRAWException("bad config")

        with pytest.raises(RedditAPIError) as exc_info:
            RedditClientManager(config).get_client()

        assert "initialization failed" in str(exc_info.value)


class TestRequest:
    """Test request() and its error translation."""

    def test_returns_parsed_body(self, config, praw_reddit):
        body = {"kind": "Listing", "data": {"children": []}}
        praw_reddit.return_value.request.return_value = body

        result = RedditClientManager(config).request("GET", "/r/python/hot", params={"limit": 5})

        assert result is body
        praw_reddit.return_value.request.assert_called_once_with(
            method="GET", path="/r/python/hot", params={"limit": 5}, data=None
        )

    @pytest.mark.parametrize(
        "exc,expected,status",
        [
            (prawcore.InvalidToken(http_response(401)), AuthenticationError, 401),
            (prawcore.Forbidden(http_response(403)), ForbiddenError, 403),
            (prawcore.NotFound(http_response(404)), NotFoundError, 404),
            (prawcore.ServerError(http_response(503)), ServerError, 503),
            (prawcore.ResponseException(http_response(401)), AuthenticationError, 401),
            (prawcore.ResponseException(http_response(409)), RedditAPIError, 409),
        ],
    )
    def test_response_errors(self, config, praw_reddit, exc, expected, status):
        praw_reddit.return_value.request.side_effect = exc

        with pytest.raises(expected) as exc_info:
            RedditClientManager(config).request("GET", "/r/python/about")

        assert exc_info.value.status_code == status
        assert exc_info.value.__cause__ is exc

    def test_not_found_resource(self, config, praw_reddit):
        praw_reddit.return_value.request.side_effect = prawcore.NotFound(http_response(404))

        with pytest.raises(NotFoundError) as exc_info:
            RedditClientManager(config).request("GET", "/r/nosuchsub/about", resource_type="subreddit")

        assert exc_info.value.resource_type == "subreddit"
        assert exc_info.value.resource_id == "/r/nosuchsub/about"

    def test_too_many_requests(self, config, praw_reddit):
        praw_reddit.return_value.request.side_effect = prawcore.TooManyRequests(
            http_response(429, headers={"retry-after": "12"})
        )

        with pytest.raises(RateLimitError) as exc_info:
            RedditClientManager(config).request("GET", "/r/python/hot")

        assert exc_info.value.retry_after == 12

    def test_too_many_requests_without_header(self, config, praw_reddit):
        praw_reddit.return_value.request.side_effect = prawcore.TooManyRequests(http_response(429))

        with pytest.raises(RateLimitError) as exc_info:
            RedditClientManager(config).request("GET", "/r/python/hot")

        assert exc_info.value.retry_after == DEFAULT_RETRY_AFTER

    def test_oauth_failure(self, config, praw_reddit):
        praw_reddit.return_value.request.side_effect = prawcore.OAuthException(
            http_response(400), "invalid_grant", None
        )

        with pytest.raises(AuthenticationError):
            RedditClientManager(config).request("GET", "/api/v1/me")

    def test_timeout(self, config, praw_reddit):
        praw_reddit.return_value.request.side_effect = prawcore.RequestException(
            requests.exceptions.ReadTimeout("read timed out"), (), {}
        )

        with pytest.raises(RequestTimeoutError) as exc_info:
            RedditClientManager(config).request("GET", "/r/python/hot")

        assert exc_info.value.timeout_seconds == 30

    def test_connection_error(self, config, praw_reddit):
        praw_reddit.return_value.request.side_effect = prawcore.RequestException(
            requests.exceptions.ConnectionError("refused"), (), {}
        )

        with pytest.raises(RedditAPIError) as exc_info:
            RedditClientManager(config).request("GET", "/r/python/hot")

        assert not isinstance(exc_info.value, RequestTimeoutError)

    def test_praw_error(self, config, praw_reddit):
        praw_reddit.return_value.request.side_effect = PRAWException("boom")

        with pytest.raises(RedditAPIError) as exc_info:
            RedditClientManager(config).request("GET", "/r/python/hot")

        assert "boom" in str(exc_info.value)
