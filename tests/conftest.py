"""
Shared fixtures: Reddit response bodies as parsed JSON.

Bodies are trimmed to the fields the models read; the shapes (kind tags,
"" replies, Listing envelopes) match what the API returns.
"""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from snoowire.reddit.config import ClientConfig
from snoowire.reddit.rate_limiter import TokenBucketRateLimiter


def listing(*children, after=None, before=None, **extra):
    data = {"children": list(children), **extra}
    if after is not None:
        data["after"] = after
    if before is not None:
        data["before"] = before
    return {"kind": "Listing", "data": data}


def post_node(post_id="abc", **fields):
    return {
        "kind": "t3",
        "data": {
            "id": post_id,
            "name": f"t3_{post_id}",
            "title": f"Post {post_id}",
            "subreddit": "test",
            "score": 10,
            "num_comments": 2,
            "created_utc": 1596392588.0,
            "edited": False,
            "permalink": f"/r/test/comments/{post_id}/post/",
            **fields,
        },
    }


def comment_node(comment_id, replies="", parent_id="t3_abc", **fields):
    return {
        "kind": "t1",
        "data": {
            "id": comment_id,
            "name": f"t1_{comment_id}",
            "parent_id": parent_id,
            "link_id": "t3_abc",
            "body": f"comment {comment_id}",
            "author": "snoo",
            "score": 1,
            "created_utc": 1596392600,
            "edited": False,
            "permalink": f"/r/test/comments/abc/post/{comment_id}/",
            "replies": replies,
            **fields,
        },
    }


def more_node(more_id="m1", children=("c9",), parent_id="t3_abc"):
    return {
        "kind": "more",
        "data": {
            "id": more_id,
            "name": f"t1_{more_id}",
            "parent_id": parent_id,
            "count": len(children),
            "depth": 0,
            "children": list(children),
        },
    }


@pytest.fixture
def single_post_listing():
    return {
        "kind": "Listing",
        "data": {
            "children": [{"kind": "t3", "data": {"id": "abc", "name": "t3_abc"}}],
            "after": "t3_abc",
            "before": "",
        },
    }


@pytest.fixture
def mixed_listing():
    """Posts, a comment, a subreddit, unknown kinds, a message and an award."""
    return listing(
        post_node("p1"),
        {"kind": "t9", "data": {"id": "zzz"}},
        comment_node("c1"),
        {"kind": "t5", "data": {"id": "2qh0y", "display_name": "python"}},
        {"kind": "t4", "data": {"id": "msg1", "body": "hi"}},
        post_node("p2"),
        {"kind": "t6", "data": {"id": "award"}},
        {"kind": "bogus", "data": None},
        after="t3_p2",
    )


@pytest.fixture
def comment_tree():
    """
    c1
    ├── c2
    │   └── c3
    │       └── more(c5, c6)
    └── more(c4)
    """
    c3 = comment_node(
        "c3",
        parent_id="t1_c2",
        replies=listing(more_node("m3", ("c5", "c6"), parent_id="t1_c3")),
    )
    c2 = comment_node("c2", parent_id="t1_c1", replies=listing(c3))
    c1 = comment_node(
        "c1",
        replies=listing(c2, more_node("m1", ("c4",), parent_id="t1_c1")),
    )
    return listing(c1)


@pytest.fixture
def post_page():
    """A /comments/{id} body: [Listing[post], Listing[comment + More]]."""
    return [
        listing(post_node("abc")),
        listing(
            comment_node(
                "c1",
                replies=listing(more_node("m2", ("c7",), parent_id="t1_c1")),
            ),
            more_node("m1", ("c8", "c9")),
        ),
    ]


@pytest.fixture
def post_page_bytes(post_page):
    return json.dumps(post_page).encode("utf-8")


@pytest.fixture
def subreddit_root():
    return {
        "kind": "t5",
        "data": {
            "id": "2qh0y",
            "name": "t5_2qh0y",
            "display_name": "python",
            "display_name_prefixed": "r/python",
            "public_description": "News about Python",
            "subreddit_type": "public",
            "subscribers": 1200000,
            "active_user_count": None,
            "over18": False,
            "created_utc": 1201230879.0,
            "url": "/r/python/",
        },
    }


@pytest.fixture
def account_root():
    return {
        "kind": "t2",
        "data": {
            "id": "1w72",
            "name": "spez",
            "link_karma": 100,
            "comment_karma": 200,
            "created_utc": 1118030400.0,
            "has_verified_email": True,
        },
    }


@pytest.fixture
def multi_root():
    return {
        "kind": "LabeledMulti",
        "data": {
            "name": "tech",
            "display_name": "tech",
            "path": "/user/spez/m/tech/",
            "description_md": "tech subs",
            "subreddits": [{"name": "python"}, {"name": "golang"}],
            "owner": "spez",
            "created_utc": 1600000000.0,
            "visibility": "public",
        },
    }


@pytest.fixture
def config():
    return ClientConfig(client_id="test_id", client_secret="test_secret")


@pytest.fixture
def mock_manager(config):
    """Transport double; set ``request.return_value`` to the body to serve."""
    manager = MagicMock()
    manager.config = config
    return manager


@pytest.fixture
def mock_limiter():
    limiter = MagicMock(spec=TokenBucketRateLimiter)
    limiter.acquire = AsyncMock(return_value=0.0)
    limiter.get_remaining.return_value = 99
    return limiter
