"""Tests for the post-and-comments pair and single-root envelopes."""

import json

import pytest

from conftest import comment_node, listing, post_node
from snoowire.decoder import (
    decode_listing_pair,
    decode_post_and_comments,
    decode_root,
    decode_roots,
)
from snoowire.models import Account, Kind, Listing, Multi, Subreddit
from snoowire.reddit.exceptions import MalformedResponseError


class TestPostAndComments:
    """Test decode_post_and_comments."""

    def test_composite(self, post_page):
        page = decode_post_and_comments(post_page)

        assert page.post.id == "abc"
        assert page.post.full_id == "t3_abc"
        assert len(page.comments) == 1
        assert page.more is not None
        assert page.more.children == ("c8", "c9")
        assert page.has_more()

    def test_nested_more(self, post_page):
        page = decode_post_and_comments(post_page)

        (comment,) = page.comments
        assert comment.has_more()
        assert comment.replies.more.children == ("c7",)

    def test_bytes(self, post_page_bytes, post_page):
        assert decode_post_and_comments(post_page_bytes) == decode_post_and_comments(post_page)

    def test_iterative(self, post_page):
        assert decode_post_and_comments(post_page, iterative=True) == decode_post_and_comments(post_page)

    def test_no_comments(self):
        page = decode_post_and_comments([listing(post_node("abc")), listing()])

        assert page.comments == ()
        assert page.more is None
        assert not page.has_more()

    @pytest.mark.parametrize("count", [0, 1, 3])
    def test_wrong_number_of_listings(self, count):
        body = [listing(post_node("abc"))] * count

        with pytest.raises(MalformedResponseError) as exc_info:
            decode_post_and_comments(body)

        assert str(exc_info.value) == f"malformed response: expected 2 listings, got {count}"

    def test_not_an_array(self, single_post_listing):
        with pytest.raises(MalformedResponseError):
            decode_post_and_comments(single_post_listing)

    def test_no_post(self):
        with pytest.raises(MalformedResponseError) as exc_info:
            decode_post_and_comments([listing(), listing(comment_node("c1"))])

        assert str(exc_info.value) == "malformed response: expected exactly one post"

    def test_two_posts(self):
        with pytest.raises(MalformedResponseError):
            decode_post_and_comments([listing(post_node("a"), post_node("b")), listing()])

    def test_invalid_post_counts_as_no_post(self):
        body = [listing({"kind": "t3", "data": {"id": "abc", "score": "x"}}), listing()]

        with pytest.raises(MalformedResponseError):
            decode_post_and_comments(body)

    def test_second_element_not_a_listing(self):
        with pytest.raises(MalformedResponseError):
            decode_post_and_comments([listing(post_node("abc")), comment_node("c1")])

    def test_malformed_comment_replies(self):
        body = [listing(post_node("abc")), listing(comment_node("c1", replies=1))]

        with pytest.raises(MalformedResponseError):
            decode_post_and_comments(body)


class TestListingPair:
    """Test decode_listing_pair."""

    def test_positional(self):
        first, second = decode_listing_pair(
            json.dumps([listing(post_node("a")), listing(post_node("b"), post_node("c"))])
        )

        assert isinstance(first, Listing)
        assert [p.id for p in first.posts] == ["a"]
        assert [p.id for p in second.posts] == ["b", "c"]


class TestDecodeRoot:
    """Test decode_root and decode_roots."""

    def test_subreddit(self, subreddit_root):
        sub = decode_root(subreddit_root, Kind.SUBREDDIT)

        assert isinstance(sub, Subreddit)
        assert sub.name == "python"
        assert sub.subscribers == 1200000

    def test_account(self, account_root):
        account = decode_root(json.dumps(account_root).encode("utf-8"), Kind.ACCOUNT)

        assert isinstance(account, Account)
        assert account.name == "spez"

    def test_multi(self, multi_root):
        multi = decode_root(multi_root, Kind.MULTI)

        assert isinstance(multi, Multi)
        assert multi.subreddits == ["python", "golang"]

    def test_listing_kind(self, single_post_listing):
        assert decode_root(single_post_listing, Kind.LISTING).posts[0].id == "abc"

    def test_kind_mismatch(self, subreddit_root):
        with pytest.raises(MalformedResponseError) as exc_info:
            decode_root(subreddit_root, Kind.ACCOUNT)

        assert "'t2'" in str(exc_info.value)

    def test_not_an_object(self):
        with pytest.raises(MalformedResponseError):
            decode_root([], Kind.SUBREDDIT)

    def test_invalid_data_is_strict(self):
        with pytest.raises(MalformedResponseError):
            decode_root({"kind": "t5", "data": {"subscribers": "many"}}, Kind.SUBREDDIT)

    def test_missing_data_is_strict(self):
        with pytest.raises(MalformedResponseError):
            decode_root({"kind": "t5"}, Kind.SUBREDDIT)

    @pytest.mark.parametrize("kind", [Kind.MESSAGE, Kind.AWARD])
    def test_unmaterialized_kind(self, kind):
        with pytest.raises(ValueError):
            decode_root({"kind": kind.value, "data": {}}, kind)

    def test_roots(self, multi_root):
        multis = decode_roots([multi_root, multi_root], Kind.MULTI)

        assert len(multis) == 2
        assert all(isinstance(m, Multi) for m in multis)

    def test_roots_empty(self):
        assert decode_roots("[]", Kind.MULTI) == []

    def test_roots_not_an_array(self, multi_root):
        with pytest.raises(MalformedResponseError):
            decode_roots(multi_root, Kind.MULTI)

    def test_roots_one_bad_element_fails_all(self, multi_root, subreddit_root):
        with pytest.raises(MalformedResponseError):
            decode_roots([multi_root, subreddit_root], Kind.MULTI)
