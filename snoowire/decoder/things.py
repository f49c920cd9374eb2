"""
Kind-tag dispatch for single Reddit things.

A thing is ``{"kind": K, "data": D}``. The kind alone decides which model
``D`` is validated against. Unknown kinds, and kinds this SDK recognizes
but does not materialize (messages, awards), decode to None.

Decoding is forgiving per thing: when ``D`` does not fit the model of a
recognized kind the thing is dropped, so one odd child never costs a
whole page, and that includes a child Listing with a broken envelope.
A comment whose replies envelope is broken is different: the
MalformedResponseError is not dropped and propagates to the caller.
"""

import json
from typing import Any, Callable, Dict, Optional, Union

from pydantic import ValidationError

from snoowire.models.things import (
    Account,
    Comment,
    Kind,
    Listing,
    ModAction,
    More,
    Multi,
    Post,
    Replies,
    Subreddit,
)
from snoowire.reddit.exceptions import DecodeError
from snoowire.utils.logger import get_logger

logger = get_logger(__name__)

Thing = Union[Comment, Account, Post, Subreddit, ModAction, More, Multi, Listing]


def load_json(raw: Any) -> Any:
    """
    Parse a response body if it still is text.

    praw hands back already-parsed JSON, while raw HTTP bodies arrive as
    bytes. Both are accepted; parsed values pass through untouched.

    Raises:
        DecodeError: If text input is not valid UTF-8 JSON
    """
    if isinstance(raw, (bytes, bytearray)):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(f"response body is not valid UTF-8: {e}") from e

    if isinstance(raw, str):
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            raise DecodeError(f"response body is not valid JSON: {e}") from e

    return raw


def _discard(data: Any) -> None:
    return None


def _decode_nested_listing(data: Any) -> Optional[Listing]:
    from snoowire.decoder.listing import decode_listing, listing_shape_error

    envelope = {"kind": Kind.LISTING.value, "data": data}
    # a broken child Listing is dropped like any other invalid child;
    # errors from envelopes deeper inside it still propagate
    reason = listing_shape_error(envelope)
    if reason is not None:
        logger.debug("thing_dropped", kind=Kind.LISTING.value, first_error=reason)
        return None
    return decode_listing(envelope)


_DECODERS: Dict[Kind, Callable[[Any], Optional[Thing]]] = {
    Kind.COMMENT: Comment.model_validate,
    Kind.ACCOUNT: Account.model_validate,
    Kind.POST: Post.model_validate,
    Kind.MESSAGE: _discard,
    Kind.SUBREDDIT: Subreddit.model_validate,
    Kind.AWARD: _discard,
    Kind.MORE: More.model_validate,
    Kind.MOD_ACTION: ModAction.model_validate,
    Kind.MULTI: Multi.model_validate,
    Kind.LISTING: _decode_nested_listing,
}


def decode_thing(node: Any, replies: Optional[Replies] = None) -> Optional[Thing]:
    """
    Decode one ``{"kind", "data"}`` node.

    Args:
        node: The parsed node
        replies: Already-decoded replies to attach instead of decoding the
            comment's own ``replies`` field (used by the iterative tree
            builder). Ignored for kinds other than comments.

    Returns:
        The typed thing, or None when the kind is unknown, intentionally
        unhandled, or its data doesn't validate.

    Raises:
        MalformedResponseError: If a nested envelope (a comment's replies)
            is structurally invalid

    Example:
        >>> post = decode_thing({"kind": "t3", "data": {"id": "abc", "name": "t3_abc"}})
        >>> post.full_id
        't3_abc'
        >>> decode_thing({"kind": "t9", "data": {}}) is None
        True
    """
    if not isinstance(node, dict):
        logger.debug("thing_skipped", reason="not_an_object", type=type(node).__name__)
        return None

    raw_kind = node.get("kind")
    try:
        kind = Kind(raw_kind)
    except ValueError:
        logger.debug("thing_skipped", reason="unrecognized_kind", kind=raw_kind)
        return None

    data = node.get("data")
    if kind is Kind.COMMENT and replies is not None and isinstance(data, dict):
        data = {**data, "replies": replies}

    try:
        return _DECODERS[kind](data)
    except ValidationError as e:
        logger.debug(
            "thing_dropped",
            kind=kind.value,
            error_count=e.error_count(),
            first_error=e.errors()[0]["msg"] if e.error_count() else None,
        )
        return None
