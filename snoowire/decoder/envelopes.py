"""
Fixed-shape response envelopes built on the Listing decoder.

- Post pages (``/comments/{id}``) return a JSON array of two Listings: the
  first holds the post, the second its comment tree.
- About pages (``/r/{sr}/about``, ``/user/{name}/about``, multireddits)
  return a single ``{"kind", "data"}`` root.

Unlike Listing children, these envelopes are decoded strictly: a response
of the wrong shape has no sensible partial result.
"""

from typing import Any, Callable, Dict, List, Tuple, Type

from pydantic import ValidationError

from snoowire.decoder.listing import decode_listing
from snoowire.decoder.replies import decode_listing_iterative
from snoowire.decoder.things import Thing, load_json
from snoowire.models.things import (
    Account,
    Comment,
    Kind,
    Listing,
    ModAction,
    More,
    Multi,
    Post,
    PostAndComments,
    RedditThing,
    Subreddit,
)
from snoowire.reddit.exceptions import MalformedResponseError

_ROOT_MODELS: Dict[Kind, Type[RedditThing]] = {
    Kind.COMMENT: Comment,
    Kind.ACCOUNT: Account,
    Kind.POST: Post,
    Kind.SUBREDDIT: Subreddit,
    Kind.MORE: More,
    Kind.MOD_ACTION: ModAction,
    Kind.MULTI: Multi,
}


def _listing_decoder(iterative: bool) -> Callable[[Any], Listing]:
    return decode_listing_iterative if iterative else decode_listing


def decode_listing_pair(raw: Any, iterative: bool = False) -> Tuple[Listing, Listing]:
    """
    Decode a JSON array of exactly two Listings, positionally.

    Raises:
        MalformedResponseError: If the body is not a 2-element array of
            Listings
    """
    payload = load_json(raw)

    if not isinstance(payload, list):
        raise MalformedResponseError(
            f"malformed response: expected 2 listings, got {type(payload).__name__}"
        )
    if len(payload) != 2:
        raise MalformedResponseError(
            f"malformed response: expected 2 listings, got {len(payload)}"
        )

    decode = _listing_decoder(iterative)
    return decode(payload[0]), decode(payload[1])


def decode_post_and_comments(raw: Any, iterative: bool = False) -> PostAndComments:
    """
    Decode a post together with its comment tree.

    Args:
        raw: Body of ``/comments/{id}``: ``[Listing[post], Listing[comments]]``
        iterative: Build comment trees with the explicit-stack decoder

    Returns:
        PostAndComments with the post, the top-level comments (replies
        nested inside them) and the top-level More, if any

    Raises:
        MalformedResponseError: If the array does not hold exactly two
            Listings, or the first one does not hold exactly one post
    """
    post_listing, comment_listing = decode_listing_pair(raw, iterative=iterative)

    if len(post_listing.posts) != 1:
        raise MalformedResponseError("malformed response: expected exactly one post")

    return PostAndComments(
        post=post_listing.posts[0],
        comments=comment_listing.comments,
        more=comment_listing.more,
    )


def decode_root(raw: Any, kind: Kind) -> Thing:
    """
    Decode a single ``{"kind": kind, "data": ...}`` root object.

    Args:
        raw: Response body or parsed JSON
        kind: The kind the endpoint is documented to return

    Returns:
        The typed value for ``kind``

    Raises:
        MalformedResponseError: If the root is not an object, has another
            kind, or its data does not validate
        ValueError: If ``kind`` is one this SDK does not materialize

    Example:
        >>> sub = decode_root({"kind": "t5", "data": {"display_name": "golang"}}, Kind.SUBREDDIT)
        >>> sub.name
        'golang'
    """
    node = load_json(raw)

    if kind is Kind.LISTING:
        return decode_listing(node)

    model = _ROOT_MODELS.get(kind)
    if model is None:
        raise ValueError(f"{kind.value} things are not decoded by this SDK")

    if not isinstance(node, dict):
        raise MalformedResponseError(
            f"malformed response: expected a {kind.value} object, got {type(node).__name__}"
        )

    actual = node.get("kind")
    if actual != kind.value:
        raise MalformedResponseError(
            f"malformed response: expected kind {kind.value!r}, got {actual!r}"
        )

    try:
        return model.model_validate(node.get("data"))
    except ValidationError as e:
        raise MalformedResponseError(
            f"malformed response: invalid {kind.value} data ({e.error_count()} errors)"
        ) from e


def decode_roots(raw: Any, kind: Kind) -> List[Thing]:
    """
    Decode a JSON array of root objects of one kind (e.g. a user's multis).

    Every element is decoded with ``decode_root``; one bad element fails
    the whole array.
    """
    payload = load_json(raw)
    if not isinstance(payload, list):
        raise MalformedResponseError(
            f"malformed response: expected an array of {kind.value}, got {type(payload).__name__}"
        )
    return [decode_root(item, kind) for item in payload]
