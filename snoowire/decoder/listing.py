"""
Listing decoding.

A Listing is Reddit's paginated envelope::

    {"kind": "Listing",
     "data": {"children": [<thing>, ...], "after": "t3_x", "before": ""}}

Children are heterogeneous, so they are partitioned by kind into a
ThingBucket rather than kept as one mixed sequence. The envelope itself is
checked strictly; the children are decoded forgivingly (see
``snoowire.decoder.things``).
"""

from typing import Any, Dict, Iterable, List, Optional

from snoowire.decoder.things import Thing, decode_thing, load_json
from snoowire.models.things import (
    Account,
    Comment,
    Kind,
    Listing,
    ModAction,
    More,
    Multi,
    Post,
    Subreddit,
    ThingBucket,
)
from snoowire.reddit.exceptions import MalformedResponseError
from snoowire.utils.logger import get_logger

logger = get_logger(__name__)

# concrete type -> ThingBucket slice
_SLOTS = {
    Comment: "comments",
    Post: "posts",
    Subreddit: "subreddits",
    ModAction: "mod_actions",
    Account: "accounts",
    Multi: "multis",
}


def listing_shape_error(envelope: Any) -> Optional[str]:
    """
    Describe what is structurally wrong with a Listing envelope.

    Returns:
        None for a well-formed envelope, otherwise the reason. Only this
        envelope is checked, not the children inside it.
    """
    if not isinstance(envelope, dict):
        return f"expected a Listing object, got {type(envelope).__name__}"

    kind = envelope.get("kind")
    if kind != Kind.LISTING.value:
        return f"expected kind 'Listing', got {kind!r}"

    data = envelope.get("data")
    if not isinstance(data, dict):
        return "Listing data is not an object"

    children = data.get("children")
    if children is not None and not isinstance(children, list):
        return "Listing children is not an array"

    for key in ("after", "before"):
        if data.get(key) is not None and not isinstance(data[key], str):
            return f"Listing {key} cursor is not a string"

    return None


def unwrap_listing(envelope: Any) -> Dict[str, Any]:
    """
    Check the Listing envelope and return its ``data`` object.

    Raises:
        MalformedResponseError: If ``envelope`` is not a Listing object, or
            its data, children or cursors have the wrong type
    """
    reason = listing_shape_error(envelope)
    if reason is not None:
        raise MalformedResponseError(f"malformed response: {reason}")
    return envelope["data"]


def listing_children(data: Dict[str, Any]) -> List[Any]:
    return data.get("children") or []


def _cursor(data: Dict[str, Any], key: str) -> str:
    # type already checked by unwrap_listing
    return data.get(key) or ""


def bucket_things(things: Iterable[Optional[Thing]]) -> ThingBucket:
    """
    Partition decoded things into a ThingBucket, keeping wire order.

    None entries (dropped children) and nested Listings are skipped. When
    more than one More shows up the last one wins.
    """
    slots: Dict[str, list] = {name: [] for name in _SLOTS.values()}
    more: Optional[More] = None

    for thing in things:
        if isinstance(thing, More):
            more = thing
            continue
        slot = _SLOTS.get(type(thing))
        if slot is not None:
            slots[slot].append(thing)

    return ThingBucket(
        more=more,
        **{name: tuple(items) for name, items in slots.items()},
    )


def assemble_listing(data: Dict[str, Any], things: Iterable[Optional[Thing]]) -> Listing:
    """Build a Listing from its unwrapped data and its decoded children."""
    dist = data.get("dist")
    listing = Listing(
        things=bucket_things(things),
        after=_cursor(data, "after"),
        before=_cursor(data, "before"),
        dist=dist if isinstance(dist, int) and not isinstance(dist, bool) else None,
    )

    logger.debug(
        "listing_decoded",
        children=len(listing_children(data)),
        kept=listing.things.total(),
        after=listing.after,
        before=listing.before,
    )

    return listing


def decode_listing(raw: Any) -> Listing:
    """
    Decode a Listing envelope.

    Children are decoded in wire order. Comments decode their reply trees
    recursively as part of this call.

    Args:
        raw: Response body (bytes/str) or already-parsed JSON

    Returns:
        The Listing with its ThingBucket and cursors. Missing cursors are
        empty strings.

    Raises:
        DecodeError: If ``raw`` is not valid JSON
        MalformedResponseError: If the envelope, or a nested reply
            envelope, is structurally invalid

    Example:
        >>> listing = decode_listing(b'{"kind": "Listing", "data": {"children": []}}')
        >>> listing.posts, listing.after
        ((), '')
    """
    data = unwrap_listing(load_json(raw))
    return assemble_listing(data, (decode_thing(child) for child in listing_children(data)))
