"""
Comment tree assembly.

A comment's ``replies`` field has two legal wire shapes: the empty string
(no replies) or a full Listing holding further comments and, possibly, a
More placeholder for replies left out of the payload.

``decode_replies`` is called while a Comment is validated, which makes the
decoders mutually recursive (Comment -> Replies -> Listing -> Comment) and
builds the tree depth-first in one pass. ``decode_listing_iterative``
builds the same tree with an explicit stack for threads deeper than the
interpreter's recursion limit allows.
"""

from typing import Any, Dict, List, Optional

from snoowire.decoder.listing import (
    assemble_listing,
    decode_listing,
    listing_children,
    listing_shape_error,
    unwrap_listing,
)
from snoowire.decoder.things import Thing, decode_thing, load_json
from snoowire.models.things import Kind, Listing, Replies
from snoowire.reddit.exceptions import MalformedResponseError


def replies_from_listing(listing: Listing) -> Replies:
    return Replies(variant="listing", comments=listing.comments, more=listing.more)


def decode_replies(raw: Any) -> Replies:
    """
    Decode the raw ``replies`` value of a comment.

    Args:
        raw: ``""``/None for no replies, or a Listing envelope

    Returns:
        Empty Replies for the sentinel, otherwise the comments and More of
        the nested Listing

    Raises:
        MalformedResponseError: If ``raw`` is neither the sentinel nor a
            well-formed Listing. The enclosing comment is invalid and the
            error is not dropped.
    """
    if isinstance(raw, Replies):
        return raw
    if raw is None or (isinstance(raw, str) and raw == ""):
        return Replies()
    if not isinstance(raw, dict):
        raise MalformedResponseError(
            f"malformed response: comment replies must be \"\" or a Listing, "
            f"got {type(raw).__name__}"
        )
    return replies_from_listing(decode_listing(raw))


def _nested_replies(node: Any) -> Optional[Dict[str, Any]]:
    """The reply Listing envelope of a comment node, if it has one."""
    if not isinstance(node, dict) or node.get("kind") != Kind.COMMENT.value:
        return None
    data = node.get("data")
    if not isinstance(data, dict):
        return None
    replies = data.get("replies")
    # anything else is left to decode_thing, which fails the same way
    # the recursive path does
    return replies if isinstance(replies, dict) else None


def _nested_listing(node: Any) -> Optional[Dict[str, Any]]:
    """A well-formed Listing that is itself a child; broken ones go to decode_thing."""
    if not isinstance(node, dict) or node.get("kind") != Kind.LISTING.value:
        return None
    return node if listing_shape_error(node) is None else None


class _Frame:
    """One Listing being decoded by the iterative builder."""

    __slots__ = ("data", "children", "index", "things", "replies", "is_child")

    def __init__(self, envelope: Any, is_child: bool = False) -> None:
        self.data = unwrap_listing(envelope)
        self.children = listing_children(self.data)
        self.index = 0
        self.things: List[Optional[Thing]] = []
        # decoded replies for the comment at self.index
        self.replies: Optional[Replies] = None
        # True when this Listing is a child of the frame below, False when
        # it holds the replies of that frame's current comment
        self.is_child = is_child


def decode_listing_iterative(raw: Any) -> Listing:
    """
    Decode a Listing like ``decode_listing``, without recursion.

    Comment reply Listings and Listings nested as children are pushed on
    an explicit stack and decoded before the node that owns them
    (post-order), so the resulting tree, the dropped children and the
    raised errors are identical to the recursive decoder.

    Raises:
        DecodeError: If ``raw`` is not valid JSON
        MalformedResponseError: If the top-level envelope or a comment's
            replies envelope is invalid
    """
    stack = [_Frame(load_json(raw))]

    while True:
        frame = stack[-1]

        if frame.index == len(frame.children):
            listing = assemble_listing(frame.data, frame.things)
            stack.pop()
            if not stack:
                return listing
            parent = stack[-1]
            if frame.is_child:
                parent.things.append(listing)
                parent.index += 1
            else:
                parent.replies = replies_from_listing(listing)
            continue

        child = frame.children[frame.index]

        nested = _nested_listing(child)
        if nested is not None:
            stack.append(_Frame(nested, is_child=True))
            continue

        if frame.replies is None:
            nested = _nested_replies(child)
            if nested is not None:
                stack.append(_Frame(nested))
                continue

        frame.things.append(decode_thing(child, replies=frame.replies))
        frame.replies = None
        frame.index += 1
