"""
Decoder for Reddit's Thing/Listing wire format.

This package turns the kind-tagged JSON Reddit returns into typed models:
- decode_thing: one ``{"kind", "data"}`` node, dispatched on its kind
- decode_listing / decode_listing_iterative: a Listing envelope
- decode_replies: a comment's ``""``-or-Listing replies value
- decode_post_and_comments, decode_listing_pair: the two-Listing array
- decode_root, decode_roots: single-object about/multireddit responses

Example:
    >>> from snoowire.decoder import decode_listing
    >>> listing = decode_listing(body)
    >>> for post in listing.posts:
    ...     print(post.title)
    >>> next_page = listing.after
"""

from snoowire.decoder.things import Thing, decode_thing, load_json
from snoowire.decoder.listing import bucket_things, decode_listing
from snoowire.decoder.replies import decode_listing_iterative, decode_replies
from snoowire.decoder.envelopes import (
    decode_listing_pair,
    decode_post_and_comments,
    decode_root,
    decode_roots,
)

__all__ = [
    "Thing",
    "bucket_things",
    "decode_listing",
    "decode_listing_iterative",
    "decode_listing_pair",
    "decode_post_and_comments",
    "decode_replies",
    "decode_root",
    "decode_roots",
    "decode_thing",
    "load_json",
]
