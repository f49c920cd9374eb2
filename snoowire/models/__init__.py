"""Typed models for decoded Reddit things and the scalar codecs they use."""

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
    Replies,
    RedditThing,
    Subreddit,
    ThingBucket,
)

__all__ = [
    "Account",
    "Comment",
    "Kind",
    "Listing",
    "ModAction",
    "More",
    "Multi",
    "Post",
    "PostAndComments",
    "Replies",
    "RedditThing",
    "Subreddit",
    "ThingBucket",
]
