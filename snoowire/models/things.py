"""
Typed models for Reddit "things".

Every node Reddit returns is ``{"kind": K, "data": D}``; the models below
describe the ``data`` payload of each kind that is materialized. Field
aliases map wire keys onto Python attribute names, unknown wire keys are
ignored and a JSON ``null`` leaves a field at its default.

Decoding entry points live in ``snoowire.decoder``; the models only know
how to validate one payload.
"""
from enum import Enum
from typing import Any, Literal, Optional, Tuple

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_serializer,
    field_validator,
)

from snoowire.models.scalars import Permalink, SubredditNames, Timestamp


class Kind(str, Enum):
    """Wire tags for the kinds of things Reddit returns."""

    COMMENT = "t1"
    ACCOUNT = "t2"
    POST = "t3"
    MESSAGE = "t4"
    SUBREDDIT = "t5"
    AWARD = "t6"
    MORE = "more"
    MOD_ACTION = "modaction"
    MULTI = "LabeledMulti"
    LISTING = "Listing"


class RedditThing(BaseModel):
    """Base for all wire models."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def _null_means_absent(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None and info.field_name is not None:
            return cls.model_fields[info.field_name].get_default(
                call_default_factory=True
            )
        return value


class More(RedditThing):
    """
    Placeholder for comments left out of a comment tree.

    ``children`` lists the IDs of the omitted comments. ``count`` is the
    total number of replies below the parent (recursively), ``depth`` the
    number of levels from the parent to the deepest omitted comment.
    """

    id: str = ""
    full_id: str = Field("", alias="name")
    parent_id: str = ""
    count: int = 0
    depth: int = 0
    children: Tuple[str, ...] = ()


class Post(RedditThing):
    """A submitted post (wire kind ``t3``, a "link")."""

    id: str = ""
    full_id: str = Field("", alias="name")
    created: Timestamp = Field(None, alias="created_utc")
    edited: Timestamp = None

    permalink: Permalink = ""
    url: str = ""

    title: str = ""
    body: str = Field("", alias="selftext")

    # None when the client has not voted
    likes: Optional[bool] = None

    score: int = 0
    upvote_ratio: float = 0.0
    num_comments: int = 0

    subreddit_name: str = Field("", alias="subreddit")
    subreddit_name_prefixed: str = ""
    subreddit_id: str = ""
    subreddit_subscribers: int = 0

    author: str = ""
    author_id: str = Field("", alias="author_fullname")

    spoiler: bool = False
    locked: bool = False
    nsfw: bool = Field(False, alias="over_18")
    is_self_post: bool = Field(False, alias="is_self")
    saved: bool = False
    stickied: bool = False


class Account(RedditThing):
    """A user account (wire kind ``t2``)."""

    # ID36 only, not the full ID
    id: str = ""
    name: str = ""
    created: Timestamp = Field(None, alias="created_utc")

    post_karma: int = Field(0, alias="link_karma")
    comment_karma: int = 0

    is_friend: bool = False
    is_employee: bool = False
    has_verified_email: bool = False
    nsfw: bool = Field(False, alias="over_18")
    is_suspended: bool = False


class Subreddit(RedditThing):
    """A subreddit (wire kind ``t5``)."""

    id: str = ""
    full_id: str = Field("", alias="name")
    created: Timestamp = Field(None, alias="created_utc")

    # relative, e.g. "/r/golang/"
    url: str = ""
    name: str = Field("", alias="display_name")
    name_prefixed: str = Field("", alias="display_name_prefixed")
    title: str = ""
    description: str = Field("", alias="public_description")
    type: str = Field("", alias="subreddit_type")
    suggested_comment_sort: str = ""

    subscribers: int = 0
    active_user_count: Optional[int] = None
    nsfw: bool = Field(False, alias="over18")
    user_is_moderator: bool = False
    user_is_subscriber: bool = False
    user_has_favorited: bool = False


class ModAction(RedditThing):
    """An entry of a subreddit's moderation log (wire kind ``modaction``)."""

    id: str = ""
    action: str = ""
    details: str = ""
    description: str = ""
    created: Timestamp = Field(None, alias="created_utc")

    moderator: str = Field("", alias="mod")
    # ID36 only
    moderator_id: str = Field("", alias="mod_id36")

    target_author: str = ""
    target_id: str = Field("", alias="target_fullname")
    target_title: str = ""
    target_permalink: Permalink = ""
    target_body: str = ""

    subreddit: str = ""
    # ID36 only
    subreddit_id: str = Field("", alias="sr_id36")


class Multi(RedditThing):
    """A multireddit (wire kind ``LabeledMulti``)."""

    name: str = ""
    display_name: str = ""
    path: str = ""
    description: str = Field("", alias="description_md")
    subreddits: SubredditNames = Field(default_factory=list)
    copied_from: Optional[str] = None

    owner: str = ""
    owner_id: str = ""
    created: Timestamp = Field(None, alias="created_utc")

    num_subscribers: int = 0
    visibility: str = ""
    is_subscriber: bool = False
    is_favorited: bool = False
    can_edit: bool = False
    nsfw: bool = Field(False, alias="over_18")


class Comment(RedditThing):
    """
    A comment (wire kind ``t1``).

    ``replies`` holds the comment's subtree. On the wire it is either ``""``
    (no replies) or a full Listing; the Listing is decoded recursively
    while this comment is validated, so one decode pass yields the whole
    tree. A comment never points back at its parent; ``parent_id`` is a
    plain full ID.
    """

    id: str = ""
    full_id: str = Field("", alias="name")
    created: Timestamp = Field(None, alias="created_utc")
    edited: Timestamp = None

    parent_id: str = ""
    permalink: Permalink = ""

    body: str = ""
    author: str = ""
    author_id: str = Field("", alias="author_fullname")
    author_flair_text: str = ""
    author_flair_id: str = Field("", alias="author_flair_template_id")

    subreddit_name: str = Field("", alias="subreddit")
    subreddit_name_prefixed: str = ""
    subreddit_id: str = ""

    # None when the client has not voted
    likes: Optional[bool] = None

    score: int = 0
    controversiality: int = 0

    post_id: str = Field("", alias="link_id")
    # The post fields below only show up on some endpoints (user history, search)
    post_title: str = Field("", alias="link_title")
    post_permalink: str = Field("", alias="link_permalink")
    post_author: str = Field("", alias="link_author")
    post_num_comments: Optional[int] = Field(None, alias="num_comments")

    is_submitter: bool = False
    score_hidden: bool = False
    saved: bool = False
    stickied: bool = False
    locked: bool = False
    can_gild: bool = False
    nsfw: bool = Field(False, alias="over_18")

    replies: "Replies" = Field(default_factory=lambda: Replies())

    @field_validator("replies", mode="before")
    @classmethod
    def _decode_replies(cls, value: Any) -> "Replies":
        # imported here: the decoder imports these models
        from snoowire.decoder.replies import decode_replies

        return decode_replies(value)

    @field_serializer("replies", when_used="json")
    def _encode_replies(self, replies: "Replies") -> Any:
        return replies.to_wire()

    def has_more(self) -> bool:
        """Whether the reply tree has omitted comments left to load."""
        return self.replies.more is not None and len(self.replies.more.children) > 0


class Replies(BaseModel):
    """
    Replies to a comment.

    A tagged variant: ``variant == "empty"`` when Reddit sent the ``""``
    sentinel (or nothing), ``"listing"`` when it sent a Listing, even an
    empty one. Comments are kept in wire order; ``more`` is the
    continuation placeholder for replies left out of the payload.
    """

    model_config = ConfigDict(frozen=True)

    variant: Literal["empty", "listing"] = "empty"
    comments: Tuple[Comment, ...] = ()
    more: Optional[More] = None

    @property
    def is_empty(self) -> bool:
        return self.variant == "empty"

    def to_wire(self) -> Any:
        """Encode back to what Reddit sends: ``""`` or a Listing envelope."""
        if self.is_empty:
            return ""

        children = [
            {"kind": Kind.COMMENT.value, "data": c.model_dump(mode="json", by_alias=True)}
            for c in self.comments
        ]
        if self.more is not None:
            children.append(
                {"kind": Kind.MORE.value, "data": self.more.model_dump(mode="json", by_alias=True)}
            )

        return {
            "kind": Kind.LISTING.value,
            "data": {"children": children, "after": "", "before": ""},
        }


class ThingBucket(BaseModel):
    """
    The decoded children of one Listing, partitioned by kind.

    Built in a single pass and frozen afterwards. Every slice is present
    even when empty. At most one More survives; when a Listing carries
    several, the last one in wire order wins.
    """

    model_config = ConfigDict(frozen=True)

    comments: Tuple[Comment, ...] = ()
    posts: Tuple[Post, ...] = ()
    subreddits: Tuple[Subreddit, ...] = ()
    mod_actions: Tuple[ModAction, ...] = ()
    accounts: Tuple[Account, ...] = ()
    multis: Tuple[Multi, ...] = ()
    more: Optional[More] = None

    def total(self) -> int:
        """Number of decoded things, counting the More placeholder."""
        return (
            len(self.comments)
            + len(self.posts)
            + len(self.subreddits)
            + len(self.mod_actions)
            + len(self.accounts)
            + len(self.multis)
            + (1 if self.more is not None else 0)
        )


class Listing(BaseModel):
    """
    A page of things plus its pagination cursors.

    ``after`` and ``before`` are full IDs usable as anchors for the next
    and previous pages; an empty string means there is no such page.
    """

    model_config = ConfigDict(frozen=True)

    things: ThingBucket = Field(default_factory=ThingBucket)
    after: str = ""
    before: str = ""
    dist: Optional[int] = None

    @property
    def comments(self) -> Tuple[Comment, ...]:
        return self.things.comments

    @property
    def posts(self) -> Tuple[Post, ...]:
        return self.things.posts

    @property
    def subreddits(self) -> Tuple[Subreddit, ...]:
        return self.things.subreddits

    @property
    def mod_actions(self) -> Tuple[ModAction, ...]:
        return self.things.mod_actions

    @property
    def accounts(self) -> Tuple[Account, ...]:
        return self.things.accounts

    @property
    def multis(self) -> Tuple[Multi, ...]:
        return self.things.multis

    @property
    def more(self) -> Optional[More]:
        return self.things.more


class PostAndComments(BaseModel):
    """A post together with its (possibly partial) comment tree."""

    model_config = ConfigDict(frozen=True)

    post: Post
    comments: Tuple[Comment, ...] = ()
    more: Optional[More] = None

    def has_more(self) -> bool:
        """Whether top-level comments were left out of the response."""
        return self.more is not None and len(self.more.children) > 0


Comment.model_rebuild()
