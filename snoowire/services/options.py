"""
Query options for listing endpoints.

Options are validated when they are constructed, so a bad limit or cursor
raises pydantic's ValidationError before any request is made.
``to_params()`` renders the query string parameters Reddit expects.
"""

from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

# full IDs such as t3_abc123 are the only valid pagination anchors
FULLNAME_PATTERN = r"^t[1-6]_[0-9a-z]+$"

TimeFilter = Literal["hour", "day", "week", "month", "year", "all"]


class ListOptions(BaseModel):
    """
    Pagination options shared by every listing endpoint.

    Reddit defaults to 25 items per page and caps pages at 100.
    """

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={"example": {"limit": 50, "after": "t3_abc123"}},
    )

    limit: Optional[int] = Field(
        None,
        ge=1,
        le=100,
        description="Maximum number of items to return",
    )
    after: Optional[str] = Field(
        None,
        pattern=FULLNAME_PATTERN,
        description="Full ID of the item to list after",
    )
    before: Optional[str] = Field(
        None,
        pattern=FULLNAME_PATTERN,
        description="Full ID of the item to list before",
    )

    @model_validator(mode="after")
    def check_single_anchor(self) -> "ListOptions":
        if self.after and self.before:
            raise ValueError("after and before cannot be used together")
        return self

    def to_params(self) -> Dict[str, Any]:
        """
        Render the options as query string parameters.

        Unset options are left out; booleans become "true"/"false".

        Example:
            >>> ListPostOptions(limit=10, time_filter="week").to_params()
            {'limit': 10, 't': 'week'}
        """
        params = self.model_dump(by_alias=True, exclude_none=True, exclude_defaults=True)
        return {
            key: (str(value).lower() if isinstance(value, bool) else value)
            for key, value in params.items()
        }


class ListPostOptions(ListOptions):
    """Options for post listings that accept a time range (top, controversial, user pages)."""

    time_filter: Optional[TimeFilter] = Field(
        None,
        serialization_alias="t",
        description="Time range for top/controversial sorts",
    )


class SearchOptions(ListPostOptions):
    """Options for post search."""

    sort: Optional[Literal["relevance", "hot", "top", "new", "comments"]] = Field(
        None,
        description="Sort order of the results",
    )


class DuplicateOptions(ListOptions):
    """Options for listing other submissions of a post's URL."""

    subreddit: Optional[str] = Field(
        None,
        pattern=r"^[A-Za-z0-9_]+$",
        serialization_alias="sr",
        description="Only look for duplicates in this subreddit",
    )
    sort: Optional[Literal["num_comments", "new"]] = None
    crossposts_only: bool = False
