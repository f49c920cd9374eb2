"""
Codecs for Reddit scalars that don't follow plain JSON rules.

- Timestamps arrive as Unix epoch numbers, and ``edited`` is ``false``
  when a post or comment was never edited.
- Permalinks arrive as paths relative to the Reddit origin.
- Multireddit subreddit lists arrive as ``[{"name": ...}, ...]``.

Each codec is exposed as an ``Annotated`` pydantic type so models declare
the wire behaviour next to the field. Encoding applies to JSON-mode dumps
(``model_dump(mode="json", by_alias=True)``), which give back the wire shape.
"""

from datetime import datetime, timezone
from typing import Annotated, Any, List, Optional

from pydantic import BeforeValidator, PlainSerializer

REDDIT_ORIGIN = "https://www.reddit.com"


def decode_timestamp(value: Any) -> Optional[datetime]:
    """
    Decode an epoch timestamp into an aware UTC datetime.

    ``false``, ``null`` and ``""`` mean "no timestamp" and decode to None.
    Fractional seconds are truncated.

    Example:
        >>> decode_timestamp(1596392588.0)
        datetime.datetime(2020, 8, 2, 18, 23, 8, tzinfo=datetime.timezone.utc)
        >>> decode_timestamp(False) is None
        True
    """
    if value is None or value is False or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, bool):
        # true is not a timestamp
        raise ValueError("expected epoch seconds, got true")
    if isinstance(value, str):
        try:
            value = float(value)
        except ValueError as e:
            raise ValueError(f"expected epoch seconds, got {value!r}") from e
    if not isinstance(value, (int, float)):
        raise ValueError(f"expected epoch seconds, got {type(value).__name__}")
    return datetime.fromtimestamp(int(value), tz=timezone.utc)


def encode_timestamp(value: Optional[datetime]) -> Any:
    """Encode a datetime back to epoch seconds, None back to ``false``."""
    if value is None:
        return False
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return float(int(value.timestamp()))


def decode_permalink(value: Any) -> str:
    """
    Prefix a relative permalink with the Reddit origin.

    Example:
        >>> decode_permalink("/r/test/comments/i2gvg4/title/")
        'https://www.reddit.com/r/test/comments/i2gvg4/title/'
    """
    if value is None or value == "":
        return ""
    if not isinstance(value, str):
        raise ValueError(f"expected permalink string, got {type(value).__name__}")
    if value.startswith("http://") or value.startswith("https://"):
        return value
    if not value.startswith("/"):
        value = "/" + value
    return REDDIT_ORIGIN + value


def encode_permalink(value: str) -> str:
    """Strip the Reddit origin so the permalink is relative again."""
    if value.startswith(REDDIT_ORIGIN):
        return value[len(REDDIT_ORIGIN):]
    return value


def decode_subreddit_names(value: Any) -> List[str]:
    """
    Flatten ``[{"name": "golang"}, {"name": "python"}]`` into names.

    Entries without a name are skipped. Plain strings are accepted so
    values built in Python validate too.
    """
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"expected a list of subreddits, got {type(value).__name__}")

    names = []
    for entry in value:
        if isinstance(entry, str):
            names.append(entry)
        elif isinstance(entry, dict) and isinstance(entry.get("name"), str):
            names.append(entry["name"])
    return names


def encode_subreddit_names(value: List[str]) -> List[dict]:
    return [{"name": name} for name in value]


Timestamp = Annotated[
    Optional[datetime],
    BeforeValidator(decode_timestamp),
    PlainSerializer(encode_timestamp, when_used="json"),
]

Permalink = Annotated[
    str,
    BeforeValidator(decode_permalink),
    PlainSerializer(encode_permalink, when_used="json"),
]

SubredditNames = Annotated[
    List[str],
    BeforeValidator(decode_subreddit_names),
    PlainSerializer(encode_subreddit_names, when_used="json"),
]
