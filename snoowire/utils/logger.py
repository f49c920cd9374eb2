"""
structlog setup for the SDK.

Library code only ever calls ``get_logger``; applications opt in to
rendering with ``setup_logging``. Events are JSON lines by default and
coloured console lines when ENVIRONMENT=development. praw and prawcore log
through the standard library, so their level follows the same setting.
"""
import logging
import os
import sys
from typing import Any, MutableMapping

import structlog

# keys whose values must never reach a log line
SECRET_KEYS = frozenset(
    {"client_secret", "password", "access_token", "refresh_token", "authorization"}
)
REDACTED = "**********"

# stdlib loggers of the HTTP stack underneath the SDK
THIRD_PARTY_LOGGERS = ("praw", "prawcore")


def redact_secrets(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """structlog processor that masks credential values."""
    for key in SECRET_KEYS.intersection(event_dict):
        event_dict[key] = REDACTED
    return event_dict


def setup_logging(level: str | None = None, json_output: bool | None = None) -> None:
    """
    Configure structlog and the standard library loggers.

    Args:
        level: DEBUG, INFO, WARNING, ERROR or CRITICAL. Falls back to the
            LOG_LEVEL environment variable, then INFO.
        json_output: Render JSON lines. Defaults to True unless
            ENVIRONMENT=development.
    """
    level = level or os.getenv("LOG_LEVEL", "INFO")
    log_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=log_level)
    for name in THIRD_PARTY_LOGGERS:
        logging.getLogger(name).setLevel(log_level)

    if json_output is None:
        json_output = os.getenv("ENVIRONMENT", "production") != "development"

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        redact_secrets,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer(),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = __name__) -> structlog.BoundLogger:
    """
    Return a structlog logger; modules call this once at import time.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.debug("listing_decoded", kept=25, after="t3_abc123")
    """
    return structlog.get_logger(name)


def log_request(
    method: str,
    path: str,
    duration_ms: float,
    error: str | None = None,
    **extra: Any,
) -> None:
    """
    Emit one event per Reddit API call.

    ``reddit_request_completed`` at info level, or ``reddit_request_failed``
    at error level when ``error`` is set.

    Args:
        method: HTTP method
        path: API path
        duration_ms: Time spent in the request and in decoding
        error: Failure message
        **extra: More context, e.g. ``RedditAPIError.to_dict()``

    Example:
        >>> log_request(method="GET", path="/r/python/hot", duration_ms=412.7)
    """
    logger = get_logger("snoowire.request")

    fields = {"method": method, "path": path, "duration_ms": round(duration_ms, 2), **extra}

    if error:
        logger.error("reddit_request_failed", error=error, **fields)
    else:
        logger.info("reddit_request_completed", **fields)
