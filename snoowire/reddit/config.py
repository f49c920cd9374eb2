"""
Client configuration.

Settings are plain pydantic fields; ``ClientConfig.from_env()`` fills them
from the REDDIT_* environment variables.
"""

import os
from typing import Optional

from pydantic import BaseModel, Field, SecretStr

from snoowire.reddit.exceptions import AuthenticationError

DEFAULT_USER_AGENT = "snoowire/0.1 (by /u/snoowire)"


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class ClientConfig(BaseModel):
    """
    Settings for the Reddit client.

    Attributes:
        client_id: OAuth2 client ID of the Reddit app
        client_secret: OAuth2 client secret
        user_agent: User-Agent sent with every request
        username: Account name for script apps (None = read-only)
        password: Account password for script apps
        timeout: Request timeout in seconds
        rate_limit_calls: Requests allowed per rate limit window
        rate_limit_period: Length of the rate limit window in seconds
        iterative_decode: Decode comment trees with the explicit-stack decoder
    """

    client_id: str = Field(..., min_length=1)
    client_secret: SecretStr
    user_agent: str = Field(DEFAULT_USER_AGENT, min_length=1)
    username: Optional[str] = None
    password: Optional[SecretStr] = None
    timeout: int = Field(30, gt=0)
    rate_limit_calls: int = Field(100, gt=0)
    rate_limit_period: int = Field(60, gt=0)
    iterative_decode: bool = False

    @property
    def has_user_credentials(self) -> bool:
        return bool(self.username and self.password)

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """
        Build the configuration from environment variables.

        Raises:
            AuthenticationError: If REDDIT_CLIENT_ID or REDDIT_CLIENT_SECRET
                is not set

        Example:
            >>> config = ClientConfig.from_env()
            >>> config.user_agent
            'snoowire/0.1 (by /u/snoowire)'
        """
        client_id = os.getenv("REDDIT_CLIENT_ID")
        client_secret = os.getenv("REDDIT_CLIENT_SECRET")

        if not client_id:
            raise AuthenticationError("REDDIT_CLIENT_ID is required")
        if not client_secret:
            raise AuthenticationError("REDDIT_CLIENT_SECRET is required")

        return cls(
            client_id=client_id,
            client_secret=client_secret,
            user_agent=os.getenv("REDDIT_USER_AGENT", DEFAULT_USER_AGENT),
            username=os.getenv("REDDIT_USERNAME") or None,
            password=os.getenv("REDDIT_PASSWORD") or None,
            timeout=int(os.getenv("REDDIT_TIMEOUT", "30")),
            rate_limit_calls=int(os.getenv("REDDIT_RATE_LIMIT_CALLS", "100")),
            rate_limit_period=int(os.getenv("REDDIT_RATE_LIMIT_PERIOD", "60")),
            iterative_decode=_env_flag("SNOOWIRE_ITERATIVE_DECODE"),
        )
