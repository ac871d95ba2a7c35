"""Chat connection configuration loaded from the environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from .errors import ConfigError

USERNAME_ENV = "TWITCH_USERNAME"
TOKEN_ENV = "TWITCH_TOKEN"
CHANNEL_ENV = "TWITCH_CHANNEL"


@dataclass(frozen=True, slots=True)
class ChatConfig:
    """Credentials and target channel for a chat connection."""

    username: str
    token: str
    channel: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "username", normalize_username(self.username))
        object.__setattr__(self, "token", normalize_token(self.token))
        object.__setattr__(self, "channel", normalize_channel(self.channel))


def normalize_username(username: str) -> str:
    return username.strip().lower()


def normalize_token(token: str) -> str:
    token = token.strip()
    return token if token.startswith("oauth:") else f"oauth:{token}"


def normalize_channel(channel: str) -> str:
    return channel.strip().lstrip("#").lower()


def load_config(environ: Mapping[str, str] | None = None) -> ChatConfig:
    """Build a :class:`ChatConfig` from environment variables.

    Args:
        environ: Mapping to read from; defaults to ``os.environ``.

    Raises:
        ConfigError: If any of the required variables is missing or blank.
    """
    env = os.environ if environ is None else environ
    values = {name: (env.get(name) or "").strip() for name in (USERNAME_ENV, TOKEN_ENV, CHANNEL_ENV)}
    missing = [name for name, value in values.items() if not value]
    if missing:
        raise ConfigError(
            f"Missing required configuration: {', '.join(missing)}",
            data={"missing": missing},
        )
    return ChatConfig(
        username=values[USERNAME_ENV],
        token=values[TOKEN_ENV],
        channel=values[CHANNEL_ENV],
    )


def summarize_config(config: ChatConfig) -> str:
    """One-line description of the configuration with the token masked."""
    return f"user={config.username} channel=#{config.channel} token=oauth:***"
