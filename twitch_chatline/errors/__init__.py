"""Error types for the chat line reader."""

from .internal import (  # noqa: F401
    ConfigError,
    InternalError,
    NetworkError,
    OAuthError,
    ParsingError,
    UnknownMessageType,
)

__all__ = [
    "ConfigError",
    "InternalError",
    "NetworkError",
    "OAuthError",
    "ParsingError",
    "UnknownMessageType",
]
