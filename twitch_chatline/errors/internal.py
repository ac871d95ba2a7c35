"""Centralized internal error hierarchy.

These exceptions provide semantic categories for retry logic and higher-level
error handling. Only raise these inside application/network boundaries; raw
socket errors are wrapped before they reach retry code.

Classes:
  InternalError        – Base for all internal errors.
  NetworkError         – Transient network/IO issues (safe to retry).
  OAuthError           – Login rejected by the chat server (not retried).
  ParsingError         – Protocol line parsing issues.
  UnknownMessageType   – A chat line that is neither PRIVMSG nor PING.
  ConfigError          – Missing or invalid configuration values.
"""

from __future__ import annotations

from collections.abc import Mapping


class InternalError(Exception):
    """Base class for all internal application errors with metadata support.

    Attributes:
        data: Dictionary containing arbitrary structured context data.

    Args:
        message: Descriptive error message.
        data: Optional mapping of additional context data.
    """

    data: dict[str, object]

    def __init__(
        self, message: str, *, data: Mapping[str, object] | None = None
    ) -> None:
        super().__init__(message)
        # Copy into a plain dict to avoid unexpected mutations from caller.
        self.data = dict(data) if data else {}


class NetworkError(InternalError):
    """Exception raised for network or transport layer errors.

    This includes connection timeouts, resets, or a server closing the
    stream, all of which may be retried.
    """


class OAuthError(InternalError):
    """Exception raised when the chat server rejects the login.

    Invalid or expired credentials are not suitable for automatic retry.
    """


class ParsingError(InternalError):
    """Exception raised when a protocol line cannot be parsed."""


class UnknownMessageType(ParsingError):
    """Raised for every chat line shape the parser does not recognize.

    Non-PRIVMSG commands, malformed prefixes, PING without the exact
    ``PING :`` prefix and truncated lines all end up here. The offending
    line is kept in ``data["line"]``.
    """

    def __init__(self, line: str) -> None:
        super().__init__("Unknown message type", data={"line": line})

    @property
    def line(self) -> str:
        return str(self.data["line"])


class ConfigError(InternalError):
    """Exception raised when required configuration is missing or invalid."""


__all__ = [
    "InternalError",
    "NetworkError",
    "OAuthError",
    "ParsingError",
    "UnknownMessageType",
    "ConfigError",
]
