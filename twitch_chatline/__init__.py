"""Twitch chat line reader: classifies chat lines as PING or PRIVMSG."""

from .errors import UnknownMessageType  # noqa: F401
from .irc.models import ChatMessage, PingMessage, UserMessage  # noqa: F401
from .irc.parser import parse_message, try_parse_message  # noqa: F401

__version__ = "0.1.0"

__all__ = [
    "ChatMessage",
    "PingMessage",
    "UnknownMessageType",
    "UserMessage",
    "parse_message",
    "try_parse_message",
]
