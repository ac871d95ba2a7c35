"""Twitch chat subsystem package.

Contains the line parser, its value models, CRLF framing, the dispatcher that
answers PINGs and forwards user messages, and the asyncio connection client.
"""

from .client import TwitchChatClient  # noqa: F401
from .dispatcher import ChatDispatcher  # noqa: F401
from .framing import split_lines  # noqa: F401
from .models import ChatMessage, PingMessage, UserMessage  # noqa: F401
from .parser import parse_message, try_parse_message  # noqa: F401

__all__ = [
    "ChatDispatcher",
    "ChatMessage",
    "PingMessage",
    "TwitchChatClient",
    "UserMessage",
    "parse_message",
    "split_lines",
    "try_parse_message",
]
