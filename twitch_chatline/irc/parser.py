"""Twitch chat line parser.

Classifies one already-framed protocol line as either a ``PING`` from the
server or a channel ``PRIVMSG``. Everything else is rejected with
:class:`UnknownMessageType`. The functions here are pure: no logging, no I/O,
no state kept between calls.

Recognized shapes::

    PING :tmi.twitch.tv
    :carkhy!carkhy@carkhy.tmi.twitch.tv PRIVMSG #captaincallback :backseating
"""

from __future__ import annotations

from enum import Enum, auto

from ..errors import UnknownMessageType
from .models import ChatMessage, PingMessage, UserMessage

PING_PREFIX = "PING :"
PRIVMSG_TOKEN = "PRIVMSG"


class _ParsingState(Enum):
    USER_NAME = auto()
    ADDITIONAL_USER_INFO = auto()
    MESSAGE_TOKEN = auto()
    CHANNEL = auto()
    MESSAGE_TEXT = auto()


def parse_message(line: str) -> ChatMessage:
    """Parse a single chat line.

    Lines starting with ``:`` are treated as prefixed user messages, anything
    else as a PING.

    Raises:
        UnknownMessageType: The line is neither a PRIVMSG nor a PING.
    """
    if line.startswith(":"):
        return parse_user_message(line)
    return parse_ping_message(line)


def parse_ping_message(line: str) -> PingMessage:
    """Parse ``PING :<server>``; the server argument is kept verbatim."""
    if not line.startswith(PING_PREFIX):
        raise UnknownMessageType(line)
    return PingMessage(server=line[len(PING_PREFIX) :])


def parse_user_message(line: str) -> UserMessage:
    """Parse ``:<nick>!<user>@<host> PRIVMSG #<channel> :<body>``.

    The nickname is everything between the last ``:`` seen before the first
    ``!`` and that ``!``. The body starts one character after the first
    character following the channel, which drops the ``:`` sigil of the
    trailing parameter, and is stripped of surrounding whitespace.
    """
    state = _ParsingState.USER_NAME
    user_name = ""
    marker = 0

    for i, char in enumerate(line):
        if state is _ParsingState.USER_NAME:
            # :carkhy!carkhy@carkhy.tmi.twitch.tv
            if char == ":":
                marker = i + 1
            elif char == " ":
                break
            elif char == "!":
                user_name = line[marker:i]
                state = _ParsingState.ADDITIONAL_USER_INFO
        elif state is _ParsingState.ADDITIONAL_USER_INFO:
            if char == " ":
                marker = i + 1
                state = _ParsingState.MESSAGE_TOKEN
        elif state is _ParsingState.MESSAGE_TOKEN:
            # PRIVMSG #captaincallback :backseating
            if char == " ":
                if line[marker:i] != PRIVMSG_TOKEN:
                    break
                state = _ParsingState.CHANNEL
        elif state is _ParsingState.CHANNEL:
            if char == " ":
                state = _ParsingState.MESSAGE_TEXT
        else:
            return UserMessage(user=user_name, text=line[i + 1 :].strip())

    raise UnknownMessageType(line)


def try_parse_message(line: str) -> ChatMessage | None:
    """Like :func:`parse_message` but returns ``None`` for unknown lines."""
    try:
        return parse_message(line)
    except UnknownMessageType:
        return None


__all__ = [
    "PING_PREFIX",
    "PRIVMSG_TOKEN",
    "parse_message",
    "parse_ping_message",
    "parse_user_message",
    "try_parse_message",
]
