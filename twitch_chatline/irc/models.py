"""Parsed chat line models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class UserMessage:
    """A channel PRIVMSG: sender nickname and trimmed message body."""

    user: str
    text: str


@dataclass(frozen=True, slots=True)
class PingMessage:
    """A server liveness probe; ``server`` is echoed back in the PONG."""

    server: str

    def pong(self) -> str:
        return f"PONG :{self.server}"


ChatMessage = UserMessage | PingMessage
