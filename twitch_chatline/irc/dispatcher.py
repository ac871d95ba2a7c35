"""Frames incoming chat data, parses each line and dispatches the result."""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from ..errors import UnknownMessageType
from ..logs.logger import logger
from .framing import split_lines
from .models import ChatMessage, PingMessage, UserMessage
from .parser import parse_message

SendLine = Callable[[str], Awaitable[None]]
MessageHandler = Callable[[UserMessage], Any]


class ChatDispatcher:
    """Turns raw chat data into handler calls.

    PINGs are answered through ``send_line``; user messages go to the
    registered handler; unrecognized lines are counted and dropped.
    """

    def __init__(
        self,
        send_line: SendLine,
        message_handler: MessageHandler | None = None,
        *,
        username: str | None = None,
        channel: str | None = None,
    ) -> None:
        self.send_line = send_line
        self.message_handler = message_handler
        self.username = username
        self.channel = channel
        self.buffer = ""
        self.lines_seen = 0
        self.unknown_lines = 0

    def set_message_handler(self, handler: MessageHandler | None) -> None:
        self.message_handler = handler

    async def feed(self, data: str) -> None:
        """Append ``data`` to the buffer and handle every complete line."""
        lines, self.buffer = split_lines(self.buffer + data)
        for line in lines:
            await self.handle_line(line)

    async def handle_line(self, line: str) -> ChatMessage | None:
        self.lines_seen += 1
        try:
            message = parse_message(line)
        except UnknownMessageType:
            self.unknown_lines += 1
            logger.log_event(
                "chat",
                "unknown_line",
                level=logging.DEBUG,
                user=self.username,
                raw=line,
            )
            return None
        if isinstance(message, PingMessage):
            await self._handle_ping(message)
        else:
            await self._handle_user_message(message)
        return message

    async def _handle_ping(self, message: PingMessage) -> None:
        logger.log_event(
            "chat",
            "ping",
            level=logging.DEBUG,
            user=self.username,
            server=message.server,
        )
        await self.send_line(message.pong())

    async def _handle_user_message(self, message: UserMessage) -> None:
        logger.log_event(
            "chat",
            "dispatch_message",
            level=logging.DEBUG,
            user=self.username,
            channel=self.channel,
            author=message.user,
        )
        if not self.message_handler:
            return
        try:
            if inspect.iscoroutinefunction(self.message_handler):
                await self.message_handler(message)
            else:
                await asyncio.to_thread(self.message_handler, message)
        except Exception as e:  # noqa: BLE001
            logger.log_event(
                "chat",
                "handler_error",
                level=logging.ERROR,
                user=self.username,
                channel=self.channel,
                error=str(e),
                exc_info=True,
            )
