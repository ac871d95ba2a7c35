"""Minimal asyncio Twitch chat client.

Opens a plain TCP connection, performs the PASS/NICK/JOIN handshake, waits for
the server to accept the login and then feeds everything it reads into a
:class:`ChatDispatcher`.
"""

from __future__ import annotations

import asyncio
import codecs
import logging

from ..config import ChatConfig
from ..constants import (
    CHAT_CONNECT_MAX_ATTEMPTS,
    CHAT_CONNECT_MAX_WAIT,
    CHAT_CONNECT_TIMEOUT,
    CHAT_ENCODING,
    CHAT_LOGIN_TIMEOUT,
    CHAT_READ_SIZE,
    TWITCH_IRC_PORT,
    TWITCH_IRC_SERVER,
)
from ..errors import NetworkError, OAuthError
from ..logs.logger import logger
from ..utils.retry import RetryExhaustedError, retry_async
from .dispatcher import ChatDispatcher, MessageHandler
from .framing import LINE_TERMINATOR

WELCOME_NUMERIC = "001"
LOGIN_FAILURE_NOTICES = (
    "Login authentication failed",
    "Improperly formatted auth",
)


def is_welcome(line: str) -> bool:
    """True for the ``001`` reply that confirms a successful login."""
    parts = line.split(" ", 2)
    return len(parts) > 1 and parts[0].startswith(":") and parts[1] == WELCOME_NUMERIC


def is_login_failure(line: str) -> bool:
    """True for the NOTICE Twitch sends before dropping a rejected login."""
    parts = line.split(" ", 2)
    if len(parts) < 3 or parts[1] != "NOTICE":
        return False
    return any(notice in parts[2] for notice in LOGIN_FAILURE_NOTICES)


class TwitchChatClient:
    def __init__(
        self,
        config: ChatConfig,
        message_handler: MessageHandler | None = None,
        *,
        server: str = TWITCH_IRC_SERVER,
        port: int = TWITCH_IRC_PORT,
    ) -> None:
        self.config = config
        self.server = server
        self.port = port
        self.reader: asyncio.StreamReader | None = None
        self.writer: asyncio.StreamWriter | None = None
        self.running = False
        self._decoder = codecs.getincrementaldecoder(CHAT_ENCODING)(errors="replace")
        self.dispatcher = ChatDispatcher(
            self.send_line,
            message_handler,
            username=config.username,
            channel=config.channel,
        )

    @property
    def connected(self) -> bool:
        return self.writer is not None

    async def connect(
        self,
        max_attempts: int = CHAT_CONNECT_MAX_ATTEMPTS,
        max_wait: float = CHAT_CONNECT_MAX_WAIT,
    ) -> None:
        """Connect and authenticate, retrying with backoff.

        Raises:
            OAuthError: The server rejected the credentials.
            NetworkError: If every attempt failed.
        """
        logger.log_event(
            "chat",
            "connect_start",
            user=self.config.username,
            server=self.server,
            port=self.port,
        )

        async def attempt_connect(attempt: int) -> tuple[bool, bool]:
            try:
                await self._open_and_authenticate()
            except (OSError, asyncio.TimeoutError, NetworkError) as e:
                logger.log_event(
                    "chat",
                    "connect_attempt_failed",
                    level=logging.WARNING,
                    user=self.config.username,
                    attempt=attempt,
                    error=str(e) or type(e).__name__,
                )
                await self._close_writer()
                raise
            except OAuthError:
                await self._close_writer()
                raise
            return True, False

        try:
            await retry_async(
                attempt_connect, max_attempts=max_attempts, max_wait=max_wait
            )
        except OAuthError as e:
            logger.log_event(
                "chat",
                "login_failed",
                level=logging.ERROR,
                user=self.config.username,
                notice=e.data.get("notice", ""),
            )
            raise
        except RetryExhaustedError as e:
            logger.log_event(
                "chat",
                "connect_failed",
                level=logging.ERROR,
                user=self.config.username,
                attempts=e.attempts,
            )
            raise NetworkError(
                f"Could not connect to {self.server}:{self.port}",
                data={"attempts": e.attempts},
            ) from e.final_exception
        logger.log_event(
            "chat",
            "connect_success",
            user=self.config.username,
            channel=self.config.channel,
        )

    async def _open_and_authenticate(self) -> None:
        await self._close_writer()
        self._decoder.reset()
        self.dispatcher.buffer = ""
        self.reader, self.writer = await asyncio.wait_for(
            asyncio.open_connection(self.server, self.port),
            timeout=CHAT_CONNECT_TIMEOUT,
        )
        await self.send_line(f"PASS {self.config.token}")
        await self.send_line(f"NICK {self.config.username}")
        await self.send_line(f"JOIN #{self.config.channel}")
        await asyncio.wait_for(self._wait_for_welcome(), timeout=CHAT_LOGIN_TIMEOUT)

    async def _wait_for_welcome(self) -> None:
        """Read lines until the server accepts or rejects the login.

        Raises:
            OAuthError: A login failure NOTICE arrived.
            NetworkError: The server closed the stream first.
        """
        assert self.reader is not None
        while True:
            raw = await self.reader.readline()
            if not raw:
                raise NetworkError("Connection closed during login")
            line = raw.decode(CHAT_ENCODING, errors="replace").rstrip("\r\n")
            if is_welcome(line):
                return
            if is_login_failure(line):
                raise OAuthError("Login rejected", data={"notice": line})
            if line.strip():
                await self.dispatcher.handle_line(line)

    async def send_line(self, line: str) -> None:
        if not self.writer:
            raise NetworkError("Not connected", data={"line": line})
        if not line.startswith("PASS "):
            logger.log_event(
                "chat", "send", level=logging.DEBUG, user=self.config.username, line=line
            )
        self.writer.write(f"{line}{LINE_TERMINATOR}".encode(CHAT_ENCODING))
        await self.writer.drain()

    async def listen(self) -> None:
        """Read until the server closes the stream or :meth:`disconnect` is called.

        Raises:
            NetworkError: Not connected, or the connection failed mid-stream.
        """
        if not self.reader:
            raise NetworkError("Not connected")
        self.running = True
        try:
            while self.running:
                try:
                    data = await self.reader.read(CHAT_READ_SIZE)
                except OSError as e:
                    logger.log_event(
                        "chat",
                        "connection_lost",
                        level=logging.ERROR,
                        user=self.config.username,
                        error=str(e) or type(e).__name__,
                    )
                    raise NetworkError(
                        "Connection lost", data={"server": self.server}
                    ) from e
                if not data:
                    logger.log_event(
                        "chat",
                        "stream_closed",
                        level=logging.WARNING,
                        user=self.config.username,
                    )
                    break
                await self.dispatcher.feed(self._decoder.decode(data))
        finally:
            self.running = False

    async def disconnect(self) -> None:
        self.running = False
        await self._close_writer()
        self.reader = None
        logger.log_event("chat", "disconnected", user=self.config.username)

    async def _close_writer(self) -> None:
        writer, self.writer = self.writer, None
        if writer is None:
            return
        writer.close()
        try:
            await writer.wait_closed()
        except OSError as e:
            logger.log_event(
                "chat",
                "close_error",
                level=logging.DEBUG,
                user=self.config.username,
                error=str(e),
            )
