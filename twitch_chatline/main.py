"""
Main entry point for the Twitch chat line reader
"""

import argparse
import asyncio
import logging
import sys

from .config import load_config, summarize_config
from .errors import ConfigError, NetworkError, OAuthError, UnknownMessageType
from .irc.client import TwitchChatClient
from .irc.models import PingMessage, UserMessage
from .irc.parser import parse_message
from .logging_config import LoggerConfigurator
from .logs.logger import logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="twitch-chatline",
        description="Read a Twitch channel's chat and log each message.",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--health-check",
        action="store_true",
        help="validate configuration and exit",
    )
    mode.add_argument(
        "--parse",
        metavar="LINE",
        help="classify a single raw chat line and exit",
    )
    return parser


def describe(line: str) -> str:
    """Human-readable classification of one raw line."""
    try:
        message = parse_message(line)
    except UnknownMessageType:
        return "unknown message type"
    if isinstance(message, PingMessage):
        return f"ping server={message.server}"
    return f"privmsg user={message.user} text={message.text}"


def log_chat_message(message: UserMessage) -> None:
    logger.log_event(
        "chat",
        "privmsg",
        author=message.user,
        chat_message=message.text,
    )


async def run(client: TwitchChatClient) -> None:
    try:
        await client.connect()
        await client.listen()
    finally:
        await client.disconnect()


def main(argv=None) -> int:
    """Main function"""
    args = build_parser().parse_args(argv)
    LoggerConfigurator().configure()

    if args.parse is not None:
        print(describe(args.parse))
        return 0

    try:
        config = load_config()
    except ConfigError as e:
        logger.log_event("app", "config_invalid", level=logging.ERROR, error=str(e))
        return 1

    if args.health_check:
        logger.log_event("app", "health_check_ok", summary=summarize_config(config))
        return 0

    logger.log_event("app", "start", user=config.username, channel=config.channel)
    client = TwitchChatClient(config, log_chat_message)
    try:
        asyncio.run(run(client))
    except KeyboardInterrupt:
        logger.log_event("app", "interrupted", level=logging.WARNING)
    except OAuthError as e:
        logger.log_event("app", "login_rejected", level=logging.ERROR, error=str(e))
        return 1
    except NetworkError as e:
        logger.log_event(
            "app", "network_error", level=logging.CRITICAL, error=str(e), exc_info=True
        )
        return 1
    finally:
        logger.log_event("app", "shutdown")
    return 0


if __name__ == "__main__":
    sys.exit(main())
