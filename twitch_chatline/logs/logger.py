"""Structured event logger for the chat line reader."""

from __future__ import annotations

import logging
import os
import sys
from typing import TextIO


def _supports_color(stream: TextIO) -> bool:
    try:
        return stream.isatty()
    except (AttributeError, ValueError):  # pragma: no cover
        return False


def _is_debug_enabled() -> bool:
    return os.environ.get("DEBUG", "false").lower() in ("true", "1", "yes")


class SimpleFormatter(logging.Formatter):
    LEVEL_COLORS = {
        logging.DEBUG: "\x1b[36m",
        logging.INFO: "\x1b[32m",
        logging.WARNING: "\x1b[33m",
        logging.ERROR: "\x1b[31m",
        logging.CRITICAL: "\x1b[35m",
    }
    RESET = "\x1b[0m"

    def __init__(self, stream: TextIO | None = None) -> None:
        super().__init__()
        self.enable_color = _supports_color(stream or sys.stdout)

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401 (simple override)
        msg = record.getMessage()
        # Longest built-in level name: 'CRITICAL' (8 chars).
        raw_level = record.levelname.ljust(8)
        if self.enable_color:
            color = self.LEVEL_COLORS.get(record.levelno, "")
            return f"{color}{raw_level}{self.RESET} {msg}"
        return f"{raw_level} {msg}"


class ChatLogger:
    """Project logger with lightweight structured event support.

    Conventions:
        * Use ``logger.log_event("chat", "privmsg", user=..., channel=..., **ctx)``.
        * The canonical event name is ``<domain>_<action>``; the human text
          comes from ``human`` or the event catalog template, else it is
          derived from the event name.
        * With ``DEBUG`` enabled the remaining context is appended as
          ``key=value`` pairs.
    """

    def __init__(
        self, name: str = "twitch_chatline", log_file: str | None = None
    ) -> None:
        self.logger = logging.getLogger(name)
        self.log_file = log_file
        self.logger.handlers.clear()
        self.logger.setLevel(logging.DEBUG if _is_debug_enabled() else logging.INFO)
        self.logger.propagate = False

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(SimpleFormatter())
        self.logger.addHandler(console_handler)

        if log_file:
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
                )
            )
            self.logger.addHandler(file_handler)

    def set_level(self, level: int) -> None:
        self.logger.setLevel(level)

    def log_event(
        self,
        domain: str,
        action: str,
        level: int = logging.INFO,
        human: str | None = None,
        *,
        exc_info: bool = False,
        **kwargs: object,
    ) -> None:
        event_name = f"{domain}_{action}".lower()
        human_text = human
        derived = False
        if human_text is None:
            from .event_catalog import EVENT_TEMPLATES

            template = EVENT_TEMPLATES.get((domain, action))
            if template:
                try:
                    human_text = template.format(**kwargs)
                except (KeyError, IndexError, ValueError):
                    human_text = template
            else:
                human_text = f"{domain.replace('_', ' ')}: {action.replace('_', ' ')}"
                derived = True
        if derived:
            kwargs.setdefault("derived", True)
        self._log(level, event_name, human_text, exc_info=exc_info, **kwargs)

    def _log(
        self,
        level: int,
        event_name: str,
        human_text: str,
        exc_info: bool = False,
        **kwargs: object,
    ) -> None:
        if not self.logger.isEnabledFor(level):
            return
        kw: dict[str, object] = dict(kwargs)
        user, channel = self._extract_reserved(kw)
        prefix = self._build_prefix(user, channel)
        msg = (
            self._build_debug_message(event_name, prefix, human_text, kw)
            if _is_debug_enabled()
            else f"{prefix} {human_text}"
        )
        self.logger.log(level, msg, exc_info=exc_info)

    @staticmethod
    def _extract_reserved(kwargs: dict[str, object]) -> tuple[str | None, str | None]:
        user_o = kwargs.pop("user", None)
        channel_o = kwargs.pop("channel", None)
        user = user_o if isinstance(user_o, str) else None
        channel = channel_o if isinstance(channel_o, str) else None
        return user, channel

    @staticmethod
    def _build_prefix(user: str | None, channel: str | None) -> str:
        user_label = user or "system"
        core = f"{user_label}#{channel}" if channel else user_label
        return f"[{core}]"

    @staticmethod
    def _build_debug_message(
        event_name: str, prefix: str, human_text: str, kwargs: dict[str, object]
    ) -> str:
        context = ", ".join(f"{k}={v}" for k, v in kwargs.items())
        # Pad event name to a fixed column for alignment
        base = f"{event_name.ljust(24)} {prefix} {human_text}"
        if context:
            base = f"{base} ({context})"
        return base


logger = ChatLogger()
