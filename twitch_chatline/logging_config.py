"""
Root logging configuration using the colorlog library.

The structured ``ChatLogger`` writes its own lines; this module configures the
root logger so third-party and stdlib ``logging`` output (asyncio, tenacity)
shares the same colored format and level.
"""

import logging
import os
import sys

import colorlog

LOG_FORMAT = (
    "%(asctime)s %(log_color)s%(levelname)-8s%(reset)s "
    "%(message_log_color)s%(message)s"
)
LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "magenta",
}


def debug_level_from_env() -> int:
    debug_env = os.environ.get("DEBUG", "").lower()
    return logging.DEBUG if debug_env in ("true", "1", "yes") else logging.INFO


def build_formatter() -> colorlog.ColoredFormatter:
    return colorlog.ColoredFormatter(
        LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        log_colors=LOG_COLORS,
        secondary_log_colors={
            "message": {
                "ERROR": "red",
                "CRITICAL": "magenta",
            }
        },
        reset=True,
    )


class LoggerConfigurator:
    """Handles logging configuration using colorlog.

    Uses environment variables:
    - DEBUG: Set to 'true', '1', or 'yes' for DEBUG level, otherwise INFO
    """

    def __init__(self, config=None):
        self.config = config or {}

    def configure(self) -> int:
        """Install the colored handler on the root logger; returns the level."""
        log_level = self.config.get("level", debug_level_from_env())
        formatter = build_formatter()

        handler = logging.StreamHandler(self.config.get("stream", sys.stderr))
        handler.setFormatter(formatter)

        root_logger = logging.getLogger()
        root_logger.handlers.clear()
        root_logger.addHandler(handler)
        root_logger.setLevel(log_level)

        # asyncio debug chatter is noisy at DEBUG
        logging.getLogger("asyncio").setLevel(logging.INFO)

        from .logs import logger

        logger.set_level(log_level)
        return log_level
