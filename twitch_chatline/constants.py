"""
Configuration constants for the Twitch chat line reader.

Each constant can be overridden by setting an environment variable with the
same name.
"""

import os


def _get_env_int(name: str, default: int) -> int:
    """Retrieve an integer value from an environment variable.

    Falls back to ``default`` when the variable is unset or not an integer.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            print(
                f"Warning: Invalid integer value for {name}='{value}', using default {default}"
            )
    return default


def _get_env_float(name: str, default: float) -> float:
    """Retrieve a float value from an environment variable.

    Falls back to ``default`` when the variable is unset or not a number.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            return float(value)
        except ValueError:
            print(
                f"Warning: Invalid float value for {name}='{value}', using default {default}"
            )
    return default


def _get_env_str(name: str, default: str) -> str:
    return os.getenv(name) or default


# Connection
TWITCH_IRC_SERVER = _get_env_str("TWITCH_IRC_SERVER", "irc.chat.twitch.tv")
TWITCH_IRC_PORT = _get_env_int("TWITCH_IRC_PORT", 6667)
CHAT_CONNECT_TIMEOUT = _get_env_float("CHAT_CONNECT_TIMEOUT", 15.0)
CHAT_LOGIN_TIMEOUT = _get_env_float("CHAT_LOGIN_TIMEOUT", 10.0)
CHAT_CONNECT_MAX_ATTEMPTS = _get_env_int("CHAT_CONNECT_MAX_ATTEMPTS", 5)
CHAT_CONNECT_MAX_WAIT = _get_env_float("CHAT_CONNECT_MAX_WAIT", 30.0)
CHAT_READ_SIZE = _get_env_int("CHAT_READ_SIZE", 4096)

# Encoding used on the wire
CHAT_ENCODING = "utf-8"
