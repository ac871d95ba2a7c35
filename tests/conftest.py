from unittest.mock import AsyncMock, MagicMock

import pytest

from twitch_chatline.config import ChatConfig


@pytest.fixture
def chat_config() -> ChatConfig:
    return ChatConfig(username="Tester", token="abc123", channel="#MyChan")


@pytest.fixture
def fake_writer() -> MagicMock:
    """StreamWriter stand-in that records written bytes."""
    writer = MagicMock()
    writer.written = []
    writer.write.side_effect = writer.written.append
    writer.drain = AsyncMock()
    writer.wait_closed = AsyncMock()
    return writer

