from unittest.mock import AsyncMock, patch

import pytest

from twitch_chatline import main as main_module
from twitch_chatline.errors import NetworkError, OAuthError
from twitch_chatline.main import describe, main


@pytest.fixture(autouse=True)
def _no_logging_setup():
    with patch.object(main_module.LoggerConfigurator, "configure"):
        yield


@pytest.fixture
def env(monkeypatch):
    monkeypatch.setenv("TWITCH_USERNAME", "tester")
    monkeypatch.setenv("TWITCH_TOKEN", "abc")
    monkeypatch.setenv("TWITCH_CHANNEL", "mychan")


def test_describe_privmsg():
    line = ":carkhy!carkhy@carkhy.tmi.twitch.tv PRIVMSG #captaincallback :hi there"
    assert describe(line) == "privmsg user=carkhy text=hi there"


def test_describe_ping_and_unknown():
    assert describe("PING :tmi.twitch.tv") == "ping server=tmi.twitch.tv"
    assert describe(":x!y@z JOIN #c") == "unknown message type"


def test_parse_mode_prints_classification(capsys):
    assert main(["--parse", "PING :tmi.twitch.tv"]) == 0
    assert capsys.readouterr().out.strip() == "ping server=tmi.twitch.tv"


def test_health_check_passes_with_config(env):
    assert main(["--health-check"]) == 0


def test_missing_config_fails(monkeypatch):
    for name in ("TWITCH_USERNAME", "TWITCH_TOKEN", "TWITCH_CHANNEL"):
        monkeypatch.delenv(name, raising=False)
    assert main(["--health-check"]) == 1
    assert main([]) == 1


def test_run_connects_listens_and_disconnects(env):
    with patch.object(main_module.TwitchChatClient, "connect", AsyncMock()) as connect, patch.object(
        main_module.TwitchChatClient, "listen", AsyncMock()
    ) as listen, patch.object(
        main_module.TwitchChatClient, "disconnect", AsyncMock()
    ) as disconnect:
        assert main([]) == 0
    connect.assert_awaited_once()
    listen.assert_awaited_once()
    disconnect.assert_awaited_once()


def test_network_failure_exits_nonzero(env):
    with patch.object(
        main_module.TwitchChatClient,
        "connect",
        AsyncMock(side_effect=NetworkError("down")),
    ), patch.object(main_module.TwitchChatClient, "disconnect", AsyncMock()) as disconnect:
        assert main([]) == 1
    disconnect.assert_awaited_once()


def test_connection_lost_while_listening_exits_nonzero(env):
    with patch.object(main_module.TwitchChatClient, "connect", AsyncMock()), patch.object(
        main_module.TwitchChatClient,
        "listen",
        AsyncMock(side_effect=NetworkError("Connection lost")),
    ), patch.object(main_module.TwitchChatClient, "disconnect", AsyncMock()) as disconnect:
        assert main([]) == 1
    disconnect.assert_awaited_once()


def test_rejected_login_exits_nonzero(env):
    with patch.object(
        main_module.TwitchChatClient,
        "connect",
        AsyncMock(side_effect=OAuthError("Login rejected")),
    ), patch.object(main_module.TwitchChatClient, "disconnect", AsyncMock()):
        assert main([]) == 1


def test_chat_messages_are_logged_once(env):
    with patch.object(main_module, "logger") as mock_logger:
        main_module.log_chat_message(main_module.UserMessage(user="a", text="hi"))
    assert mock_logger.log_event.call_count == 1
    assert mock_logger.log_event.call_args.args[:2] == ("chat", "privmsg")
