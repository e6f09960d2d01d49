# Area: Shared Tests
"""Tests for the command-line entry point."""

import asyncio
from unittest.mock import AsyncMock, Mock, patch

import pytest

from overcookied_client import cli
from overcookied_client._client_config import ENV_MAPPINGS
from overcookied_client._session import ConnectionState, Credential, SessionPhase
from overcookied_client.demo_player import DemoPlayer

from conftest import frame


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for env_key in ENV_MAPPINGS:
        monkeypatch.delenv(env_key, raising=False)
    with patch("overcookied_client._client_config.load_dotenv"):
        yield


class TestParseArgs:
    def test_flags(self):
        args = cli.parse_args([
            "--demo", "--token", "t", "--api-url", "http://h", "--clicks-per-second", "3",
        ])
        assert args.demo is True
        assert args.token == "t"
        assert args.api_url == "http://h"
        assert args.clicks_per_second == 3
        assert args.verbose is False

    def test_overrides_win(self):
        args = cli.parse_args(["--token", "flag-token", "--verify-session"])
        config = cli.apply_overrides({"token": "file-token", "clicks_per_second": 5}, args)
        assert config["token"] == "flag-token"
        assert config["verify_session"] is True
        assert config["clicks_per_second"] == 5


class TestResolveCredential:
    def test_without_verification(self):
        credential = cli.resolve_credential({"token": "t", "user_id": "u1"})
        assert credential == Credential(user_id="u1", token="t")

    def test_with_verification(self):
        session = {"id": "u9", "email": "e", "name": "N", "picture": "", "token": "t"}
        with patch("overcookied_client.cli.AuthClient") as mock_auth:
            mock_auth.return_value.verify_session.return_value = session
            credential = cli.resolve_credential(
                {"token": "t", "verify_session": True, "api_url": "http://h"}
            )
        mock_auth.assert_called_once_with(api_url="http://h")
        assert credential.user_id == "u9"
        assert credential.name == "N"

    def test_verification_failure(self):
        with patch("overcookied_client.cli.AuthClient") as mock_auth:
            mock_auth.return_value.verify_session.return_value = None
            assert cli.resolve_credential({"token": "t", "verify_session": True}) is None


class TestMain:
    def test_missing_config_exits_1(self, capsys):
        assert cli.main([]) == 1
        assert "Missing required config" in capsys.readouterr().err

    def test_bad_origin_exits_1(self):
        assert cli.main(["--token", "t", "--origin", "not-a-url"]) == 1

    def test_runs_session(self, tmp_path):
        with patch("overcookied_client.cli.play_session", new=Mock(return_value="coro")) as mock_play, \
             patch("overcookied_client.cli.asyncio.run", return_value=0) as mock_run, \
             patch("overcookied_client.cli.setup_logging"), \
             patch("overcookied_client.cli.enable_protocol_mode"):
            code = cli.main(["--token", "t", "--api-url", "http://h", "--demo"])

        assert code == 0
        mock_run.assert_called_once_with("coro")
        client, credential, player = mock_play.call_args[0]
        assert client.connection.api_url == "http://h"
        assert credential.token == "t"
        assert isinstance(player, DemoPlayer)

    def test_verification_failure_exits_1(self):
        with patch("overcookied_client.cli.resolve_credential", return_value=None), \
             patch("overcookied_client.cli.setup_logging"), \
             patch("overcookied_client.cli.enable_protocol_mode"):
            assert cli.main(["--token", "t", "--api-url", "http://h"]) == 1


class TestPlaySession:
    @pytest.mark.asyncio
    async def test_failed_connect_returns_1(self, make_client, credential):
        client, _, connector = make_client()
        connector.side_effect = OSError("refused")
        assert await cli.play_session(client, credential) == 1

    @pytest.mark.asyncio
    async def test_runs_until_game_over(self, make_client, credential):
        frames = [
            frame("GAME_START", p1Name="Me", p2Name="Them"),
            frame("UPDATE", p1Score=3),
            frame("GAME_OVER", winner="me"),
        ]
        client, socket, _ = make_client(frames=frames)
        assert await cli.play_session(client, credential) == 0
        assert client.phase == SessionPhase.FINISHED
        assert client.snapshot.winner == "me"
        assert socket.closed
        assert client.connection_state == ConnectionState.DISCONNECTED

    @pytest.mark.asyncio
    async def test_socket_drop_ends_session(self, make_client, credential):
        client, _, _ = make_client(frames=[frame("GAME_START")])
        code = await asyncio.wait_for(cli.play_session(client, credential), timeout=1)
        assert code == 0
        assert client.phase == SessionPhase.PLAYING
