# Area: Shared Tests
"""Tests for the command-line entry point."""

import logging
from unittest.mock import patch

import pytest

from reveal_referee.cli import main, parse_args


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for key in ("DISCORD_TOKEN", "CLIENT_ID", "GUILD_ID", "MULTI_GUILD_IDS", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    with patch("reveal_referee.config.load_dotenv"):
        yield monkeypatch
    logging.getLogger("reveal_referee").handlers.clear()
    logging.getLogger("discord").handlers.clear()


class TestParseArgs:
    """Argument parsing."""

    def test_defaults(self):
        args = parse_args([])
        assert args.config is None
        assert args.log_level is None
        assert args.sync_only is False

    def test_all_flags(self):
        args = parse_args(["--config", "c.json", "--log-level", "DEBUG", "--sync-only"])
        assert args.config == "c.json"
        assert args.log_level == "DEBUG"
        assert args.sync_only is True


class TestMain:
    """Startup paths."""

    def test_missing_token_exits_with_error(self, clean_env, capsys):
        assert main([]) == 1
        assert "discord_token" in capsys.readouterr().err

    def test_invalid_log_level_exits_with_error(self, clean_env):
        clean_env.setenv("DISCORD_TOKEN", "tok")
        assert main(["--log-level", "chatty"]) == 1

    def test_sync_only(self, clean_env):
        clean_env.setenv("DISCORD_TOKEN", "tok")
        with patch("reveal_referee._discord.sync_only") as sync, \
                patch("reveal_referee._discord.run_bot") as run:
            assert main(["--sync-only"]) == 0
        sync.assert_called_once()
        assert sync.call_args.args[0].discord_token == "tok"
        run.assert_not_called()

    def test_runs_bot(self, clean_env):
        clean_env.setenv("DISCORD_TOKEN", "tok")
        with patch("reveal_referee._discord.run_bot") as run:
            assert main(["--log-level", "warning"]) == 0
        config = run.call_args.args[0]
        assert config.log_level == "WARNING"
