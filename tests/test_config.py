# Area: Shared Tests
"""Tests for configuration loading and validation."""

import json
import logging

import pytest

from reveal_referee.config import (
    DEFAULT_EXPIRY_SECONDS,
    RefereeConfig,
    load_config,
    read_environment,
    validate_for_discord,
)
from reveal_referee.errors import ConfigError


class TestRefereeConfigDefaults:
    """Field defaults."""

    def test_defaults(self):
        config = RefereeConfig()
        assert config.match_expiry_seconds == DEFAULT_EXPIRY_SECONDS == 600
        assert config.guild_ids == []
        assert config.capture_raw_messages is True
        assert config.thread_auto_archive_minutes == 60
        assert config.log_level_value == logging.INFO


class TestLoadConfig:
    """File + environment layering."""

    def test_environment_only(self):
        config = load_config(environ={
            "DISCORD_TOKEN": "tok",
            "CLIENT_ID": "1234",
            "MATCH_EXPIRY_SECONDS": "90",
            "CAPTURE_RAW_MESSAGES": "false",
        })
        assert config.discord_token == "tok"
        assert config.application_id == 1234
        assert config.match_expiry_seconds == 90
        assert config.capture_raw_messages is False

    def test_multi_guild_ids_win_over_guild_id(self):
        env = {"MULTI_GUILD_IDS": "11, 22,,33", "GUILD_ID": "99"}
        assert read_environment(env) == {"guild_ids": "11, 22,,33"}
        assert load_config(environ=env).guild_ids == [11, 22, 33]

    def test_single_guild_id(self):
        assert load_config(environ={"GUILD_ID": "42"}).guild_ids == [42]

    def test_file_then_environment(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({
            "discord_token": "from-file",
            "match_expiry_seconds": 120,
            "log_level": "debug",
        }))
        config = load_config(str(path), environ={"DISCORD_TOKEN": "from-env"})
        assert config.discord_token == "from-env"
        assert config.match_expiry_seconds == 120
        assert config.log_level == "DEBUG"

    def test_overrides_applied_last(self):
        config = load_config(environ={"LOG_LEVEL": "INFO"}, overrides={"log_level": "warning"})
        assert config.log_level == "WARNING"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(str(tmp_path / "nope.json"), environ={})

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError, match="not valid JSON"):
            load_config(str(path), environ={})


class TestConfigValidation:
    """Rejected values become ConfigError."""

    @pytest.mark.parametrize("env", [
        {"MATCH_EXPIRY_SECONDS": "0"},
        {"MATCH_EXPIRY_SECONDS": "soon"},
        {"THREAD_AUTO_ARCHIVE_MINUTES": "30"},
        {"LOG_LEVEL": "chatty"},
        {"GUILD_ID": "not-a-number"},
    ])
    def test_invalid_values(self, env):
        with pytest.raises(ConfigError) as exc_info:
            load_config(environ=env)
        assert exc_info.value.errors

    def test_discord_requires_token(self):
        with pytest.raises(ConfigError, match="discord_token"):
            validate_for_discord(RefereeConfig())

    def test_discord_token_present(self):
        validate_for_discord(RefereeConfig(discord_token="tok"))
