# Area: Shared
"""
reveal_referee.config — Runtime configuration
=============================================

Settings are read, in increasing priority, from:

    1. Field defaults
    2. A JSON config file (``--config``)
    3. A ``.env`` file in the working directory
    4. Environment variables

and validated with pydantic before anything starts.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from .errors import ConfigError

# Discord only accepts these auto-archive durations for threads
THREAD_ARCHIVE_MINUTES = (60, 1440, 4320, 10080)

DEFAULT_EXPIRY_SECONDS = 600

# Environment variable -> config key
ENV_MAPPINGS = {
    "DISCORD_TOKEN": "discord_token",
    "CLIENT_ID": "application_id",
    "GUILD_ID": "guild_ids",
    "MULTI_GUILD_IDS": "guild_ids",
    "MATCH_EXPIRY_SECONDS": "match_expiry_seconds",
    "THREAD_AUTO_ARCHIVE_MINUTES": "thread_auto_archive_minutes",
    "CAPTURE_RAW_MESSAGES": "capture_raw_messages",
    "LOG_FILE": "log_file",
    "LOG_LEVEL": "log_level",
}

# Keys needed before the bot can log in
REQUIRED_FOR_DISCORD = ["discord_token"]


class RefereeConfig(BaseModel):
    """Validated settings for one referee process."""

    discord_token: str = ""
    application_id: Optional[int] = None
    guild_ids: List[int] = Field(default_factory=list)
    match_expiry_seconds: float = Field(default=DEFAULT_EXPIRY_SECONDS, gt=0)
    thread_auto_archive_minutes: int = 60
    capture_raw_messages: bool = True
    log_file: str = "reveal_referee.log"
    log_level: str = "INFO"

    @field_validator("guild_ids", mode="before")
    @classmethod
    def _split_guild_ids(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [part.strip() for part in value.split(",") if part.strip()]
        if isinstance(value, int):
            return [value]
        return value

    @field_validator("thread_auto_archive_minutes")
    @classmethod
    def _check_archive_minutes(cls, value: int) -> int:
        if value not in THREAD_ARCHIVE_MINUTES:
            raise ValueError(f"must be one of {THREAD_ARCHIVE_MINUTES}")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level '{value}'")
        return level

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


def read_environment(environ: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
    """Collect config overrides from environment variables."""
    environ = os.environ if environ is None else environ
    overrides: Dict[str, Any] = {}
    for env_key, config_key in ENV_MAPPINGS.items():
        if env_key == "GUILD_ID" and "MULTI_GUILD_IDS" in environ:
            continue
        if env_key in environ:
            overrides[config_key] = environ[env_key]
    return overrides


def load_config(
    config_path: Optional[str] = None,
    environ: Optional[Dict[str, str]] = None,
    use_dotenv: bool = True,
    overrides: Optional[Dict[str, Any]] = None,
) -> RefereeConfig:
    """
    Load and validate configuration.

    Raises
    ------
    ConfigError
        If the config file cannot be read or a value fails validation.
    """
    data: Dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise ConfigError(f"Config file not found: {config_path}")
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Config file is not valid JSON: {e}") from e

    if use_dotenv and environ is None:
        load_dotenv()

    data.update(read_environment(environ))
    if overrides:
        data.update(overrides)

    try:
        return RefereeConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}", errors=e.errors()) from e


def validate_for_discord(config: RefereeConfig) -> None:
    """Check that the settings needed to log in are present."""
    missing = [key for key in REQUIRED_FOR_DISCORD if not getattr(config, key)]
    if missing:
        raise ConfigError(f"Missing required config keys: {missing}")
