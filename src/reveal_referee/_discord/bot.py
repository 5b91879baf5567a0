# Area: Discord
"""
reveal_referee._discord.bot — Discord client
============================================

Bot subclass that owns the match coordinator, loads the Matches cog and
registers slash commands, either per guild (``guild_ids`` configured) or
globally.
"""

from __future__ import annotations

import asyncio
import logging
import sys

import discord
from discord.ext import commands

from .threads import DiscordThreadChannels
from .._shared import log_unexpected_error
from ..config import RefereeConfig
from ..coordinator import MatchCoordinator

logger = logging.getLogger("reveal_referee.discord")

COG_EXTENSION = "reveal_referee._discord.cog"


def build_intents(config: RefereeConfig) -> discord.Intents:
    """Guild, guild message and member events; message content only for raw capture."""
    intents = discord.Intents.default()
    intents.guilds = True
    intents.guild_messages = True
    intents.members = True
    intents.message_content = config.capture_raw_messages
    return intents


class RevealBot(commands.Bot):
    """Discord bot running simultaneous reveal matches."""

    def __init__(self, config: RefereeConfig):
        super().__init__(
            command_prefix=commands.when_mentioned,
            intents=build_intents(config),
            application_id=config.application_id,
        )
        self.config = config
        self.channels = DiscordThreadChannels(
            self, auto_archive_minutes=config.thread_auto_archive_minutes
        )
        self.coordinator = MatchCoordinator(config, self.channels)

    async def setup_hook(self) -> None:
        await self.load_extension(COG_EXTENSION)
        await self.sync_commands()

    async def sync_commands(self) -> None:
        if self.config.guild_ids:
            for guild_id in self.config.guild_ids:
                guild = discord.Object(id=guild_id)
                self.tree.copy_global_to(guild=guild)
                await self.tree.sync(guild=guild)
                logger.info(f"Registered GUILD commands for {guild_id}")
        else:
            await self.tree.sync()
            logger.info("Registered GLOBAL commands")

    async def on_ready(self) -> None:
        logger.info(f"Logged in as {self.user}")

    async def on_error(self, event_method: str, *args, **kwargs) -> None:
        error = sys.exc_info()[1]
        if error is None:
            logger.error(f"Unknown error in {event_method}")
            return
        log_unexpected_error(error, operation=event_method)

    async def close(self) -> None:
        self.coordinator.shutdown()
        await super().close()


def run_bot(config: RefereeConfig) -> None:
    """Log in and serve until interrupted. Blocks."""
    bot = RevealBot(config)
    # Logging is configured by setup_logging; keep discord.py from adding its own handler
    bot.run(config.discord_token, log_handler=None)


def sync_only(config: RefereeConfig) -> None:
    """Log in, register slash commands, and exit."""

    async def _sync() -> None:
        async with RevealBot(config) as bot:
            await bot.login(config.discord_token)

    asyncio.run(_sync())
