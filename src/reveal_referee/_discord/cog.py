# Area: Discord
"""
Cog: Matches

Commands:
  /startmatch opponent  -- open a private thread for you and your opponent
  /submit choice        -- record your hidden choice in the match thread
  /reveal               -- post both choices once both players submitted

Listener:
  Messages typed by a player inside their match thread are captured as
  their choice, then deleted from the thread.

Every command translates its interaction into a match command, hands it
to the coordinator, and answers privately unless it is the reveal itself.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

import discord
from discord import app_commands
from discord.ext import commands

from . import messages
from .threads import THREAD_PARENT_TYPES, DiscordThreadChannels
from .._match.commands import IncomingRawMessage, Reveal, StartMatch, Submit
from .._match.state import Participant
from .._shared import log_unexpected_error
from ..coordinator import MatchCoordinator
from ..errors import (
    IncompleteMatchError,
    InvalidParticipantsError,
    NoSuchMatchError,
    NotAParticipantError,
)

logger = logging.getLogger("reveal_referee.discord.cog")


def to_participant(user: discord.abc.User) -> Participant:
    return Participant(participant_id=str(user.id), display_name=user.name)


async def reply_private(interaction: discord.Interaction, content: str) -> None:
    """Answer only the requester, whether or not the interaction was deferred."""
    if interaction.response.is_done():
        await interaction.followup.send(content, ephemeral=True)
    else:
        await interaction.response.send_message(content, ephemeral=True)


class Matches(commands.Cog):
    def __init__(
        self,
        bot: commands.Bot,
        coordinator: MatchCoordinator,
        channels: DiscordThreadChannels,
    ):
        self.bot = bot
        self.coordinator = coordinator
        self.channels = channels

    # -- Commands --------------------------------------------------------------

    @app_commands.command(
        name="startmatch",
        description="Start a new match and create a private reveal thread",
    )
    @app_commands.describe(opponent="Your opponent")
    async def startmatch(self, interaction: discord.Interaction, opponent: discord.User):
        if interaction.guild is None:
            await interaction.response.send_message(messages.GUILD_ONLY, ephemeral=True)
            return

        await interaction.response.defer(ephemeral=True)

        parent = interaction.channel
        if getattr(parent, "type", None) not in THREAD_PARENT_TYPES:
            await interaction.edit_original_response(content=messages.WRONG_CHANNEL_TYPE)
            return

        pair: Tuple[Participant, Participant] = (
            to_participant(interaction.user),
            to_participant(opponent),
        )
        try:
            state = await self.coordinator.dispatch(
                StartMatch(participants=pair, origin=str(parent.id))
            )
        except InvalidParticipantsError:
            await interaction.edit_original_response(content=messages.SAME_OPPONENT)
            return
        except (discord.DiscordException, ValueError) as e:
            logger.error(f"Thread create failed: {e}")
            await interaction.edit_original_response(content=messages.THREAD_CREATE_FAILED)
            return

        await interaction.edit_original_response(
            content=messages.match_created(
                state.channel_key, self.coordinator.config.match_expiry_seconds
            )
        )
        try:
            await self.channels.post(
                state.channel_key,
                messages.welcome(pair, self.coordinator.config.capture_raw_messages),
            )
        except discord.DiscordException as e:
            logger.warning(f"[{state.channel_key}] Could not post welcome message: {e}")

    @app_commands.command(
        name="submit",
        description="Submit your hidden choice to this match thread",
    )
    @app_commands.describe(choice="Your secret choice")
    async def submit(self, interaction: discord.Interaction, choice: str):
        command = Submit(
            channel_key=str(interaction.channel_id),
            submitter_id=str(interaction.user.id),
            value=choice,
        )
        try:
            receipt = await self.coordinator.dispatch(command)
        except NoSuchMatchError:
            await reply_private(interaction, messages.NOT_A_MATCH_SUBMIT)
            return
        except NotAParticipantError:
            await reply_private(interaction, messages.NOT_A_PLAYER)
            return

        await reply_private(
            interaction,
            messages.CHOICE_UPDATED if receipt.replaced else messages.CHOICE_RECORDED,
        )

    @app_commands.command(
        name="reveal",
        description="Reveal both players' stored choices in this thread",
    )
    async def reveal(self, interaction: discord.Interaction):
        try:
            disclosure = await self.coordinator.dispatch(
                Reveal(channel_key=str(interaction.channel_id))
            )
        except NoSuchMatchError:
            await reply_private(interaction, messages.NOT_A_MATCH_REVEAL)
            return
        except IncompleteMatchError as e:
            await reply_private(interaction, messages.not_all_submitted(e.missing_names))
            return

        await interaction.channel.send(embed=messages.build_reveal_embed(disclosure))
        await reply_private(interaction, messages.REVEALED)

    # -- Raw message capture ---------------------------------------------------

    @commands.Cog.listener()
    async def on_message(self, message: discord.Message):
        if message.author.bot:
            return
        channel_key = str(message.channel.id)
        if not self.coordinator.is_match_channel(channel_key):
            return

        receipt = await self.coordinator.dispatch(
            IncomingRawMessage(
                channel_key=channel_key,
                author_id=str(message.author.id),
                content=message.content,
            )
        )
        if receipt is None:
            return

        name = message.author.name
        try:
            await message.delete()
            notice = messages.submitted_notice(name)
        except discord.DiscordException as e:
            logger.error(f"[{channel_key}] Failed to delete message: {e}")
            notice = messages.submitted_but_not_hidden(name)

        try:
            await message.channel.send(notice)
        except discord.DiscordException as e:
            logger.error(f"[{channel_key}] Failed to report capture: {e}")

    # -- Error boundary --------------------------------------------------------

    async def cog_app_command_error(
        self, interaction: discord.Interaction, error: app_commands.AppCommandError
    ):
        original: Optional[BaseException] = getattr(error, "original", None) or error
        command_name = interaction.command.name if interaction.command else "unknown"
        log_unexpected_error(
            original,
            operation=f"/{command_name}",
            context={
                "channel_id": interaction.channel_id,
                "user_id": interaction.user.id if interaction.user else None,
            },
        )
        try:
            if interaction.response.is_done():
                await interaction.edit_original_response(content=messages.UNEXPECTED_ERROR)
            else:
                await interaction.response.send_message(messages.UNEXPECTED_ERROR, ephemeral=True)
        except discord.DiscordException as e:
            logger.error(f"Could not report error to user: {e}")


async def setup(bot: commands.Bot):
    await bot.add_cog(Matches(bot, bot.coordinator, bot.channels))
