# Area: Discord
"""
reveal_referee._discord.threads — Private thread provider
=========================================================

Opens one private thread per match under the text channel where
/startmatch was run, adds both players to it, and deletes it when the
match expires. Channel keys are thread ids as strings.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Tuple

import discord

from . import messages
from .._match.state import Participant
from ..channels import ChannelLifecycle

logger = logging.getLogger("reveal_referee.discord.threads")

# Parent channel types a private thread can be opened under
THREAD_PARENT_TYPES = (discord.ChannelType.text, discord.ChannelType.news)


class DiscordThreadChannels(ChannelLifecycle):
    """ChannelLifecycle backed by Discord private threads."""

    def __init__(self, client: discord.Client, auto_archive_minutes: int = 60):
        self.client = client
        self.auto_archive_minutes = auto_archive_minutes
        self._threads: Dict[str, discord.Thread] = {}

    async def create_isolated_channel(
        self,
        participants: Tuple[Participant, Participant],
        origin: Optional[str] = None,
    ) -> str:
        """
        Raises
        ------
        ValueError
            If ``origin`` is missing or is not a text/announcement channel.
        discord.DiscordException
            If Discord refuses to create the thread.
        """
        if origin is None:
            raise ValueError("A private match thread needs a parent channel")
        parent = await self._resolve(origin)
        if getattr(parent, "type", None) not in THREAD_PARENT_TYPES:
            raise ValueError(f"Channel {origin} cannot host private threads")

        thread = await parent.create_thread(
            name=messages.thread_name(participants),
            auto_archive_duration=self.auto_archive_minutes,
            type=discord.ChannelType.private_thread,
            reason="Match reveal thread",
        )
        channel_key = str(thread.id)
        self._threads[channel_key] = thread

        for participant in participants:
            try:
                await thread.add_user(discord.Object(id=int(participant.participant_id)))
            except discord.DiscordException as e:
                logger.warning(
                    f"[{channel_key}] Could not add {participant.participant_id}: {e}"
                )

        logger.info(f"[{channel_key}] Private thread '{thread.name}' created")
        return channel_key

    async def delete_channel(self, channel_key: str) -> None:
        thread = self._threads.pop(channel_key, None)
        if thread is None:
            thread = await self._resolve(channel_key)
        await thread.delete()

    async def post(self, channel_key: str, content: str) -> None:
        """Send a plain message into a match thread."""
        thread = self._threads.get(channel_key) or await self._resolve(channel_key)
        await thread.send(content)

    async def _resolve(self, channel_key: str):
        channel = self.client.get_channel(int(channel_key))
        if channel is None:
            channel = await self.client.fetch_channel(int(channel_key))
        return channel
