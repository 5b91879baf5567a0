# Area: Channels
"""
reveal_referee.channels — Channel lifecycle providers
=====================================================

A match lives in an isolated channel that only its two participants can
see. The coordinator asks a ``ChannelLifecycle`` to open that channel
when a match starts and to delete it when the match expires.

Two implementations ship with the package:

- ``InMemoryChannels`` keeps channels in a dict. Used for local runs
  and tests.
- ``DiscordThreadChannels`` (in ``reveal_referee._discord``) opens a
  private thread under a guild text channel.
"""

from __future__ import annotations

import itertools
import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Tuple

from ._match.state import Participant

logger = logging.getLogger("reveal_referee.channels")


class ChannelLifecycle(ABC):
    """Abstract provider of isolated match channels."""

    @abstractmethod
    async def create_isolated_channel(
        self,
        participants: Tuple[Participant, Participant],
        origin: Optional[str] = None,
    ) -> str:
        """
        Open a channel visible to both participants and return its key.

        ``origin`` is the key of the channel the start request came from,
        for providers that open the new channel underneath it.
        """
        ...

    @abstractmethod
    async def delete_channel(self, channel_key: str) -> None:
        """Delete the channel. Called once the match has expired."""
        ...


class InMemoryChannels(ChannelLifecycle):
    """
    Channel provider that only records what it was asked to do.

    Channel keys are ``match-<n>``. Deleted channels are kept in
    ``deleted`` in the order they were removed.
    """

    def __init__(self, prefix: str = "match") -> None:
        self.prefix = prefix
        self.channels: Dict[str, Tuple[Participant, Participant]] = {}
        self.deleted: List[str] = []
        self._counter = itertools.count(1)

    async def create_isolated_channel(
        self,
        participants: Tuple[Participant, Participant],
        origin: Optional[str] = None,
    ) -> str:
        channel_key = f"{self.prefix}-{next(self._counter)}"
        self.channels[channel_key] = participants
        logger.debug(f"Channel opened: {channel_key}")
        return channel_key

    async def delete_channel(self, channel_key: str) -> None:
        if self.channels.pop(channel_key, None) is not None:
            self.deleted.append(channel_key)
            logger.debug(f"Channel deleted: {channel_key}")
