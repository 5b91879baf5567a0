# Area: Discord
"""
Discord adapter
===============

Slash commands, raw message capture and private thread management on
top of the match coordinator.
"""

from .bot import RevealBot, run_bot, sync_only
from .threads import DiscordThreadChannels

__all__ = [
    "RevealBot",
    "run_bot",
    "sync_only",
    "DiscordThreadChannels",
]
