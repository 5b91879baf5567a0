# Area: Discord
"""
reveal_referee._discord.messages — User-facing text and embeds
==============================================================

Everything the bot says lives here so the cog stays about flow.
Nothing in this module ever receives a submitted value except
``build_reveal_embed``, which is only called after a successful reveal.
"""

from __future__ import annotations

from typing import Sequence

import discord

from .._match.reveal import Disclosure
from .._match.state import Participant

GUILD_ONLY = "Use this in a server."
WRONG_CHANNEL_TYPE = (
    "Please run /startmatch in a regular text channel (not in a thread/forum)."
)
THREAD_CREATE_FAILED = (
    "I could not create a private thread. "
    "I may be missing the **Create Private Threads** permission."
)
SAME_OPPONENT = "You need to pick someone else as your opponent."
NOT_A_MATCH_SUBMIT = (
    "This thread is not a valid match. Use /submit inside the match thread."
)
NOT_A_MATCH_REVEAL = (
    "This thread is not a valid match. "
    "Make sure you run /reveal inside the match thread."
)
NOT_A_PLAYER = "Only the two match players can submit here."
CHOICE_RECORDED = "Your choice has been recorded (hidden)."
CHOICE_UPDATED = "Your choice has been updated (hidden)."
REVEALED = "Choices revealed!"
UNEXPECTED_ERROR = "Unexpected error handling this command."


def mention(user_id: str) -> str:
    return f"<@{user_id}>"


def channel_mention(channel_key: str) -> str:
    return f"<#{channel_key}>"


def thread_name(participants: Sequence[Participant]) -> str:
    """Discord caps channel names at 100 characters."""
    a, b = participants
    return f"match-{a.name}-vs-{b.name}"[:100]


def match_created(channel_key: str, expiry_seconds: float) -> str:
    minutes = max(1, round(expiry_seconds / 60))
    return f"Match thread created: {channel_mention(channel_key)} (will delete in ~{minutes} minutes)"


def welcome(participants: Sequence[Participant], raw_capture: bool) -> str:
    a, b = participants
    how = (
        "You can type your choice here (I will hide it), or use /submit."
        if raw_capture
        else "Use /submit to send your choice."
    )
    return f"Welcome {mention(a.participant_id)} and {mention(b.participant_id)}! {how}"


def submitted_notice(name: str) -> str:
    return f"{name} has submitted their choice (hidden)."


def submitted_but_not_hidden(name: str) -> str:
    return (
        f"{name} has submitted their choice, but I could not delete their message. "
        "Please make sure I have the **Manage Messages** permission."
    )


def not_all_submitted(missing_names: Sequence[str]) -> str:
    waiting = ", ".join(missing_names)
    return f"Not all players have submitted their choice yet. Waiting for: {waiting}."


def build_reveal_embed(disclosure: Disclosure) -> discord.Embed:
    """Embed posted in the match thread with both choices."""
    embed = discord.Embed(title="Match Reveal", timestamp=disclosure.revealed_at)
    for (participant, value), label in zip(disclosure.pairs(), ("Player A", "Player B")):
        embed.add_field(
            name=f"{label} · {participant.name}",
            value=_field_value(value),
            inline=False,
        )
    return embed


def _field_value(value: str) -> str:
    # Embed field values must be 1..1024 characters and not blank
    if not value:
        return "*(empty)*"
    if not value.strip():
        value = f"`{value!r}`"
    if len(value) > 1024:
        return value[:1021] + "..."
    return value
