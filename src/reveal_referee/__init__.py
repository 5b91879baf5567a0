"""
reveal_referee — Simultaneous Reveal Referee
============================================

Two players each submit a hidden choice inside a private channel. Nothing
is shown until both have submitted; then both choices are revealed
together, exactly once. Every match expires after a fixed time whether
or not it was revealed.

Quick Start (Discord):
    $ export DISCORD_TOKEN=... CLIENT_ID=... GUILD_ID=...
    $ reveal-referee

Embedding the match core:
    from reveal_referee import InMemoryChannels, MatchCoordinator, Participant, RefereeConfig

    coordinator = MatchCoordinator(RefereeConfig(), InMemoryChannels())
    state = await coordinator.start_match([Participant("alice"), Participant("bob")])
    coordinator.submit(state.channel_key, "alice", "rock")
    coordinator.submit(state.channel_key, "bob", "paper")
    disclosure = coordinator.reveal(state.channel_key)
"""

from .coordinator import MatchCoordinator
from .channels import ChannelLifecycle, InMemoryChannels
from .config import RefereeConfig, load_config
from ._match import (
    Disclosure,
    IncomingRawMessage,
    MatchRegistry,
    MatchState,
    Participant,
    Reveal,
    Slot,
    StartMatch,
    Submit,
    SubmissionReceipt,
)
from .errors import (
    RevealRefereeError,
    MatchAlreadyExistsError,
    NoSuchMatchError,
    NotAParticipantError,
    IncompleteMatchError,
    InvalidParticipantsError,
    ConfigError,
)

__all__ = [
    # Main classes
    "MatchCoordinator",
    "ChannelLifecycle",
    "InMemoryChannels",
    "RefereeConfig",
    "load_config",
    # Match core
    "Disclosure",
    "MatchRegistry",
    "MatchState",
    "Participant",
    "Slot",
    "SubmissionReceipt",
    # Commands
    "IncomingRawMessage",
    "Reveal",
    "StartMatch",
    "Submit",
    # Errors
    "RevealRefereeError",
    "MatchAlreadyExistsError",
    "NoSuchMatchError",
    "NotAParticipantError",
    "IncompleteMatchError",
    "InvalidParticipantsError",
    "ConfigError",
]
__version__ = "1.0.0"
