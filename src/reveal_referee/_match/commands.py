# Area: Match Core
"""
reveal_referee._match.commands — Command variants
=================================================

The closed set of requests the match core accepts. Adapters translate
their transport events (slash commands, channel messages) into one of
these and hand it to the router.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .state import Participant


@dataclass(frozen=True)
class StartMatch:
    """Open an isolated channel for two participants and start a match in it."""
    participants: Tuple[Participant, Participant]
    origin: Optional[str] = None


@dataclass(frozen=True)
class Submit:
    """Explicit submission of a hidden value."""
    channel_key: str
    submitter_id: str
    value: str


@dataclass(frozen=True)
class Reveal:
    """Request to disclose both values."""
    channel_key: str


@dataclass(frozen=True)
class IncomingRawMessage:
    """Content observed in a channel, captured as a submission when it hosts a match."""
    channel_key: str
    author_id: str
    content: str


MatchCommand = Union[StartMatch, Submit, Reveal, IncomingRawMessage]
