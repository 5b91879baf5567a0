# Area: Match Core
"""
Match core
==========

In-memory state machine for two-party simultaneous reveal matches:
registry, submission and reveal gates, expiry scheduling, and the
command router that ties them together.
"""

from .state import MatchState, Participant, Slot
from .registry import MatchRegistry
from .submission import SubmissionGate, SubmissionReceipt
from .reveal import Disclosure, RevealGate
from .expiry import ExpiryHandle, ExpiryScheduler
from .commands import IncomingRawMessage, MatchCommand, Reveal, StartMatch, Submit
from .router import CommandRouter
from .snapshot import build_match_snapshot

__all__ = [
    "MatchState",
    "Participant",
    "Slot",
    "MatchRegistry",
    "SubmissionGate",
    "SubmissionReceipt",
    "Disclosure",
    "RevealGate",
    "ExpiryHandle",
    "ExpiryScheduler",
    "IncomingRawMessage",
    "MatchCommand",
    "Reveal",
    "StartMatch",
    "Submit",
    "CommandRouter",
    "build_match_snapshot",
]
