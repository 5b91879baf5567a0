# Area: Match Core
"""
reveal_referee.errors — Custom exception classes
=================================================

Defines the exception hierarchy for match operations.
Every error is an expected, recoverable condition that is reported back
to the caller that triggered it. None of them carries a submitted value.
"""

from __future__ import annotations
from typing import Any, Dict, List, Sequence


class RevealRefereeError(Exception):
    """Base exception for all reveal referee errors."""
    pass


class MatchAlreadyExistsError(RevealRefereeError):
    """Raised when a match is created on a channel that already hosts one."""

    def __init__(self, channel_key: str):
        self.channel_key = channel_key
        super().__init__(f"Channel '{channel_key}' already hosts a match")


class NoSuchMatchError(RevealRefereeError):
    """Raised when a channel has no active match (never created, revealed or expired)."""

    def __init__(self, channel_key: str):
        self.channel_key = channel_key
        super().__init__(f"Channel '{channel_key}' has no active match")


class NotAParticipantError(RevealRefereeError):
    """Raised when someone outside the match tries to submit."""

    def __init__(self, channel_key: str, submitter_id: str):
        self.channel_key = channel_key
        self.submitter_id = submitter_id
        super().__init__(
            f"'{submitter_id}' is not a participant of the match in '{channel_key}'"
        )


class IncompleteMatchError(RevealRefereeError):
    """
    Raised when a reveal is requested before both slots are filled.

    ``missing`` lists the participant ids that have not submitted yet, in
    slot order, and ``missing_names`` their display names. Only presence
    is reported, never a value.
    """

    def __init__(
        self,
        channel_key: str,
        missing: Sequence[str],
        missing_names: Sequence[str] | None = None,
    ):
        self.channel_key = channel_key
        self.missing: List[str] = list(missing)
        self.missing_names: List[str] = list(missing_names or missing)
        super().__init__(
            f"Match in '{channel_key}' is still waiting for: {', '.join(self.missing)}"
        )

    @property
    def nobody_submitted(self) -> bool:
        return len(self.missing) == 2


class InvalidParticipantsError(RevealRefereeError):
    """Raised when a match is not started with exactly two distinct participants."""

    def __init__(self, participant_ids: Sequence[str]):
        self.participant_ids = list(participant_ids)
        super().__init__(
            f"A match needs exactly two distinct participants, got {self.participant_ids}"
        )


class ConfigError(RevealRefereeError):
    """Raised when the runtime configuration is missing or invalid."""

    def __init__(self, message: str, errors: List[Dict[str, Any]] | None = None):
        self.errors = errors or []
        super().__init__(message)
