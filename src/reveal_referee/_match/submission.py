# Area: Match Core
"""
reveal_referee._match.submission — Submission gate
==================================================

Validates a submission against the match hosted in a channel and writes
it into the submitter's slot. The receipt returned to the caller says
that something was recorded, never what.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .registry import MatchRegistry
from .state import Participant, Slot
from ..errors import NoSuchMatchError, NotAParticipantError

logger = logging.getLogger("reveal_referee.submission")


@dataclass(frozen=True)
class SubmissionReceipt:
    """Acknowledgement of a recorded submission."""
    channel_key: str
    participant: Participant
    slot: Slot
    replaced: bool
    filled_count: int

    @property
    def both_submitted(self) -> bool:
        return self.filled_count == 2


class SubmissionGate:
    """Applies submissions to matches held in a registry."""

    def __init__(self, registry: MatchRegistry):
        self.registry = registry

    def submit(self, channel_key: str, submitter_id: str, value: str) -> SubmissionReceipt:
        """
        Record ``value`` for ``submitter_id``, overwriting any earlier value.

        Raises
        ------
        NoSuchMatchError
            If the channel hosts no active match.
        NotAParticipantError
            If the submitter is not one of the two participants.
        """
        with self.registry.mutex:
            state = self.registry.get(channel_key)
            if state is None:
                raise NoSuchMatchError(channel_key)

            slot = state.slot_of(submitter_id)
            if slot is None:
                raise NotAParticipantError(channel_key, submitter_id)

            replaced = state.write(slot, value)
            receipt = SubmissionReceipt(
                channel_key=channel_key,
                participant=state.participant_at(slot),
                slot=slot,
                replaced=replaced,
                filled_count=state.filled_count(),
            )

        logger.info(
            f"[{channel_key}] Submission recorded for {submitter_id} "
            f"({receipt.filled_count}/2 filled)"
        )
        return receipt
