# Area: Match Core
"""
reveal_referee._match.reveal — Reveal gate
==========================================

Checks that both slots are filled, reads the two values and retires the
match, all in one locked step. Disclosure happens only after the record
is gone, and only for the caller whose retire actually removed it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Tuple

from .registry import MatchRegistry
from .state import Participant
from ..errors import IncompleteMatchError, NoSuchMatchError

logger = logging.getLogger("reveal_referee.reveal")


@dataclass(frozen=True)
class Disclosure:
    """Both submitted values, in participant order."""
    channel_key: str
    participants: Tuple[Participant, Participant]
    values: Tuple[str, str]
    revealed_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def pairs(self) -> List[Tuple[Participant, str]]:
        return list(zip(self.participants, self.values))


class RevealGate:
    """Consumes complete matches exactly once."""

    def __init__(self, registry: MatchRegistry):
        self.registry = registry

    def reveal(self, channel_key: str) -> Disclosure:
        """
        Disclose both values and retire the match.

        Raises
        ------
        NoSuchMatchError
            If the channel hosts no active match, or it was retired
            concurrently.
        IncompleteMatchError
            If either participant has not submitted. The match stays active.
        """
        with self.registry.mutex:
            state = self.registry.get(channel_key)
            if state is None:
                raise NoSuchMatchError(channel_key)

            if not state.both_submitted():
                waiting = state.missing_participants()
                missing = [p.participant_id for p in waiting]
                logger.info(f"[{channel_key}] Reveal refused, waiting for {missing}")
                raise IncompleteMatchError(channel_key, missing, [p.name for p in waiting])

            values = (state.submissions[0], state.submissions[1])
            if not self.registry.retire(channel_key):
                raise NoSuchMatchError(channel_key)

        logger.info(f"[{channel_key}] Match revealed")
        return Disclosure(
            channel_key=channel_key,
            participants=state.participants,
            values=values,
        )
