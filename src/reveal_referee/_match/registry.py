# Area: Match Core
"""
reveal_referee._match.registry — Active match table
===================================================

Maps channel keys to their MatchState. The registry is the only shared
mutable state of the process, so every access goes through one
re-entrant lock. Gates that need a read-then-write step hold ``mutex``
for the whole step; the registry's own methods take it again, which an
``RLock`` allows.
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Tuple

from .state import MatchState, Participant
from ..errors import InvalidParticipantsError, MatchAlreadyExistsError

logger = logging.getLogger("reveal_referee.registry")


def validate_participants(participants: Iterable[Participant]) -> Tuple[Participant, Participant]:
    """Return the pair as a tuple, or raise if it is not two distinct ids."""
    pair = tuple(participants)
    ids = [p.participant_id for p in pair]
    if len(pair) != 2 or ids[0] == ids[1]:
        raise InvalidParticipantsError(ids)
    return pair


class MatchRegistry:
    """
    Table of active matches keyed by channel key.

    A record is present if and only if its match has neither been
    revealed nor expired.
    """

    def __init__(self) -> None:
        self._matches: Dict[str, MatchState] = {}
        self._lock = threading.RLock()

    @property
    def mutex(self) -> threading.RLock:
        """Lock guarding every read-then-write on the table."""
        return self._lock

    def create(
        self,
        channel_key: str,
        participants: Iterable[Participant],
        expires_at: Optional[datetime] = None,
    ) -> MatchState:
        """
        Register a fresh match with both slots absent.

        Raises
        ------
        InvalidParticipantsError
            If ``participants`` is not exactly two distinct identifiers.
        MatchAlreadyExistsError
            If ``channel_key`` already hosts a match.
        """
        pair = validate_participants(participants)

        with self._lock:
            if channel_key in self._matches:
                raise MatchAlreadyExistsError(channel_key)
            state = MatchState(
                channel_key=channel_key, participants=pair, expires_at=expires_at
            )
            self._matches[channel_key] = state

        logger.info(
            f"[{channel_key}] Match created: "
            f"{pair[0].participant_id} vs {pair[1].participant_id}"
        )
        return state

    def get(self, channel_key: str) -> Optional[MatchState]:
        with self._lock:
            return self._matches.get(channel_key)

    def retire(self, channel_key: str) -> bool:
        """Remove the record. Returns True only for the caller that removed it."""
        with self._lock:
            state = self._matches.pop(channel_key, None)
        if state is None:
            logger.debug(f"[{channel_key}] Retire: already gone")
            return False
        logger.info(f"[{channel_key}] Match retired")
        return True

    def keys(self) -> List[str]:
        with self._lock:
            return list(self._matches)

    def __contains__(self, channel_key: object) -> bool:
        with self._lock:
            return channel_key in self._matches

    def __len__(self) -> int:
        with self._lock:
            return len(self._matches)
