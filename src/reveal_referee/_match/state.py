# Area: Match Core
"""
reveal_referee._match.state — Match state record
================================================

Tracks one in-progress reveal match: the two participants, fixed at
creation, and one optional submitted value per participant slot.
A slot that was never written is ``None``, which is distinct from a
submitted empty string.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional, Tuple
import logging

logger = logging.getLogger("reveal_referee.state")


class Slot(Enum):
    """Position of a participant in the match. Display order only."""
    A = 0
    B = 1

    @property
    def label(self) -> str:
        return f"Player {self.name}"


@dataclass(frozen=True)
class Participant:
    """One side of a match."""
    participant_id: str
    display_name: Optional[str] = None

    @property
    def name(self) -> str:
        return self.display_name or self.participant_id


@dataclass
class MatchState:
    """
    Full state of one match.

    The registry owns these records. ``participants`` never changes after
    creation; ``submissions`` is only written through ``write``.
    """
    channel_key: str
    participants: Tuple[Participant, Participant]
    submissions: List[Optional[str]] = field(default_factory=lambda: [None, None])
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    expires_at: Optional[datetime] = None

    # ── Slot helpers ─────────────────────────────────────────

    def slot_of(self, participant_id: str) -> Optional[Slot]:
        for slot in Slot:
            if self.participants[slot.value].participant_id == participant_id:
                return slot
        return None

    def participant_at(self, slot: Slot) -> Participant:
        return self.participants[slot.value]

    def write(self, slot: Slot, value: str) -> bool:
        """Store ``value`` in ``slot``. Returns True if it replaced an earlier value."""
        replaced = self.submissions[slot.value] is not None
        self.submissions[slot.value] = value
        logger.debug(
            f"[{self.channel_key}] {slot.label} submitted ({len(value)} chars)"
            + (" (overwrite)" if replaced else "")
        )
        return replaced

    def has_submitted(self, slot: Slot) -> bool:
        return self.submissions[slot.value] is not None

    def filled_count(self) -> int:
        return sum(1 for value in self.submissions if value is not None)

    def both_submitted(self) -> bool:
        return self.filled_count() == 2

    def missing_participants(self) -> List[Participant]:
        return [self.participant_at(slot) for slot in Slot if not self.has_submitted(slot)]
