# Area: Match Core
"""
reveal_referee._match.snapshot — Match status snapshot
======================================================

Builds a serializable view of a match that reports who has submitted,
never what. Safe to show to either participant or to log.
"""

from .state import MatchState, Slot


def build_match_snapshot(state: MatchState) -> dict:
    """Build presence-only snapshot of a match."""
    return {
        "channel_key": state.channel_key,
        "created_at": state.created_at.isoformat(),
        "expires_at": state.expires_at.isoformat() if state.expires_at else None,
        "slots": [_slot_snapshot(state, slot) for slot in Slot],
        "ready_to_reveal": state.both_submitted(),
    }


def _slot_snapshot(state: MatchState, slot: Slot) -> dict:
    participant = state.participant_at(slot)
    return {
        "slot": slot.name,
        "participant_id": participant.participant_id,
        "display_name": participant.name,
        "submitted": state.has_submitted(slot),
    }
