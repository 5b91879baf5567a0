# Area: Match Core Tests
"""Tests for SubmissionGate."""

import pytest

from reveal_referee._match.registry import MatchRegistry
from reveal_referee._match.state import Participant, Slot
from reveal_referee._match.submission import SubmissionGate
from reveal_referee.errors import NoSuchMatchError, NotAParticipantError


def _setup():
    registry = MatchRegistry()
    registry.create("chan1", [Participant("P1", "alice"), Participant("P2", "bob")])
    return registry, SubmissionGate(registry)


class TestSubmissionGate:
    """Submission validation and slot writes."""

    def test_unknown_channel_raises(self):
        gate = SubmissionGate(MatchRegistry())
        with pytest.raises(NoSuchMatchError) as exc_info:
            gate.submit("never-created", "P1", "rock")
        assert exc_info.value.channel_key == "never-created"

    def test_outsider_rejected_without_mutation(self):
        registry, gate = _setup()
        gate.submit("chan1", "P1", "rock")
        with pytest.raises(NotAParticipantError) as exc_info:
            gate.submit("chan1", "intruder", "scissors")
        assert exc_info.value.submitter_id == "intruder"
        assert registry.get("chan1").submissions == ["rock", None]

    def test_submission_fills_own_slot(self):
        registry, gate = _setup()
        receipt = gate.submit("chan1", "P2", "paper")
        assert receipt.slot == Slot.B
        assert receipt.participant.participant_id == "P2"
        assert receipt.replaced is False
        assert receipt.filled_count == 1
        assert registry.get("chan1").submissions == [None, "paper"]

    def test_resubmission_overwrites(self):
        registry, gate = _setup()
        gate.submit("chan1", "P1", "rock")
        receipt = gate.submit("chan1", "P1", "paper")
        assert receipt.replaced is True
        assert receipt.filled_count == 1
        assert registry.get("chan1").submissions[0] == "paper"

    def test_both_submitted_does_not_reveal(self):
        """Submitting never retires the match."""
        registry, gate = _setup()
        gate.submit("chan1", "P1", "rock")
        receipt = gate.submit("chan1", "P2", "paper")
        assert receipt.both_submitted is True
        assert "chan1" in registry

    def test_receipt_never_carries_value(self):
        _, gate = _setup()
        receipt = gate.submit("chan1", "P1", "top secret")
        assert "top secret" not in repr(receipt)

    def test_submit_after_retire_raises(self):
        registry, gate = _setup()
        registry.retire("chan1")
        with pytest.raises(NoSuchMatchError):
            gate.submit("chan1", "P1", "rock")
