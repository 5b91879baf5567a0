# Area: Discord Tests
"""Tests for user-facing texts and the reveal embed."""

from reveal_referee._discord import messages
from reveal_referee._match.reveal import Disclosure
from reveal_referee._match.state import Participant

P1 = Participant("111", "alice")
P2 = Participant("222", "bob")


class TestTexts:
    """Plain message helpers."""

    def test_thread_name(self):
        assert messages.thread_name((P1, P2)) == "match-alice-vs-bob"

    def test_thread_name_is_capped(self):
        long = Participant("1", "x" * 80)
        assert len(messages.thread_name((long, long))) == 100

    def test_match_created_rounds_minutes(self):
        text = messages.match_created("999", 600)
        assert "<#999>" in text
        assert "~10 minutes" in text

    def test_welcome_mentions_both(self):
        text = messages.welcome((P1, P2), raw_capture=True)
        assert "<@111>" in text and "<@222>" in text
        assert "type your choice here" in text
        assert "type your choice" not in messages.welcome((P1, P2), raw_capture=False)

    def test_not_all_submitted_lists_names(self):
        text = messages.not_all_submitted(["bob"])
        assert text.startswith("Not all players have submitted their choice yet.")
        assert "bob" in text


class TestRevealEmbed:
    """Embed built from a disclosure."""

    def test_fields_in_participant_order(self):
        embed = messages.build_reveal_embed(
            Disclosure("chan1", (P1, P2), ("rock", "paper"))
        )
        assert embed.title == "Match Reveal"
        assert [f.value for f in embed.fields] == ["rock", "paper"]
        assert embed.fields[0].name.startswith("Player A")
        assert "alice" in embed.fields[0].name
        assert embed.fields[1].name.startswith("Player B")
        assert embed.timestamp is not None

    def test_empty_and_oversized_values(self):
        embed = messages.build_reveal_embed(
            Disclosure("chan1", (P1, P2), ("", "y" * 2000))
        )
        assert embed.fields[0].value == "*(empty)*"
        assert len(embed.fields[1].value) == 1024

    def test_blank_value_stays_visible(self):
        embed = messages.build_reveal_embed(
            Disclosure("chan1", (P1, P2), ("   ", "\t"))
        )
        assert embed.fields[0].value == "`'   '`"
        assert embed.fields[1].value == "`'\\t'`"
