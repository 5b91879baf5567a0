"""
local_match.py — Play matches WITHOUT Discord
=============================================

Runs the coordinator against in-memory channels: one match is revealed,
another is left to expire. No token or network needed.

Run with:  python examples/local_match.py
"""

import asyncio
import json
import logging

from reveal_referee import (
    IncompleteMatchError,
    InMemoryChannels,
    MatchCoordinator,
    Participant,
    RefereeConfig,
    Reveal,
    StartMatch,
    Submit,
)
from reveal_referee._shared import setup_logging

ALICE = Participant("111", "alice")
BOB = Participant("222", "bob")


async def play():
    channels = InMemoryChannels()
    coordinator = MatchCoordinator(RefereeConfig(match_expiry_seconds=1), channels)

    # ── Match 1: both submit, then reveal ────────────────────
    state = await coordinator.dispatch(StartMatch(participants=(ALICE, BOB)))
    key = state.channel_key
    print(f"\n  Match opened in {key}")

    await coordinator.dispatch(Submit(key, ALICE.participant_id, "rock"))
    try:
        coordinator.reveal(key)
    except IncompleteMatchError as e:
        print(f"  Early reveal refused, waiting on: {', '.join(e.missing_names)}")

    print("  Status:", json.dumps(coordinator.status(key), indent=2))

    await coordinator.dispatch(Submit(key, BOB.participant_id, "paper"))
    disclosure = await coordinator.dispatch(Reveal(key))
    for participant, value in disclosure.pairs():
        print(f"  {participant.name}: {value}")

    # ── Match 2: nobody submits, the timer ends it ───────────
    state = await coordinator.dispatch(StartMatch(participants=(BOB, ALICE)))
    print(f"\n  Match opened in {state.channel_key}, letting it expire...")
    await asyncio.sleep(1.5)

    print(f"  Active matches: {len(coordinator.registry)}")
    print(f"  Deleted channels: {channels.deleted}")
    coordinator.shutdown()


if __name__ == "__main__":
    setup_logging(log_file_path=None, level=logging.INFO)
    asyncio.run(play())
