# Area: Match Core
"""
reveal_referee.coordinator — Match coordinator
==============================================

High-level entry point adapters talk to. Owns the registry, both gates,
the expiry scheduler and the channel provider, and wires them together:

    start_match  → open channel → register match → arm expiry
    submit       → SubmissionGate
    reveal       → RevealGate
    expiry fires → retire match → delete channel

State transitions are committed before any channel I/O is attempted, and
channel I/O never runs while the registry lock is held.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timedelta, timezone
from typing import Iterable, Optional

from ._match.commands import IncomingRawMessage, MatchCommand, Reveal, StartMatch, Submit
from ._match.expiry import ExpiryScheduler
from ._match.registry import MatchRegistry, validate_participants
from ._match.reveal import Disclosure, RevealGate
from ._match.router import CommandRouter, RouteOutcome
from ._match.snapshot import build_match_snapshot
from ._match.state import MatchState, Participant
from ._match.submission import SubmissionGate, SubmissionReceipt
from .channels import ChannelLifecycle
from .config import RefereeConfig
from .errors import NoSuchMatchError, RevealRefereeError

logger = logging.getLogger("reveal_referee.coordinator")


class MatchCoordinator:
    """
    Runs every match of one process.

    Submissions and reveals are synchronous and may be called from any
    thread. ``start_match`` and ``dispatch`` are coroutines because
    opening a channel is network I/O; the event loop they run on is also
    the loop channel deletions are scheduled on when a match expires.
    """

    def __init__(
        self,
        config: RefereeConfig,
        channels: ChannelLifecycle,
        registry: Optional[MatchRegistry] = None,
        scheduler: Optional[ExpiryScheduler] = None,
    ):
        self.config = config
        self.channels = channels
        self.registry = registry or MatchRegistry()
        self.scheduler = scheduler or ExpiryScheduler()
        self.submissions = SubmissionGate(self.registry)
        self.reveals = RevealGate(self.registry)
        self.router = CommandRouter(self.submissions, self.reveals)
        self._loop: Optional[asyncio.AbstractEventLoop] = None

    # ── Lifecycle ────────────────────────────────────────────

    async def start_match(
        self, participants: Iterable[Participant], origin: Optional[str] = None
    ) -> MatchState:
        """
        Open an isolated channel for the pair and start a match in it.

        Raises InvalidParticipantsError before any channel is opened if
        the pair is not two distinct participants. Errors from the channel
        provider propagate and leave the registry untouched. If the match
        cannot be registered the fresh channel is deleted again.
        """
        pair = validate_participants(participants)
        self._loop = asyncio.get_running_loop()

        channel_key = await self.channels.create_isolated_channel(pair, origin=origin)

        duration = self.config.match_expiry_seconds
        expires_at = datetime.now(timezone.utc) + timedelta(seconds=duration)
        try:
            state = self.registry.create(channel_key, pair, expires_at=expires_at)
        except RevealRefereeError:
            await self._teardown(channel_key)
            raise
        self.scheduler.arm(channel_key, duration, self.expire)
        logger.info(f"[{channel_key}] Match started, expires in {duration:.0f}s")
        return state

    def expire(self, channel_key: str) -> bool:
        """
        Terminate a match on its deadline, whatever its progress.

        Returns True if this call removed the match, False if it had
        already been revealed. The channel is deleted either way.
        """
        retired = self.registry.retire(channel_key)
        if retired:
            logger.info(f"[{channel_key}] Match expired before reveal")
        else:
            logger.debug(f"[{channel_key}] Expiry after match already ended")
        self._schedule_teardown(channel_key)
        return retired

    def shutdown(self) -> None:
        """Cancel pending expiry timers. Active matches are dropped with the process."""
        logger.info(f"Coordinator shutting down with {len(self.registry)} active match(es)")
        self.scheduler.shutdown()

    # ── Match operations ─────────────────────────────────────

    def submit(self, channel_key: str, submitter_id: str, value: str) -> SubmissionReceipt:
        return self.submissions.submit(channel_key, submitter_id, value)

    def reveal(self, channel_key: str) -> Disclosure:
        return self.reveals.reveal(channel_key)

    def capture_raw_message(
        self, channel_key: str, author_id: str, content: str
    ) -> Optional[SubmissionReceipt]:
        """Treat a message posted in a match channel as a submission."""
        if not self.config.capture_raw_messages:
            return None
        return self.router.route(IncomingRawMessage(channel_key, author_id, content))

    def status(self, channel_key: str) -> dict:
        """Presence-only snapshot of the match in ``channel_key``."""
        with self.registry.mutex:
            state = self.registry.get(channel_key)
            if state is None:
                raise NoSuchMatchError(channel_key)
            return build_match_snapshot(state)

    def is_match_channel(self, channel_key: str) -> bool:
        return channel_key in self.registry

    async def dispatch(self, command: MatchCommand) -> RouteOutcome | MatchState:
        """Route any command variant to its operation."""
        if isinstance(command, StartMatch):
            return await self.start_match(command.participants, origin=command.origin)
        if isinstance(command, IncomingRawMessage):
            return self.capture_raw_message(
                command.channel_key, command.author_id, command.content
            )
        if isinstance(command, (Submit, Reveal)):
            return self.router.route(command)
        raise TypeError(f"Unknown command {type(command).__name__}")

    # ── Channel teardown ─────────────────────────────────────

    def _schedule_teardown(self, channel_key: str) -> None:
        loop = self._loop
        if loop is None or loop.is_closed():
            logger.warning(f"[{channel_key}] No event loop available, channel not deleted")
            return
        asyncio.run_coroutine_threadsafe(self._teardown(channel_key), loop)

    async def _teardown(self, channel_key: str) -> None:
        try:
            await self.channels.delete_channel(channel_key)
            logger.info(f"[{channel_key}] Channel deleted")
        except Exception as e:
            logger.warning(f"[{channel_key}] Could not delete channel: {e}")
