# Area: Match Core
"""
reveal_referee._match.router — Command router
=============================================

Routes in-channel commands to the submission and reveal gates.
Starting a match needs the channel provider, so ``StartMatch`` is
handled by the coordinator before it reaches this router.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from .commands import IncomingRawMessage, MatchCommand, Reveal, Submit
from .reveal import Disclosure, RevealGate
from .submission import SubmissionGate, SubmissionReceipt
from ..errors import NoSuchMatchError, NotAParticipantError

logger = logging.getLogger("reveal_referee.router")

RouteOutcome = Union[SubmissionReceipt, Disclosure, None]


class CommandRouter:
    """Stateless dispatch from command variants to gate operations."""

    def __init__(self, submissions: SubmissionGate, reveals: RevealGate):
        self.submissions = submissions
        self.reveals = reveals

    def route(self, command: MatchCommand) -> RouteOutcome:
        """
        Route one command.

        ``Submit`` and ``Reveal`` propagate the gates' errors.
        ``IncomingRawMessage`` returns None when the message is not a
        submission (no match in the channel, or the author is not playing).
        """
        if isinstance(command, Submit):
            return self.submissions.submit(
                command.channel_key, command.submitter_id, command.value
            )

        elif isinstance(command, Reveal):
            return self.reveals.reveal(command.channel_key)

        elif isinstance(command, IncomingRawMessage):
            return self._capture(command)

        raise TypeError(f"No route for command {type(command).__name__}")

    def _capture(self, message: IncomingRawMessage) -> Optional[SubmissionReceipt]:
        try:
            return self.submissions.submit(
                message.channel_key, message.author_id, message.content
            )
        except (NoSuchMatchError, NotAParticipantError) as e:
            logger.debug(f"Ignored channel message: {e}")
            return None
