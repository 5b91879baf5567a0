# Area: Match Core
"""
reveal_referee._match.expiry — Match expiry scheduling
======================================================

Arms one deadline per match when it is created. When the deadline passes
the ``on_fire`` callback runs once on a timer thread, whatever state the
match is in by then.

Fire and cancel race on the scheduler's lock: whichever claims the
handle first wins, the other becomes a no-op. A callback that already
started is never interrupted.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Dict, Optional

logger = logging.getLogger("reveal_referee.expiry")

ExpiryCallback = Callable[[str], None]


class ExpiryHandle:
    """A single armed deadline."""

    def __init__(self, channel_key: str, duration: float, on_fire: ExpiryCallback):
        self.channel_key = channel_key
        self.duration = duration
        self.on_fire = on_fire
        self.expires_at = time.monotonic() + duration
        self.fired = False
        self.cancelled = False
        self._timer: Optional[threading.Timer] = None

    @property
    def pending(self) -> bool:
        return not (self.fired or self.cancelled)

    def remaining(self) -> float:
        return max(0.0, self.expires_at - time.monotonic())


class ExpiryScheduler:
    """
    One-shot deadlines keyed by channel key.

    Each armed key owns a daemon ``threading.Timer``. Re-arming a key
    cancels the timer it replaces.
    """

    def __init__(self) -> None:
        self._handles: Dict[str, ExpiryHandle] = {}
        self._lock = threading.Lock()

    def arm(self, channel_key: str, duration: float, on_fire: ExpiryCallback) -> ExpiryHandle:
        """Run ``on_fire(channel_key)`` once after ``duration`` seconds."""
        handle = ExpiryHandle(channel_key, duration, on_fire)
        timer = threading.Timer(duration, self._fire, args=(handle,))
        timer.daemon = True
        timer.name = f"expiry-{channel_key}"
        handle._timer = timer

        with self._lock:
            previous = self._handles.get(channel_key)
            if previous is not None:
                self._cancel_locked(previous)
            self._handles[channel_key] = handle
            timer.start()

        logger.debug("Expiry armed: %s in %.1fs", channel_key, duration)
        return handle

    def cancel(self, channel_key: str) -> bool:
        """Cancel the pending deadline. Returns False if it already fired or is unknown."""
        with self._lock:
            handle = self._handles.get(channel_key)
            if handle is None:
                return False
            return self._cancel_locked(handle)

    def pending(self) -> int:
        with self._lock:
            return len(self._handles)

    def is_armed(self, channel_key: str) -> bool:
        with self._lock:
            return channel_key in self._handles

    def shutdown(self) -> None:
        """Cancel every pending deadline."""
        with self._lock:
            for handle in list(self._handles.values()):
                self._cancel_locked(handle)
        logger.debug("All expiry timers cancelled")

    def _cancel_locked(self, handle: ExpiryHandle) -> bool:
        if not handle.pending:
            return False
        handle.cancelled = True
        if handle._timer is not None:
            handle._timer.cancel()
        if self._handles.get(handle.channel_key) is handle:
            del self._handles[handle.channel_key]
        logger.debug("Expiry cancelled for %s", handle.channel_key)
        return True

    def _fire(self, handle: ExpiryHandle) -> None:
        with self._lock:
            if not handle.pending:
                return
            handle.fired = True
            if self._handles.get(handle.channel_key) is handle:
                del self._handles[handle.channel_key]

        logger.info("Expiry fired for %s", handle.channel_key)
        try:
            handle.on_fire(handle.channel_key)
        except Exception as e:
            logger.error(f"Expiry callback failed for {handle.channel_key}: {e}", exc_info=True)
