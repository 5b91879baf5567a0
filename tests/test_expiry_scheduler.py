# Area: Match Core Tests
"""Tests for ExpiryScheduler — one-shot timers with race-free cancel."""

import threading
from unittest.mock import patch

from reveal_referee._match.expiry import ExpiryHandle, ExpiryScheduler

MOCK_TIME = "reveal_referee._match.expiry.time"
WAIT = 2.0


class TestExpiryFiring:
    """Deadlines fire once."""

    def test_fires_after_duration(self):
        scheduler = ExpiryScheduler()
        fired = threading.Event()
        seen = []

        def on_fire(key):
            seen.append(key)
            fired.set()

        handle = scheduler.arm("chan1", 0.02, on_fire)
        assert fired.wait(WAIT)
        assert seen == ["chan1"]
        assert handle.fired is True
        assert handle.pending is False
        assert scheduler.pending() == 0

    def test_callback_error_is_contained(self):
        """A failing callback is logged, not raised on the timer thread."""
        scheduler = ExpiryScheduler()
        called = threading.Event()

        def on_fire(key):
            called.set()
            raise RuntimeError("boom")

        handle = scheduler.arm("chan1", 0.01, on_fire)
        assert called.wait(WAIT)
        assert handle.fired is True

    def test_rearm_replaces_pending_timer(self):
        scheduler = ExpiryScheduler()
        first = []
        second = threading.Event()

        old = scheduler.arm("chan1", 60, first.append)
        scheduler.arm("chan1", 0.01, lambda key: second.set())

        assert second.wait(WAIT)
        assert old.cancelled is True
        assert first == []
        assert scheduler.pending() == 0


class TestExpiryCancel:
    """Cancellation in both orders."""

    def test_cancel_before_fire(self):
        scheduler = ExpiryScheduler()
        calls = []
        handle = scheduler.arm("chan1", 60, calls.append)

        assert scheduler.cancel("chan1") is True
        assert handle.cancelled is True
        assert scheduler.is_armed("chan1") is False
        assert scheduler.cancel("chan1") is False
        assert calls == []

    def test_cancel_after_fire_is_noop(self):
        scheduler = ExpiryScheduler()
        fired = threading.Event()
        handle = scheduler.arm("chan1", 0.01, lambda key: fired.set())

        assert fired.wait(WAIT)
        assert scheduler.cancel("chan1") is False
        assert handle.cancelled is False

    def test_fire_after_cancel_does_not_run_callback(self):
        """A timer thread that lost the race finds the handle cancelled."""
        scheduler = ExpiryScheduler()
        calls = []
        handle = scheduler.arm("chan1", 60, calls.append)
        scheduler.cancel("chan1")

        scheduler._fire(handle)
        assert calls == []
        assert handle.fired is False

    def test_cancel_unknown_key(self):
        assert ExpiryScheduler().cancel("never") is False

    def test_shutdown_cancels_everything(self):
        scheduler = ExpiryScheduler()
        calls = []
        scheduler.arm("chan1", 60, calls.append)
        scheduler.arm("chan2", 60, calls.append)
        assert scheduler.pending() == 2

        scheduler.shutdown()
        assert scheduler.pending() == 0
        assert calls == []


class TestExpiryHandle:
    """Remaining time bookkeeping."""

    def test_remaining_counts_down(self):
        with patch(MOCK_TIME) as mock_time:
            mock_time.monotonic.return_value = 100.0
            handle = ExpiryHandle("chan1", 60, lambda key: None)

            mock_time.monotonic.return_value = 130.0
            assert handle.remaining() == 30.0

            mock_time.monotonic.return_value = 200.0
            assert handle.remaining() == 0.0
