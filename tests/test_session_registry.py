"""
Tests for SessionRegistry: creation, lookup and idle-session pruning.
"""

from conftest import ManualClock, build_pools
from ulpan_app.modules.exercises.session import SessionRegistry
from ulpan_app.modules.exercises.tracks import HEBREW_TRACK


def make_registry(timeout=10):
    return SessionRegistry(build_pools(), config={'SESSION_IDLE_TIMEOUT': timeout}, clock=ManualClock())


class TestIdlePruning:

    def test_idle_sessions_are_dropped_on_create(self):
        registry = make_registry()
        stale = registry.create(HEBREW_TRACK)

        registry.clock.advance(11)
        fresh = registry.create(HEBREW_TRACK)

        assert len(registry) == 1
        assert registry.get(stale.session_id) is None
        assert registry.get(fresh.session_id) is fresh

    def test_lookup_keeps_a_session_alive(self):
        registry = make_registry()
        kept = registry.create(HEBREW_TRACK)
        dropped = registry.create(HEBREW_TRACK)

        registry.clock.advance(6)
        assert registry.get(kept.session_id) is kept
        registry.clock.advance(6)
        registry.create(HEBREW_TRACK)

        assert registry.get(kept.session_id) is kept
        assert registry.get(dropped.session_id) is None
        assert len(registry) == 2

    def test_pruning_clears_pending_timers(self):
        registry = make_registry()
        session = registry.create(HEBREW_TRACK)
        session.scheduler.schedule(1.0, lambda: None)

        registry.clock.advance(20)
        assert registry.prune_idle() == 1
        assert session.scheduler.pending() == 0

    def test_zero_timeout_keeps_sessions(self):
        registry = make_registry(timeout=0)
        session = registry.create(HEBREW_TRACK)

        registry.clock.advance(10 ** 6)
        registry.create(HEBREW_TRACK)
        assert registry.get(session.session_id) is session
        assert len(registry) == 2
