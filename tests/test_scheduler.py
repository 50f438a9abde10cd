"""
Unit tests for the cooperative TimerQueue.
"""

from conftest import ManualClock
from ulpan_app.core.scheduler import TimerQueue


def test_nothing_fires_before_the_deadline():
    clock = ManualClock()
    queue = TimerQueue(clock=clock)
    fired = []
    queue.schedule(1.0, lambda: fired.append('a'))

    clock.advance(0.5)
    assert queue.run_due() == 0
    assert fired == []

    clock.advance(0.5)
    assert queue.run_due() == 1
    assert fired == ['a']


def test_fires_in_deadline_order_then_insertion_order():
    clock = ManualClock()
    queue = TimerQueue(clock=clock)
    fired = []
    queue.schedule(2.0, lambda: fired.append('late'))
    queue.schedule(1.0, lambda: fired.append('first'))
    queue.schedule(1.0, lambda: fired.append('second'))

    clock.advance(5)
    assert queue.run_due() == 3
    assert fired == ['first', 'second', 'late']


def test_cancel_keyed_only_touches_that_key():
    clock = ManualClock()
    queue = TimerQueue(clock=clock)
    fired = []
    queue.schedule(1.0, lambda: fired.append(1), key=1)
    queue.schedule(1.0, lambda: fired.append(1), key=1)
    queue.schedule(1.0, lambda: fired.append(2), key=2)

    assert queue.cancel_keyed(1) == 2
    assert queue.pending() == 1

    clock.advance(1)
    queue.run_due()
    assert fired == [2]


def test_callbacks_may_schedule_more_work():
    clock = ManualClock()
    queue = TimerQueue(clock=clock)
    fired = []

    def first():
        fired.append('first')
        queue.schedule(0, lambda: fired.append('chained'))
        queue.schedule(1.0, lambda: fired.append('later'))

    queue.schedule(0.5, first)
    clock.advance(0.5)
    assert queue.run_due() == 2
    assert fired == ['first', 'chained']
    assert queue.pending() == 1


def test_clear_drops_everything():
    clock = ManualClock()
    queue = TimerQueue(clock=clock)
    task = queue.schedule(1.0, lambda: None)
    queue.clear()

    assert task.cancelled
    assert queue.pending() == 0
    clock.advance(2)
    assert queue.run_due() == 0


def test_negative_delay_is_due_immediately():
    queue = TimerQueue(clock=ManualClock())
    fired = []
    queue.schedule(-3, lambda: fired.append('now'))
    assert queue.run_due() == 1
