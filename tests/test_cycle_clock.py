# test_cycle_clock.py

import pytest

from cycle_clock import CycleClock, loop_time


class FakeTicks:
    """Stand-in for pygame.time.get_ticks with a hand-driven clock."""
    def __init__(self, now=0):
        self.now = now

    def __call__(self):
        return self.now


def test_loop_time_wraps_at_the_cycle_length():
    assert loop_time(0, 6800) == 0.0
    assert loop_time(250, 6800) == 250.0
    assert loop_time(6799, 6800) == 6799.0
    assert loop_time(6800, 6800) == 0.0
    assert loop_time(6800 * 3 + 120, 6800) == 120.0


def test_loop_time_without_a_cycle():
    assert loop_time(1234, 0) == 0.0


def test_loop_time_rejects_negative_clock():
    with pytest.raises(ValueError):
        loop_time(-1, 6800)


def test_cycle_clock_counts_from_its_start():
    ticks = FakeTicks(now=5000)
    clock = CycleClock(1000, ticks)
    assert clock.looped_time() == 0.0

    ticks.now = 5400
    assert clock.elapsed() == 400
    assert clock.looped_time() == 400.0
    assert clock.cycle_index() == 0

    ticks.now = 7250
    assert clock.looped_time() == 250.0
    assert clock.cycle_index() == 2


def test_cycle_clock_reset():
    ticks = FakeTicks()
    clock = CycleClock(1000, ticks)
    ticks.now = 2500
    clock.reset()
    assert clock.looped_time() == 0.0
    assert clock.cycle_index() == 0
    ticks.now = 2600
    assert clock.looped_time() == 100.0


def test_looped_time_is_non_decreasing_within_a_cycle():
    ticks = FakeTicks()
    clock = CycleClock(700, ticks)
    previous = clock.looped_time()
    for now in range(1, 700):
        ticks.now = now
        current = clock.looped_time()
        assert current >= previous
        previous = current
    ticks.now = 700
    assert clock.looped_time() == 0.0
