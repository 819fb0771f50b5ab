# cycle_clock.py

"""
Looping clock for the confetti animation.

The pose evaluator only ever sees an already-looped time value, so the
ever-growing raw clock never reaches the floating-point math of the kernels.
"""

import logging

logger = logging.getLogger("confetti")


def loop_time(clock_ms: float, total_cycle_duration: float) -> float:
    """
    Reduces a raw clock value into [0, total_cycle_duration).
    A cycle with no length has nothing to animate and always yields 0.
    """
    if clock_ms < 0:
        raise ValueError(f"Clock value must be non-negative, got {clock_ms}")
    if total_cycle_duration <= 0:
        return 0.0
    return float(clock_ms % total_cycle_duration)


class CycleClock:
    """
    Wraps an external millisecond time source and derives the looped time.

    Data Contract:
    - Inputs:
        - total_cycle_duration (float): loop length in milliseconds.
        - time_source (callable): zero-argument callable returning a
          monotonically increasing time in milliseconds (e.g. pygame.time.get_ticks).
    - Invariants: looped_time() is non-decreasing within a cycle and wraps
      exactly at total_cycle_duration.
    """
    def __init__(self, total_cycle_duration: float, time_source):
        self.total_cycle_duration = total_cycle_duration
        self._time_source = time_source
        self._start = time_source()

    def reset(self):
        """Restarts the cycle from the current source time."""
        self._start = self._time_source()
        logger.debug(f"CycleClock reset at source time {self._start}")

    def elapsed(self) -> float:
        return max(self._time_source() - self._start, 0)

    def looped_time(self) -> float:
        return loop_time(self.elapsed(), self.total_cycle_duration)

    def cycle_index(self) -> int:
        """Number of complete loops since the clock was started."""
        if self.total_cycle_duration <= 0:
            return 0
        return int(self.elapsed() // self.total_cycle_duration)
