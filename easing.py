# easing.py

"""
Interpolation primitives shared by the pose evaluator.

All functions are stateless and compiled by Numba in nopython mode, so they
can be called both from plain Python and from the JIT-compiled pose kernels
without a round trip through the interpreter.
"""

import numba


@numba.jit(nopython=True)
def ease_in_out_cubic(x):
    """Slow-fast-slow curve: 4x^3 below the midpoint, mirrored above it."""
    if x < 0.5:
        return 4.0 * x * x * x
    return 1.0 - (-2.0 * x + 2.0) ** 3 / 2.0


@numba.jit(nopython=True)
def ease_out_quart(x):
    """Fast start, slow settle."""
    return 1.0 - (1.0 - x) ** 4


@numba.jit(nopython=True)
def clamped_lerp(x, in_lo, in_hi, out_lo, out_hi):
    """
    Maps x from [in_lo, in_hi] onto [out_lo, out_hi].

    The normalized position is clamped to [0, 1] first, so the result never
    leaves the output range. An empty input range behaves as a step at in_hi.
    """
    if in_hi == in_lo:
        t = 1.0 if x >= in_hi else 0.0
    else:
        t = min(max((x - in_lo) / (in_hi - in_lo), 0.0), 1.0)
    return out_lo + t * (out_hi - out_lo)
