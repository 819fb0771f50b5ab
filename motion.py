# motion.py

"""
Pose Evaluator

Computes where a confetti particle is, how it is turned and how visible it is
at a given looped time. The trajectory has three phases that follow each other
after the particle's own delay:

    ascend  -> shoots up from the spawn point and fades in
    hover   -> bobs up briefly at the apex
    descend -> flutters down and fades out

Each phase adds its own contribution to the position instead of replacing the
previous one, so the path stays continuous across phase boundaries. Phase
fractions saturate at 1, so a finished particle holds its final (invisible)
pose until the shared clock loops.

Data Contract:
- Inputs: immutable ParticleParameters and a looped time in milliseconds.
- Outputs: a Pose. No state is read or written besides the inputs.
- Invariants: output is finite for every valid configuration; opacity is 0
  before the delay and from the end of the descent on.
"""

import math
from enum import Enum

import numba
import numpy as np

import constants
from easing import clamped_lerp, ease_in_out_cubic, ease_out_quart
from particle import Pose

# Column indices into a kernel parameter row (see particle.KERNEL_FIELDS).
DELAY, START_X, START_Y = 0, 1, 2
ASC_DURATION, ASC_X_OFFSET, ASC_Y_TARGET = 3, 4, 5
HOVER_DURATION, HOVER_AMPLITUDE = 6, 7
DESC_DURATION, DESC_SPEED_X, DESC_SPEED_Y, DESC_RANDOM_FACTOR = 8, 9, 10, 11
ROTATION_VELOCITY, SCALE = 12, 13

_FADE_IN_LO, _FADE_IN_HI = constants.ASCEND_FADE_IN_WINDOW
_HOVER_DECAY_LO, _HOVER_DECAY_HI = constants.HOVER_DECAY_WINDOW
_HOVER_DECAY_FROM, _HOVER_DECAY_TO = constants.HOVER_DECAY_OUTPUT
_FADE_OUT_LO, _FADE_OUT_HI = constants.DESCEND_FADE_OUT_WINDOW
_SPEED_RAMP_MS = constants.DESCEND_SPEED_RAMP_MS
_SPEED_FROM, _SPEED_TO = constants.DESCEND_SPEED_RAMP_OUTPUT
_WOBBLE = constants.DESCEND_WOBBLE_RADIUS


class Phase(Enum):
    WAITING = 'waiting'
    ASCENDING = 'ascending'
    HOVERING = 'hovering'
    DESCENDING = 'descending'
    DONE = 'done'


@numba.jit(nopython=True)
def _phase_fraction(looped_time, window_start, window_end, duration):
    """
    Completion fraction of a phase, clamped to [0, 1].
    Saturates against the window end itself, so a finished phase is exactly 1
    even when (start + duration) - start rounds below duration. A zero-length
    phase completes the instant its window opens.
    """
    if looped_time >= window_end:
        return 1.0
    if looped_time < window_start or duration <= 0.0:
        return 0.0
    return min((looped_time - window_start) / duration, 1.0)


@numba.jit(nopython=True)
def _pose_jit(row, looped_time):
    """
    Numba-compiled pose kernel for one parameter row.
    Returns (translate_x, translate_y, rotate_radians, scale, opacity).
    """
    asc_start = row[DELAY]
    hover_start = asc_start + row[ASC_DURATION]
    desc_start = hover_start + row[HOVER_DURATION]
    # Same association as ParticleParameters.end_time.
    desc_end = desc_start + row[DESC_DURATION]

    # Ascending phase
    ascending_percent = _phase_fraction(looped_time, asc_start, hover_start, row[ASC_DURATION])
    ascending_t = ease_in_out_cubic(ascending_percent)
    ascending_x = row[START_X] + ascending_t * row[ASC_X_OFFSET]
    ascending_y = row[START_Y] + ascending_t * (row[ASC_Y_TARGET] - row[START_Y])
    ascending_opacity = clamped_lerp(ascending_percent, _FADE_IN_LO, _FADE_IN_HI, 0.0, 1.0)

    # Hovering phase
    hovering_time = max(looped_time - hover_start, 0.0)
    hovering_percent = _phase_fraction(looped_time, hover_start, desc_start, row[HOVER_DURATION])
    hovering_t = ease_out_quart(hovering_percent) * clamped_lerp(
        hovering_percent, _HOVER_DECAY_LO, _HOVER_DECAY_HI, _HOVER_DECAY_FROM, _HOVER_DECAY_TO)
    hovering_y = -row[HOVER_AMPLITUDE] * hovering_t

    # Descending phase
    descending_time = max(looped_time - desc_start, 0.0)
    descending_percent = _phase_fraction(looped_time, desc_start, desc_end, row[DESC_DURATION])
    speed_factor = clamped_lerp(descending_time, 0.0, _SPEED_RAMP_MS, _SPEED_FROM, _SPEED_TO)
    random_factor = row[DESC_RANDOM_FACTOR]
    angle = random_factor + (descending_time / 1000.0) * (2.0 * math.pi) * random_factor
    descending_x = descending_time * row[DESC_SPEED_X] + math.sin(angle) * _WOBBLE
    descending_y = descending_time * speed_factor * row[DESC_SPEED_Y] + math.cos(angle) * _WOBBLE
    descending_opacity = clamped_lerp(descending_percent, _FADE_OUT_LO, _FADE_OUT_HI, 1.0, 0.0)

    # Rotation keeps running on hover time through the descent.
    rotate = (hovering_time / 1000.0) * row[ROTATION_VELOCITY] * math.pi / 180.0

    return (
        ascending_x + descending_x,
        ascending_y + hovering_y + descending_y,
        rotate,
        row[SCALE],
        ascending_opacity * descending_opacity,
    )


def evaluate(params, looped_time) -> Pose:
    """Pose of one particle at the given looped time (milliseconds)."""
    row = np.array(params.as_row(), dtype=np.float64)
    return Pose(*_pose_jit(row, float(looped_time)))


def phase_at(params, looped_time) -> Phase:
    """Which phase of its trajectory the particle is in at looped_time."""
    if looped_time < params.delay:
        return Phase.WAITING
    hover_start = params.delay + params.ascending_duration
    if looped_time < hover_start:
        return Phase.ASCENDING
    desc_start = hover_start + params.hovering_duration
    if looped_time < desc_start:
        return Phase.HOVERING
    if looped_time < params.end_time:
        return Phase.DESCENDING
    return Phase.DONE
