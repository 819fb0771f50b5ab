# particle.py

import logging
from collections import namedtuple
from dataclasses import dataclass

import numpy as np

from motion_config import InvalidConfig, MotionConfig

logger = logging.getLogger("confetti")

# The instantaneous, renderable state of one particle. Recomputed every frame.
Pose = namedtuple('Pose', ['translate_x', 'translate_y', 'rotate_radians', 'scale', 'opacity'])

# Order of the numeric fields as laid out in the kernel parameter table.
KERNEL_FIELDS = (
    'delay',
    'start_x',
    'start_y',
    'ascending_duration',
    'ascending_x_offset',
    'ascending_y_target',
    'hovering_duration',
    'hovering_amplitude',
    'descending_duration',
    'descending_speed_x',
    'descending_speed_y',
    'descending_random_factor',
    'rotation_velocity',
    'scale',
)


@dataclass(frozen=True)
class ParticleParameters:
    """
    The randomized trajectory of a single confetti particle.

    Drawn once when the particle is created and never modified afterwards; a
    particle "restarts" only because the shared clock loops.

    Data Contract:
    - Times are in milliseconds, positions in pixels, descending speeds in
      pixels per millisecond, rotation_velocity in degrees per second.
    - color and image are opaque references handed to the renderer.
    """
    delay: float
    start_x: float
    start_y: float
    ascending_duration: float
    ascending_x_offset: float
    ascending_y_target: float
    hovering_duration: float
    hovering_amplitude: float
    descending_duration: float
    descending_speed_x: float
    descending_speed_y: float
    descending_random_factor: float
    rotation_velocity: float
    scale: float
    color: str
    image: str

    @property
    def end_time(self) -> float:
        """Looped time at which the descent (and the fade-out) completes."""
        return self.delay + self.ascending_duration + self.hovering_duration + self.descending_duration

    def as_row(self):
        """The numeric fields as a tuple of floats, in KERNEL_FIELDS order."""
        return tuple(float(getattr(self, name)) for name in KERNEL_FIELDS)


def _sample(rng: np.random.Generator, value_range) -> float:
    lo, hi = value_range
    if lo == hi:
        return float(lo)
    return float(rng.uniform(lo, hi))


def _pick(rng: np.random.Generator, palette, name: str):
    if not palette:
        raise InvalidConfig(f"Cannot pick from an empty {name} palette")
    return palette[int(rng.integers(len(palette)))]


def generate_particle_parameters(config: MotionConfig, canvas_width: float, canvas_height: float,
                                 rng: np.random.Generator) -> ParticleParameters:
    """
    Draws one particle's parameters from the configured ranges.

    Must be called once per particle at creation time, never per frame.

    - Inputs:
        - config (MotionConfig): ranges and palettes to sample from.
        - canvas_width, canvas_height (float): canvas size in pixels, used to
          scale the fractional spawn and target positions.
        - rng (np.random.Generator): the random source; nothing else is touched.
    - Raises: InvalidConfig if the config is malformed or the canvas is empty.
    """
    config.validate()
    if canvas_width <= 0 or canvas_height <= 0:
        raise InvalidConfig(f"Canvas size must be positive, got {canvas_width}x{canvas_height}")

    params = ParticleParameters(
        delay=_sample(rng, config.delay_range),
        start_x=_sample(rng, config.x_spawn_range) * canvas_width,
        start_y=_sample(rng, config.y_spawn_range) * canvas_height,
        ascending_duration=_sample(rng, config.ascending_duration_range),
        ascending_x_offset=_sample(rng, config.ascending_x_offset_range),
        ascending_y_target=_sample(rng, config.ascending_y_target_range) * canvas_height,
        hovering_duration=_sample(rng, config.hovering_duration_range),
        hovering_amplitude=_sample(rng, config.hovering_amplitude_range),
        descending_duration=_sample(rng, config.descending_duration_range),
        # Configured per second, evaluated per millisecond.
        descending_speed_x=_sample(rng, config.descending_speed_x_range) / 1000.0,
        descending_speed_y=_sample(rng, config.descending_speed_y_range) / 1000.0,
        descending_random_factor=_sample(rng, config.descending_random_factor_range),
        rotation_velocity=_sample(rng, config.rotation_velocity_range),
        scale=float(config.scale),
        color=_pick(rng, config.colors, 'colors'),
        image=_pick(rng, config.images, 'images'),
    )

    logger.debug(
        f"Particle created: start=({params.start_x:.1f}, {params.start_y:.1f}), "
        f"delay={params.delay:.0f}ms, end={params.end_time:.0f}ms, image={params.image}"
    )
    return params
