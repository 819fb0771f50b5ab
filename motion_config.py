# motion_config.py

"""
Motion Configuration

The ranges and palettes from which every confetti particle draws its
randomized trajectory. One MotionConfig is shared by all particles of an
animation instance and never changes after construction.

Data Contract:
- Every *_range field is a (min, max) pair with min <= max.
- Durations and delays are in milliseconds, spawn and target positions are
  fractions of the canvas, speeds are in pixels per second.
- count >= 0, and both palettes are non-empty whenever count > 0.
"""

from dataclasses import dataclass, fields, replace
from typing import Tuple

Range = Tuple[float, float]

DEFAULT_COLORS = ('#22e39e', '#ed4e4e', '#fea134', '#ff8fd8', '#5c59f3')
DEFAULT_IMAGES = (
    'assets/confetti1.png',
    'assets/confetti2.png',
    'assets/confetti3.png',
    'assets/confetti4.png',
)

# Ranges whose lower bound must not be negative.
_NON_NEGATIVE_RANGES = (
    'delay_range',
    'ascending_duration_range',
    'hovering_duration_range',
    'descending_duration_range',
)


class InvalidConfig(ValueError):
    """Raised when a MotionConfig (or a canvas size) cannot produce particles."""


@dataclass(frozen=True)
class MotionConfig:
    count: int = 50
    colors: Tuple[str, ...] = DEFAULT_COLORS
    images: Tuple[str, ...] = DEFAULT_IMAGES
    delay_range: Range = (0, 0)
    x_spawn_range: Range = (0.4, 0.6)
    y_spawn_range: Range = (0.5, 0.5)
    ascending_duration_range: Range = (500, 600)
    ascending_x_offset_range: Range = (-200, 200)
    hovering_duration_range: Range = (200, 200)
    descending_duration_range: Range = (2000, 6000)
    ascending_y_target_range: Range = (-0.3, 0.2)
    hovering_amplitude_range: Range = (2, 4)
    descending_speed_x_range: Range = (-30, 30)
    descending_speed_y_range: Range = (150, 200)
    descending_random_factor_range: Range = (-1, 1)
    rotation_velocity_range: Range = (40, 360)
    scale: float = 0.9

    @classmethod
    def from_dict(cls, overrides=None):
        """
        Builds a config from a partial mapping (e.g. the 'confetti' section of
        config.json). Missing keys keep their defaults; JSON lists are turned
        into tuples. Unknown keys are rejected rather than ignored.
        """
        overrides = dict(overrides or {})
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise InvalidConfig(f"Unknown motion config keys: {', '.join(unknown)}")

        values = {}
        for key, value in overrides.items():
            if isinstance(value, list):
                value = tuple(value)
            values[key] = value
        return replace(cls(), **values)

    @property
    def range_fields(self):
        """Names of all (min, max) fields, in declaration order."""
        return [f.name for f in fields(self) if f.name.endswith('_range')]

    @property
    def total_cycle_duration(self) -> float:
        """
        Length of one loop of the shared clock. Built from the upper bounds of
        the phase duration ranges so every particle finishes within a loop.
        """
        return (
            self.ascending_duration_range[1]
            + self.hovering_duration_range[1]
            + self.descending_duration_range[1]
        )

    def validate(self):
        """Raises InvalidConfig on the first problem found."""
        if self.count < 0:
            raise InvalidConfig(f"count must be >= 0, got {self.count}")

        for name in self.range_fields:
            value = getattr(self, name)
            if not isinstance(value, (tuple, list)) or len(value) != 2:
                raise InvalidConfig(f"{name} must be a (min, max) pair, got {value!r}")
            lo, hi = value
            if lo > hi:
                raise InvalidConfig(f"{name} has min > max: {value!r}")
            if name in _NON_NEGATIVE_RANGES and lo < 0:
                raise InvalidConfig(f"{name} must not be negative: {value!r}")

        if self.scale < 0:
            raise InvalidConfig(f"scale must be >= 0, got {self.scale}")

        if self.count > 0:
            if not self.colors:
                raise InvalidConfig("colors palette is empty but count > 0")
            if not self.images:
                raise InvalidConfig("images palette is empty but count > 0")
