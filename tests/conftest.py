# conftest.py

import os

# pygame must never try to open a real display during tests.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from particle import ParticleParameters


@pytest.fixture
def make_params():
    """
    Builds ParticleParameters for a single, fully known trajectory:
    ascend 500ms, hover 200ms, descend 2000ms, no delay, spawning at the origin.
    """
    def _make(**overrides):
        values = dict(
            delay=0.0,
            start_x=0.0,
            start_y=0.0,
            ascending_duration=500.0,
            ascending_x_offset=100.0,
            ascending_y_target=-50.0,
            hovering_duration=200.0,
            hovering_amplitude=3.0,
            descending_duration=2000.0,
            descending_speed_x=0.01,
            descending_speed_y=0.15,
            descending_random_factor=0.0,
            rotation_velocity=90.0,
            scale=0.9,
            color='#22e39e',
            image='assets/confetti1.png',
        )
        values.update(overrides)
        return ParticleParameters(**values)
    return _make
