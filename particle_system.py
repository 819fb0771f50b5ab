# particle_system.py

import logging
import math
import os

import numba
import numpy as np
import pygame

import constants
from motion import Phase, _pose_jit, phase_at
from motion_config import MotionConfig
from particle import KERNEL_FIELDS, Pose, generate_particle_parameters

logger = logging.getLogger("confetti")

ASSET_ROOT = os.path.dirname(os.path.abspath(__file__))
POSE_COLUMNS = len(Pose._fields)

# --- JIT-Compiled Pose Functions ---
# The batch kernel runs the same per-particle kernel as motion.evaluate over the
# whole parameter table, so single and batched evaluation cannot drift apart.

@numba.jit(nopython=True)
def _evaluate_poses_jit(table, looped_time, out):
    """
    Numba-accelerated pose evaluation for every row of the parameter table.
    Particles share nothing but looped_time; results are written into `out`.
    """
    for i in range(table.shape[0]):
        translate_x, translate_y, rotate, scale, opacity = _pose_jit(table[i], looped_time)
        out[i, 0] = translate_x
        out[i, 1] = translate_y
        out[i, 2] = rotate
        out[i, 3] = scale
        out[i, 4] = opacity


class ConfettiSystem:
    """
    The fixed set of confetti particles of one animation instance.

    Data Contract:
    - Inputs:
        - config (MotionConfig): ranges and palettes for every particle.
        - rng (np.random.Generator): the master seeded random number generator.
        - bounds (tuple): the (width, height) of the canvas at creation time.
    - Outputs: poses on request. Nothing is advanced between frames; every
      call recomputes from the looped time alone.
    - Invariants: the particle count and every particle's parameters are fixed
      at construction. Particle order is insertion order and never changes.
      Resizing the canvas later does not reflow existing particles.
    """
    def __init__(self, config: MotionConfig, rng: np.random.Generator, bounds: tuple):
        config.validate()
        self.config = config
        self.bounds = (float(bounds[0]), float(bounds[1]))

        self.particles = [
            generate_particle_parameters(config, self.bounds[0], self.bounds[1], rng)
            for _ in range(config.count)
        ]
        self.num_particles = len(self.particles)

        # --- Structure of Arrays view of the parameters for the JIT kernel ---
        self.table = np.array(
            [p.as_row() for p in self.particles], dtype=np.float64
        ).reshape(self.num_particles, len(KERNEL_FIELDS))

        self._sprites = {}
        self._missing_images = set()

        logger.info(f"ConfettiSystem created for {self.num_particles} particles on a "
                    f"{self.bounds[0]:.0f}x{self.bounds[1]:.0f} canvas.")
        logger.info(f"Cycle duration: {self.total_cycle_duration}ms")

    @property
    def total_cycle_duration(self) -> float:
        return self.config.total_cycle_duration

    def evaluate_all(self, looped_time: float) -> np.ndarray:
        """
        Poses of all particles as an (n, 5) array whose columns follow the
        Pose fields.
        """
        out = np.empty((self.num_particles, POSE_COLUMNS), dtype=np.float64)
        _evaluate_poses_jit(self.table, float(looped_time), out)
        return out

    def poses(self, looped_time: float):
        """(Pose, image, color) for every particle, in creation order."""
        poses = self.evaluate_all(looped_time)
        return [
            (Pose(*(float(v) for v in poses[i])), params.image, params.color)
            for i, params in enumerate(self.particles)
        ]

    def visible_count(self, looped_time: float) -> int:
        poses = self.evaluate_all(looped_time)
        return int(np.count_nonzero(poses[:, 4] > 0.0))

    def phase_counts(self, looped_time: float) -> dict:
        """How many particles are in each Phase at looped_time, in Phase order."""
        counts = {phase: 0 for phase in Phase}
        for params in self.particles:
            counts[phase_at(params, looped_time)] += 1
        return counts

    def _get_sprite(self, image: str, color: str) -> pygame.Surface:
        """
        Loads an image once and caches it. Missing assets fall back to a
        plain rectangle in the particle's color.
        """
        path = image if os.path.isabs(image) else os.path.join(ASSET_ROOT, image)
        if os.path.exists(path):
            key = image
            if key not in self._sprites:
                self._sprites[key] = pygame.image.load(path)
                logger.debug(f"Loaded confetti sprite {path}")
            return self._sprites[key]

        if image not in self._missing_images:
            self._missing_images.add(image)
            logger.warning(f"Confetti image {path} not found, drawing colored rectangles instead.")

        key = (image, color)
        if key not in self._sprites:
            sprite = pygame.Surface(constants.FALLBACK_SPRITE_SIZE, pygame.SRCALPHA)
            sprite.fill(pygame.Color(color))
            self._sprites[key] = sprite
        return self._sprites[key]

    def draw(self, screen: pygame.Surface, looped_time: float):
        """
        Draws every visible particle: rotated, scaled and faded, centered on
        its translate position.
        """
        poses = self.evaluate_all(looped_time)

        for i, params in enumerate(self.particles):
            translate_x, translate_y, rotate, scale, opacity = poses[i]
            if opacity <= 0.0:
                continue

            sprite = self._get_sprite(params.image, params.color)
            # pygame rotates counter-clockwise, screen-space angles run clockwise.
            transformed = pygame.transform.rotozoom(sprite, -math.degrees(rotate), float(scale))
            transformed.set_alpha(int(round(float(opacity) * 255)))

            rect = transformed.get_rect(center=(int(translate_x), int(translate_y)))
            screen.blit(transformed, rect)
