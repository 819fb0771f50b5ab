# main.py

import pygame
import constants
import json
import logging
import logger_setup
import numpy as np
from cycle_clock import CycleClock
from motion_config import MotionConfig
from particle_system import ConfettiSystem

# Get the application's dedicated logger
logger = logging.getLogger("confetti")


def run_animation_loop(confetti, screen, clock, cycle_clock):
    """
    The main render loop. Every frame reads the looped time once and redraws
    every particle from scratch; no particle state is carried between frames.
    """
    running = True
    frame = 0
    last_cycle = cycle_clock.cycle_index()

    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE:
                # Restart the burst from the beginning.
                cycle_clock.reset()
                last_cycle = 0
                logger.info("Burst restarted by user.")

        looped_time = cycle_clock.looped_time()

        cycle = cycle_clock.cycle_index()
        if cycle != last_cycle:
            logger.info(f"Cycle {cycle} started (cycle length {cycle_clock.total_cycle_duration}ms).")
            last_cycle = cycle

        # --- Logging (throttled) ---
        if frame % constants.STATS_LOG_INTERVAL == 0:
            phases = ", ".join(
                f"{phase.value}:{count}" for phase, count in confetti.phase_counts(looped_time).items()
            )
            logger.debug(
                f"Frame={frame}, "
                f"Cycle={cycle}, "
                f"LoopedTime={looped_time:.0f}ms, "
                f"Visible={confetti.visible_count(looped_time)}/{confetti.num_particles}, "
                f"Phases={phases}, "
                f"FPS={clock.get_fps():.1f}"
            )

        # --- Drawing ---
        screen.fill(constants.BLACK)
        confetti.draw(screen, looped_time)
        pygame.display.flip()
        clock.tick(constants.FPS)
        frame += 1


def main():
    """
    Main function to initialize and run the confetti animation.
    """
    # --- Setup ---
    logger_setup.setup_logging()

    with open('config.json', 'r') as f:
        config = json.load(f)
    motion_config = MotionConfig.from_dict(config.get('confetti'))

    logger.info("Application starting...")
    logger.info(f"Loaded configuration: {config}")

    # Initialize the master random number generator (RNG)
    rng = np.random.default_rng(config['master_seed'])
    logger.info(f"Master RNG initialized with seed: {config['master_seed']}")

    # --- Initialization ---
    pygame.init()
    screen = pygame.display.set_mode((constants.WIDTH, constants.HEIGHT))
    pygame.display.set_caption(constants.TITLE)
    clock = pygame.time.Clock()

    confetti = ConfettiSystem(
        config=motion_config,
        rng=rng,
        bounds=screen.get_size()
    )

    # Prime the JIT kernels before the first frame so compilation doesn't
    # show up as a stall in the animation.
    confetti.evaluate_all(0.0)

    cycle_clock = CycleClock(confetti.total_cycle_duration, pygame.time.get_ticks)

    run_animation_loop(confetti, screen, clock, cycle_clock)

    logger.info("Application shutting down.")
    pygame.quit()


if __name__ == "__main__":
    main()
