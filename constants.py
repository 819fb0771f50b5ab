# constants.py

"""
Application Constants

This module defines static configuration values for the application's framework
and the fixed shape of the confetti motion curves.
These are not expected to change between runs.

Data Contract:
- All values are immutable constants.
- Units are specified in comments where applicable.
"""

# Screen dimensions
WIDTH = 1200  # Pixels
HEIGHT = 800  # Pixels

# Framerate
FPS = 60  # Frames per second

# Colors (RGB)
BLACK = (0, 0, 0)

# Window Title
TITLE = "Confetti Burst"

# Size of the fallback sprite used when an image asset is missing.
FALLBACK_SPRITE_SIZE = (10, 6)  # Pixels

# --- Motion curve shape ---
# Fade windows are (input_lo, input_hi) over a phase completion fraction.
ASCEND_FADE_IN_WINDOW = (0.3, 0.8)
HOVER_DECAY_WINDOW = (0.8, 1.0)
HOVER_DECAY_OUTPUT = (1.0, 0.7)
DESCEND_FADE_OUT_WINDOW = (0.8, 1.0)

# Descent speed ramps from 70% to full speed over the first second of falling.
DESCEND_SPEED_RAMP_MS = 1000.0  # Milliseconds
DESCEND_SPEED_RAMP_OUTPUT = (0.7, 1.0)

# Radius of the side-to-side flutter while falling.
DESCEND_WOBBLE_RADIUS = 10.0  # Pixels

# How often the driver logs frame statistics.
STATS_LOG_INTERVAL = 120  # Frames
