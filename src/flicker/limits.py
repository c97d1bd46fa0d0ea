"""Numeric limits and animation timings - no circular dependencies."""

from __future__ import annotations

MAX_CYCLING_CHARS = 120
MIN_RAMP_SIZE = 3
MIN_GRADIENT_TEXT_SIZE = 3


# Cadences (frames per second)
CHAR_CYCLING_FPS = 22.0
ELLIPSIS_FPS = 3.0

# Pause between the label resolving and the ellipsis starting (seconds)
ELLIPSIS_START_DELAY = 0.22

# Per-character delays are drawn as randrange(steps) * unit (seconds)
INITIAL_DELAY_STEPS = 8
INITIAL_DELAY_UNIT = 0.060
LIFETIME_STEPS = 5
LIFETIME_UNIT = 0.180

MAX_INITIAL_DELAY = (INITIAL_DELAY_STEPS - 1) * INITIAL_DELAY_UNIT


MAX_LOG_MESSAGE_LENGTH = 4096
MAX_LOG_LINES = 2000
