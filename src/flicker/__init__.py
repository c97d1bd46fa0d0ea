"""Flicker: cycling-characters loading animation for terminal UIs."""

from flicker.animation import CyclingChars, make_gradient_ramp, make_gradient_text

__version__ = "0.1.0"

__all__ = ["CyclingChars", "__version__", "make_gradient_ramp", "make_gradient_text"]
